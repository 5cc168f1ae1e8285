"""
Evaluate a single perceptron and print its decision.

Usage:
    perceptron-demo
    perceptron-demo --inputs 1 1 --weights 0.5 -0.5 --bias 0.1
    perceptron-demo --config neuron.json --log-level DEBUG
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from perceptron.config import NeuronConfig, resolve_config_path
from perceptron.neuron import evaluate
from perceptron.utils import configure_logging, get_logger

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate a single perceptron")
    parser.add_argument("--config", type=Path, default=None, help="Neuron config JSON file")
    parser.add_argument("--inputs", type=float, nargs="*", default=None, help="Input values")
    parser.add_argument("--weights", type=float, nargs="*", default=None, help="Weight values")
    parser.add_argument("--bias", type=float, default=None, help="Bias term")
    parser.add_argument("--log-level", default=None, help="Logging level (default: $LOG_LEVEL or INFO)")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    return parser


def load_config(args: argparse.Namespace) -> NeuronConfig:
    """Resolve the neuron to evaluate: config file (or the example), then CLI overrides."""
    path = resolve_config_path(args.config)
    if path is not None:
        logger.info("Loading neuron config from %s", path)
        cfg = NeuronConfig.from_file(path)
    else:
        cfg = NeuronConfig.default()
    data = cfg.to_dict()
    if args.inputs is not None:
        data["inputs"] = args.inputs
    if args.weights is not None:
        data["weights"] = args.weights
    if args.bias is not None:
        data["bias"] = args.bias
    return NeuronConfig.from_dict(data)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, json_output=args.json_logs)
    try:
        cfg = load_config(args)
        output = evaluate(cfg.inputs, cfg.weights, cfg.bias, cfg.count)
    except (ValueError, OSError) as exc:
        logger.error("Cannot evaluate perceptron: %s", exc)
        return 2
    print(f"Perceptron Output: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
