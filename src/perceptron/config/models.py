import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from perceptron.errors import LengthMismatchError

CONFIG_PATH_ENV_VAR = "PERCEPTRON_CONFIG_PATH"

DEFAULT_INPUTS = (0.0, 1.0)
DEFAULT_WEIGHTS = (0.5, -0.5)
DEFAULT_BIAS = 0.1


def _float_list(name: str, values: Sequence) -> List[float]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise ValueError(f"Neuron config field '{name}' must be a list of numbers")
    try:
        return [float(v) for v in values]
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Neuron config field '{name}' must contain only numbers") from exc


@dataclass
class NeuronConfig:
    inputs: List[float] = field(default_factory=lambda: list(DEFAULT_INPUTS))
    weights: List[float] = field(default_factory=lambda: list(DEFAULT_WEIGHTS))
    bias: float = DEFAULT_BIAS

    @property
    def count(self) -> int:
        return len(self.inputs)

    @classmethod
    def default(cls) -> "NeuronConfig":
        """The two-input reference example."""
        return cls()

    @classmethod
    def from_file(cls, path: Path) -> "NeuronConfig":
        path = Path(path)
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid neuron config JSON at {path}: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict) -> "NeuronConfig":
        if not isinstance(data, dict):
            raise ValueError("Neuron config must be a JSON object")
        try:
            inputs = _float_list("inputs", data["inputs"])
            weights = _float_list("weights", data["weights"])
        except KeyError as exc:
            raise ValueError(f"Neuron config missing required field {exc}") from exc
        try:
            bias = float(data.get("bias", 0.0))
        except (TypeError, ValueError) as exc:
            raise ValueError("Neuron config field 'bias' must be a number") from exc
        if len(weights) != len(inputs):
            raise LengthMismatchError("weights", len(inputs), len(weights))
        return cls(inputs=inputs, weights=weights, bias=bias)

    def to_dict(self) -> Dict[str, object]:
        return {"inputs": list(self.inputs), "weights": list(self.weights), "bias": self.bias}


def resolve_config_path(path: Optional[Path] = None) -> Optional[Path]:
    """Explicit path first, then $PERCEPTRON_CONFIG_PATH; None when neither is set."""
    if path is not None:
        return Path(path)
    env_value = os.getenv(CONFIG_PATH_ENV_VAR)
    if not env_value:
        return None
    candidate = Path(env_value)
    if not candidate.is_absolute():
        candidate = (Path.cwd() / candidate).resolve()
    return candidate
