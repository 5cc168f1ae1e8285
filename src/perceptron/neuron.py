"""Single-neuron evaluator and a small model wrapper around it."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

import numpy as np

from perceptron.activation import step_function
from perceptron.errors import LengthMismatchError
from perceptron.utils import get_logger

logger = get_logger("neuron")


def _check_lengths(inputs: Sequence[float], weights: Sequence[float], count: int) -> None:
    if count < 0:
        raise ValueError(f"Input count must be non-negative, got {count}")
    if len(inputs) != count:
        raise LengthMismatchError("inputs", count, len(inputs))
    if len(weights) != count:
        raise LengthMismatchError("weights", count, len(weights))


def _accumulate(inputs: Sequence[float], weights: Sequence[float], bias: float, count: int) -> np.float32:
    # Single precision, strictly left to right; NaN/inf propagate silently.
    with np.errstate(over="ignore", invalid="ignore"):
        total = np.float32(bias)
        for i in range(count):
            total = np.float32(total + np.float32(inputs[i]) * np.float32(weights[i]))
    return total


def evaluate(inputs: Sequence[float], weights: Sequence[float], bias: float, count: int) -> int:
    """
    Compute ``step(bias + sum(inputs[i] * weights[i]))`` for i in [0, count).

    Both vectors must hold exactly ``count`` elements; otherwise a
    LengthMismatchError is raised before any arithmetic is done.

    Returns:
        0 or 1.
    """
    _check_lengths(inputs, weights, count)
    total = _accumulate(inputs, weights, bias, count)
    logger.debug("Weighted sum %s over %d inputs", float(total), count)
    return step_function(total)


class Perceptron:
    """Fixed-parameter neuron with predict/state helpers."""

    def __init__(self, weights: Sequence[float], bias: float = 0.0) -> None:
        self.weights: List[float] = [float(w) for w in weights]
        self.bias = float(bias)

    @property
    def num_inputs(self) -> int:
        return len(self.weights)

    def weighted_sum(self, inputs: Sequence[float]) -> float:
        _check_lengths(inputs, self.weights, self.num_inputs)
        return float(_accumulate(inputs, self.weights, self.bias, self.num_inputs))

    def predict(self, inputs: Sequence[float]) -> int:
        return evaluate(inputs, self.weights, self.bias, self.num_inputs)

    def state_dict(self) -> Dict[str, object]:
        return {"weights": list(self.weights), "bias": self.bias}

    def load_state_dict(self, state: Dict[str, Any]) -> None:
        try:
            weights = state["weights"]
            bias = state["bias"]
        except KeyError as exc:
            raise ValueError(f"State missing required field {exc}") from exc
        self.weights = [float(w) for w in weights]
        self.bias = float(bias)

    def __repr__(self) -> str:
        return f"Perceptron(weights={self.weights!r}, bias={self.bias!r})"
