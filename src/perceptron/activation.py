"""Step activation function."""

from __future__ import annotations


def step_function(x: float) -> int:
    """Return 1 for non-negative ``x`` and 0 otherwise. NaN maps to 0."""
    return 1 if x >= 0 else 0
