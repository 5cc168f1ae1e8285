"""
Single-neuron perceptron: weighted sum plus bias, thresholded by a step function.

Components:
- Activation function
- Neuron evaluator and model
- Config loading
- Demo driver
"""

from perceptron.activation import step_function
from perceptron.errors import LengthMismatchError, PerceptronError
from perceptron.neuron import Perceptron, evaluate

__all__ = [
    "LengthMismatchError",
    "Perceptron",
    "PerceptronError",
    "evaluate",
    "step_function",
    "config",
    "utils",
]
