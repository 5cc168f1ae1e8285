"""Exception types raised by the perceptron package."""


class PerceptronError(Exception):
    """Base error for the perceptron package."""


class LengthMismatchError(PerceptronError, ValueError):
    """Raised when a vector length disagrees with the declared input count."""

    def __init__(self, name: str, expected: int, actual: int) -> None:
        super().__init__(f"{name} length {actual} does not match input count {expected}")
        self.name = name
        self.expected = expected
        self.actual = actual
