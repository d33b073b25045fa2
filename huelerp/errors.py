"""Exceptions raised by huelerp."""


class HueLerpError(ValueError):
    """Base class for every input error huelerp reports."""


class MalformedHex(HueLerpError):
    """A hex color is not exactly six hexadecimal digits (after an optional ``#``)."""

    def __init__(self, value: str, reason: str = "expected 6 hexadecimal digits"):
        self.value = value
        self.reason = reason
        super().__init__(f"Malformed hex color {value!r}: {reason}")


class GradientLengthError(HueLerpError):
    """The requested gradient length does not exceed the number of colors."""

    def __init__(self, length: int, color_count: int):
        self.length = length
        self.color_count = color_count
        super().__init__("Gradient length must be greater than the color amount")


class ControlPointError(HueLerpError):
    """Interpolation needs at least two control points."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"At least two colors are required to build a gradient, got {count}")


class GradientQuantizationWarning(UserWarning):
    """The gradient came out shorter than requested because of per-segment rounding."""
