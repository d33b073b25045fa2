from typing import ClassVar, Tuple
from ..types.format_type import FormatType, HUE_360
from ..types.color_types import ColorSpace
from .color_base import ColorBase


class ColorHSL(ColorBase):
    """
    HSL color with hue in degrees and saturation/lightness in percent.

    Channels are not range-checked: interpolated samples are passed through
    unclamped, as is the conversion back to RGB.
    """
    __slots__ = ()
    num_channels: ClassVar[int] = 3
    mode: ClassVar[ColorSpace] = "hsl"
    maxima: ClassVar[Tuple[float, float, float]] = (HUE_360, 100.0, 100.0)
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def lightness(self) -> float:
        return self._value[2]
