from __future__ import annotations
from typing import Dict, Union

from .color_base import ColorBase
from .hsl import ColorHSL
from .rgb import ColorRGB
from ..types.color_types import ColorElement, ColorSpace

space_to_class: Dict[str, type[ColorBase]] = {
    ColorRGB.mode: ColorRGB,
    ColorHSL.mode: ColorHSL,
}


def get_color_class(color_space: str) -> type[ColorBase]:
    color_class = space_to_class.get(color_space.lower())
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpace) -> ColorBase:
    """
    Convert this color to another color class.

    Args:
        to_space: Target color space ("rgb" or "hsl")

    Returns:
        New ColorBase instance in the target space
    """
    return get_color_class(to_space)(self)


ColorBase.convert = color_convert


def convert_color(value: Union[ColorBase, ColorElement], color_space: str) -> ColorBase:
    """Coerce a ColorBase, hex string or raw triple into ``color_space``."""
    color_class = get_color_class(color_space)
    if isinstance(value, ColorBase):
        return value.convert(color_space)  # type: ignore
    return color_class(value)
