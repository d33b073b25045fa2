"""
huelerp Color Classes
=====================

Immutable value objects for the two color spaces the gradient pipeline
works in.

>>> from huelerp.colors import ColorRGB
>>> red = ColorRGB.from_hex("#ff0000")
>>> red.value
(255, 0, 0)
>>> red.convert("hsl").value
(0.0, 100.0, 50.0)

Color Classes
-------------
    - ColorRGB: 8-bit RGB (0-255), range-checked
    - ColorHSL: hue degrees, saturation/lightness percent, unchecked
"""

from .color import color_convert, convert_color, get_color_class
from .color_base import ColorBase
from .rgb import ColorRGB
from .hsl import ColorHSL


__all__ = ['ColorBase', 'ColorRGB', 'ColorHSL', 'color_convert', 'convert_color', 'get_color_class']
