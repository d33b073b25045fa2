"""
huelerp Color Space Conversions
===============================

Conversions between hex strings, 8-bit RGB and HSL, with scalar and
vectorized (numpy) implementations.

Formats
-------
- hex: ``"#RRGGBB"``; a leading ``#`` is optional on input, output is uppercase
- rgb: 8-bit channels (0-255)
- hsl: hue in degrees [0, 360), saturation and lightness in percent [0, 100]

Conversion Functions
-------------------

Hex ↔ RGB:
    decode_hex(hex_color) / np_decode_hex(hex_colors)
    encode_hex(rgb) / np_encode_hex(rgb_array)

RGB → HSL:
    rgb_to_hsl(rgb) / np_rgb_to_hsl(rgb_array)
    unit_rgb_to_hsl(r, g, b) / np_unit_rgb_to_hsl(r, g, b)

HSL → RGB:
    hsl_to_rgb(hsl) / np_hsl_to_rgb(hsl_array)
    hsl_to_unit_rgb(h, s, l) / np_hsl_to_unit_rgb(h, s, l)
    hue_to_channel(p, q, t) / np_hue_to_channel(p, q, t)

High-Level API
-------------
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space)

Examples
--------
>>> from huelerp.conversions import convert
>>> convert("#FF0000", "hex", "hsl")
(0.0, 100.0, 50.0)
>>> convert((120.0, 100.0, 50.0), "hsl", "hex")
'#00FF00'
"""

from .hex import (
    decode_hex,
    encode_hex,
    canonical_hex,
    np_decode_hex,
    np_encode_hex,
)

from .to_hsl import (
    unit_rgb_to_hsl,
    rgb_to_hsl,
    np_unit_rgb_to_hsl,
    np_rgb_to_hsl,
)

from .to_rgb import (
    hue_to_channel,
    hsl_to_unit_rgb,
    hsl_to_rgb,
    np_hue_to_channel,
    np_hsl_to_unit_rgb,
    np_hsl_to_rgb,
)

from .wrapper import convert, np_convert, hex_to_hsl, hsl_to_hex

from ..types.color_types import ColorSpace
from ..types.format_type import FormatType

__all__ = [
    # Hex ↔ RGB
    'decode_hex',
    'encode_hex',
    'canonical_hex',
    'np_decode_hex',
    'np_encode_hex',

    # RGB → HSL
    'unit_rgb_to_hsl',
    'rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'np_rgb_to_hsl',

    # HSL → RGB
    'hue_to_channel',
    'hsl_to_unit_rgb',
    'hsl_to_rgb',
    'np_hue_to_channel',
    'np_hsl_to_unit_rgb',
    'np_hsl_to_rgb',

    # High-level API
    'convert',
    'np_convert',
    'hex_to_hsl',
    'hsl_to_hex',

    # Types
    'ColorSpace',
    'FormatType',
]
