"""
huelerp - HSL Gradients for the Terminal
========================================

Builds a linear gradient through a list of hex colors in HSL space and
prints it with 24-bit terminal colors.

Key Features
------------
- Hex ↔ RGB ↔ HSL conversions, scalar and vectorized (numpy)
- Multi-stop linear HSL interpolation
- Immutable color value objects
- rich-based terminal rendering: colored hex, swatch block, RGB readout

Quick Start
-----------
>>> from huelerp import Gradient1D
>>> grad = Gradient1D.from_hex(["#FF0000", "#0000FF"], 3)
>>> grad.hex
['#FF0000', '#00FF00', '#0000FF']

Command line::

    huelerp --gradient-length 10 --colors "#FF0000" "#0000FF" --inline-colors

Modules
-------
- conversions: hex/rgb/hsl conversion functions
- colors: ColorRGB and ColorHSL value classes
- gradient: interpolation and Gradient1D
- render: terminal output
- cli: argument parsing and entry point
"""

__version__ = "1.0.0"

from .errors import (
    HueLerpError,
    MalformedHex,
    GradientLengthError,
    ControlPointError,
    GradientQuantizationWarning,
)

from .conversions import (
    decode_hex, encode_hex,
    rgb_to_hsl, hsl_to_rgb, hue_to_channel,
    hex_to_hsl, hsl_to_hex,
    convert, np_convert,
    ColorSpace, FormatType,
)

from .colors import ColorBase, ColorRGB, ColorHSL

from .gradient import (
    Gradient1D,
    lerp_hsl, np_lerp_hsl,
    gradient_length,
    validate_gradient_request,
)
