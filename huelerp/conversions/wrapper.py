from typing import Callable, Dict, Tuple

from ..types.color_types import ColorElement, ColorSpace, COLOR_SPACES, HSLTriple, element_to_array
from .hex import decode_hex, encode_hex, np_decode_hex, np_encode_hex
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_rgb import hsl_to_rgb, np_hsl_to_rgb


def hex_to_hsl(hex_color: str) -> HSLTriple:
    return rgb_to_hsl(decode_hex(hex_color))


def hsl_to_hex(hsl: HSLTriple) -> str:
    return encode_hex(hsl_to_rgb(hsl))


# Every path goes through rgb, the only space adjacent to both others
CONVERT_SCALAR: Dict[Tuple[str, str], Callable[[ColorElement], ColorElement]] = {
    ("hex", "rgb"): decode_hex,
    ("rgb", "hex"): encode_hex,
    ("rgb", "hsl"): rgb_to_hsl,
    ("hsl", "rgb"): hsl_to_rgb,
    ("hex", "hsl"): hex_to_hsl,
    ("hsl", "hex"): hsl_to_hex,
}

CONVERT_NUMPY: Dict[Tuple[str, str], Callable] = {
    ("hex", "rgb"): np_decode_hex,
    ("rgb", "hex"): np_encode_hex,
    ("rgb", "hsl"): np_rgb_to_hsl,
    ("hsl", "rgb"): np_hsl_to_rgb,
    ("hex", "hsl"): lambda colors: np_rgb_to_hsl(np_decode_hex(colors)),
    ("hsl", "hex"): lambda hsl: np_encode_hex(np_hsl_to_rgb(hsl)),
}


def _check_spaces(from_space: str, to_space: str) -> Tuple[str, str]:
    fs, ts = from_space.lower(), to_space.lower()
    for space in (fs, ts):
        if space not in COLOR_SPACES:
            raise ValueError(f"Unknown space: {space}")
    return fs, ts


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> ColorElement:
    """
    Convert a single color between the ``hex``, ``rgb`` and ``hsl`` spaces.

    Args:
        color: ``"#RRGGBB"`` string, 8-bit RGB triple or HSL triple
            (hue degrees, saturation/lightness percent)
        from_space: Space of ``color``
        to_space: Target space

    Returns:
        The color in ``to_space``; tuples for rgb/hsl, a string for hex.
    """
    fs, ts = _check_spaces(from_space, to_space)
    if fs == ts:
        return color  # No conversion needed
    return CONVERT_SCALAR[(fs, ts)](color)


def np_convert(color, from_space: ColorSpace, to_space: ColorSpace):
    """
    Vectorized :func:`convert`.

    ``hex`` input/output is a list of strings; ``rgb``/``hsl`` are
    ``(..., 3)`` arrays.
    """
    fs, ts = _check_spaces(from_space, to_space)
    if fs == ts:
        return color  # No conversion needed
    if fs != "hex":
        color = element_to_array(color)
    return CONVERT_NUMPY[(fs, ts)](color)
