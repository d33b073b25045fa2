import re
from typing import Iterable, List

import numpy as np
from numpy import ndarray as NDArray

from ..errors import MalformedHex
from ..types.color_types import RGBTriple

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]{6}")


def _strip_hash(hex_color: str) -> str:
    return hex_color[1:] if hex_color.startswith("#") else hex_color


def decode_hex(hex_color: str) -> RGBTriple:
    """
    Convert a hex color string to an 8-bit RGB triple.

    A single leading ``#`` is optional. Alpha channels and 3-digit
    shorthand are rejected.

    Args:
        hex_color: Hex color string (e.g. ``"#FF8000"`` or ``"ff8000"``)

    Returns:
        Tuple of (r, g, b) values 0-255

    Raises:
        MalformedHex: if the digits are not exactly six base-16 characters
    """
    if not isinstance(hex_color, str):
        raise TypeError(f"hex color must be a str, got {type(hex_color).__name__}")
    digits = _strip_hash(hex_color)
    if len(digits) != 6:
        raise MalformedHex(hex_color, f"expected 6 hexadecimal digits, got {len(digits)}")
    if not _HEX_DIGITS.fullmatch(digits):
        raise MalformedHex(hex_color, "contains non-hexadecimal characters")
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    return r, g, b


def encode_hex(rgb: RGBTriple) -> str:
    """Format an 8-bit RGB triple as canonical ``#RRGGBB`` (uppercase)."""
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


def canonical_hex(hex_color: str) -> str:
    """Return the canonical uppercase ``#``-prefixed form of a valid hex color."""
    return encode_hex(decode_hex(hex_color))


def np_decode_hex(hex_colors: Iterable[str]) -> NDArray:
    """
    Vectorized: decode many hex colors at once.

    Returns:
        uint8 array of shape (n, 3)
    """
    rows = [decode_hex(h) for h in hex_colors]
    return np.array(rows, dtype=np.uint8).reshape(-1, 3)


def np_encode_hex(rgb: NDArray) -> List[str]:
    """Vectorized: encode an (..., 3) array of 8-bit channels to hex strings."""
    arr = np.asarray(rgb).reshape(-1, 3)
    return [encode_hex((int(r), int(g), int(b))) for r, g, b in arr]
