import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSLTriple, RGBTriple
from ..types.format_type import FormatType, HUE_360, max_non_hue


def unit_rgb_to_hsl(r: float, g: float, b: float) -> HSLTriple:
    """
    Convert RGB in [0, 1] to HSL with hue in degrees and s/l in [0, 1].

    The hue branch is picked by exact comparison against the maximum channel
    in red, green, blue order, so ties resolve to the earliest channel.

    Args:
        r: Red in [0, 1]
        g: Green in [0, 1]
        b: Blue in [0, 1]

    Returns:
        Tuple[float, float, float]: (h, s, l), h in [0, 360)
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2

    if max_c == min_c:
        return 0.0, 0.0, l

    rng = max_c - min_c
    if l > 0.5:
        s = rng / (2 - max_c - min_c)
    else:
        s = rng / (max_c + min_c)

    if max_c == r:
        h = ((g - b) / rng + (6 if g < b else 0)) / 6
    elif max_c == g:
        h = ((b - r) / rng + 2) / 6
    else:
        h = ((r - g) / rng + 4) / 6

    return h * HUE_360, s, l


def rgb_to_hsl(rgb: RGBTriple) -> HSLTriple:
    """
    Convert an 8-bit RGB triple to HSL (hue degrees, saturation/lightness percent).

    >>> rgb_to_hsl((255, 0, 0))
    (0.0, 100.0, 50.0)
    """
    maxval = max_non_hue[FormatType.INT]
    percent = max_non_hue[FormatType.PERCENTAGE]
    r, g, b = rgb
    h, s, l = unit_rgb_to_hsl(r / maxval, g / maxval, b / maxval)
    return h, s * percent, l * percent


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB in [0, 1] to HSL (degrees, unit s/l).

    Args:
        r, g, b: array-like or scalar channels in [0, 1]

    Returns:
        hsl: array of shape (..., 3)
    """
    r = np.asarray(r, dtype=np.float64)
    g = np.asarray(g, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    max_c = np.maximum(np.maximum(r, g), b)
    min_c = np.minimum(np.minimum(r, g), b)
    l = (max_c + min_c) / 2
    rng = max_c - min_c
    chromatic = rng != 0

    # Dummy denominators keep achromatic pixels out of 0/0
    safe_rng = np.where(chromatic, rng, 1.0)
    high = 2 - max_c - min_c
    low = max_c + min_c
    s = np.where(
        l > 0.5,
        rng / np.where(chromatic, high, 1.0),
        rng / np.where(chromatic, low, 1.0),
    )

    h_red = ((g - b) / safe_rng + np.where(g < b, 6.0, 0.0)) / 6
    h_green = ((b - r) / safe_rng + 2) / 6
    h_blue = ((r - g) / safe_rng + 4) / 6
    h = np.select([max_c == r, max_c == g], [h_red, h_green], default=h_blue)

    h = np.where(chromatic, h * HUE_360, 0.0)
    s = np.where(chromatic, s, 0.0)
    return np.stack([h, s, l], axis=-1)


def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """Vectorized: (..., 3) 8-bit RGB -> (..., 3) HSL in degrees/percent."""
    unit = np.asarray(rgb, dtype=np.float64) / max_non_hue[FormatType.INT]
    hsl = np_unit_rgb_to_hsl(unit[..., 0], unit[..., 1], unit[..., 2])
    percent = max_non_hue[FormatType.PERCENTAGE]
    return np.stack([hsl[..., 0], hsl[..., 1] * percent, hsl[..., 2] * percent], axis=-1)
