import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSLTriple, RGBTriple, UnitTriple
from ..types.format_type import FormatType, HUE_360, max_non_hue

ONE_THIRD = 1.0 / 3.0
ONE_SIXTH = 1.0 / 6.0
ONE_HALF = 1.0 / 2.0
TWO_THIRDS = 2.0 / 3.0


def hue_to_channel(p: float, q: float, t: float) -> float:
    """
    Evaluate one RGB channel of the HSL hue ramp.

    ``t`` is wrapped into [0, 1] by a single add/subtract of 1; values more
    than one turn outside that range are left as they are.
    """
    if t < 0:
        t += 1
    elif t > 1:
        t -= 1

    if t < ONE_SIXTH:
        return p + (q - p) * 6 * t
    if t < ONE_HALF:
        return q
    if t < TWO_THIRDS:
        return p + (q - p) * (TWO_THIRDS - t) * 6
    return p


def hsl_to_unit_rgb(h: float, s: float, l: float) -> UnitTriple:
    """
    Convert HSL to RGB in [0, 1].

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = h / HUE_360
    if s == 0:
        return l, l, l

    if l < 0.5:
        q = l * (1 + s)
    else:
        q = l + s - l * s
    p = 2 * l - q

    return (
        hue_to_channel(p, q, h + ONE_THIRD),
        hue_to_channel(p, q, h),
        hue_to_channel(p, q, h - ONE_THIRD),
    )


def hsl_to_rgb(hsl: HSLTriple) -> RGBTriple:
    """
    Convert HSL (hue degrees, saturation/lightness percent) to 8-bit RGB.

    Channels are truncated toward zero after scaling by 255, not rounded.
    """
    percent = max_non_hue[FormatType.PERCENTAGE]
    maxval = max_non_hue[FormatType.INT]
    h, s, l = hsl
    r, g, b = hsl_to_unit_rgb(h, s / percent, l / percent)
    return int(r * maxval), int(g * maxval), int(b * maxval)


def np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    """Vectorized :func:`hue_to_channel`, same single-wrap and branch order."""
    t = np.asarray(t, dtype=np.float64)
    t = np.where(t < 0, t + 1, np.where(t > 1, t - 1, t))
    return np.select(
        [t < ONE_SIXTH, t < ONE_HALF, t < TWO_THIRDS],
        [p + (q - p) * 6 * t, q + np.zeros_like(t), p + (q - p) * (TWO_THIRDS - t) * 6],
        default=p + np.zeros_like(t),
    )


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL (degrees, unit s/l) to RGB in [0, 1].

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=np.float64) / HUE_360
    s = np.asarray(s, dtype=np.float64)
    l = np.asarray(l, dtype=np.float64)

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    r = np_hue_to_channel(p, q, h + ONE_THIRD)
    g = np_hue_to_channel(p, q, h)
    b = np_hue_to_channel(p, q, h - ONE_THIRD)

    gray = s == 0
    r = np.where(gray, l, r)
    g = np.where(gray, l, g)
    b = np.where(gray, l, b)
    return np.stack([r, g, b], axis=-1)


def np_hsl_to_rgb(hsl: NDArray) -> NDArray:
    """Vectorized: (..., 3) HSL in degrees/percent -> (..., 3) uint8 RGB, truncated."""
    hsl = np.asarray(hsl, dtype=np.float64)
    percent = max_non_hue[FormatType.PERCENTAGE]
    unit = np_hsl_to_unit_rgb(hsl[..., 0], hsl[..., 1] / percent, hsl[..., 2] / percent)
    return np.trunc(unit * max_non_hue[FormatType.INT]).astype(np.uint8)
