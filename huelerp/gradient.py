from __future__ import annotations

import warnings
from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray

from .colors import ColorBase, ColorHSL, ColorRGB, convert_color
from .conversions import hsl_to_hex, hsl_to_rgb
from .errors import ControlPointError, GradientLengthError, GradientQuantizationWarning
from .types.color_types import ColorElement, HSLTriple, RGBTriple


def gradient_length(control_count: int, n: int) -> int:
    """
    Number of samples :func:`lerp_hsl` produces for ``control_count`` points.

    Each segment gets ``(n - 1) // segments`` samples, so the result falls
    short of ``n`` whenever ``n - 1`` does not divide evenly.
    """
    segments = control_count - 1
    return segments * ((n - 1) // segments) + 1


def lerp_hsl(control_points: Sequence[HSLTriple], n: int) -> List[HSLTriple]:
    """
    Linearly interpolate a sequence of HSL control points.

    Hue, saturation and lightness are interpolated independently; hue is
    treated as a plain number, so 350° -> 10° passes through 180°.
    The last control point is appended unchanged.

    Callers are expected to check ``n > len(control_points) >= 2`` first
    (see :func:`validate_gradient_request`).

    Args:
        control_points: HSL triples (hue degrees, saturation/lightness percent)
        n: Requested number of samples

    Returns:
        ``gradient_length(len(control_points), n)`` HSL triples
    """
    segments = len(control_points) - 1
    per_segment = (n - 1) // segments
    result: List[HSLTriple] = []

    for i in range(segments):
        h1, s1, l1 = control_points[i]
        h2, s2, l2 = control_points[i + 1]
        for j in range(per_segment):
            t = j / per_segment
            result.append((
                h1 + t * (h2 - h1),
                s1 + t * (s2 - s1),
                l1 + t * (l2 - l1),
            ))

    result.append(tuple(control_points[-1]))  # type: ignore[arg-type]
    return result


def np_lerp_hsl(control_points: Union[Sequence[HSLTriple], NDArray], n: int) -> NDArray:
    """
    Vectorized :func:`lerp_hsl`.

    Returns:
        float64 array of shape (gradient_length(len(control_points), n), 3)
    """
    points = np.asarray(control_points, dtype=np.float64)
    segments = points.shape[0] - 1
    per_segment = (n - 1) // segments

    t = (np.arange(per_segment, dtype=np.float64) / per_segment)[None, :, None]
    start = points[:-1, None, :]
    end = points[1:, None, :]
    body = (start + t * (end - start)).reshape(-1, 3)
    return np.concatenate([body, points[-1:]], axis=0)


def validate_gradient_request(n: int, colors: Sequence) -> None:
    """
    Reject requests the interpolator cannot serve.

    Raises:
        GradientLengthError: if ``n`` does not exceed the number of colors
        ControlPointError: if fewer than two colors are given
    """
    if n <= len(colors):
        raise GradientLengthError(n, len(colors))
    if len(colors) < 2:
        raise ControlPointError(len(colors))


class Gradient1D:
    """
    An HSL gradient through two or more control colors.

    >>> grad = Gradient1D.from_hex(["#FF0000", "#0000FF"], 3)
    >>> grad.hex
    ['#FF0000', '#00FF00', '#0000FF']
    """

    def __init__(self, samples: Sequence[HSLTriple], requested_length: int | None = None):
        self._samples: Tuple[HSLTriple, ...] = tuple(tuple(s) for s in samples)  # type: ignore[misc]
        self.requested_length = len(self._samples) if requested_length is None else requested_length

    @classmethod
    def from_colors(
        cls,
        colors: Sequence[Union[ColorBase, ColorElement]],
        n: int,
    ) -> "Gradient1D":
        """
        Build a gradient from ColorBase instances, hex strings or RGB triples.

        Raw triples are read as 8-bit RGB; pass a ColorHSL for HSL input.

        Args:
            colors: Control colors in order
            n: Requested number of samples

        Returns:
            Gradient1D with ``gradient_length(len(colors), n)`` samples
        """
        validate_gradient_request(n, colors)
        control = [c if isinstance(c, ColorBase) else ColorRGB(c) for c in colors]
        return cls._interpolate(control, n)

    @classmethod
    def from_hex(cls, hex_colors: Sequence[str], n: int) -> "Gradient1D":
        # Length is checked before any hex is decoded
        validate_gradient_request(n, hex_colors)
        return cls._interpolate([ColorRGB.from_hex(h) for h in hex_colors], n)

    @classmethod
    def _interpolate(cls, colors: Sequence[ColorBase], n: int) -> "Gradient1D":
        points = [convert_color(c, "hsl").value for c in colors]
        samples = lerp_hsl(points, n)

        if len(samples) < n:
            # Attributed to whoever called from_colors/from_hex
            warnings.warn(
                f"Gradient has {len(samples)} colors instead of the requested {n}: "
                f"{n - 1} steps do not split evenly across {len(colors) - 1} segments",
                GradientQuantizationWarning,
                stacklevel=3,
            )
        return cls(samples, requested_length=n)

    @property
    def hsl(self) -> List[HSLTriple]:
        return list(self._samples)

    @property
    def rgb(self) -> List[RGBTriple]:
        return [hsl_to_rgb(s) for s in self._samples]

    @property
    def hex(self) -> List[str]:
        return [hsl_to_hex(s) for s in self._samples]

    @property
    def colors(self) -> List[ColorHSL]:
        return [ColorHSL(s) for s in self._samples]

    @property
    def is_quantized(self) -> bool:
        """True when fewer samples were produced than requested."""
        return len(self._samples) < self.requested_length

    def to_array(self) -> NDArray:
        return np.array(self._samples, dtype=np.float64).reshape(-1, 3)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[HSLTriple]:
        return iter(self._samples)

    def __getitem__(self, index: int) -> HSLTriple:
        return self._samples[index]

    def __repr__(self) -> str:
        return f"Gradient1D(len={len(self)}, requested={self.requested_length})"
