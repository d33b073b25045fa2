from __future__ import annotations
from typing import Literal, Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

RGBTriple = Tuple[int, int, int]
HSLTriple = Tuple[float, float, float]
UnitTriple = Tuple[float, float, float]
HexColor = str
ColorElement = Union[RGBTriple, HSLTriple, HexColor]
ColorSpace = Literal["hex", "rgb", "hsl"]
COLOR_SPACES = ("hex", "rgb", "hsl")


def element_to_array(element: Union[Sequence[float], ndarray]) -> np.ndarray:
    """
    Convert a channel triple (or a stack of them) to a float64 numpy array.

    Args:
        element: Tuple, list of tuples, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(np.float64, copy=False)
    return np.asarray(element, dtype=np.float64)
