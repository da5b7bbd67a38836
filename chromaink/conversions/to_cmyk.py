"""
RGB <-> CMYK.

Uses the usual black-extraction formula::

    k = 1 - max(r, g, b)
    c = 1 - r / (1 - k)      (likewise m, y)

Absolute black and absolute white are answered directly before the formula
runs. The general formula divides by ``1 - k``, which is zero at black, and
evaluating it at the boundaries can leave near-black/near-white noise where
print output needs the exact values.
"""
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

from .numbers import clamp01, int_to_unit, np_clamp
from ..types.constants import CMYK_EPSILON

CMYKTuple = Tuple[float, float, float, float]

ABSOLUTE_BLACK_CMYK: CMYKTuple = (0.0, 0.0, 0.0, 1.0)
ABSOLUTE_WHITE_CMYK: CMYKTuple = (0.0, 0.0, 0.0, 0.0)


def rgb_to_cmyk(r: float, g: float, b: float) -> CMYKTuple:
    """
    Convert unit RGB (0..1) to unit CMYK.

    Returns:
        (cyan, magenta, yellow, black), each in [0, 1]
    """
    r, g, b = clamp01(r), clamp01(g), clamp01(b)

    if r == 0.0 and g == 0.0 and b == 0.0:
        return ABSOLUTE_BLACK_CMYK
    if r == 1.0 and g == 1.0 and b == 1.0:
        return ABSOLUTE_WHITE_CMYK

    brightest = max(r, g, b)
    k = 1.0 - brightest
    denominator = max(CMYK_EPSILON, 1.0 - k)
    c = 1.0 - r / denominator
    m = 1.0 - g / denominator
    y = 1.0 - b / denominator
    return clamp01(c), clamp01(m), clamp01(y), clamp01(k)


def rgb_int_to_cmyk(r: int, g: int, b: int) -> CMYKTuple:
    """Convert 0-255 RGB to unit CMYK."""
    return rgb_to_cmyk(int_to_unit(r), int_to_unit(g), int_to_unit(b))


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> Tuple[float, float, float]:
    """Convert unit CMYK back to unit RGB."""
    c, m, y, k = clamp01(c), clamp01(m), clamp01(y), clamp01(k)
    white = 1.0 - k
    return (1.0 - c) * white, (1.0 - m) * white, (1.0 - y) * white


def np_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: unit RGB to unit CMYK.

    Returns:
        array of shape (..., 4): (cyan, magenta, yellow, black)
    """
    r, g, b = np_clamp(r), np_clamp(g), np_clamp(b)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    brightest = np.maximum.reduce([r, g, b])
    k = 1.0 - brightest
    denominator = np.maximum(CMYK_EPSILON, 1.0 - k)
    cmyk = np.stack([1.0 - r / denominator, 1.0 - g / denominator, 1.0 - b / denominator, k], axis=-1)
    cmyk = np.clip(cmyk, 0.0, 1.0)

    black = (r == 0.0) & (g == 0.0) & (b == 0.0)
    white = (r == 1.0) & (g == 1.0) & (b == 1.0)
    cmyk[black] = ABSOLUTE_BLACK_CMYK
    cmyk[white] = ABSOLUTE_WHITE_CMYK
    return cmyk


def np_cmyk_to_rgb(c: NDArray, m: NDArray, y: NDArray, k: NDArray) -> NDArray:
    """Vectorized: unit CMYK to unit RGB, shape (..., 3)."""
    c, m, y, k = np_clamp(c), np_clamp(m), np_clamp(y), np_clamp(k)
    white = 1.0 - k
    return np.stack([(1.0 - c) * white, (1.0 - m) * white, (1.0 - y) * white], axis=-1)
