"""
RGB to grayscale and RGB to 1-bit bitmap.

The two conversions use different weightings:

- Grayscale uses the NTSC luma weights (0.2989, 0.587, 0.114) as published
  for Matlab's ``rgb2gray``. Equal weighting leaves too many mid-grays that
  blur together in scientific charts.
- Bitmap posterization only needs a coarse split, so it thresholds the plain
  channel average at 0.5. Do not swap in the luma weights here.
"""
import numpy as np
from numpy import ndarray as NDArray

from .numbers import clamp01, int_to_unit, np_clamp
from ..types.constants import NTSC_LUMA_WEIGHTS, BITMAP_THRESHOLD

RED_WEIGHT, GREEN_WEIGHT, BLUE_WEIGHT = NTSC_LUMA_WEIGHTS


def rgb_to_gray(r: float, g: float, b: float) -> float:
    """Convert unit RGB (0..1) to a unit gray value using NTSC luma weights."""
    r, g, b = clamp01(r), clamp01(g), clamp01(b)
    gray = RED_WEIGHT * r + GREEN_WEIGHT * g + BLUE_WEIGHT * b
    return min(gray, 1.0)


def rgb_int_to_gray(r: int, g: int, b: int) -> float:
    """Convert 0-255 RGB to a unit gray value."""
    return rgb_to_gray(int_to_unit(r), int_to_unit(g), int_to_unit(b))


def np_rgb_to_gray(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: unit RGB to unit gray."""
    r, g, b = np_clamp(r), np_clamp(g), np_clamp(b)
    gray = RED_WEIGHT * r + GREEN_WEIGHT * g + BLUE_WEIGHT * b
    return np.minimum(gray, 1.0)


def rgb_to_bitmap(r: float, g: float, b: float) -> float:
    """
    Posterize unit RGB (0..1) to exactly 0.0 (black) or 1.0 (white).

    The unweighted channel mean is compared against 0.5; a mean of exactly
    0.5 is white.
    """
    r, g, b = clamp01(r), clamp01(g), clamp01(b)
    gray = (r + g + b) / 3.0
    return 0.0 if gray < BITMAP_THRESHOLD else 1.0


def rgb_int_to_bitmap(r: int, g: int, b: int) -> float:
    """Posterize 0-255 RGB to exactly 0.0 or 1.0."""
    return rgb_to_bitmap(int_to_unit(r), int_to_unit(g), int_to_unit(b))


def np_rgb_to_bitmap(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: unit RGB to bitmap values (0.0 or 1.0 only)."""
    r, g, b = np_clamp(r), np_clamp(g), np_clamp(b)
    gray = (r + g + b) / 3.0
    return np.where(gray < BITMAP_THRESHOLD, 0.0, 1.0)
