"""
Dark/light classification and foreground color selection.

A color is dark when its HSB brightness is at or below a cutoff (0.51 by
default). Perceived darkness follows brightness far better than an average of
the R, G and B channels, and the cutoff sits slightly above 0.5 so borderline
mid-grays are classified as dark and get a white foreground.

This is not the bitmap posterization rule in ``conversions.to_gray``, which
compares the plain channel mean with a strict ``< 0.5``.
"""
from __future__ import annotations
from typing import Any, Tuple, Union
import numpy as np
from numpy import ndarray as NDArray

from .colors.color_base import ColorBase
from .colors.rgb import ColorRGBINT, BLACK, WHITE
from .conversions.to_hsb import rgb_to_hsb, np_rgb_to_hsb
from .types.constants import (
    DEFAULT_BRIGHTNESS_CUTOFF, HSB_BRIGHTNESS_INDEX,
    RGB_RED_INDEX, RGB_GREEN_INDEX, RGB_BLUE_INDEX,
)

ColorLike = Union[ColorBase, Tuple[int, int, int], Any]


def _int_rgb(color: ColorLike) -> Tuple[int, int, int]:
    if isinstance(color, ColorBase):
        if color.is_array:
            raise ValueError("is_dark takes a single color; use np_is_dark for arrays of colors")
        r, g, b = ColorRGBINT(color).value
        return r, g, b
    r, g, b = color[:3]
    return int(r), int(g), int(b)


def is_dark(color: ColorLike, brightness_cutoff: float = DEFAULT_BRIGHTNESS_CUTOFF) -> bool:
    """
    Classify a color as dark (True) or light (False).

    Args:
        color: Color object or (r, g, b) tuple of 0-255 integers
        brightness_cutoff: HSB brightness at or below which the color is dark

    Returns:
        True if the color's HSB brightness is <= ``brightness_cutoff``
    """
    hsb = rgb_to_hsb(*_int_rgb(color))
    return hsb[HSB_BRIGHTNESS_INDEX] <= brightness_cutoff


def foreground_for(background: ColorLike) -> ColorRGBINT:
    """
    Pick a foreground color that will not be masked by ``background``.

    Returns:
        ``WHITE`` on dark backgrounds, ``BLACK`` on light ones. No other value
        is ever returned.
    """
    return WHITE if is_dark(background) else BLACK


def np_is_dark(pixels: NDArray, brightness_cutoff: float = DEFAULT_BRIGHTNESS_CUTOFF) -> NDArray:
    """Vectorized: boolean dark mask for a 0-255 array of shape (..., 3)."""
    pixels = np.asarray(pixels)
    hsb = np_rgb_to_hsb(pixels[..., RGB_RED_INDEX], pixels[..., RGB_GREEN_INDEX], pixels[..., RGB_BLUE_INDEX])
    return hsb[..., HSB_BRIGHTNESS_INDEX] <= brightness_cutoff


def np_foreground_for(pixels: NDArray) -> NDArray:
    """Vectorized: white or black foreground per pixel, ``uint8`` shape (..., 3)."""
    dark = np_is_dark(pixels)[..., None]
    return np.where(dark, np.array(WHITE.value, dtype=np.uint8), np.array(BLACK.value, dtype=np.uint8))
