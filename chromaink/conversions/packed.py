"""
Packed ARGB integers.

A packed color holds four 8-bit channels in one 32-bit integer, high byte to
low byte: alpha, red, green, blue (``0xAARRGGBB``). Packing masks every
channel to its low 8 bits, so out-of-range input wraps instead of failing.
"""
import math
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

BYTE_MASK = 0xff
ALPHA_SHIFT = 24
RED_SHIFT = 16
GREEN_SHIFT = 8


def pack(red: int, green: int, blue: int, alpha: int = 0) -> int:
    """Pack four channels into an ``0xAARRGGBB`` integer."""
    return (
        ((alpha & BYTE_MASK) << ALPHA_SHIFT)
        | ((red & BYTE_MASK) << RED_SHIFT)
        | ((green & BYTE_MASK) << GREEN_SHIFT)
        | (blue & BYTE_MASK)
    )


def unpack_red(packed: int) -> int:
    return (packed >> RED_SHIFT) & BYTE_MASK


def unpack_green(packed: int) -> int:
    return (packed >> GREEN_SHIFT) & BYTE_MASK


def unpack_blue(packed: int) -> int:
    return packed & BYTE_MASK


def unpack_alpha(packed: int) -> int:
    return (packed >> ALPHA_SHIFT) & BYTE_MASK


def unpack(packed: int) -> Tuple[int, int, int, int]:
    """Return ``(red, green, blue, alpha)`` from a packed integer."""
    return unpack_red(packed), unpack_green(packed), unpack_blue(packed), unpack_alpha(packed)


def dim_pixel(pixel: int, dim_fraction: float) -> int:
    """
    Move each RGB channel of a packed pixel toward white.

    Args:
        pixel: Packed ARGB pixel
        dim_fraction: Fraction of the remaining distance to white, 0.0-1.0
            (already divided down from a 0-100 percentage)

    Returns:
        Packed pixel with the dimmed channels. The alpha byte is not carried
        over, so the result always has alpha 0.
    """
    red = unpack_red(pixel)
    green = unpack_green(pixel)
    blue = unpack_blue(pixel)
    red += math.floor((BYTE_MASK - red) * dim_fraction)
    green += math.floor((BYTE_MASK - green) * dim_fraction)
    blue += math.floor((BYTE_MASK - blue) * dim_fraction)
    return pack(red, green, blue)


def np_pack(red: NDArray, green: NDArray, blue: NDArray, alpha: NDArray | int = 0) -> NDArray:
    """Vectorized: pack channel arrays into a ``uint32`` array."""
    r = np.asarray(red).astype(np.int64) & BYTE_MASK
    g = np.asarray(green).astype(np.int64) & BYTE_MASK
    b = np.asarray(blue).astype(np.int64) & BYTE_MASK
    a = np.asarray(alpha).astype(np.int64) & BYTE_MASK
    packed = (a << ALPHA_SHIFT) | (r << RED_SHIFT) | (g << GREEN_SHIFT) | b
    return packed.astype(np.uint32)


def np_unpack(packed: NDArray) -> NDArray:
    """
    Vectorized: unpack an array of packed colors.

    Returns:
        ``uint8`` array of shape (..., 4) in RGBA channel order
    """
    p = np.asarray(packed).astype(np.int64)
    return np.stack(
        [
            (p >> RED_SHIFT) & BYTE_MASK,
            (p >> GREEN_SHIFT) & BYTE_MASK,
            p & BYTE_MASK,
            (p >> ALPHA_SHIFT) & BYTE_MASK,
        ],
        axis=-1,
    ).astype(np.uint8)
