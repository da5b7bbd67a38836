"""
Hexadecimal token output for vector/print exporters.

Each function composes a numeric conversion with the fixed-width channel
encoder, giving one 2-character token per output channel in a fixed order:
red, green, blue for RGB and cyan, magenta, yellow, black for CMYK.

Colors may be passed as color objects or as ``(r, g, b)`` tuples of 0-255
integers. Alpha is ignored.
"""
from __future__ import annotations
from typing import Any, Callable, Dict, Tuple, Union
import numpy as np
from numpy import ndarray as NDArray

from .hexadecimal import component_to_hex, int_component_to_hex
from .numbers import int_to_unit
from .to_gray import rgb_to_gray, rgb_to_bitmap, np_rgb_to_gray, np_rgb_to_bitmap
from .to_cmyk import rgb_to_cmyk, np_rgb_to_cmyk
from ..types.color_mode import ColorMode
from ..types.color_types import HexTokens, RGBTriple
from ..types.constants import MAX_COMPONENT

ColorLike = Union[RGBTriple, Any]

_HEX_TABLE = tuple(int_component_to_hex(i) for i in range(MAX_COMPONENT + 1))


def _require_single(color) -> None:
    if color.is_array:
        raise ValueError("hex token functions take a single color; use hex_image_data for arrays of colors")


def _int_rgb(color: ColorLike) -> RGBTriple:
    from ..colors.color_base import ColorBase  # local import to avoid cycles
    from ..colors.rgb import ColorRGBINT

    if isinstance(color, ColorBase):
        _require_single(color)
        r, g, b = ColorRGBINT(color).value
        return r, g, b
    r, g, b = color[:3]
    return int(r), int(g), int(b)


def _unit_rgb(color: ColorLike) -> Tuple[float, float, float]:
    from ..colors.color_base import ColorBase  # local import to avoid cycles
    from ..colors.rgb import ColorUnitRGB

    if isinstance(color, ColorBase):
        _require_single(color)
        r, g, b = ColorUnitRGB(color).value
        return r, g, b
    r, g, b = _int_rgb(color)
    return int_to_unit(r), int_to_unit(g), int_to_unit(b)


def rgb_to_gray_hex(color: ColorLike) -> str:
    """Gray token ("00".."ff") for an RGB color, using NTSC luma weights."""
    return component_to_hex(rgb_to_gray(*_unit_rgb(color)))


def rgb_to_bitmap_hex(color: ColorLike) -> str:
    """Bitmap token for an RGB color; always "00" or "ff"."""
    return component_to_hex(rgb_to_bitmap(*_unit_rgb(color)))


def rgb_to_cmyk_hex(color: ColorLike) -> HexTokens:
    """Cyan, magenta, yellow and black tokens for an RGB color."""
    return tuple(component_to_hex(v) for v in rgb_to_cmyk(*_unit_rgb(color)))


def rgb_to_rgb_hex(color: ColorLike) -> HexTokens:
    """Red, green and blue tokens for an RGB color."""
    return tuple(component_to_hex(v) for v in _int_rgb(color))


HEX_CONVERTERS: Dict[ColorMode, Callable[[ColorLike], Union[str, HexTokens]]] = {
    ColorMode.BITMAP: rgb_to_bitmap_hex,
    ColorMode.GRAYSCALE: rgb_to_gray_hex,
    ColorMode.RGB: rgb_to_rgb_hex,
    ColorMode.CMYK: rgb_to_cmyk_hex,
}


def to_hex(color: ColorLike, color_mode: ColorMode | str | None = None) -> HexTokens:
    """
    Encode an RGB color for the given export color mode.

    Args:
        color: Color object or (r, g, b) 0-255 tuple
        color_mode: Target mode; a ColorMode, its canonical string, or None
            for the default mode (RGB)

    Returns:
        Tuple of tokens, one per channel of the color mode
    """
    if not isinstance(color_mode, ColorMode):
        color_mode = ColorMode.from_canonical_string(color_mode)
    tokens = HEX_CONVERTERS[color_mode](color)
    return (tokens,) if isinstance(tokens, str) else tokens


def _np_unit_to_int(values: NDArray) -> NDArray:
    values = np.nan_to_num(values, nan=0.0)
    return np.clip(np.floor(values * MAX_COMPONENT + 0.5), 0, MAX_COMPONENT).astype(np.intp)


def hex_image_data(pixels: NDArray | Any, color_mode: ColorMode | str | None = None) -> str:
    """
    Encode a block of RGB pixels as one continuous hex string.

    Pixels are emitted in row-major order with the channel tokens of each
    pixel adjacent, which is the sample layout PostScript ``image`` and
    ``colorimage`` read from a hex data source.

    Args:
        pixels: 0-255 array of shape (..., 3), or an array-valued color object
        color_mode: Target mode (default RGB)

    Returns:
        Hex string of ``2 * num_channels`` characters per pixel
    """
    from ..colors.color_base import ColorBase  # local import to avoid cycles
    from ..colors.rgb import ColorRGBINT

    if not isinstance(color_mode, ColorMode):
        color_mode = ColorMode.from_canonical_string(color_mode)

    if isinstance(pixels, ColorBase):
        pixels = ColorRGBINT(pixels).value
    rgb = np.asarray(pixels)
    if rgb.shape[-1] != 3:
        raise ValueError(f"Expected last dimension 3, got shape {rgb.shape}")
    rgb = rgb.reshape(-1, 3)

    if color_mode is ColorMode.RGB:
        # out-of-range channels encode as black, matching int_component_to_hex
        in_range = (rgb >= 0) & (rgb <= MAX_COMPONENT)
        channels = np.where(in_range, rgb, 0).astype(np.intp)
    else:
        unit = np.clip(rgb, 0, MAX_COMPONENT) / MAX_COMPONENT
        r, g, b = unit[:, 0], unit[:, 1], unit[:, 2]
        if color_mode is ColorMode.CMYK:
            converted = np_rgb_to_cmyk(r, g, b)
        elif color_mode is ColorMode.GRAYSCALE:
            converted = np_rgb_to_gray(r, g, b)[:, None]
        else:
            converted = np_rgb_to_bitmap(r, g, b)[:, None]
        channels = _np_unit_to_int(converted)

    return "".join(_HEX_TABLE[v] for v in channels.ravel())
