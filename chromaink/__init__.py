"""
Chromaink - Color Model Conversion Engine
=========================================

Deterministic conversions between RGB, grayscale, 1-bit bitmap, CMYK and HSB,
packed ARGB integers, fixed-width hexadecimal channel tokens for vector and
print exporters, and dark/light contrast classification for picking a legible
foreground color.

Key Features
------------
- NTSC-weighted grayscale and unweighted bitmap posterization, kept distinct
- CMYK with exact results for absolute black and absolute white
- Two-character lowercase hex tokens, safe for PostScript/EPS image data
- Packed 0xAARRGGBB integers with silent 8-bit masking
- Immutable color values, scalar or numpy arrays
- Pure, total functions: bad numeric input degrades to black, never raises

Quick Start
-----------
>>> from chromaink import ColorRGBINT, foreground_for, rgb_to_cmyk, component_to_hex
>>> foreground_for(ColorRGBINT((128, 128, 128))).value
(255, 255, 255)
>>> rgb_to_cmyk(1.0, 1.0, 1.0)
(0.0, 0.0, 0.0, 0.0)
>>> component_to_hex(300)
'00'

Modules
-------
- conversions: Numeric and hexadecimal conversion functions
- colors: Immutable color classes
- contrast: Dark/light classification and foreground selection
- types: Enumerations (ColorMode, DrawMode, FormatType) and constants
"""

from .colors import (
    ColorBase,
    ColorRGBINT, ColorRGBAINT,
    ColorUnitRGB, ColorUnitRGBA,
    UnitGray, UnitBitmap, UnitCMYK, UnitHSB,
    BLACK, WHITE,
)

from .conversions import (
    pack, unpack, unpack_red, unpack_green, unpack_blue, unpack_alpha, dim_pixel,
    component_to_hex,
    rgb_to_gray, rgb_int_to_gray,
    rgb_to_bitmap, rgb_int_to_bitmap,
    rgb_to_cmyk, rgb_int_to_cmyk, cmyk_to_rgb,
    rgb_to_hsb, hsb_to_rgb,
    rgb_to_gray_hex, rgb_to_bitmap_hex, rgb_to_cmyk_hex, rgb_to_rgb_hex,
    to_hex, hex_image_data,
    convert, np_convert,
)

from .contrast import is_dark, foreground_for, np_is_dark, np_foreground_for

from .types.color_mode import ColorMode, DrawMode
from .types.color_types import ColorSpace
from .types.format_type import FormatType

__version__ = "1.0.0"
