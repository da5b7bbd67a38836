"""
Chromaink Color Classes
=======================

Immutable color values for RGB, grayscale, 1-bit bitmap, CMYK and HSB.

Features
--------
- Immutable instances (frozen after initialization)
- Scalar colors or numpy arrays of colors (channels on the last axis)
- Values clamped to each channel's maximum on construction
- Conversion between spaces with ``convert``
- Hexadecimal export tokens with ``to_hex``

Usage
-----
>>> from chromaink.colors import ColorRGBINT
>>> color = ColorRGBINT((200, 100, 50))
>>> color.convert("bitmap").value
0.0
>>> color.to_hex("cmyk")
('00', '80', 'bf', '37')

Color Classes
-------------
RGB:
    - ColorRGBINT / ColorRGBAINT: integer channels (0-255)
    - ColorUnitRGB / ColorUnitRGBA: float channels (0.0-1.0)

Derived spaces (float only):
    - UnitGray: NTSC luma gray value
    - UnitBitmap: exactly 0.0 or 1.0
    - UnitCMYK: cyan, magenta, yellow, black
    - UnitHSB: hue (fraction of a turn), saturation, brightness
"""

from .color_base import ColorBase, WithAlpha
from .rgb import (
    ColorRGBINT, ColorRGBAINT,
    ColorUnitRGB, ColorUnitRGBA,
    RGB, RGBA, BLACK, WHITE,
)
from .gray import UnitGray, UnitBitmap
from .cmyk import UnitCMYK
from .hsb import UnitHSB
from .color import color_convert, get_color_class, unified_tuple_to_class


__all__ = [
    'ColorBase', 'WithAlpha',
    'ColorRGBINT', 'ColorRGBAINT', 'ColorUnitRGB', 'ColorUnitRGBA',
    'RGB', 'RGBA', 'BLACK', 'WHITE',
    'UnitGray', 'UnitBitmap', 'UnitCMYK', 'UnitHSB',
    'color_convert', 'get_color_class', 'unified_tuple_to_class',
]
