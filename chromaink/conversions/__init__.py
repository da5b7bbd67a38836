"""
Chromaink Color Conversions
===========================

Pure conversion functions between RGB, grayscale, 1-bit bitmap, CMYK and HSB,
packed ARGB integers, and fixed-width hexadecimal channel tokens. Every
function is total over numeric input: out-of-range values are masked, clamped
or mapped to black instead of raising.

Conversion Functions
-------------------

Packed ARGB:
    pack(red, green, blue, alpha=0), unpack(packed)
    unpack_red / unpack_green / unpack_blue / unpack_alpha(packed)
    dim_pixel(pixel, dim_fraction)
    np_pack, np_unpack

Hexadecimal:
    component_to_hex(value)
        int 0-255 or float 0.0-1.0 -> 2-character lowercase token

RGB → Gray / Bitmap:
    rgb_to_gray(r, g, b)           NTSC luma weights, unit floats
    rgb_to_bitmap(r, g, b)         unweighted mean, 0.0 or 1.0
    rgb_int_to_gray / rgb_int_to_bitmap
        0-255 integer variants
    np_rgb_to_gray / np_rgb_to_bitmap

RGB ↔ CMYK:
    rgb_to_cmyk(r, g, b), rgb_int_to_cmyk(r, g, b)
    cmyk_to_rgb(c, m, y, k)
    np_rgb_to_cmyk, np_cmyk_to_rgb

RGB ↔ HSB:
    rgb_to_hsb(r, g, b)            0-255 input, unit output
    unit_rgb_to_hsb(r, g, b)
    hsb_to_rgb(h, s, b)            0-255 output
    np_rgb_to_hsb, np_hsb_to_rgb

Hex output:
    rgb_to_gray_hex, rgb_to_bitmap_hex, rgb_to_cmyk_hex, rgb_to_rgb_hex
    to_hex(color, color_mode), hex_image_data(pixels, color_mode)

High-Level API
-------------
    convert(color, from_space, to_space, input_type, output_type)
    np_convert(color, from_space, to_space, input_type, output_type)

Examples
--------
>>> from chromaink.conversions import rgb_to_cmyk, component_to_hex
>>> rgb_to_cmyk(0.0, 0.0, 0.0)
(0.0, 0.0, 0.0, 1.0)
>>> [component_to_hex(v) for v in rgb_to_cmyk(1.0, 0.5, 0.0)]
['00', '80', 'ff', '00']
"""

from .packed import (
    pack,
    unpack,
    unpack_red,
    unpack_green,
    unpack_blue,
    unpack_alpha,
    dim_pixel,
    np_pack,
    np_unpack,
)

from .hexadecimal import component_to_hex, int_component_to_hex, unit_component_to_hex

from .to_gray import (
    rgb_to_gray,
    rgb_int_to_gray,
    np_rgb_to_gray,
    rgb_to_bitmap,
    rgb_int_to_bitmap,
    np_rgb_to_bitmap,
)

from .to_cmyk import (
    rgb_to_cmyk,
    rgb_int_to_cmyk,
    cmyk_to_rgb,
    np_rgb_to_cmyk,
    np_cmyk_to_rgb,
)

from .to_hsb import (
    rgb_to_hsb,
    unit_rgb_to_hsb,
    hsb_to_rgb,
    np_rgb_to_hsb,
    np_hsb_to_rgb,
)

from .to_hex import (
    rgb_to_gray_hex,
    rgb_to_bitmap_hex,
    rgb_to_cmyk_hex,
    rgb_to_rgb_hex,
    to_hex,
    hex_image_data,
)

# High-level API
from .wrapper import convert, np_convert

# Types and enums
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from ..types.color_mode import ColorMode

__all__ = [
    # Packed ARGB
    'pack',
    'unpack',
    'unpack_red',
    'unpack_green',
    'unpack_blue',
    'unpack_alpha',
    'dim_pixel',
    'np_pack',
    'np_unpack',

    # Hexadecimal
    'component_to_hex',
    'int_component_to_hex',
    'unit_component_to_hex',

    # Gray / Bitmap
    'rgb_to_gray',
    'rgb_int_to_gray',
    'np_rgb_to_gray',
    'rgb_to_bitmap',
    'rgb_int_to_bitmap',
    'np_rgb_to_bitmap',

    # CMYK
    'rgb_to_cmyk',
    'rgb_int_to_cmyk',
    'cmyk_to_rgb',
    'np_rgb_to_cmyk',
    'np_cmyk_to_rgb',

    # HSB
    'rgb_to_hsb',
    'unit_rgb_to_hsb',
    'hsb_to_rgb',
    'np_rgb_to_hsb',
    'np_hsb_to_rgb',

    # Hex output
    'rgb_to_gray_hex',
    'rgb_to_bitmap_hex',
    'rgb_to_cmyk_hex',
    'rgb_to_rgb_hex',
    'to_hex',
    'hex_image_data',

    # High-level API
    'convert',
    'np_convert',

    # Types
    'FormatType',
    'ColorSpace',
    'ColorMode',
]
