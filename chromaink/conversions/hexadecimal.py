"""
Fixed-width hexadecimal channel encoding.

PostScript image blocks (and the EPS/SVG exporters built on the same model)
need a constant number of bits per channel. Our channels are 8 bits, so every
token is exactly two lowercase hex characters.
"""
import math
from typing import Union
import numpy as np

from ..types.constants import BLACK_HEX, WHITE_HEX, MAX_COMPONENT


def int_component_to_hex(value: int) -> str:
    """
    Encode a 0-255 channel as two hex characters.

    Values outside 0-255 are treated as invalid and encode as black ("00").
    """
    if value < 0 or value > MAX_COMPONENT:
        return BLACK_HEX
    if value == 0:
        return BLACK_HEX
    if value == MAX_COMPONENT:
        return WHITE_HEX
    hex_value = format(int(value), "x")
    if len(hex_value) == 1:
        hex_value = "0" + hex_value
    return hex_value


def unit_component_to_hex(value: float) -> str:
    """
    Encode a 0.0-1.0 channel as two hex characters.

    The value is scaled to 0-255, rounded half up and capped at 255 before
    encoding. NaN encodes as black.
    """
    if math.isnan(value):
        return BLACK_HEX
    scaled = value * MAX_COMPONENT
    if math.isinf(scaled):
        return WHITE_HEX if scaled > 0 else BLACK_HEX
    int_value = min(math.floor(scaled + 0.5), MAX_COMPONENT)
    return int_component_to_hex(int_value)


def component_to_hex(value: Union[int, float]) -> str:
    """
    Encode one color channel as a 2-character lowercase hex token.

    Integers (including numpy integers) are read as 0-255 channels, floats as
    0.0-1.0 channels.

    >>> component_to_hex(0), component_to_hex(10), component_to_hex(255)
    ('00', '0a', 'ff')
    >>> component_to_hex(0.5)
    '80'
    """
    if isinstance(value, (float, np.floating)):
        return unit_component_to_hex(float(value))
    return int_component_to_hex(int(value))
