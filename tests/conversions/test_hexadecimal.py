import math
import numpy as np
from chromaink.conversions.hexadecimal import component_to_hex, int_component_to_hex, unit_component_to_hex


def test_boundaries():
    assert component_to_hex(0) == "00"
    assert component_to_hex(255) == "ff"

def test_out_of_range_maps_to_black():
    assert component_to_hex(-5) == "00"
    assert component_to_hex(300) == "00"
    assert component_to_hex(256) == "00"

def test_single_digit_is_padded():
    assert component_to_hex(1) == "01"
    assert component_to_hex(10) == "0a"
    assert component_to_hex(15) == "0f"
    assert component_to_hex(16) == "10"

def test_every_channel_value_is_two_lowercase_chars():
    for value in range(256):
        token = int_component_to_hex(value)
        assert len(token) == 2
        assert token == token.lower()
        assert int(token, 16) == value

def test_float_components():
    assert component_to_hex(0.0) == "00"
    assert component_to_hex(1.0) == "ff"
    assert component_to_hex(0.5) == "80"
    assert component_to_hex(0.9999) == "ff"

def test_float_components_clamp():
    assert component_to_hex(1.5) == "ff"
    assert component_to_hex(-0.2) == "00"

def test_float_non_finite():
    assert unit_component_to_hex(math.nan) == "00"
    assert unit_component_to_hex(math.inf) == "ff"
    assert unit_component_to_hex(-math.inf) == "00"

def test_numpy_scalars():
    assert component_to_hex(np.uint8(255)) == "ff"
    assert component_to_hex(np.int64(171)) == "ab"
    assert component_to_hex(np.float64(0.0)) == "00"
    assert component_to_hex(np.float32(1.0)) == "ff"
