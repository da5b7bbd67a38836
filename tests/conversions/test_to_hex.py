import numpy as np
import pytest
from chromaink.colors import ColorRGBINT, ColorUnitRGB, ColorRGBAINT
from chromaink.conversions.to_hex import (
    rgb_to_gray_hex, rgb_to_bitmap_hex, rgb_to_cmyk_hex, rgb_to_rgb_hex,
    to_hex, hex_image_data,
)
from chromaink.types.color_mode import ColorMode
from ..samples import samples_rgb_cmyk


def test_rgb_hex_order():
    assert rgb_to_rgb_hex((255, 0, 16)) == ("ff", "00", "10")
    assert rgb_to_rgb_hex(ColorRGBINT((1, 171, 254))) == ("01", "ab", "fe")

def test_rgb_hex_ignores_alpha():
    assert rgb_to_rgb_hex(ColorRGBAINT((10, 20, 30, 40))) == ("0a", "14", "1e")

def test_rgb_hex_out_of_range_tuple():
    assert rgb_to_rgb_hex((300, -1, 255)) == ("00", "00", "ff")

def test_cmyk_hex_boundaries():
    assert rgb_to_cmyk_hex((0, 0, 0)) == ("00", "00", "00", "ff")
    assert rgb_to_cmyk_hex((255, 255, 255)) == ("00", "00", "00", "00")

def test_cmyk_hex_general():
    # (0, 0.5, 0.75, 55/255)
    assert rgb_to_cmyk_hex((200, 100, 50)) == ("00", "80", "bf", "37")

def test_gray_hex():
    assert rgb_to_gray_hex((0, 0, 0)) == "00"
    assert rgb_to_gray_hex((255, 255, 255)) == "ff"
    assert rgb_to_gray_hex(ColorUnitRGB((0.0, 1.0, 0.0))) == "96"

def test_bitmap_hex():
    assert rgb_to_bitmap_hex((128, 128, 128)) == "ff"
    assert rgb_to_bitmap_hex((127, 127, 127)) == "00"
    assert rgb_to_bitmap_hex((0, 255, 0)) == "00"

def test_to_hex_dispatch():
    color = (200, 100, 50)
    assert to_hex(color, ColorMode.CMYK) == rgb_to_cmyk_hex(color)
    assert to_hex(color, "grayscale") == (rgb_to_gray_hex(color),)
    assert to_hex(color, "bitmap") == ("00",)
    assert to_hex(color) == rgb_to_rgb_hex(color)

def test_tokens_are_fixed_width():
    for color in samples_rgb_cmyk:
        for mode in ColorMode:
            tokens = to_hex(color, mode)
            assert len(tokens) == mode.num_channels
            assert all(len(t) == 2 and t == t.lower() for t in tokens)

def test_hex_image_data_rgb():
    pixels = np.array([[[0, 0, 0], [255, 255, 255]]], dtype=np.uint8)
    assert hex_image_data(pixels) == "000000ffffff"
    assert hex_image_data(pixels, ColorMode.RGB) == "000000ffffff"

def test_hex_image_data_other_modes():
    pixels = np.array([[[0, 0, 0], [255, 255, 255]]], dtype=np.uint8)
    assert hex_image_data(pixels, ColorMode.CMYK) == "000000ff" + "00000000"
    assert hex_image_data(pixels, ColorMode.GRAYSCALE) == "00ff"
    assert hex_image_data(pixels, ColorMode.BITMAP) == "00ff"

def test_hex_image_data_matches_to_hex():
    pixels = np.array(list(samples_rgb_cmyk.keys()))
    for mode in ColorMode:
        expected = "".join("".join(to_hex(tuple(p), mode)) for p in pixels)
        assert hex_image_data(pixels, mode) == expected

def test_hex_image_data_out_of_range_rgb():
    assert hex_image_data(np.array([[300, -1, 16]])) == "000010"

def test_hex_image_data_accepts_color_arrays():
    colors = ColorRGBINT(np.array([[255, 0, 0], [0, 0, 255]], dtype=np.uint8))
    assert hex_image_data(colors, "cmyk") == "00ffff00" + "ffff0000"

def test_hex_image_data_rejects_bad_shape():
    with pytest.raises(ValueError):
        hex_image_data(np.zeros((2, 4)))

def test_array_colors_point_to_image_data():
    colors = ColorRGBINT(np.array([[0, 0, 0], [255, 255, 255]], dtype=np.uint8))
    for mode in ColorMode:
        with pytest.raises(ValueError, match="hex_image_data"):
            to_hex(colors, mode)
