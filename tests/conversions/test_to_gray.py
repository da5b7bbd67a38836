import math
import numpy as np
import pytest
from chromaink.conversions.to_gray import (
    rgb_to_gray, rgb_int_to_gray, np_rgb_to_gray,
    rgb_to_bitmap, rgb_int_to_bitmap, np_rgb_to_bitmap,
)


def test_gray_black_and_white():
    assert rgb_to_gray(0, 0, 0) == 0.0
    assert abs(rgb_to_gray(1, 1, 1) - 1.0) < 1e-3

def test_gray_uses_ntsc_weights():
    assert rgb_to_gray(1.0, 0.0, 0.0) == pytest.approx(0.2989)
    assert rgb_to_gray(0.0, 1.0, 0.0) == pytest.approx(0.587)
    assert rgb_to_gray(0.0, 0.0, 1.0) == pytest.approx(0.114)

def test_gray_never_exceeds_one():
    assert rgb_to_gray(2.0, 2.0, 2.0) <= 1.0
    assert rgb_to_gray(-1.0, 0.0, 0.0) == 0.0

def test_gray_int_delegates():
    assert rgb_int_to_gray(255, 255, 255) == rgb_to_gray(1.0, 1.0, 1.0)
    assert rgb_int_to_gray(0, 255, 0) == pytest.approx(0.587)

def test_bitmap_threshold_is_strict():
    assert rgb_to_bitmap(0.4999, 0.4999, 0.4999) == 0.0
    assert rgb_to_bitmap(0.5, 0.5, 0.5) == 1.0
    assert rgb_to_bitmap(1.0, 0.5, 0.0) == 1.0

def test_bitmap_is_binary():
    for value in np.linspace(0.0, 1.0, 41):
        assert rgb_to_bitmap(value, value * 0.5, 1.0 - value) in (0.0, 1.0)

def test_bitmap_uses_unweighted_mean():
    # pure green is light by luma but dark by the plain channel average
    assert rgb_to_gray(0.0, 1.0, 0.0) > 0.5
    assert rgb_to_bitmap(0.0, 1.0, 0.0) == 0.0

def test_bitmap_int():
    assert rgb_int_to_bitmap(128, 128, 128) == 1.0
    assert rgb_int_to_bitmap(127, 127, 127) == 0.0

def test_numpy_matches_scalar():
    rgb = np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0], [0.2, 0.7, 0.4], [0.0, 1.0, 0.0]])
    gray = np_rgb_to_gray(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    bitmap = np_rgb_to_bitmap(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    for i, (r, g, b) in enumerate(rgb):
        assert gray[i] == pytest.approx(rgb_to_gray(r, g, b))
        assert bitmap[i] == rgb_to_bitmap(r, g, b)

def test_non_finite_inputs_stay_in_range():
    assert rgb_to_gray(math.nan, 0, 0) == 0.0
    assert 0.0 <= rgb_to_gray(math.inf, math.nan, -math.inf) <= 1.0
    assert rgb_to_bitmap(math.nan, math.nan, math.nan) == 0.0
    gray = np_rgb_to_gray(np.array([math.nan, math.inf]), np.zeros(2), np.zeros(2))
    assert np.all((gray >= 0.0) & (gray <= 1.0))
    assert np_rgb_to_bitmap(np.array([math.nan]), np.array([math.nan]), np.array([math.nan])).tolist() == [0.0]
