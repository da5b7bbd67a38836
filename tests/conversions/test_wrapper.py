import numpy as np
import pytest
from chromaink.conversions import convert, np_convert, FormatType


def test_convert_returns_tuple():
    result = convert((255, 128, 64), "rgb", "cmyk", output_type=FormatType.FLOAT)
    assert isinstance(result, tuple)
    assert len(result) == 4

def test_single_channel_returns_float():
    assert convert((0, 0, 0), "rgb", "gray", output_type=FormatType.FLOAT) == 0.0
    assert convert((128, 128, 128), "rgb", "bitmap", output_type=FormatType.FLOAT) == 1.0

def test_format_only_change():
    assert convert((1.0, 0.5, 0.0), "rgb", "rgb", FormatType.FLOAT, FormatType.INT) == (255, 128, 0)
    assert convert((255, 0, 51), "rgb", "rgb", FormatType.INT, FormatType.FLOAT) == (1.0, 0.0, 0.2)

def test_adds_alpha():
    assert convert((255, 128, 64), "rgb", "rgba") == (255, 128, 64, 255)
    assert convert((1.0, 0.5, 0.0), "rgb", "rgba", FormatType.FLOAT, FormatType.FLOAT) == (1.0, 0.5, 0.0, 1.0)

def test_keeps_and_rescales_alpha():
    assert convert((255, 0, 0, 51), "rgba", "rgba", FormatType.INT, FormatType.FLOAT) == (1.0, 0.0, 0.0, 0.2)

def test_drops_alpha_for_derived_spaces():
    assert convert((0, 0, 0, 128), "rgba", "cmyk", output_type=FormatType.FLOAT) == (0.0, 0.0, 0.0, 1.0)

def test_routes_through_rgb():
    assert convert((0.0, 0.0, 0.0, 1.0), "cmyk", "gray", FormatType.FLOAT, FormatType.FLOAT) == 0.0
    h, s, b = convert(1.0, "gray", "hsb", FormatType.FLOAT, FormatType.FLOAT)
    assert (s, b) == (0.0, 1.0)

def test_hsb_to_rgb_int():
    assert convert((0.0, 1.0, 1.0), "hsb", "rgb", FormatType.FLOAT, FormatType.INT) == (255, 0, 0)

def test_derived_spaces_are_float_only():
    with pytest.raises(ValueError):
        convert((0, 0, 0), "rgb", "gray", output_type=FormatType.INT)

def test_unknown_space():
    with pytest.raises(ValueError):
        convert((0, 0, 0), "rgb", "lab", output_type=FormatType.FLOAT)

def test_wrong_channel_count():
    with pytest.raises(ValueError):
        convert((0, 0), "rgb", "cmyk", output_type=FormatType.FLOAT)

def test_np_convert_shapes():
    colors = np.array([[0, 0, 0], [255, 255, 255], [200, 100, 50]])
    gray = np_convert(colors, "rgb", "gray", output_type=FormatType.FLOAT)
    assert gray.shape == (3, 1)
    cmyk = np_convert(colors, "rgb", "cmyk", output_type=FormatType.FLOAT)
    assert cmyk.shape == (3, 4)
    assert cmyk[0].tolist() == [0.0, 0.0, 0.0, 1.0]
    assert cmyk[1].tolist() == [0.0, 0.0, 0.0, 0.0]

def test_np_convert_matches_scalar():
    colors = np.array([[12, 200, 7], [255, 0, 128], [90, 90, 91]])
    for space in ("gray", "bitmap", "cmyk", "hsb"):
        result = np_convert(colors, "rgb", space, output_type=FormatType.FLOAT)
        for row, color in zip(result, colors):
            expected = convert(tuple(int(c) for c in color), "rgb", space, output_type=FormatType.FLOAT)
            expected = expected if isinstance(expected, tuple) else (expected,)
            assert np.allclose(row, expected, atol=1e-9)

def test_np_convert_adds_alpha():
    colors = np.array([[1.0, 0.0, 0.0]])
    result = np_convert(colors, "rgb", "rgba", FormatType.FLOAT, FormatType.INT)
    assert result.tolist() == [[255, 0, 0, 255]]
