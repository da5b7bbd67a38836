import itertools
import numpy as np
from chromaink.conversions.packed import (
    pack, unpack, unpack_red, unpack_green, unpack_blue, unpack_alpha,
    dim_pixel, np_pack, np_unpack,
)


def test_pack_byte_order():
    assert pack(255, 0, 0) == 0x00ff0000
    assert pack(0, 255, 0) == 0x0000ff00
    assert pack(0, 0, 255) == 0x000000ff
    assert pack(1, 2, 3, 4) == 0x04010203

def test_pack_defaults_to_zero_alpha():
    assert unpack_alpha(pack(10, 20, 30)) == 0

def test_unpack_reproduces_channels():
    grid = range(0, 256, 17)
    for r, g, b, a in itertools.product(grid, grid, grid, grid):
        packed = pack(r, g, b, a)
        assert unpack_red(packed) == r
        assert unpack_green(packed) == g
        assert unpack_blue(packed) == b
        assert unpack_alpha(packed) == a
        assert unpack(packed) == (r, g, b, a)

def test_pack_masks_out_of_range():
    # 256 -> 0, -1 -> 255, 300 -> 44, 0x1ff -> 0xff
    assert pack(256, -1, 300, 0x1ff) == 0xff00ff2c

def test_unpack_signed_values():
    # 0xff000000 as a signed 32-bit value
    assert unpack_alpha(-16777216) == 255
    assert unpack_red(-16777216) == 0
    assert unpack(-1) == (255, 255, 255, 255)

def test_dim_pixel():
    assert dim_pixel(0x000000, 1.0) == 0xffffff
    assert dim_pixel(0x000000, 0.5) == 0x7f7f7f
    assert dim_pixel(0xffffff, 0.3) == 0xffffff

def test_dim_pixel_drops_alpha():
    assert dim_pixel(0x80112233, 0.0) == 0x00112233

def test_np_pack_matches_scalar():
    r = np.array([255, 1, 300])
    g = np.array([0, 2, -1])
    b = np.array([0, 3, 7])
    packed = np_pack(r, g, b, np.array([0, 4, 255]))
    assert packed.dtype == np.uint32
    assert packed.tolist() == [pack(255, 0, 0, 0), pack(1, 2, 3, 4), pack(300, -1, 7, 255)]

def test_np_unpack_rgba_order():
    unpacked = np_unpack(np.array([0x04010203, 0xff00ff2c], dtype=np.uint32))
    assert unpacked.shape == (2, 4)
    assert unpacked.tolist() == [[1, 2, 3, 4], [0, 255, 44, 255]]

def test_each_channel_round_trips_full_range():
    for v in range(256):
        assert unpack(pack(v, 255 - v, v, 255 - v)) == (v, 255 - v, v, 255 - v)
