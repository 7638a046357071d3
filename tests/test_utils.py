import pytest

from solong.mlx42.utils import draw_pixel, fnv_hash, rgba_to_mono


def test_fnv_empty_is_offset_basis():
    assert fnv_hash(b"") == 0xCBF29CE484222325


def test_fnv_known_vector():
    assert fnv_hash(b"a") == 0xAF63DC4C8601EC8C


def test_fnv_str_and_bytes_agree():
    assert fnv_hash("..X") == fnv_hash(b"..X")


def test_fnv_distinguishes_inputs_and_fits_64_bits():
    values = {fnv_hash(s) for s in ["ab", "ba", "a", "b", "  ", "#."]}
    assert len(values) == 6
    assert all(0 <= v < 2**64 for v in values)


def test_fnv_high_bytes_are_deterministic():
    assert fnv_hash(b"\xff\x80") == fnv_hash(bytes([0xFF, 0x80]))
    assert fnv_hash(b"\xff") != fnv_hash(b"\x7f")


def test_mono_white():
    assert rgba_to_mono(0xFFFFFFFF) == 0xFEFEFEFF


def test_mono_black_keeps_alpha():
    assert rgba_to_mono(0x000000FF) == 0x000000FF
    assert rgba_to_mono(0x00000000) == 0x00000000


@pytest.mark.parametrize("color", [0x12345678, 0xFF000080, 0x00FF0011, 0x0000FFAA])
def test_mono_channels_equal_and_alpha_kept(color):
    result = rgba_to_mono(color)
    r, g, b, a = result.to_bytes(4, "big")
    assert r == g == b
    assert a == color & 0xFF


def test_mono_is_idempotent_for_gray():
    gray = rgba_to_mono(0x80808080)
    r = gray >> 24
    assert r <= 0x80


def test_draw_pixel_writes_big_endian():
    buf = bytearray(8)
    draw_pixel(buf, 4, 0x11223344)
    assert buf == bytearray([0, 0, 0, 0, 0x11, 0x22, 0x33, 0x44])


def test_draw_pixel_keeps_length():
    buf = bytearray(4)
    draw_pixel(buf, 0, 0xFFFFFFFF)
    assert buf == bytearray(b"\xff\xff\xff\xff")


@pytest.mark.parametrize("offset", [-1, 5, 8])
def test_draw_pixel_out_of_range(offset):
    buf = bytearray(8)
    with pytest.raises(IndexError):
        draw_pixel(buf, offset, 0)
    assert buf == bytearray(8)