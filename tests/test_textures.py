import pytest
from PIL import Image as PILImage

from solong.mlx42.errors import MlxErrno, MlxError
from solong.mlx42.images import Image
from solong.mlx42.textures import (
    Texture,
    draw_texture,
    load_png,
    texture_area_to_image,
    texture_to_image,
)


def coordinate_texture(width, height):
    """Texture whose pixel (x, y) holds bytes (x, y, 0, 255)."""
    data = bytearray()
    for y in range(height):
        for x in range(width):
            data += bytes([x, y, 0, 255])
    return Texture(width, height, data)


def pixel(image, x, y):
    offset = (y * image.width + x) * 4
    return bytes(image.pixels[offset:offset + 4])


def test_texture_rejects_wrong_buffer_size():
    with pytest.raises(ValueError):
        Texture(2, 2, bytearray(3))


def test_texture_to_image_copies_everything():
    tex = coordinate_texture(3, 2)
    img = texture_to_image(tex)
    assert (img.width, img.height) == (3, 2)
    assert bytes(img.pixels) == bytes(tex.pixels)


def test_texture_to_image_is_independent_copy():
    tex = coordinate_texture(2, 2)
    img = texture_to_image(tex)
    img.put_pixel(0, 0, 0)
    assert tex.pixels[:4] == bytes([0, 0, 0, 255])


def test_area_to_image_takes_subregion():
    tex = coordinate_texture(4, 4)
    img = texture_area_to_image(tex, (1, 2), (2, 2))
    assert (img.width, img.height) == (2, 2)
    for y in range(2):
        for x in range(2):
            assert pixel(img, x, y) == bytes([1 + x, 2 + y, 0, 255])


def test_area_too_large():
    tex = coordinate_texture(2, 2)
    with pytest.raises(MlxError) as info:
        texture_area_to_image(tex, (0, 0), (3, 1))
    assert info.value.errno == MlxErrno.INVDIM


def test_area_position_out_of_bounds():
    tex = coordinate_texture(2, 2)
    with pytest.raises(MlxError) as info:
        texture_area_to_image(tex, (3, 0), (1, 1))
    assert info.value.errno == MlxErrno.INVPOS


def test_draw_texture_places_pixels():
    tex = coordinate_texture(2, 2)
    img = Image(4, 4)
    draw_texture(img, tex, 1, 1)
    assert pixel(img, 1, 1) == bytes([0, 0, 0, 255])
    assert pixel(img, 2, 2) == bytes([1, 1, 0, 255])
    assert pixel(img, 0, 0) == bytes(4)
    assert pixel(img, 3, 3) == bytes(4)


def test_draw_texture_too_large():
    tex = coordinate_texture(5, 1)
    with pytest.raises(MlxError) as info:
        draw_texture(Image(4, 4), tex, 0, 0)
    assert info.value.errno == MlxErrno.INVDIM


def test_draw_texture_bad_position():
    tex = coordinate_texture(2, 2)
    with pytest.raises(MlxError) as info:
        draw_texture(Image(4, 4), tex, 5, 0)
    assert info.value.errno == MlxErrno.INVPOS


def test_load_png_round_trip(tmp_path):
    source = PILImage.new("RGBA", (3, 2))
    source.putpixel((0, 0), (10, 20, 30, 40))
    source.putpixel((2, 1), (200, 100, 50, 255))
    path = tmp_path / "pic.png"
    source.save(path)
    tex = load_png(path)
    assert (tex.width, tex.height) == (3, 2)
    assert tex.bytes_per_pixel == 4
    assert bytes(tex.pixels) == source.tobytes()


def test_load_png_converts_rgb_to_rgba(tmp_path):
    path = tmp_path / "rgb.png"
    PILImage.new("RGB", (1, 1), (1, 2, 3)).save(path)
    tex = load_png(path)
    assert bytes(tex.pixels) == bytes([1, 2, 3, 255])


def test_load_png_corrupt(tmp_path):
    path = tmp_path / "bad.png"
    path.write_bytes(b"not a png at all")
    with pytest.raises(MlxError) as info:
        load_png(path)
    assert info.value.errno == MlxErrno.INVPNG


def test_load_png_missing(tmp_path):
    with pytest.raises(MlxError) as info:
        load_png(tmp_path / "missing.png")
    assert info.value.errno == MlxErrno.INVPNG


def test_load_png_rejects_other_formats(tmp_path):
    path = tmp_path / "pic.bmp"
    PILImage.new("RGB", (1, 1)).save(path)
    with pytest.raises(MlxError) as info:
        load_png(path)
    assert info.value.errno == MlxErrno.INVPNG