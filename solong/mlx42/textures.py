"""Textures loaded from PNG files and their conversion to images."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Sequence

from PIL import Image as PILImage

from solong.mlx42.errors import MlxErrno, MlxError
from solong.mlx42.images import BYTES_PER_PIXEL, Image

__all__ = [
    "Texture",
    "load_png",
    "texture_area_to_image",
    "texture_to_image",
    "draw_texture",
]


@dataclass
class Texture:
    """Decoded RGBA pixel data of a given size."""

    width: int
    height: int
    pixels: bytearray = field(repr=False)
    bytes_per_pixel: int = BYTES_PER_PIXEL

    def __post_init__(self) -> None:
        self.pixels = bytearray(self.pixels)
        expected = self.width * self.height * self.bytes_per_pixel
        if self.width < 0 or self.height < 0 or len(self.pixels) != expected:
            raise ValueError(
                f"texture of {self.width}x{self.height} needs {expected} bytes, "
                f"got {len(self.pixels)}"
            )


def load_png(path: str | os.PathLike[str]) -> Texture:
    """Decode the PNG file at ``path`` into an RGBA texture."""
    try:
        with PILImage.open(path) as img:
            if img.format != "PNG":
                raise ValueError(f"not a PNG file: {img.format}")
            rgba = img.convert("RGBA")
            width, height = rgba.size
            data = rgba.tobytes()
    except (OSError, ValueError, SyntaxError) as exc:
        print(f"MLX42: PNG: {exc}", file=sys.stderr)
        raise MlxError(MlxErrno.INVPNG) from exc
    return Texture(width, height, bytearray(data))


def texture_area_to_image(
    texture: Texture, xy: Sequence[int], wh: Sequence[int]
) -> Image:
    """Copy the ``wh``-sized area at ``xy`` of ``texture`` into a new image."""
    x, y = xy
    width, height = wh
    if width > texture.width or height > texture.height:
        raise MlxError(MlxErrno.INVDIM)
    if x < 0 or y < 0 or x + width > texture.width or y + height > texture.height:
        raise MlxError(MlxErrno.INVPOS)
    image = Image(width, height)
    bpp = BYTES_PER_PIXEL
    row_bytes = width * bpp
    for row in range(height):
        src = ((y + row) * texture.width + x) * bpp
        dst = row * row_bytes
        image.pixels[dst:dst + row_bytes] = texture.pixels[src:src + row_bytes]
    return image


def texture_to_image(texture: Texture) -> Image:
    """Copy the whole texture into a new image."""
    return texture_area_to_image(texture, (0, 0), (texture.width, texture.height))


def draw_texture(image: Image, texture: Texture, x: int, y: int) -> None:
    """Copy ``texture`` into ``image`` with its top-left corner at ``(x, y)``."""
    if texture.width > image.width or texture.height > image.height:
        raise MlxError(MlxErrno.INVDIM)
    if (
        x < 0
        or y < 0
        or x + texture.width > image.width
        or y + texture.height > image.height
    ):
        raise MlxError(MlxErrno.INVPOS)
    bpp = texture.bytes_per_pixel
    row_bytes = texture.width * bpp
    for row in range(texture.height):
        src = row * row_bytes
        dst = ((row + y) * image.width + x) * bpp
        image.pixels[dst:dst + row_bytes] = texture.pixels[src:src + row_bytes]