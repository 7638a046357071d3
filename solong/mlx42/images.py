"""Images with RGBA pixel buffers and the instances that place them."""

from __future__ import annotations

from dataclasses import dataclass

from solong.mlx42.errors import MlxErrno, MlxError
from solong.mlx42.utils import draw_pixel

__all__ = ["BYTES_PER_PIXEL", "MAX_DIMENSION", "Instance", "Image"]

BYTES_PER_PIXEL = 4
MAX_DIMENSION = 0x7FFF


def _check_dimensions(width: int, height: int) -> None:
    if not (0 < width <= MAX_DIMENSION and 0 < height <= MAX_DIMENSION):
        raise MlxError(MlxErrno.INVDIM)


@dataclass
class Instance:
    """One placement of an image on the window."""

    x: int
    y: int
    z: int
    enabled: bool = True


class Image:
    """A width by height RGBA pixel buffer, zero-filled when created."""

    def __init__(self, width: int, height: int) -> None:
        _check_dimensions(width, height)
        self.width = width
        self.height = height
        self.pixels = bytearray(width * height * BYTES_PER_PIXEL)
        self.instances: list[Instance] = []
        self.enabled = True

    def __repr__(self) -> str:
        return (
            f"Image(width={self.width}, height={self.height}, "
            f"instances={len(self.instances)})"
        )

    @property
    def count(self) -> int:
        """Number of instances of this image."""
        return len(self.instances)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at ``(x, y)`` to the RGBA value ``color``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError("Pixel is out of bounds")
        draw_pixel(self.pixels, (y * self.width + x) * BYTES_PER_PIXEL, color)

    def resize(self, width: int, height: int) -> None:
        """Change the image size; existing bytes are kept from the start."""
        _check_dimensions(width, height)
        if width == self.width and height == self.height:
            return
        size = width * height * BYTES_PER_PIXEL
        kept = self.pixels[:size]
        self.pixels = kept + bytearray(size - len(kept))
        self.width = width
        self.height = height

    def add_instance(self, x: int, y: int, z: int) -> int:
        """Add an enabled instance at ``(x, y)`` with depth ``z``; return its index."""
        self.instances.append(Instance(x, y, z))
        return len(self.instances) - 1