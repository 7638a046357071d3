"""Small helpers: string hashing, grayscale conversion and pixel writes."""

from __future__ import annotations

import struct

__all__ = ["fnv_hash", "rgba_to_mono", "draw_pixel"]

_FNV_PRIME = 0x100000001B3
_FNV_OFFSET = 0xCBF29CE484222325
_MASK64 = 0xFFFFFFFFFFFFFFFF
_BYTES_PER_PIXEL = 4


def fnv_hash(data: bytes | str) -> int:
    """Return the 64-bit FNV-1a hash of ``data``.

    Bytes above 0x7F are sign-extended before mixing, as a signed ``char`` is.
    """
    if isinstance(data, str):
        data = data.encode()
    value = _FNV_OFFSET
    for byte in data:
        mixed = byte if byte < 0x80 else (byte - 0x100) & _MASK64
        value ^= mixed
        value = (value * _FNV_PRIME) & _MASK64
    return value


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


_RED_WEIGHT = _f32(0.299)
_GREEN_WEIGHT = _f32(0.587)
_BLUE_WEIGHT = _f32(0.114)


def rgba_to_mono(color: int) -> int:
    """Convert an RGBA colour to grayscale, keeping its alpha channel."""
    color &= 0xFFFFFFFF
    red = int(_f32(_RED_WEIGHT * ((color >> 24) & 0xFF))) & 0xFF
    green = int(_f32(_GREEN_WEIGHT * ((color >> 16) & 0xFF))) & 0xFF
    blue = int(_f32(_BLUE_WEIGHT * ((color >> 8) & 0xFF))) & 0xFF
    gray = (red + green + blue) & 0xFF
    return (gray << 24) | (gray << 16) | (gray << 8) | (color & 0xFF)


def draw_pixel(pixels: bytearray, offset: int, color: int) -> None:
    """Write ``color`` as four RGBA bytes into ``pixels`` at ``offset``."""
    if offset < 0 or offset + _BYTES_PER_PIXEL > len(pixels):
        raise IndexError(f"pixel offset {offset} out of range")
    pixels[offset:offset + _BYTES_PER_PIXEL] = (color & 0xFFFFFFFF).to_bytes(
        _BYTES_PER_PIXEL, "big"
    )