"""Reader for the XPM42 text image format."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from solong.mlx42.errors import MlxErrno, MlxError
from solong.mlx42.images import BYTES_PER_PIXEL, MAX_DIMENSION
from solong.mlx42.textures import Texture
from solong.mlx42.utils import draw_pixel, fnv_hash, rgba_to_mono

__all__ = ["Xpm", "parse_xpm42", "load_xpm42"]

_MAGIC = b"!XPM42\n"
_TABLE_SIZE = 0xFFFF
_MAX_CPP = 10
_C_INT = re.compile(rb"([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_HEX_DIGITS = b"0123456789abcdefABCDEF"


@dataclass
class Xpm:
    """A decoded XPM42 image with its header information."""

    texture: Texture
    color_count: int
    cpp: int
    mode: str


class _Invalid(Exception):
    pass


def _as_bytes(line: bytes | str) -> bytes:
    return line.encode() if isinstance(line, str) else bytes(line)


def _parse_int(token: bytes) -> int:
    match = _C_INT.fullmatch(token)
    if match is None:
        raise _Invalid
    sign, digits = match.groups()
    if digits[:2].lower() == b"0x":
        value = int(digits[2:], 16)
    elif len(digits) > 1 and digits.startswith(b"0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    return -value if sign == b"-" else value


def _hex_channel(chars: bytes) -> int:
    """Parse up to two characters as a hexadecimal byte, stopping early."""
    chars = chars[:2].split(b"\0", 1)[0].lstrip(b" \t\n\r\x0b\x0c")
    negative = chars[:1] == b"-"
    if chars[:1] in (b"+", b"-"):
        chars = chars[1:]
    digits = bytearray()
    for byte in chars:
        if byte not in _HEX_DIGITS:
            break
        digits.append(byte)
    value = int(digits, 16) if digits else 0
    return (-value if negative else value) & 0xFF


def _parse_header(line: bytes) -> tuple[int, int, int, int, str]:
    tokens = line.split()
    if len(tokens) < 5:
        raise _Invalid
    width, height, color_count, cpp = (_parse_int(token) for token in tokens[:4])
    mode = tokens[4][:1]
    if not (0 <= width <= MAX_DIMENSION and 0 <= height <= MAX_DIMENSION):
        raise _Invalid
    if mode not in (b"c", b"m") or not 0 <= cpp <= _MAX_CPP:
        raise _Invalid
    return width, height, color_count, cpp, mode.decode()


def _insert_entry(line: bytes, cpp: int, mode: str, table: dict[int, int]) -> None:
    if line.rfind(b" ") != cpp:
        raise _Invalid
    if line[cpp + 1:cpp + 2] != b"#" or not line[cpp + 2:cpp + 3].isalnum():
        raise _Invalid
    start = cpp + 2
    padded = line + b"\0" * 8
    color = 0
    for shift, channel in zip((24, 16, 8, 0), range(start, start + 8, 2)):
        color |= _hex_channel(padded[channel:channel + 2]) << shift
    key = fnv_hash(line[:cpp]) % _TABLE_SIZE
    table[key] = rgba_to_mono(color) if mode == "m" else color


def _next_line(lines: Iterator[bytes | str]) -> bytes:
    line = next(lines, None)
    if line is None:
        raise _Invalid
    return _as_bytes(line)


def _parse(lines: Iterator[bytes | str]) -> Xpm:
    if _next_line(lines) != _MAGIC:
        raise _Invalid
    width, height, color_count, cpp, mode = _parse_header(_next_line(lines))
    table: dict[int, int] = {}
    for _ in range(color_count):
        _insert_entry(_next_line(lines), cpp, mode, table)

    pixels = bytearray(width * height * BYTES_PER_PIXEL)
    for y in range(height):
        line = _next_line(lines)
        if line.endswith(b"\n"):
            line = line[:-1]
        if len(line) != width * cpp:
            raise _Invalid
        for x in range(width):
            key = line[x * cpp:(x + 1) * cpp]
            color = table.get(fnv_hash(key) % _TABLE_SIZE, 0)
            draw_pixel(pixels, (y * width + x) * BYTES_PER_PIXEL, color)
    return Xpm(Texture(width, height, pixels), max(color_count, 0), cpp, mode)


def parse_xpm42(lines: Iterable[bytes | str]) -> Xpm:
    """Decode XPM42 content given as lines that keep their newlines."""
    try:
        return _parse(iter(lines))
    except _Invalid:
        raise MlxError(MlxErrno.INVXPM) from None


def load_xpm42(path: str | os.PathLike[str]) -> Xpm:
    """Read and decode the XPM42 file at ``path``."""
    if ".xpm42" not in os.fspath(path):
        raise MlxError(MlxErrno.INVEXT)
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise MlxError(MlxErrno.INVFILE) from exc
    with handle:
        return parse_xpm42(handle)