"""A small ``printf`` supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator

__all__ = ["format_string", "printf"]

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _next(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _char(_next(args))
    if spec == "s":
        value = _next(args)
        return "(null)" if value is None else str(value)
    if spec == "p":
        value = _next(args)
        return "0x" + format(0 if value is None else int(value) & _UINT64, "x")
    if spec in ("d", "i", "u"):
        # Signed values are printed through an unsigned 32-bit conversion.
        return str(int(_next(args)) & _UINT32)
    if spec == "x":
        return format(int(_next(args)) & _UINT32, "x")
    if spec == "X":
        return format(int(_next(args)) & _UINT32, "X")
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by its argument.

    A ``%`` followed by an unknown character produces nothing, and both
    characters are dropped.
    """
    pieces: list[str] = []
    remaining = iter(args)
    index = 0
    length = len(fmt)
    while index < length:
        char = fmt[index]
        if char == "%":
            if index + 1 < length:
                pieces.append(_convert(fmt[index + 1], remaining))
            index += 2
        else:
            pieces.append(char)
            index += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)