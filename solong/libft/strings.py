"""String helpers: number conversion, splitting, trimming and comparison."""

from __future__ import annotations

__all__ = [
    "atoi",
    "itoa",
    "split",
    "strtrim",
    "substr",
    "strnstr",
    "strncmp",
    "strlcat",
]

_WHITESPACE = frozenset("\t\n\v\f\r ")
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a 32-bit ``atoi`` does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Arithmetic wraps at 32 bits, and a result whose sign no
    longer matches the written sign collapses to ``0`` (negative input) or
    ``-1`` (positive input).
    """
    index = 0
    length = len(text)
    while index < length and text[index] in _WHITESPACE:
        index += 1
    sign = 1
    if index < length and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    result = 0
    while index < length and "0" <= text[index] <= "9":
        result = _wrap_int32(result * 10 + (ord(text[index]) - ord("0")))
        index += 1
    result = _wrap_int32(result * sign)
    if result > 0 and sign < 0:
        return 0
    if result < 0 and sign > 0:
        return -1
    return result


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    if not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return str(number)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return where ``needle`` first occurs within ``haystack[:length]``.

    An empty needle is found at index 0; ``None`` means not found.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode() if isinstance(value, str) else bytes(value)


def strncmp(first: str | bytes, second: str | bytes, count: int) -> int:
    """Compare at most ``count`` bytes; return the difference of the first mismatch.

    Comparison stops at the end of either string, where the missing byte
    counts as zero.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    left = _as_bytes(first)
    right = _as_bytes(second)
    for position in range(count):
        a = left[position] if position < len(left) else 0
        b = right[position] if position < len(right) else 0
        if a != b or a == 0 or position == count - 1:
            return a - b
    return 0


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting string (at most ``size - 1`` characters when
    anything was appended) and the length the full result would have had.
    When ``size`` does not exceed ``len(dest)``, ``dest`` is returned
    unchanged together with ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dest_len = len(dest)
    src_len = len(src)
    if size <= dest_len or size == 0:
        return dest, src_len + size
    room = size - 1 - dest_len
    return dest + src[:room], dest_len + src_len