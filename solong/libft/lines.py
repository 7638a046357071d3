"""Line-by-line reading of a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator

__all__ = ["BUFFER_SIZE", "iter_lines"]

BUFFER_SIZE = 512


def iter_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield each line of ``stream``, newline included.

    A last line without a trailing newline is yielded as is; an empty
    stream yields nothing. Works with text and binary streams alike.
    """
    pending = None
    while True:
        chunk = stream.read(BUFFER_SIZE)
        if not chunk:
            break
        pending = chunk if pending is None else pending + chunk
        newline = "\n" if isinstance(pending, str) else b"\n"
        *complete, pending = pending.split(newline)
        for line in complete:
            yield line + newline
    if pending:
        yield pending