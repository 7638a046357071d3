"""Reading map files and checking that a map can be won."""

from __future__ import annotations

import os
from typing import Sequence

from solong.libft.lines import iter_lines

__all__ = [
    "MapError",
    "VALID_CHARS",
    "read_map",
    "validate_chars",
    "player_position",
    "flood_fill",
    "verify_win",
]

VALID_CHARS = "PEC01"
_VISITED = "X"
_WALL = "1"
_EXIT = "E"
_COLLECTIBLE = "C"
_PLAYER = "P"


class MapError(Exception):
    """Raised when a map file cannot be read or describes an invalid map."""


def read_map(path: str | os.PathLike[str]) -> list[str]:
    """Read the map at ``path`` and return its non-empty rows."""
    try:
        handle = open(path, "r", encoding="utf-8", newline="")
    except OSError as exc:
        raise MapError("File error or empty") from exc
    with handle:
        lines = list(iter_lines(handle))
    if not lines:
        raise MapError("Empty file")
    return [row for row in "".join(lines).split("\n") if row]


def validate_chars(rows: Sequence[str]) -> None:
    """Raise :class:`MapError` if any cell is not one of ``P``, ``E``, ``C``, ``0``, ``1``."""
    if any(char not in VALID_CHARS for row in rows for char in row):
        raise MapError("Invalid chars, only P,E,C,0,1")


def player_position(rows: Sequence[Sequence[str]]) -> tuple[int, int]:
    """Return ``(row, column)`` of the last player cell, or ``(0, 0)`` if none."""
    position = (0, 0)
    for row_index, row in enumerate(rows):
        for col_index, char in enumerate(row):
            if char == _PLAYER:
                position = (row_index, col_index)
    return position


def _cell(grid: Sequence[Sequence[str]], row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return ""


def _blocked_by_exit(grid: list[list[str]], row: int, col: int) -> bool:
    """A cell next to the exit in a one-wide corridor is not entered."""
    vertical_exit = _EXIT in (_cell(grid, row + 1, col), _cell(grid, row - 1, col))
    horizontal_wall = _WALL in (_cell(grid, row, col + 1), _cell(grid, row, col - 1))
    if vertical_exit and horizontal_wall:
        return True
    horizontal_exit = _EXIT in (_cell(grid, row, col + 1), _cell(grid, row, col - 1))
    vertical_wall = _WALL in (_cell(grid, row + 1, col), _cell(grid, row - 1, col))
    return horizontal_exit and vertical_wall


def flood_fill(grid: list[list[str]], row: int, col: int) -> None:
    """Mark every cell reachable from ``(row, col)`` with ``X``, in place."""
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        cell = _cell(grid, r, c)
        if cell in ("", _WALL, _VISITED):
            continue
        if _blocked_by_exit(grid, r, c):
            continue
        grid[r][c] = _VISITED
        # Pushed in reverse so cells are explored up, down, left, right.
        stack.extend([(r, c + 1), (r, c - 1), (r + 1, c), (r - 1, c)])


def verify_win(rows: Sequence[str]) -> list[list[str]]:
    """Check that every collectible and the exit can be reached.

    Returns the filled copy of the map; raises :class:`MapError` otherwise.
    """
    grid = [list(row) for row in rows]
    start_row, start_col = player_position(grid)
    flood_fill(grid, start_row, start_col)
    if any(char in (_COLLECTIBLE, _EXIT) for row in grid for char in row):
        raise MapError("There is no posible way to win")
    return grid