"""Game state, player movement and drawing of the map."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from solong.game.mapfile import player_position
from solong.mlx42.context import Action, Key, KeyData, Mlx
from solong.mlx42.images import Image
from solong.mlx42.textures import load_png

__all__ = [
    "TILE_SIZE",
    "Direction",
    "MoveResult",
    "Sprites",
    "Game",
    "load_sprites",
]

TILE_SIZE = 32


class Direction(Enum):
    """A step the player can take, as a (row, column) offset."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class MoveResult(Enum):
    """Outcome of handling one input."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    QUIT = "quit"


_KEY_DIRECTIONS = {
    Key.W: Direction.UP,
    Key.UP: Direction.UP,
    Key.S: Direction.DOWN,
    Key.DOWN: Direction.DOWN,
    Key.A: Direction.LEFT,
    Key.LEFT: Direction.LEFT,
    Key.D: Direction.RIGHT,
    Key.RIGHT: Direction.RIGHT,
}
_QUIT_KEYS = {Key.ESCAPE, Key.Q}


@dataclass
class Sprites:
    """The images each kind of cell is drawn with."""

    floor: Image
    wall: Image
    collect: Image
    player: Image
    exit: Image


def load_sprites(mlx: Mlx, image_dir: str | os.PathLike[str] = "img") -> Sprites:
    """Load the cell images from PNG files in ``image_dir``."""

    def load(name: str) -> Image:
        return mlx.texture_to_image(load_png(os.path.join(image_dir, name)))

    return Sprites(
        floor=load("floor.png"),
        wall=load("wall.png"),
        collect=load("collectible.png"),
        player=load("pj.png"),
        exit=load("exit.png"),
    )


class Game:
    """A map being played: the grid, the player and the move count."""

    def __init__(self, rows: Sequence[str]) -> None:
        self.grid = [list(row) for row in rows]
        self.collectibles = sum(row.count("C") for row in self.grid)
        self.moves = 0
        self.finished = False
        self.player_row, self.player_col = player_position(self.grid)

    @property
    def rows(self) -> list[str]:
        """The current map as strings."""
        return ["".join(row) for row in self.grid]

    def _cell(self, row: int, col: int) -> str:
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return "1"

    def move(self, direction: Direction) -> MoveResult:
        """Try to step the player one cell in ``direction``."""
        if self.finished:
            raise RuntimeError("game is over")
        d_row, d_col = direction.value
        row, col = self.player_row + d_row, self.player_col + d_col
        target = self._cell(row, col)
        if target == "1" or (target == "E" and self.collectibles != 0):
            return MoveResult.BLOCKED
        self.grid[self.player_row][self.player_col] = "0"
        if target == "C":
            self.collectibles -= 1
        if target == "E" and self.collectibles == 0:
            self.finished = True
            sys.stdout.write(
                "\n========================================\n"
                f"==  You finish the game with {self.moves} moves =="
                "\n========================================\n"
            )
            sys.stdout.flush()
            return MoveResult.WON
        self.grid[row][col] = "P"
        self.player_row, self.player_col = row, col
        self.moves += 1
        sys.stdout.write(f"\nMoves: {self.moves}")
        sys.stdout.flush()
        return MoveResult.MOVED

    def handle_key(self, key_data: KeyData) -> MoveResult | None:
        """React to a key event; return what happened, or None if ignored."""
        if key_data.action != Action.PRESS:
            return None
        if key_data.key in _QUIT_KEYS:
            self.finished = True
            return MoveResult.QUIT
        direction = _KEY_DIRECTIONS.get(key_data.key)
        if direction is None:
            return None
        return self.move(direction)

    def draw(self, mlx: Mlx, sprites: Sprites) -> None:
        """Place an instance of the right sprites on every cell of the map."""
        for row_index, row in enumerate(self.grid):
            for col_index, char in enumerate(row):
                x, y = col_index * TILE_SIZE, row_index * TILE_SIZE
                if char == "1":
                    mlx.image_to_window(sprites.wall, x, y)
                    continue
                if char in "CEP0":
                    mlx.image_to_window(sprites.floor, x, y)
                if char == "C":
                    mlx.image_to_window(sprites.collect, x, y)
                elif char == "E":
                    mlx.image_to_window(sprites.exit, x, y)
                elif char == "P":
                    mlx.image_to_window(sprites.player, x, y)
                    self.player_row, self.player_col = row_index, col_index