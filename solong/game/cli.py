"""Command that loads a map and runs the game in a window."""

from __future__ import annotations

import sys
from typing import Sequence

from solong.game.mapfile import MapError, read_map, validate_chars, verify_win
from solong.game.play import TILE_SIZE, Game, MoveResult, load_sprites
from solong.mlx42.context import KeyData, Mlx
from solong.mlx42.errors import MlxError

__all__ = ["WINDOW_TITLE", "verify_args", "main"]

WINDOW_TITLE = "So_Loong"


def verify_args(args: Sequence[str]) -> None:
    """Raise :class:`MapError` unless exactly one map file is given."""
    if len(args) > 1:
        raise MapError("Too many arguments")
    if len(args) < 1:
        raise MapError("NO mapfile, ERROR")


def _load(args: Sequence[str]) -> list[str]:
    verify_args(args)
    rows = read_map(args[0])
    validate_chars(rows)
    verify_win(rows)
    return rows


def _run(rows: list[str]) -> None:
    game = Game(rows)
    width = max(len(row) for row in rows) * TILE_SIZE if rows else 0
    height = len(rows) * TILE_SIZE
    with Mlx(width, height, WINDOW_TITLE, False) as mlx:
        sprites = load_sprites(mlx, "img")
        game.draw(mlx, sprites)

        def on_key(key_data: KeyData) -> None:
            result = game.handle_key(key_data)
            if result in (MoveResult.WON, MoveResult.QUIT):
                mlx.close_window()
            elif result is MoveResult.MOVED:
                game.draw(mlx, sprites)

        mlx.key_hook(on_key)
        mlx.loop()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named in ``argv``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        rows = _load(args)
        _run(rows)
    except (MapError, MlxError, ValueError) as exc:
        sys.stdout.write(f"Error\n{exc}")
        sys.stdout.flush()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())