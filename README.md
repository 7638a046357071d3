# solong

A small top-down puzzle game played on a grid read from a text map. Walk the
player around the map, pick up every collectible, then step onto the exit to
win. Each move prints the running move count.

## Installing

```
pip install .
```

This installs the `so_long` command and the `pygame` and `pillow` libraries.

## Playing

```
so_long path/to/level.ber
```

The command takes exactly one argument, the map file. It reads the map, checks
it, opens a window sized 32 pixels per cell and runs the game.

The cell pictures are read from PNG files in a directory named `img` under the
current working directory: `floor.png`, `wall.png`, `collectible.png`,
`pj.png` (the player) and `exit.png`. These pictures are not shipped with the
package; provide your own 32x32 images there.

On any problem (no argument or more than one, an unreadable or empty file, a
bad map, a missing or broken picture, a window that cannot be opened) the
command prints `Error` followed by a message to standard output and exits with
status 1. It exits with status 0 when the game ends.

### Controls

| Key           | Action     |
|---------------|------------|
| `W` / `Up`    | Move up    |
| `S` / `Down`  | Move down  |
| `A` / `Left`  | Move left  |
| `D` / `Right` | Move right |
| `Esc` / `Q`   | Quit       |

Walls block movement. The exit also blocks movement until every collectible
has been picked up. When the player reaches the exit, the game prints a
message with the number of moves and the window closes.

## Map format

A map is a plain text file, one row per line, made only of these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | Wall         |
| `0`  | Floor        |
| `P`  | Player start |
| `C`  | Collectible  |
| `E`  | Exit         |

Empty lines are ignored. Example:

```
1111111
1P0C0E1
1111111
```

### What is checked, and what is not

A map is rejected if it holds any character other than the five above, or if
a flood fill from the player does not reach every collectible and the exit.
The fill treats a cell as closed when it lies next to the exit in a one-cell
corridor.

The package does not check that the map is rectangular, that it is enclosed
by walls, or that it holds exactly one player, at least one exit and at least
one collectible. If there are several `P` cells, the last one found is the
player.

## Using it as a library

### Maps

```python
from solong.game.mapfile import MapError, read_map, validate_chars, verify_win

rows = read_map("level.ber")   # list of non-empty row strings
validate_chars(rows)           # raises MapError on a bad character
verify_win(rows)               # raises MapError if the map cannot be won
```

`player_position(rows)` returns the `(row, column)` of the player, and
`flood_fill(grid, row, col)` marks reachable cells of a list-of-lists grid
with `X` in place.

### Game rules

```python
from solong.game.play import Direction, Game, MoveResult

game = Game(["1111111", "1P0C0E1", "1111111"])
game.move(Direction.RIGHT)   # MoveResult.MOVED, prints the move count
game.move(Direction.UP)      # MoveResult.BLOCKED
```

`Game` keeps the `grid`, `rows`, `collectibles`, `moves`, `player_row`,
`player_col` and `finished` state. `Game.handle_key(key_data)` takes a
`solong.mlx42.context.KeyData`, reacts only to key presses and returns a
`MoveResult` (`QUIT` for `Esc` and `Q`) or `None`. Moving after the game is
over raises `RuntimeError`. `Game.draw(mlx, sprites)` places an instance of
the right `Sprites` image on each cell; `load_sprites(mlx, image_dir)` loads
them from PNG files.

### Window and images

`solong.mlx42` is a small layer over pygame:

- `context.Mlx(width, height, title, resize=False, settings=None)` opens a
  window, owns images (`new_image`, `texture_to_image`, `delete_image`),
  places them with `image_to_window`, keeps a depth-sorted render queue
  (`render_order`, `set_instance_depth`), and takes hooks for frames, keys,
  mouse buttons, scrolling, cursor movement, closing and resizing. `loop()`
  runs until `close_window()`; `Mlx` is a context manager that calls
  `terminate()` on exit. Passing `settings={Setting.HEADLESS: True}` uses
  SDL's dummy video driver, so no window appears.
- `images.Image` is an RGBA pixel buffer with `put_pixel`, `resize` and
  `add_instance`.
- `textures.load_png(path)` decodes a PNG into a `Texture`;
  `texture_to_image`, `texture_area_to_image` and `draw_texture` copy pixels
  between textures and images.
- `xpm42.load_xpm42(path)` and `xpm42.parse_xpm42(lines)` read the XPM42 text
  image format into an `Xpm`.
- Failures raise `errors.MlxError`, which carries an `MlxErrno`;
  `errors.strerror(errno)` gives its message.

### Helpers

`solong.libft.lines.iter_lines(stream)` yields the lines of a text or binary
stream. `solong.libft.strings` holds `atoi`, `itoa`, `split`, `strtrim`,
`substr`, `strnstr`, `strncmp` and `strlcat`, and `solong.libft.printf` holds
`format_string` and `printf` for the `c s p d i u x X %` conversions.

## Running the tests

```
pip install .[test]
pytest
```