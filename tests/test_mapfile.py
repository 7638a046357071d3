import pytest

from solong.game.mapfile import (
    MapError,
    flood_fill,
    player_position,
    read_map,
    validate_chars,
    verify_win,
)

WINNABLE = [
    "111111",
    "1P0C01",
    "100001",
    "100E01",
    "111111",
]

ENCLOSED = [
    "111111",
    "1P0001",
    "100001",
    "1E0111",
    "1001C1",
    "111111",
]


def test_read_map_splits_rows_and_drops_empty_lines(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("111\n1P1\n\n111\n")
    assert read_map(path) == ["111", "1P1", "111"]


def test_read_map_without_trailing_newline(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("\n".join(WINNABLE))
    assert read_map(path) == WINNABLE


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapError, match="File error or empty"):
        read_map(tmp_path / "absent.ber")


def test_read_map_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    with pytest.raises(MapError, match="Empty file"):
        read_map(path)


def test_validate_chars_rejects_unknown():
    with pytest.raises(MapError, match="Invalid chars, only P,E,C,0,1"):
        validate_chars(["111", "1P2", "111"])


def test_validate_chars_accepts_valid_map():
    rows = list(WINNABLE)
    assert validate_chars(rows) is None
    assert rows == WINNABLE


def test_player_position_finds_player():
    assert player_position(WINNABLE) == (1, 1)


def test_player_position_uses_last_player():
    assert player_position(["1P0P1"]) == (0, 3)


def test_player_position_defaults_to_origin():
    assert player_position(["111", "101"]) == (0, 0)


def test_flood_fill_marks_reachable_cells_only():
    grid = [list(row) for row in ENCLOSED]
    flood_fill(grid, 1, 1)
    assert grid[1][1] == "X"
    assert grid[4][4] == "C"
    for original, filled in zip(ENCLOSED, grid):
        for before, after in zip(original, filled):
            if before == "1":
                assert after == "1"


def test_flood_fill_starting_on_wall_changes_nothing():
    grid = [list(row) for row in WINNABLE]
    flood_fill(grid, 0, 0)
    assert ["".join(row) for row in grid] == WINNABLE


def test_verify_win_reaches_everything():
    filled = verify_win(WINNABLE)
    flat = "".join("".join(row) for row in filled)
    assert "C" not in flat and "E" not in flat
    assert filled[3][3] == "X"


def test_verify_win_does_not_modify_input():
    rows = list(WINNABLE)
    verify_win(rows)
    assert rows == WINNABLE


def test_verify_win_enclosed_collectible():
    with pytest.raises(MapError, match="There is no posible way to win"):
        verify_win(ENCLOSED)


def test_verify_win_exit_in_corridor_is_unreachable():
    with pytest.raises(MapError):
        verify_win(["11111", "1P0E1", "11111"])