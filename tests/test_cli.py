import pytest

from solong.game.cli import main, verify_args
from solong.game.mapfile import MapError


def test_verify_args_too_many():
    with pytest.raises(MapError, match="Too many arguments"):
        verify_args(["a.ber", "b.ber"])


def test_verify_args_none():
    with pytest.raises(MapError, match="NO mapfile, ERROR"):
        verify_args([])


def test_verify_args_one_is_accepted():
    args = ["map.ber"]
    assert verify_args(args) is None
    assert args == ["map.ber"]


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Error\nNO mapfile, ERROR"


def test_main_too_many_arguments(capsys):
    assert main(["a", "b"]) == 1
    assert capsys.readouterr().out == "Error\nToo many arguments"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert capsys.readouterr().out == "Error\nFile error or empty"


def test_main_empty_file(tmp_path, capsys):
    path = tmp_path / "empty.ber"
    path.write_text("")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nEmpty file"


def test_main_invalid_chars(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("1111\n1PX1\n1111\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nInvalid chars, only P,E,C,0,1"


def test_main_unwinnable_map(tmp_path, capsys):
    path = tmp_path / "closed.ber"
    path.write_text("11111\n1P1C1\n10E01\n11111\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nThere is no posible way to win"