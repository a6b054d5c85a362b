from pathlib import Path

import pytest

from wallj.sim.board import Tile
from wallj.sim.level_loader import LevelPaths, load_level, parse_level

BUNDLED_LEVELS = Path(__file__).resolve().parents[1] / "levels"


def test_load_level_from_directory(tmp_path: Path) -> None:
    (tmp_path / "level2.txt").write_text("WWWW\nW GW\nWTWW\n", encoding="utf-8")

    board = load_level(2, paths=LevelPaths(base_dir=tmp_path))

    assert board.width == 4
    assert board.length == 3
    assert board.tile(2, 1) == Tile.GARBAGE
    assert board.tile(1, 2) == Tile.TRASHCAN
    assert board.is_walkable(1, 1)


def test_missing_level_names_the_file(tmp_path: Path) -> None:
    paths = LevelPaths(base_dir=tmp_path)

    with pytest.raises(FileNotFoundError, match="level7.txt"):
        load_level(7, paths=paths)


def test_illegal_character_is_rejected() -> None:
    with pytest.raises(ValueError, match="Illegal character"):
        parse_level(["WWW", "WXW", "WWW"])


def test_flat_level_is_rejected() -> None:
    with pytest.raises(ValueError, match="flat"):
        parse_level(["WWWW", "WWWW"])


def test_short_rows_are_padded_with_empty_tiles() -> None:
    board = parse_level(["WWWW", "W", "WWWW", ""])

    assert board.length == 3
    assert board.is_walkable(3, 1)
    assert board.tile(0, 1) == Tile.WALL


def test_bundled_levels_load() -> None:
    paths = LevelPaths(base_dir=BUNDLED_LEVELS)

    for number in (0, 1):
        board = load_level(number, paths=paths)
        assert board.garbage_count > 0
