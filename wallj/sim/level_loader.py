"""Load levels from ASCII text files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from wallj.sim.board import Board, Tile

MIN_SIDE = 3


@dataclass(frozen=True)
class LevelPaths:
    base_dir: Path = Path("levels")

    def level_file(self, number: int) -> Path:
        return self.base_dir / f"level{number}.txt"


def load_level(number: int, *, paths: LevelPaths | None = None) -> Board:
    paths = paths or LevelPaths()
    path = paths.level_file(number)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing level file: {path}") from exc
    return parse_level(text.splitlines(), source=str(path))


def parse_level(lines: list[str], *, source: str = "<level>") -> Board:
    while lines and not lines[-1].strip():
        lines = lines[:-1]
    if not lines:
        raise ValueError(f"Level {source} is empty.")

    width = len(lines[0])
    rows: list[list[Tile]] = []
    for y, line in enumerate(lines):
        row = [_parse_tile(char, x, y, source) for x, char in enumerate(line)]
        if len(row) > width:
            raise ValueError(
                f"Level {source} row {y} is wider than the first row ({width})."
            )
        row.extend(Tile.EMPTY for _ in range(width - len(row)))
        rows.append(row)

    if len(rows) < MIN_SIDE or width < MIN_SIDE:
        raise ValueError(f"Level {source} is flat ({width}x{len(rows)}).")
    return Board(rows=rows)


def _parse_tile(char: str, x: int, y: int, source: str) -> Tile:
    if char.isspace():
        return Tile.EMPTY
    try:
        return Tile(char)
    except ValueError as exc:
        raise ValueError(
            f"Illegal character {char!r} in level {source} at ({x}, {y})."
        ) from exc
