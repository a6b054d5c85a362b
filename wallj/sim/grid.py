"""Cell coordinates and the occupancy grid consulted by the path search."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Protocol

OPEN_TILES: set[str] = {" ", "."}


@dataclass(frozen=True)
class Cell:
    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(
                f"Cell coordinates must be non-negative, got ({self.x}, {self.y})."
            )

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


class GridOracle(Protocol):
    """Read-only view of a board: bounds plus a walkability query."""

    @property
    def width(self) -> int: ...

    @property
    def length(self) -> int: ...

    def is_walkable(self, x: int, y: int) -> bool: ...


@dataclass(frozen=True)
class OccupancyGrid:
    """Immutable snapshot of which cells are blocked.

    A search always runs against one of these so the board cannot change
    underneath it.
    """

    width: int
    length: int
    blocked: frozenset[Cell] = frozenset()

    def __post_init__(self) -> None:
        if self.width <= 0 or self.length <= 0:
            raise ValueError(
                f"Grid bounds must be positive, got {self.width}x{self.length}."
            )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.length

    def is_walkable(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return Cell(x, y) not in self.blocked

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "OccupancyGrid":
        rows = list(lines)
        if not rows:
            raise ValueError("Grid needs at least one row.")
        width = max(len(row) for row in rows)
        blocked = {
            Cell(x, y)
            for y, row in enumerate(rows)
            for x, tile in enumerate(row)
            if tile not in OPEN_TILES
        }
        return cls(width=width, length=len(rows), blocked=frozenset(blocked))


def in_bounds(grid: GridOracle, x: int, y: int) -> bool:
    return 0 <= x < grid.width and 0 <= y < grid.length


def distance(a: Cell, b: Cell) -> float:
    """Straight-line distance between two cells."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def is_adjacent(a: Cell, b: Cell) -> bool:
    return max(abs(a.x - b.x), abs(a.y - b.y)) == 1
