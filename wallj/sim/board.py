"""Level board: tiles, player, bombs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from wallj.sim.grid import Cell, OccupancyGrid, is_adjacent

logger = logging.getLogger(__name__)

MAX_BOMBS = 3
MIN_BOMB_TIMER = 1
MAX_BOMB_TIMER = 99


class Tile(str, Enum):
    EMPTY = " "
    WALL = "W"
    GARBAGE = "G"
    TRASHCAN = "T"


@dataclass
class Bomb:
    position: Cell
    timer: int = MIN_BOMB_TIMER

    def increment(self) -> None:
        if self.timer < MAX_BOMB_TIMER:
            self.timer += 1

    def decrement(self) -> None:
        if self.timer > MIN_BOMB_TIMER:
            self.timer -= 1


@dataclass
class Board:
    """A loaded level. Rows are indexed by y, columns by x."""

    rows: list[list[Tile]]
    player: Cell | None = None
    bombs: dict[Cell, Bomb] = field(default_factory=dict)
    bombs_left: int = MAX_BOMBS

    def __post_init__(self) -> None:
        if not self.rows or not self.rows[0]:
            raise ValueError("Board needs at least one row and one column.")
        width = len(self.rows[0])
        if any(len(row) != width for row in self.rows):
            raise ValueError("Board rows must all have the same width.")

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def length(self) -> int:
        return len(self.rows)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.length

    def tile(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise ValueError(f"({x}, {y}) is outside the board.")
        return self.rows[y][x]

    def is_walkable(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return self.rows[y][x] == Tile.EMPTY

    def occupancy(self) -> OccupancyGrid:
        blocked = {
            Cell(x, y)
            for y, row in enumerate(self.rows)
            for x, tile in enumerate(row)
            if tile != Tile.EMPTY
        }
        return OccupancyGrid(
            width=self.width, length=self.length, blocked=frozenset(blocked)
        )

    @property
    def garbage_count(self) -> int:
        return sum(1 for row in self.rows for tile in row if tile == Tile.GARBAGE)

    @property
    def is_won(self) -> bool:
        return self.garbage_count == 0

    def place_player(self, cell: Cell) -> None:
        if not self.is_walkable(cell.x, cell.y):
            raise ValueError(f"Cannot place the player on {cell.as_tuple()}.")
        self.player = cell

    def move_player(self, cell: Cell) -> None:
        if self.player is None:
            raise ValueError("The player has not been placed yet.")
        if not is_adjacent(self.player, cell):
            raise ValueError(
                f"Player can only move one cell at a time: "
                f"{self.player.as_tuple()} -> {cell.as_tuple()}."
            )
        self.player = cell

    def toggle_bomb(self) -> Bomb | None:
        """Drop a bomb under the player, or pick up the one already there."""
        if self.player is None:
            raise ValueError("The player has not been placed yet.")
        existing = self.bombs.pop(self.player, None)
        if existing is not None:
            self.bombs_left += 1
            logger.info("Picked up bomb at %s", self.player)
            return None
        if self.bombs_left <= 0:
            logger.info("No bombs left to drop")
            return None
        bomb = Bomb(position=self.player)
        self.bombs[self.player] = bomb
        self.bombs_left -= 1
        logger.info("Dropped bomb at %s (%d left)", self.player, self.bombs_left)
        return bomb

    def adjust_bomb_timer(self, delta: int) -> Bomb | None:
        if self.player is None:
            return None
        bomb = self.bombs.get(self.player)
        if bomb is None:
            return None
        if delta > 0:
            bomb.increment()
        elif delta < 0:
            bomb.decrement()
        return bomb
