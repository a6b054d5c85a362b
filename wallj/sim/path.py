"""Walkable path produced by the search, consumed one cell per tick."""

from __future__ import annotations

from typing import Iterable

from wallj.sim.grid import Cell


class Path:
    """Ordered cells from the mover's current cell to its destination.

    The cursor starts on the first cell (where the mover stands). Each
    `advance()` moves the cursor one cell forward and returns that cell, or
    None once the destination has already been reached.
    """

    def __init__(self, cells: Iterable[Cell], *, cost: float = 0.0) -> None:
        self._cells = tuple(cells)
        if not self._cells:
            raise ValueError("A path needs at least one cell.")
        self._cost = cost
        self._index = 0

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    def __repr__(self) -> str:
        return (
            f"Path(start={self.start.as_tuple()}, end={self.end.as_tuple()}, "
            f"steps={self.steps}, index={self._index})"
        )

    @property
    def cells(self) -> tuple[Cell, ...]:
        return self._cells

    @property
    def cost(self) -> float:
        return self._cost

    @property
    def index(self) -> int:
        return self._index

    @property
    def start(self) -> Cell:
        return self._cells[0]

    @property
    def end(self) -> Cell:
        return self._cells[-1]

    @property
    def steps(self) -> int:
        return len(self._cells) - 1

    @property
    def current(self) -> Cell:
        return self._cells[min(self._index, len(self._cells) - 1)]

    @property
    def is_exhausted(self) -> bool:
        return self.remaining_length() == 0

    def remaining_length(self) -> int:
        return max(0, len(self._cells) - 1 - self._index)

    def advance(self) -> Cell | None:
        if self._index < len(self._cells):
            self._index += 1
        if self._index < len(self._cells):
            return self._cells[self._index]
        return None
