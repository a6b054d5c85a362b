"""Grid-based pathfinding (A*) with 8-directional movement."""

from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass

from wallj.sim.grid import Cell, GridOracle, distance, in_bounds
from wallj.sim.path import Path

logger = logging.getLogger(__name__)

ORTHOGONAL_COST = 1.0
DIAGONAL_COST = math.sqrt(2)

# Expansion order. Admission order decides ties, so it must stay fixed.
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
)


@dataclass(eq=False)
class SearchNode:
    """A cell reached during one search.

    `parent` is a handle into the search's node arena. Nodes compare equal
    when they sit on the same cell, whatever their cost or parent.
    """

    cell: Cell
    cost: float
    score: float
    parent: int | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchNode):
            return NotImplemented
        return self.cell == other.cell

    def __hash__(self) -> int:
        return hash(self.cell)


class Frontier:
    """Open set of discovered but unexpanded nodes.

    Holds at most one live entry per cell. `pop()` returns the lowest score;
    among equal scores the most recently admitted entry wins.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, int]] = []
        self._live: dict[Cell, int] = {}
        self._sequence = 0

    def __len__(self) -> int:
        return len(self._live)

    def __bool__(self) -> bool:
        return bool(self._live)

    def __contains__(self, cell: Cell) -> bool:
        return cell in self._live

    def admit(self, arena: list[SearchNode], candidate: SearchNode) -> bool:
        """Add `candidate` unless the frontier already reaches its cell as cheaply.

        A dearer entry for the same cell is replaced by the candidate. Returns
        whether the candidate was kept.
        """
        existing = self._live.get(candidate.cell)
        if existing is not None and arena[existing].score <= candidate.score:
            return False
        arena.append(candidate)
        handle = len(arena) - 1
        self._live[candidate.cell] = handle
        self._sequence += 1
        heapq.heappush(self._heap, (candidate.score, -self._sequence, handle))
        return True

    def pop(self, arena: list[SearchNode]) -> int:
        while self._heap:
            _, _, handle = heapq.heappop(self._heap)
            cell = arena[handle].cell
            if self._live.get(cell) != handle:
                continue
            del self._live[cell]
            return handle
        raise IndexError("pop from an empty frontier")


def step_cost(grid: GridOracle, origin: Cell, dx: int, dy: int) -> float | None:
    """Cost of stepping from `origin` by (dx, dy), or None if the step is illegal.

    A diagonal step needs the target walkable and at least one of the two
    flanking orthogonal cells walkable.
    """
    if not grid.is_walkable(origin.x + dx, origin.y + dy):
        return None
    if dx == 0 or dy == 0:
        return ORTHOGONAL_COST
    if grid.is_walkable(origin.x + dx, origin.y) or grid.is_walkable(
        origin.x, origin.y + dy
    ):
        return DIAGONAL_COST
    return None


def is_legal_step(grid: GridOracle, a: Cell, b: Cell) -> bool:
    dx = b.x - a.x
    dy = b.y - a.y
    if (dx, dy) not in DIRECTIONS:
        return False
    if not in_bounds(grid, b.x, b.y):
        return False
    return step_cost(grid, a, dx, dy) is not None


def find_path(grid: GridOracle, current: Cell, destination: Cell) -> Path | None:
    """Shortest path from `current` to `destination`, or None when there is none.

    The search is rooted at the destination and aims at the current cell, so
    walking parents back from the reached node already yields the cells in
    walking order.
    """
    if grid.width <= 0 or grid.length <= 0:
        raise ValueError(
            f"Grid bounds must be positive, got {grid.width}x{grid.length}."
        )
    if current == destination:
        return None
    if not in_bounds(grid, destination.x, destination.y):
        logger.debug("Destination %s is out of bounds", destination)
        return None
    if not grid.is_walkable(destination.x, destination.y):
        logger.debug("Destination %s is not walkable", destination)
        return None
    if not in_bounds(grid, current.x, current.y):
        logger.debug("Current cell %s is out of bounds", current)
        return None

    result = _search(grid, start=destination, arrival=current)
    if result is None:
        logger.debug("No path from %s to %s", current, destination)
        return None
    arena, handle = result
    path = _rebuild_path(arena, handle)
    logger.debug(
        "Path from %s to %s: %d steps, cost %.3f (%d nodes built)",
        current,
        destination,
        path.steps,
        path.cost,
        len(arena),
    )
    return path


def _search(
    grid: GridOracle, *, start: Cell, arrival: Cell
) -> tuple[list[SearchNode], int] | None:
    arena: list[SearchNode] = []
    frontier = Frontier()
    frontier.admit(
        arena, SearchNode(cell=start, cost=0.0, score=distance(start, arrival))
    )
    visited: set[Cell] = set()

    while frontier:
        handle = frontier.pop(arena)
        node = arena[handle]
        if node.cell == arrival:
            return arena, handle
        visited.add(node.cell)

        for dx, dy in DIRECTIONS:
            x = node.cell.x + dx
            y = node.cell.y + dy
            if not in_bounds(grid, x, y):
                continue
            cost = step_cost(grid, node.cell, dx, dy)
            if cost is None:
                continue
            cell = Cell(x, y)
            if cell in visited:
                continue
            total = node.cost + cost
            frontier.admit(
                arena,
                SearchNode(
                    cell=cell,
                    cost=total,
                    score=distance(cell, arrival) + total,
                    parent=handle,
                ),
            )
    return None


def _rebuild_path(arena: list[SearchNode], handle: int) -> Path:
    cells: list[Cell] = []
    current: int | None = handle
    while current is not None:
        node = arena[current]
        cells.append(node.cell)
        current = node.parent
    return Path(cells, cost=arena[handle].cost)
