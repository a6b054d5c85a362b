"""Click-to-move helpers: one search per request, one step per tick."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from wallj.sim.board import Board
from wallj.sim.contracts import Event
from wallj.sim.grid import Cell
from wallj.sim.path import Path
from wallj.sim.pathfinding import find_path

logger = logging.getLogger(__name__)


@dataclass
class MovementState:
    path: Path | None = None
    origin: Cell | None = None
    destination: Cell | None = None

    @property
    def is_moving(self) -> bool:
        return self.path is not None

    def clear(self) -> None:
        self.path = None
        self.origin = None
        self.destination = None


def start_move(board: Board, state: MovementState, destination: Cell) -> bool:
    """Plan a walk to `destination` against a snapshot of the board.

    Returns False, leaving board and state untouched, when no walk starts.
    """
    if state.is_moving:
        logger.debug("Ignoring move to %s while a path is being walked", destination)
        return False
    if board.player is None:
        logger.debug("Ignoring move to %s: player not placed", destination)
        return False
    if board.player == destination:
        return False

    path = find_path(board.occupancy(), board.player, destination)
    if path is None:
        logger.info("No path from %s to %s", board.player, destination)
        return False

    state.path = path
    state.origin = board.player
    state.destination = destination
    logger.info(
        "Walking from %s to %s in %d steps", board.player, destination, path.steps
    )
    return True


def advance_movement(board: Board, state: MovementState) -> Event | None:
    if state.path is None:
        return None

    next_cell = state.path.advance()
    if next_cell is not None:
        board.move_player(next_cell)
    if not state.path.is_exhausted:
        return None

    origin = state.origin
    destination = state.destination
    steps = state.path.steps
    state.clear()
    if origin and destination:
        logger.info("Arrived at %s", destination)
        return Event(
            kind="MOVE",
            payload={
                "from": list(origin.as_tuple()),
                "to": list(destination.as_tuple()),
                "steps": steps,
            },
        )
    return None
