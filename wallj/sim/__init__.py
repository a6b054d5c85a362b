"""Simulation core: board, path search, movement."""

from wallj.sim.board import Board, Bomb, Tile
from wallj.sim.contracts import BoardSnapshot, Event, TickPayload, snapshot_board
from wallj.sim.grid import Cell, GridOracle, OccupancyGrid
from wallj.sim.level_loader import LevelPaths, load_level
from wallj.sim.movement import MovementState, advance_movement, start_move
from wallj.sim.path import Path
from wallj.sim.pathfinding import find_path, is_legal_step
from wallj.sim.tick_loop import TickClock, run_ticks

__all__ = [
    "Board",
    "BoardSnapshot",
    "Bomb",
    "Cell",
    "Event",
    "GridOracle",
    "LevelPaths",
    "MovementState",
    "OccupancyGrid",
    "Path",
    "TickClock",
    "TickPayload",
    "Tile",
    "advance_movement",
    "find_path",
    "is_legal_step",
    "load_level",
    "run_ticks",
    "snapshot_board",
    "start_move",
]
