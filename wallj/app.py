"""Application entry for walking the player across a level."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import Sequence

from wallj.db.replay_log import append_tick_payload, create_run_folder, write_header
from wallj.render.play_screen import run_play_screen
from wallj.sim.board import Board
from wallj.sim.grid import Cell
from wallj.sim.level_loader import LevelPaths, load_level
from wallj.sim.tick_loop import DEFAULT_TICK_MS, TickClock, run_ticks

logger = logging.getLogger(__name__)

DEFAULT_LEVEL_DIR = Path("levels")


def run_walk(
    base_dir: Path,
    *,
    level: int = 0,
    start: Cell,
    destinations: Sequence[Cell],
    ticks: int | None = None,
    level_dir: Path | None = None,
    tick_ms: int | None = None,
    realtime: bool = False,
) -> Path:
    board = load_board(level, level_dir=level_dir)
    board.place_player(start)
    resolved_tick_ms = resolve_tick_ms(tick_ms)

    run_dir, log_path = create_run_folder(base_dir)
    write_header(
        log_path,
        metadata={
            "run_id": run_dir.name,
            "level": level,
            "start": list(start.as_tuple()),
            "destinations": [list(cell.as_tuple()) for cell in destinations],
            "tick_ms": resolved_tick_ms,
        },
    )
    clock = TickClock(resolved_tick_ms, sleep=time.sleep if realtime else None)
    count = 0
    for payload in run_ticks(board, destinations, ticks, clock=clock):
        append_tick_payload(log_path, payload)
        count += 1
    logger.info("Recorded %d ticks to %s", count, log_path)
    return run_dir


def run_play(
    *,
    level: int = 0,
    level_dir: Path | None = None,
    tick_ms: int | None = None,
) -> None:
    board = load_board(level, level_dir=level_dir)
    run_play_screen(board, tick_ms=resolve_tick_ms(tick_ms))


def load_board(level: int, *, level_dir: Path | None = None) -> Board:
    paths = LevelPaths(base_dir=resolve_level_dir(level_dir))
    board = load_level(level, paths=paths)
    logger.info(
        "Loaded level %d (%dx%d, %d garbage)",
        level,
        board.width,
        board.length,
        board.garbage_count,
    )
    return board


def resolve_level_dir(level_dir: Path | None) -> Path:
    if level_dir is not None:
        return level_dir
    env_dir = os.getenv("WALLJ_LEVEL_DIR")
    return Path(env_dir) if env_dir else DEFAULT_LEVEL_DIR


def resolve_tick_ms(tick_ms: int | None) -> int:
    if tick_ms is not None:
        return tick_ms
    env_value = os.getenv("WALLJ_TICK_MS")
    if not env_value:
        return DEFAULT_TICK_MS
    try:
        return int(env_value)
    except ValueError:
        logger.warning(
            "Invalid WALLJ_TICK_MS value '%s', defaulting to %d",
            env_value,
            DEFAULT_TICK_MS,
        )
        return DEFAULT_TICK_MS
