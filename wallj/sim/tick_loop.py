"""Fixed-tick loop driving player movement."""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import Callable, Iterable, Iterator

from wallj.sim.board import Board
from wallj.sim.contracts import Event, TickPayload, snapshot_board
from wallj.sim.grid import Cell
from wallj.sim.movement import MovementState, advance_movement, start_move

logger = logging.getLogger(__name__)

DEFAULT_TICK_MS = 30


class TickClock:
    """Paces ticks at a fixed duration.

    Without a `sleep` callable the clock only counts time, which keeps the
    loop deterministic for headless runs and tests.
    """

    def __init__(
        self,
        tick_ms: int = DEFAULT_TICK_MS,
        *,
        sleep: Callable[[float], None] | None = None,
        now: Callable[[], float] = time.monotonic,
    ) -> None:
        if tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        self.tick_ms = tick_ms
        self.elapsed_ms = 0
        self._sleep = sleep
        self._now = now
        self._started_at: float | None = None

    def begin(self) -> None:
        self._started_at = self._now()

    def end(self) -> None:
        self.elapsed_ms += self.tick_ms
        if self._sleep is None or self._started_at is None:
            return
        remaining = self.tick_ms / 1000 - (self._now() - self._started_at)
        if remaining > 0:
            self._sleep(remaining)


def run_ticks(
    board: Board,
    destinations: Iterable[Cell] = (),
    ticks: int | None = None,
    *,
    clock: TickClock | None = None,
    movement: MovementState | None = None,
) -> Iterator[TickPayload]:
    """Walk the player to each destination in turn, one cell per tick.

    With `ticks=None` the loop ends once every destination has been handled
    and the player stands still.
    """
    clock = clock or TickClock()
    movement = movement or MovementState()
    pending: deque[Cell] = deque(destinations)
    tick_id = 0

    while ticks is None or tick_id < ticks:
        if ticks is None and not pending and not movement.is_moving:
            break
        clock.begin()
        tick_id += 1
        events: list[Event] = []

        if not movement.is_moving and pending:
            destination = pending.popleft()
            if board.player is None or board.player == destination:
                logger.debug("Skipping move request to %s", destination)
            elif not start_move(board, movement, destination):
                events.append(
                    Event(
                        kind="NO_PATH",
                        payload={
                            "from": list(board.player.as_tuple()),
                            "to": list(destination.as_tuple()),
                        },
                    )
                )

        path = movement.path
        event = advance_movement(board, movement)
        if event:
            events.append(event)

        yield TickPayload(
            tick=tick_id,
            elapsed_ms=clock.elapsed_ms,
            state=snapshot_board(board, path),
            events=events or None,
        )
        clock.end()

    logger.debug("Tick loop finished after %d ticks", tick_id)
