"""Serializable per-tick data contracts."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wallj.sim.board import Board
from wallj.sim.path import Path


class Event(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: str
    payload: dict[str, Any] = Field(default_factory=dict)


class BombSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid")

    x: int
    y: int
    timer: int


class BoardSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid")

    width: int
    length: int
    rows: list[str]
    player: tuple[int, int] | None = None
    path: list[tuple[int, int]] = Field(default_factory=list)
    path_index: int = 0
    bombs: list[BombSnapshot] = Field(default_factory=list)
    bombs_left: int = 0

    @model_validator(mode="after")
    def validate_rows(self) -> "BoardSnapshot":
        if len(self.rows) != self.length:
            raise ValueError("rows must match length")
        for row in self.rows:
            if len(row) != self.width:
                raise ValueError("every row must match width")
        return self


class TickPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tick: int
    elapsed_ms: int = 0
    state: BoardSnapshot
    events: list[Event] | None = None


def snapshot_board(board: Board, path: Path | None = None) -> BoardSnapshot:
    return BoardSnapshot(
        width=board.width,
        length=board.length,
        rows=["".join(tile.value for tile in row) for row in board.rows],
        player=board.player.as_tuple() if board.player else None,
        path=[cell.as_tuple() for cell in path] if path else [],
        path_index=path.index if path else 0,
        bombs=[
            BombSnapshot(x=bomb.position.x, y=bomb.position.y, timer=bomb.timer)
            for bomb in board.bombs.values()
        ],
        bombs_left=board.bombs_left,
    )
