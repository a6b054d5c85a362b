"""Textual widget rendering the board and resolving clicks to cells."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.events import Click
from textual.message import Message
from textual.widget import Widget

from wallj.render.board_view import render_board
from wallj.sim.contracts import BoardSnapshot


class BoardClicked(Message):
    """Message emitted when a click lands on a board cell."""

    def __init__(self, *, cell: tuple[int, int]) -> None:
        super().__init__()
        self.cell = cell


class BoardWidget(Widget):
    def __init__(
        self,
        snapshot: Callable[[], BoardSnapshot | None],
        *,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self._snapshot = snapshot
        self._width = 0
        self._length = 0

    def render(self) -> Text:
        board = self._snapshot()
        if board is None:
            return Text("No board loaded.")
        self._width = board.width
        self._length = board.length
        return render_board(board)

    def on_click(self, event: Click) -> None:
        offset = event.get_content_offset(self)
        if offset is None:
            return
        cell = map_board_click(offset.x, offset.y, self._width, self._length)
        if cell is not None:
            self.post_message(BoardClicked(cell=cell))


def map_board_click(
    x: int | None, y: int | None, width: int, length: int
) -> tuple[int, int] | None:
    if x is None or y is None:
        return None
    if 0 <= x < width and 0 <= y < length:
        return (x, y)
    return None
