"""Interactive board: click to place the player, then click to walk."""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Static

from wallj.render.textual_app import WalljApp
from wallj.render.textual_widgets import BoardClicked, BoardWidget
from wallj.sim.board import Board
from wallj.sim.contracts import BoardSnapshot, Event, snapshot_board
from wallj.sim.grid import Cell
from wallj.sim.movement import MovementState, advance_movement, start_move
from wallj.sim.tick_loop import DEFAULT_TICK_MS


@dataclass
class PlayController:
    """Input handling for the play screen, kept free of Textual types."""

    board: Board
    movement: MovementState = field(default_factory=MovementState)
    tick: int = 0
    message: str = "Click an empty cell to place the player."

    def click(self, x: int, y: int) -> None:
        cell = Cell(x, y)
        if self.board.player is None:
            if not self.board.is_walkable(x, y):
                self.message = f"({x}, {y}) is not empty."
                return
            self.board.place_player(cell)
            self.message = "Click a destination."
            return
        if self.movement.is_moving:
            return
        if start_move(self.board, self.movement, cell):
            self.message = f"Walking to ({x}, {y})."
        elif self.board.player != cell:
            self.message = f"No path to ({x}, {y})."

    def toggle_bomb(self) -> None:
        if self.board.player is None or self.movement.is_moving:
            return
        self.board.toggle_bomb()
        self.message = f"Bombs left: {self.board.bombs_left}."

    def adjust_timer(self, delta: int) -> None:
        if self.movement.is_moving:
            return
        bomb = self.board.adjust_bomb_timer(delta)
        if bomb is not None:
            self.message = f"Bomb timer: {bomb.timer}."

    def advance(self) -> Event | None:
        self.tick += 1
        event = advance_movement(self.board, self.movement)
        if event is not None:
            self.message = "Arrived. Click a destination."
        return event

    def snapshot(self) -> BoardSnapshot:
        return snapshot_board(self.board, self.movement.path)


class PlayScreen(Screen):
    BINDINGS = [
        ("b", "toggle_bomb", "Bomb"),
        ("up", "timer_up", "Timer +"),
        ("down", "timer_down", "Timer -"),
        ("q", "quit", "Quit"),
    ]

    CSS = """
    Screen {
        layout: vertical;
    }
    #board {
        height: 1fr;
    }
    #status-bar {
        height: 3;
    }
    """

    def __init__(self, board: Board, *, tick_ms: int = DEFAULT_TICK_MS) -> None:
        super().__init__()
        self.controller = PlayController(board=board)
        self._tick_ms = tick_ms
        self._timer: Timer | None = None
        self._board_widget: BoardWidget | None = None
        self._status_bar: Static | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="root"):
            yield BoardWidget(self.controller.snapshot, id="board")
            yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._board_widget = self.query_one("#board", BoardWidget)
        self._status_bar = self.query_one("#status-bar", Static)
        self._timer = self.set_interval(self._tick_ms / 1000, self._on_tick)
        self._refresh_ui()

    def on_unmount(self) -> None:
        if self._timer is not None:
            self._timer.stop()

    def on_board_clicked(self, event: BoardClicked) -> None:
        self.controller.click(*event.cell)
        self._refresh_ui()

    def _on_tick(self) -> None:
        if not self.controller.movement.is_moving:
            return
        self.controller.advance()
        self._refresh_ui()

    def action_toggle_bomb(self) -> None:
        self.controller.toggle_bomb()
        self._refresh_ui()

    def action_timer_up(self) -> None:
        self.controller.adjust_timer(1)
        self._refresh_ui()

    def action_timer_down(self) -> None:
        self.controller.adjust_timer(-1)
        self._refresh_ui()

    def action_quit(self) -> None:
        self.app.exit()

    def _refresh_ui(self) -> None:
        if self._board_widget:
            self._board_widget.refresh()
        if self._status_bar:
            self._status_bar.update(
                Text(
                    "click=move | b=bomb | up/down=timer | q=quit | "
                    + self.controller.message
                )
            )


def run_play_screen(board: Board, *, tick_ms: int = DEFAULT_TICK_MS) -> None:
    app = WalljApp(PlayScreen(board, tick_ms=tick_ms), title="Wall-J")
    app.run()
