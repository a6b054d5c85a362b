"""Rich viewer rendering for TickPayload."""

from __future__ import annotations

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from wallj.render.board_view import render_board
from wallj.sim.contracts import TickPayload


def render_tick(payload: TickPayload, *, max_events: int = 5) -> RenderableType:
    header = Text(f"Tick {payload.tick} ({payload.elapsed_ms} ms)", style="bold")
    board = Panel(render_board(payload.state), title="Board")
    status = _render_status(payload)
    events = _render_events(payload, max_events=max_events)
    return Columns([Group(header, board), Group(status, events)])


def _render_status(payload: TickPayload) -> RenderableType:
    state = payload.state
    table = Table(title="Player", show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Position", _format_cell(state.player))
    if state.path:
        remaining = max(0, len(state.path) - 1 - state.path_index)
        table.add_row("Destination", _format_cell(state.path[-1]))
        table.add_row("Remaining", str(remaining))
    else:
        table.add_row("Destination", "-")
    table.add_row("Bombs left", str(state.bombs_left))
    return table


def _render_events(payload: TickPayload, *, max_events: int) -> RenderableType:
    table = Table(title="Recent Events", show_header=True, header_style="bold")
    table.add_column("Kind")
    table.add_column("Detail")

    events = payload.events or []
    for event in events[-max_events:]:
        table.add_row(event.kind, _format_payload(event.payload))
    if not events:
        table.add_row("-", "None")
    return table


def _format_cell(cell: tuple[int, int] | list[int] | None) -> str:
    if cell is None:
        return "-"
    x, y = cell
    return f"({x}, {y})"


def _format_payload(payload: dict) -> str:
    if not payload:
        return "-"
    return ", ".join(f"{key}={value}" for key, value in payload.items())
