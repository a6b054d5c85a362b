from rich.console import Console

from wallj.render.board_view import (
    AHEAD_GLYPH,
    AHEAD_STYLE,
    BOMB_STYLE,
    PLAYER_STYLE,
    TILE_STYLES,
    WALKED_GLYPH,
    WALKED_STYLE,
    render_board,
    render_board_lines,
)
from wallj.render.viewer import render_tick
from wallj.sim.contracts import BombSnapshot, BoardSnapshot, Event, TickPayload


def _board() -> BoardSnapshot:
    return BoardSnapshot(
        width=6,
        length=3,
        rows=["WWWWWW", "W  G W", "WWWWWW"],
        player=(2, 1),
        path=[(1, 1), (2, 1), (3, 1), (4, 1)],
        path_index=1,
        bombs=[BombSnapshot(x=4, y=1, timer=7)],
        bombs_left=2,
    )


def test_board_lines_mark_walked_and_remaining_path() -> None:
    lines = [line.plain for line in render_board_lines(_board())]

    assert lines[0] == "######"
    assert lines[1] == f"#{WALKED_GLYPH}@{AHEAD_GLYPH}7#"


def test_board_cells_carry_only_their_own_style() -> None:
    line = render_board_lines(_board())[1]

    styles = [str(span.style) for span in line.spans]

    assert styles == [
        TILE_STYLES["W"],
        WALKED_STYLE,
        PLAYER_STYLE,
        AHEAD_STYLE,
        BOMB_STYLE,
        TILE_STYLES["W"],
    ]
    assert render_board(_board()).plain.splitlines()[1] == line.plain


def test_render_tick_contains_expected_sections() -> None:
    payload = TickPayload(
        tick=3,
        elapsed_ms=60,
        state=_board(),
        events=[Event(kind="MOVE", payload={"from": [1, 1], "to": [4, 1]})],
    )

    console = Console(width=100, record=True)
    console.print(render_tick(payload))
    output = console.export_text()

    assert "Tick 3" in output
    assert "Board" in output
    assert "Recent Events" in output
    assert "MOVE" in output
    assert "(2, 1)" in output
    assert "(4, 1)" in output


def test_render_tick_without_events_or_player() -> None:
    payload = TickPayload(
        tick=1,
        state=BoardSnapshot(width=3, length=3, rows=["WWW", "W W", "WWW"]),
        events=None,
    )

    console = Console(width=80, record=True)
    console.print(render_tick(payload))
    output = console.export_text()

    assert "None" in output
    assert "Position" in output
