"""Rich rendering of a board snapshot: tiles, bombs, path and player."""

from __future__ import annotations

from rich.text import Text

from wallj.sim.contracts import BoardSnapshot

TILE_GLYPHS = {
    " ": ".",
    "W": "#",
    "G": "%",
    "T": "U",
}

TILE_STYLES = {
    " ": "grey30",
    "W": "bright_white",
    "G": "green3",
    "T": "bright_blue",
}

WALKED_STYLE = "dark_orange"
AHEAD_STYLE = "bright_green"
WALKED_GLYPH = "o"
AHEAD_GLYPH = "*"
BOMB_STYLE = "bold yellow"
PLAYER_STYLE = "bold red"


def render_board_lines(board: BoardSnapshot) -> list[Text]:
    grid = [[TILE_GLYPHS.get(ch, ch) for ch in row] for row in board.rows]
    styles = [[TILE_STYLES.get(ch, "grey70") for ch in row] for row in board.rows]

    for index, (x, y) in enumerate(board.path):
        if not _inside(board, x, y):
            continue
        if index < board.path_index:
            grid[y][x] = WALKED_GLYPH
            styles[y][x] = WALKED_STYLE
        else:
            grid[y][x] = AHEAD_GLYPH
            styles[y][x] = AHEAD_STYLE

    for bomb in board.bombs:
        if _inside(board, bomb.x, bomb.y):
            grid[bomb.y][bomb.x] = _bomb_glyph(bomb.timer)
            styles[bomb.y][bomb.x] = BOMB_STYLE

    if board.player and _inside(board, *board.player):
        x, y = board.player
        grid[y][x] = "@"
        styles[y][x] = PLAYER_STYLE

    lines: list[Text] = []
    for row, row_styles in zip(grid, styles):
        line = Text()
        for glyph, style in zip(row, row_styles):
            line.append(glyph, style=style)
        lines.append(line)
    return lines


def render_board(board: BoardSnapshot) -> Text:
    return Text("\n").join(render_board_lines(board))


def _bomb_glyph(timer: int) -> str:
    # Single-digit timers fit the cell; longer ones fall back to a marker.
    return str(timer) if timer < 10 else "B"


def _inside(board: BoardSnapshot, x: int, y: int) -> bool:
    return 0 <= x < board.width and 0 <= y < board.length
