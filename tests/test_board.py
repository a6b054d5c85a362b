import pytest

from wallj.sim.board import MAX_BOMB_TIMER, MAX_BOMBS, Tile
from wallj.sim.grid import Cell
from wallj.sim.level_loader import parse_level

LEVEL = [
    "WWWWWW",
    "W G  W",
    "W  W W",
    "W T  W",
    "WWWWWW",
]


def test_walkability_follows_tiles() -> None:
    board = parse_level(LEVEL)

    assert board.width == 6
    assert board.length == 5
    assert board.is_walkable(1, 1)
    assert not board.is_walkable(0, 0)
    assert not board.is_walkable(2, 1)
    assert not board.is_walkable(2, 3)
    assert not board.is_walkable(6, 1)
    assert board.tile(3, 2) == Tile.WALL


def test_occupancy_snapshot_matches_board() -> None:
    board = parse_level(LEVEL)
    grid = board.occupancy()

    for y in range(board.length):
        for x in range(board.width):
            assert grid.is_walkable(x, y) == board.is_walkable(x, y)

    board.rows[1][1] = Tile.WALL
    assert grid.is_walkable(1, 1)


def test_place_player_requires_empty_cell() -> None:
    board = parse_level(LEVEL)

    with pytest.raises(ValueError):
        board.place_player(Cell(2, 1))
    board.place_player(Cell(1, 1))
    assert board.player == Cell(1, 1)


def test_move_player_one_cell_at_a_time() -> None:
    board = parse_level(LEVEL)
    board.place_player(Cell(1, 1))

    board.move_player(Cell(1, 2))
    assert board.player == Cell(1, 2)
    with pytest.raises(ValueError):
        board.move_player(Cell(3, 2))


def test_toggle_bomb_drops_and_picks_up() -> None:
    board = parse_level(LEVEL)
    board.place_player(Cell(1, 1))

    bomb = board.toggle_bomb()
    assert bomb is not None
    assert board.bombs_left == MAX_BOMBS - 1
    assert board.bombs[Cell(1, 1)].timer == 1

    assert board.toggle_bomb() is None
    assert board.bombs == {}
    assert board.bombs_left == MAX_BOMBS


def test_bombs_are_limited() -> None:
    board = parse_level(LEVEL)
    cells = [Cell(1, 1), Cell(1, 2), Cell(1, 3), Cell(2, 2)]
    board.place_player(cells[0])
    board.toggle_bomb()
    for cell in cells[1:]:
        board.move_player(cell)
        board.toggle_bomb()

    assert len(board.bombs) == MAX_BOMBS
    assert Cell(2, 2) not in board.bombs
    assert board.bombs_left == 0


def test_bomb_timer_is_clamped() -> None:
    board = parse_level(LEVEL)
    board.place_player(Cell(4, 1))
    board.toggle_bomb()

    board.adjust_bomb_timer(-1)
    assert board.bombs[Cell(4, 1)].timer == 1
    for _ in range(MAX_BOMB_TIMER + 5):
        board.adjust_bomb_timer(1)
    assert board.bombs[Cell(4, 1)].timer == MAX_BOMB_TIMER


def test_bombs_do_not_block_walking() -> None:
    board = parse_level(LEVEL)
    board.place_player(Cell(1, 1))
    board.toggle_bomb()

    assert board.is_walkable(1, 1)


def test_garbage_count_and_win() -> None:
    board = parse_level(LEVEL)

    assert board.garbage_count == 1
    assert not board.is_won
    board.rows[1][2] = Tile.EMPTY
    assert board.is_won
