import io

import pytest

from solong.errors import InvalidMapError
from solong.game import Direction, Game, MoveResult, main

CORRIDOR = ["111111", "1P0CE1", "111111"]


def make(grid):
    return Game(grid, stream=io.StringIO())


def test_move_onto_floor():
    game = make(CORRIDOR)
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.player == (1, 2)
    assert game.grid[1][1] == "0"
    assert game.grid[1][2] == "P"


def test_collecting_then_winning():
    game = make(CORRIDOR)
    assert game.collectibles == 1
    game.move(Direction.RIGHT)
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.collectibles == 0
    assert game.move(Direction.RIGHT) is MoveResult.WON
    assert game.player == (1, 3)


def test_exit_blocked_while_collectibles_remain():
    game = make(["111111", "1PEC01", "111111"])
    assert game.move(Direction.RIGHT) is MoveResult.BLOCKED
    assert game.player == (1, 1)
    assert game.grid[1][2] == "E"


def test_wall_blocks():
    game = make(CORRIDOR)
    assert game.move(Direction.LEFT) is MoveResult.BLOCKED
    assert game.move(Direction.UP) is MoveResult.BLOCKED
    assert game.player == (1, 1)


def test_moving_down_onto_exit_never_wins():
    game = make(["111", "1P1", "1E1", "111"])
    assert game.collectibles == 0
    assert game.move(Direction.DOWN) is MoveResult.BLOCKED


def test_moving_up_onto_exit_wins():
    game = make(["111", "1E1", "1P1", "111"])
    assert game.move(Direction.UP) is MoveResult.WON


def test_facing_follows_successful_moves_only():
    game = make(["11111", "10P01", "1C0E1", "11111"])
    assert game.facing is Direction.DOWN
    game.move(Direction.LEFT)
    assert game.facing is Direction.LEFT
    assert game.facing.value == 3
    game.move(Direction.UP)
    assert game.facing is Direction.LEFT


def test_handle_key_counts_and_prints():
    stream = io.StringIO()
    game = Game(CORRIDOR, stream=stream)
    assert game.handle_key(2) is MoveResult.MOVED
    assert game.moves == 1
    assert stream.getvalue() == "MOVEMENTS: 1\n"


def test_handle_key_blocked_still_prints_count():
    stream = io.StringIO()
    game = Game(CORRIDOR, stream=stream)
    assert game.handle_key(0) is MoveResult.BLOCKED
    assert game.moves == 0
    assert stream.getvalue() == "MOVEMENTS: 0\n"


@pytest.mark.parametrize("keycode", [2, 124])
def test_right_keys(keycode):
    game = make(CORRIDOR)
    game.handle_key(keycode)
    assert game.player == (1, 2)


def test_escape_quits_without_output():
    stream = io.StringIO()
    game = Game(CORRIDOR, stream=stream)
    assert game.handle_key(53) is MoveResult.QUIT
    assert stream.getvalue() == ""


def test_winning_key_prints_nothing():
    stream = io.StringIO()
    game = Game(["11111", "1PE01", "11111"], stream=stream)
    assert game.handle_key(124) is MoveResult.WON
    assert stream.getvalue() == ""
    assert game.moves == 0


def test_tiles_cover_grid():
    game = make(CORRIDOR)
    tiles = list(game.tiles())
    assert len(tiles) == game.rows * game.cols
    assert (1, 1, "P") in tiles
    assert (1, 4, "E") in tiles


def test_grid_without_player_is_rejected():
    with pytest.raises(InvalidMapError):
        Game(["1111", "10C1", "1111"])


def test_from_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("111111\n1P0CE1\n111111")
    game = Game.from_file(path)
    assert game.player == (1, 1)
    assert game.collectibles == 1
    assert (game.rows, game.cols) == (3, 6)


def test_main_rejects_bad_arguments(capsys):
    assert main(["so_long"]) == 1
    assert capsys.readouterr().out == "Error, invalid argument\n"


def test_main_rejects_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("111\n1P1\n111")
    assert main(["so_long", str(path)]) == 1
    assert capsys.readouterr().out.startswith("Error, invalid")