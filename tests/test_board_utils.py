"""Tests for game state representation and board helpers."""

import numpy as np
import pytest

from connect_four.utils import (
    ROWS,
    COLUMNS,
    Player,
    GameResult,
    board_to_array,
    format_board,
    format_winning_discs,
    is_valid_position,
    render_board_ascii,
)
from connect_four.game.board import GameState, column_height, describe_status, empty_board, with_disc
from connect_four.game.engine import initial_state, place_disc


def play(columns):
    state = initial_state()
    for col in columns:
        state = place_disc(state, col)
    return state


def test_player_other():
    assert Player.RED.other() is Player.YELLOW
    assert Player.YELLOW.other() is Player.RED
    assert str(Player.RED) == "red"


def test_game_result_is_game_over():
    assert not GameResult.CONTINUE.is_game_over()
    assert GameResult.WIN.is_game_over()
    assert GameResult.DRAW.is_game_over()


def test_is_valid_position():
    assert is_valid_position(0, 0)
    assert is_valid_position(ROWS - 1, COLUMNS - 1)
    assert not is_valid_position(-1, 0)
    assert not is_valid_position(0, COLUMNS)
    assert not is_valid_position(ROWS, 0)


def test_with_disc_copies_board():
    board = empty_board()
    updated = with_disc(board, 5, 2, Player.YELLOW)

    assert board[5][2] is None
    assert updated[5][2] is Player.YELLOW
    assert column_height(updated, 2) == 1
    assert column_height(board, 2) == 0


def test_game_state_rejects_wrong_dimensions():
    """Test that boards of the wrong size are rejected."""
    short_board = empty_board()[1:]
    with pytest.raises(ValueError):
        GameState(result=GameResult.CONTINUE, board=short_board, current_player=Player.RED)

    narrow_board = tuple(row[1:] for row in empty_board())
    with pytest.raises(ValueError):
        GameState(result=GameResult.CONTINUE, board=narrow_board, current_player=Player.RED)


def test_game_state_rejects_invalid_cells():
    board = with_disc(empty_board(), 5, 0, Player.RED)
    bad_board = board[:5] + (("red",) + board[5][1:],)

    with pytest.raises(ValueError):
        GameState(result=GameResult.CONTINUE, board=bad_board, current_player=Player.RED)


def test_game_state_winning_discs_invariant():
    """winning_discs must be present exactly when the game is won."""
    with pytest.raises(ValueError):
        GameState(result=GameResult.CONTINUE, board=empty_board(),
                  current_player=Player.RED, winning_discs=((5, 0),))

    with pytest.raises(ValueError):
        GameState(result=GameResult.WIN, board=empty_board(), current_player=Player.RED)


def test_game_state_equality_and_immutability():
    state = initial_state()

    assert state == initial_state()
    assert hash(state) == hash(initial_state())
    with pytest.raises(AttributeError):
        state.current_player = Player.YELLOW


def test_disc_count_and_cell():
    state = play([3, 3, 4])

    assert state.disc_count == 3
    assert state.cell(5, 3) is Player.RED
    assert state.cell(4, 3) is Player.YELLOW
    assert state.cell(0, 0) is None


def test_board_to_array():
    state = play([0, 0])
    array = board_to_array(state.board)

    assert array.shape == (ROWS, COLUMNS)
    assert array.dtype == np.int8
    assert array[5, 0] == 1
    assert array[4, 0] == 2
    assert array.sum() == 3


def test_render_empty_board():
    lines = render_board_ascii(empty_board()).split("\n")

    assert len(lines) == ROWS + 3
    assert lines[0] == "|-------------|"
    assert all(line == "|             |" for line in lines[1:ROWS + 1])
    assert lines[-1] == "|0 1 2 3 4 5 6|"


def test_render_highlights_winning_run():
    state = play([0, 0, 1, 1, 2, 2, 3])
    lines = state.render().split("\n")

    assert lines[ROWS] == "|R R R R      |"
    assert lines[ROWS - 1] == "|y y y        |"


def test_format_winning_discs():
    state = play([4, 5, 4, 5, 4, 5, 4])

    assert format_winning_discs(state.winning_discs) == "\n".join([
        "- - - - - - -",
        "- - - - - - -",
        "- - - - W - -",
        "- - - - W - -",
        "- - - - W - -",
        "- - - - W - -",
    ])
    assert format_winning_discs(None) == format_board(empty_board())


@pytest.mark.parametrize("columns, expected", [
    ([], "Next: red"),
    ([3], "Next: yellow"),
    ([0, 0, 1, 1, 2, 2, 3], "Winner: red"),
])
def test_describe_status(columns, expected):
    assert describe_status(play(columns)) == expected


def test_describe_status_draw():
    board = tuple(
        tuple(Player.RED if (r + c) % 2 else Player.YELLOW for c in range(COLUMNS))
        for r in range(ROWS)
    )
    state = GameState(result=GameResult.DRAW, board=board, current_player=Player.YELLOW)

    assert describe_status(state) == "Draw: yellow"
