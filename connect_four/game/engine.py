"""
engine.py - Game-state transitions for Connect Four

Pure functions over GameState values: building the starting state, dropping
a disc, and detecting wins and draws. Nothing here mutates its input; every
accepted move returns a brand-new state. Invalid moves (bad column, full
column, game already decided) hand back the input state unchanged.
"""

from typing import List, Optional, Tuple

from connect_four.debug import debug
from connect_four.game.board import (Board, Coordinate, GameState, WinningDiscs,
                                     empty_board, with_disc)
from connect_four.utils import (ROWS, COLUMNS, CONNECT_N, FIRST_PLAYER,
                                DIRECTION_VECTORS, GameResult, is_valid_position)


def initial_state() -> GameState:
    """
    Create the starting state.

    Returns:
        Empty board, first player to move, result CONTINUE, no winning discs
    """
    return GameState(
        result=GameResult.CONTINUE,
        board=empty_board(),
        current_player=FIRST_PLAYER,
        winning_discs=None,
    )


def get_empty_row(board: Board, col: int) -> int:
    """
    Get the row a disc dropped into a column would land on.

    Args:
        board: The game board
        col: The column to check

    Returns:
        The row index of the lowest empty cell, or -1 if the column is full
        or outside the board
    """
    if not 0 <= col < COLUMNS:
        return -1
    for row in range(ROWS - 1, -1, -1):
        if board[row][col] is None:
            return row
    return -1


def is_board_full(board: Board) -> bool:
    """
    Check if the board is full.

    Discs stack from the bottom, so a full top row means every column is full.
    """
    return all(cell is not None for cell in board[0])


def count_cells(board: Board, row: int, col: int, d_row: int, d_col: int) -> List[Coordinate]:
    """
    Collect consecutive discs matching (row, col) in one direction.

    Args:
        board: The game board
        row: Row of the starting disc (not included in the result)
        col: Column of the starting disc
        d_row: Row step
        d_col: Column step

    Returns:
        Coordinates of the matching discs, nearest first
    """
    player = board[row][col]
    discs = []
    r, c = row + d_row, col + d_col
    while is_valid_position(r, c) and board[r][c] == player:
        discs.append((r, c))
        r += d_row
        c += d_col
    return discs


def check_direction(board: Board, row: int, col: int,
                    d_row: int, d_col: int) -> Optional[WinningDiscs]:
    """
    Check one axis through (row, col) for a winning run.

    Returns:
        The run (the disc itself, then the forward walk, then the backward
        walk) if it holds at least CONNECT_N discs, otherwise None
    """
    run = [(row, col)]
    run.extend(count_cells(board, row, col, d_row, d_col))
    run.extend(count_cells(board, row, col, -d_row, -d_col))

    if len(run) >= CONNECT_N:
        return tuple(run)
    return None


def is_winning_move(board: Board, row: int, col: int) -> Optional[WinningDiscs]:
    """
    Check if the disc at (row, col) completes a winning run.

    Axes are checked horizontal, vertical, diagonal down-right, diagonal
    up-right; only the first winning axis is reported.

    Returns:
        Coordinates of the winning run, or None
    """
    if board[row][col] is None:
        return None

    for direction, (d_row, d_col) in DIRECTION_VECTORS.items():
        run = check_direction(board, row, col, d_row, d_col)
        if run is not None:
            debug.trace(f"Winning run on {direction.value} axis: {run}", "engine")
            return run
    return None


def is_winning_cell(state: GameState, row: int, col: int) -> bool:
    """True iff (row, col) belongs to the state's winning run."""
    return state.winning_discs is not None and (row, col) in state.winning_discs


def valid_columns(state: GameState) -> List[int]:
    """
    Columns a move would currently be accepted in.

    Returns:
        Column indices with room for a disc, or an empty list once the game
        is decided
    """
    if state.result.is_game_over():
        return []
    return [col for col in range(COLUMNS) if state.board[0][col] is None]


def apply_move(state: GameState, column: int) -> Tuple[GameState, bool]:
    """
    Drop the current player's disc and report whether the move was applied.

    Args:
        state: The current game state
        column: Column chosen by the current player

    Returns:
        Tuple of (next state, applied). When applied is False the returned
        state is the input state itself.
    """
    if state.result.is_game_over():
        debug.debug(f"Move rejected: game is over (result: {state.result.value})", "engine")
        return state, False

    row = get_empty_row(state.board, column)
    if row == -1:
        debug.debug(f"Move rejected: column {column} is full or off the board", "engine")
        return state, False

    player = state.current_player
    debug.trace(f"Placing {player} disc at ({row}, {column})", "engine")
    next_board = with_disc(state.board, row, column, player)

    winning_discs = is_winning_move(next_board, row, column)
    if winning_discs is not None:
        debug.info(f"{player} wins with the disc at ({row}, {column})", "engine")
        return GameState(
            result=GameResult.WIN,
            board=next_board,
            current_player=player,
            winning_discs=winning_discs,
        ), True

    if is_board_full(next_board):
        debug.info("Game ends in a draw", "engine")
        return GameState(
            result=GameResult.DRAW,
            board=next_board,
            current_player=player,
            winning_discs=None,
        ), True

    return GameState(
        result=GameResult.CONTINUE,
        board=next_board,
        current_player=player.other(),
        winning_discs=None,
    ), True


def place_disc(state: GameState, column: int) -> GameState:
    """
    Return the next game state after the current player picks a column.

    Moves after the game is decided, into a full column, or outside the
    board are no-ops: the input state is returned unchanged.
    """
    next_state, _ = apply_move(state, column)
    return next_state
