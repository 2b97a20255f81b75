"""
board.py - Board and game state representation for Connect Four

This module implements the immutable GameState value that the engine
transitions between, plus the small board helpers the engine builds on.
Boards are tuples of row tuples, so a state can be shared freely and
compared with ``==``.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from connect_four.utils import (ROWS, COLUMNS, Player, GameResult,
                                format_board, render_board_ascii)

Cell = Optional[Player]
Row = Tuple[Cell, ...]
Board = Tuple[Row, ...]
Coordinate = Tuple[int, int]
WinningDiscs = Tuple[Coordinate, ...]


def empty_board() -> Board:
    """Build a ROWS x COLUMNS board with every cell empty."""
    return tuple(tuple(None for _ in range(COLUMNS)) for _ in range(ROWS))


def with_disc(board: Board, row: int, col: int, player: Player) -> Board:
    """
    Return a copy of the board with one cell set.

    Args:
        board: Source board (left untouched)
        row: Row index of the cell
        col: Column index of the cell
        player: Disc owner to store

    Returns:
        New board sharing no rows with the caller's reference
    """
    rows = [list(r) for r in board]
    rows[row][col] = player
    return tuple(tuple(r) for r in rows)


def column_height(board: Board, col: int) -> int:
    """Number of discs stacked in a column."""
    return sum(1 for row in range(ROWS) if board[row][col] is not None)


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of a game.

    current_player is the side to move while the game continues; once the
    result is WIN it names the winner, and on DRAW it is the last mover.
    winning_discs lists the run that ended the game, starting with the
    disc that completed it.
    """

    result: GameResult
    board: Board
    current_player: Player
    winning_discs: Optional[WinningDiscs] = None

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if len(self.board) != ROWS or any(len(row) != COLUMNS for row in self.board):
            raise ValueError(f"Board must be {ROWS}x{COLUMNS}")
        for row in self.board:
            for cell in row:
                if cell is not None and not isinstance(cell, Player):
                    raise ValueError(f"Invalid cell value {cell!r}")
        if not isinstance(self.current_player, Player):
            raise ValueError(f"Invalid player {self.current_player!r}")
        if (self.winning_discs is not None) != (self.result is GameResult.WIN):
            raise ValueError("winning_discs must be set exactly when the result is a win")

    @property
    def is_terminal(self) -> bool:
        return self.result.is_game_over()

    @property
    def disc_count(self) -> int:
        return sum(1 for row in self.board for cell in row if cell is not None)

    def cell(self, row: int, col: int) -> Cell:
        return self.board[row][col]

    def render(self) -> str:
        return render_board_ascii(self.board, self.winning_discs)

    def __str__(self) -> str:
        return format_board(self.board)


def describe_status(state: GameState) -> str:
    """
    Turn/result indicator text for a state.

    Returns "Next: <player>" while the game continues, "Winner: <player>"
    after a win and "Draw: <player>" after a draw.
    """
    if state.result is GameResult.WIN:
        label = "Winner"
    elif state.result is GameResult.DRAW:
        label = "Draw"
    else:
        label = "Next"
    return f"{label}: {state.current_player}"
