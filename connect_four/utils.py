"""
utils.py - Constants, enumerations and rendering helpers for Connect Four

This module provides the board dimensions, the player and result
enumerations, the four win-check directions, and the text/array views of a
board used by the presentation side of the package.
"""

from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

# Game constants
ROWS = 6
COLUMNS = 7
CONNECT_N = 4  # Number of discs in a row to win


class Player(Enum):
    """The two sides of the game. RED always moves first."""
    RED = "red"
    YELLOW = "yellow"

    def other(self) -> 'Player':
        """Get the other player."""
        return Player.YELLOW if self is Player.RED else Player.RED

    @property
    def symbol(self) -> str:
        return "R" if self is Player.RED else "Y"

    def __str__(self):
        return self.value


FIRST_PLAYER = Player.RED


class GameResult(Enum):
    """Outcome recorded on a game state."""
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self is not GameResult.CONTINUE


class Direction(Enum):
    """Axes checked for a winning run, in the order they are checked."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_DOWN = "diagonal_down"  # Top-left to bottom-right
    DIAGONAL_UP = "diagonal_up"  # Bottom-left to top-right


# Direction vectors (row, col) for each axis; iteration order is check order
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (1, -1),
}

# Integer codes used for array observations
CELL_CODES = {None: 0, Player.RED: 1, Player.YELLOW: 2}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLUMNS


def board_to_array(board: Sequence[Sequence[Optional[Player]]]) -> np.ndarray:
    """
    Convert a board into an int8 array (0 empty, 1 red, 2 yellow).

    Args:
        board: The game board, row 0 at the top

    Returns:
        Array of shape (ROWS, COLUMNS)
    """
    return np.array([[CELL_CODES[cell] for cell in row] for row in board], dtype=np.int8)


def render_board_ascii(board: Sequence[Sequence[Optional[Player]]],
                       winning_discs: Optional[Iterable[Tuple[int, int]]] = None) -> str:
    """
    Render the board as ASCII art.

    When winning_discs is given, the winning cells keep their upper-case
    letter and every other disc is drawn in lower case.

    Args:
        board: The game board
        winning_discs: Optional coordinates to highlight

    Returns:
        ASCII representation of the board
    """
    highlight = set(winning_discs) if winning_discs else None
    border = "|" + "-" * (COLUMNS * 2 - 1) + "|"

    lines = [border]
    for row in range(ROWS):
        cells = []
        for col in range(COLUMNS):
            cell = board[row][col]
            if cell is None:
                cells.append(" ")
            elif highlight is not None and (row, col) not in highlight:
                cells.append(cell.symbol.lower())
            else:
                cells.append(cell.symbol)
        lines.append("|" + " ".join(cells) + "|")
    lines.append(border)
    lines.append("|" + " ".join(str(i) for i in range(COLUMNS)) + "|")

    return "\n".join(lines)


def format_board(board: Sequence[Sequence[Optional[Player]]]) -> str:
    """Compact grid view: '-' for empty, 'R'/'Y' for discs."""
    return "\n".join(
        " ".join("-" if cell is None else cell.symbol for cell in row)
        for row in board
    )


def format_winning_discs(winning_discs: Optional[Iterable[Tuple[int, int]]]) -> str:
    """Compact grid view of a winning run: 'W' on winning cells, '-' elsewhere."""
    marked = set(winning_discs or ())
    lines: List[str] = []
    for row in range(ROWS):
        lines.append(" ".join("W" if (row, col) in marked else "-" for col in range(COLUMNS)))
    return "\n".join(lines)
