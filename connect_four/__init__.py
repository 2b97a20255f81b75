"""
connect_four - Rules engine for the Connect Four disc-drop game

This package provides the pure game-state transition functions for
Connect Four (disc placement, win and draw detection, turn alternation),
together with the thin collaborators that drive it: a session object that
owns the current state, a gymnasium environment adapter, and a terminal
interface.
"""

# Version number
__version__ = '0.1.0'

from connect_four.utils import ROWS, COLUMNS, CONNECT_N, Player, GameResult
from connect_four.game.board import GameState
from connect_four.game.engine import initial_state, place_disc, apply_move, is_winning_cell

__all__ = [
    'ROWS', 'COLUMNS', 'CONNECT_N', 'Player', 'GameResult', 'GameState',
    'initial_state', 'place_disc', 'apply_move', 'is_winning_cell',
]
