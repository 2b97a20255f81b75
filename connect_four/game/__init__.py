"""
connect_four.game - Core game mechanics for Connect Four

This package contains the game state representation, the transition
engine, and the session/environment wrappers that drive it.
"""

from connect_four.game.board import GameState
from connect_four.game.engine import initial_state, place_disc, apply_move, is_winning_cell
from connect_four.game.rules import ConnectFourGame, ConnectFourEnv

__all__ = ['GameState', 'initial_state', 'place_disc', 'apply_move', 'is_winning_cell',
           'ConnectFourGame', 'ConnectFourEnv']
