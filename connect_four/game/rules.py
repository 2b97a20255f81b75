"""
rules.py - Game session management and Gymnasium environment for Connect Four

This module provides:
1. ConnectFourGame, which owns the current state of one game and forwards
   column selections to the engine
2. A gymnasium-compatible environment built on the same session
"""

from typing import Dict, Tuple, List, Optional, Any, Union

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from connect_four.debug import debug
from connect_four.utils import ROWS, COLUMNS, Player, GameResult, board_to_array
from connect_four.game.board import GameState, describe_status
from connect_four.game import engine


class ConnectFourGame:
    """
    Holder of the single "current" state of a game.

    Every accepted column selection swaps in the state returned by the
    engine; a rejected one leaves the held state as it was. Reset swaps in a
    fresh starting state.
    """

    def __init__(self):
        """Initialize a new Connect Four game."""
        debug.debug("Initializing ConnectFourGame", "game")
        self._state = engine.initial_state()

    @property
    def state(self) -> GameState:
        return self._state

    def reset(self) -> None:
        """Reset the game to initial state."""
        debug.debug("Resetting game", "game")
        self._state = engine.initial_state()

    def select_column(self, column: int) -> bool:
        """
        Forward a column selection to the engine.

        Args:
            column: Column to place a disc (0-indexed)

        Returns:
            True if the move was applied, False if it was rejected
        """
        debug.debug(f"{self._state.current_player} selects column {column}", "game")
        self._state, applied = engine.apply_move(self._state, column)
        return applied

    def is_game_over(self) -> bool:
        return self._state.result.is_game_over()

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning player, or None if no winner yet or draw
        """
        if self._state.result is GameResult.WIN:
            return self._state.current_player
        return None

    def get_current_player(self) -> Player:
        return self._state.current_player

    def get_valid_moves(self) -> List[int]:
        return engine.valid_columns(self._state)

    def is_winning_cell(self, row: int, col: int) -> bool:
        return engine.is_winning_cell(self._state, row, col)

    def status(self) -> str:
        return describe_status(self._state)

    def render(self) -> str:
        return self._state.render()


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Actions are column indices; observations are the board as an int8 array
    (0 empty, 1 red, 2 yellow). Rewards are given from red's point of view.
    """

    metadata = {'render_modes': ['ascii', 'human', 'rgb_array'], 'render_fps': 4}

    CELL_PIXELS = 50

    def __init__(self, render_mode: Optional[str] = None):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: Mode for rendering the environment
        """
        debug.debug("Initializing ConnectFourEnv", "env")

        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.action_space = spaces.Discrete(COLUMNS)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(ROWS, COLUMNS), dtype=np.int8
        )

        self.game = ConnectFourGame()
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment to initial state.

        Args:
            seed: Random seed for reproducibility
            options: Additional options for reset (unused)

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.game.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Take a step in the environment by dropping a disc.

        Args:
            action: Column to place a disc (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        if not self.game.select_column(int(action)):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False
        state = self.game.state

        if state.result is GameResult.WIN:
            terminated = True
            reward = self.reward_win if state.current_player is Player.RED else self.reward_lose
            debug.info(f"Game over: {state.current_player} wins", "env")
        elif state.result is GameResult.DRAW:
            terminated = True
            reward = self.reward_draw
            debug.info("Game over: draw", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        """
        Render the current state of the environment.

        Returns:
            Rendered frame depending on render_mode
        """
        if self.render_mode is None:
            return None

        if self.render_mode == "ascii":
            return self.game.render()

        if self.render_mode == "human":
            print(self.game.render())
            print(self.game.status())
            return None

        return self._render_rgb()

    def _render_rgb(self) -> np.ndarray:
        """Draw the board as an RGB image, outlining the winning discs."""
        size = self.CELL_PIXELS
        radius = size * 2 // 5
        frame = np.zeros((ROWS * size, COLUMNS * size, 3), dtype=np.uint8)
        frame[:, :] = [30, 144, 255]  # Board blue

        yy, xx = np.mgrid[0:size, 0:size]
        dist2 = (yy - size // 2) ** 2 + (xx - size // 2) ** 2
        disc_mask = dist2 <= radius ** 2
        ring_mask = disc_mask & (dist2 >= (radius - 4) ** 2)

        colours = {None: [255, 255, 255], Player.RED: [255, 0, 0], Player.YELLOW: [255, 255, 0]}
        board = self.game.state.board
        for row in range(ROWS):
            for col in range(COLUMNS):
                tile = frame[row * size:(row + 1) * size, col * size:(col + 1) * size]
                tile[disc_mask] = colours[board[row][col]]
                if self.game.is_winning_cell(row, col):
                    tile[ring_mask] = [255, 255, 255]

        return frame

    def _get_observation(self) -> np.ndarray:
        return board_to_array(self.game.state.board)

    def _get_info(self) -> Dict[str, Any]:
        """
        Get additional information about the current state.

        Returns:
            Dictionary with info about the current state
        """
        state = self.game.state
        valid_moves = self.game.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': state.current_player.value,
            'game_result': state.result.value,
            'discs_placed': state.disc_count,
            'winning_discs': list(state.winning_discs or ()),
        }
