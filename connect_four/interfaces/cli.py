"""
cli.py - Command-line interface for the Connect Four engine

This module provides a terminal front end for the engine: a hot-seat game
for two players, a replay command that applies a column sequence and shows
the outcome, and a small benchmark of the transition function.
"""

import argparse
import sys
from typing import List, Optional

import numpy as np

from connect_four.debug import debug
from connect_four.utils import COLUMNS, format_board, format_winning_discs
from connect_four.game.rules import ConnectFourGame
from connect_four.game import engine

QUIT = -1
RESET = -2


def parse_moves(text: str) -> List[int]:
    """
    Parse a comma-separated column sequence such as "0,0,1,1".

    Raises:
        ValueError: if any entry is not an integer
    """
    moves = []
    for token in text.split(','):
        token = token.strip()
        if not token:
            continue
        try:
            moves.append(int(token))
        except ValueError:
            raise ValueError(f"Invalid column '{token}' in move list") from None
    return moves


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self):
        """Initialize the CLI."""
        self.game = ConnectFourGame()
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four')

        common = argparse.ArgumentParser(add_help=False)
        common.add_argument('--debug-level',
                            choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                            default='warning',
                            help='Logging verbosity (default: warning)')
        common.add_argument('--log-file', type=str, default=None,
                            help='Also write log messages to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', parents=[common],
                                            help='Play a two-player game in the terminal')
        play_parser.add_argument('--ascii', action='store_true',
                                 help='Use the compact board view')

        replay_parser = subparsers.add_parser('replay', parents=[common],
                                              help='Apply a column sequence and show the result')
        replay_parser.add_argument('--moves', type=str, required=True,
                                   help='Comma-separated columns, e.g. "0,0,1,1,2,2,3"')

        benchmark_parser = subparsers.add_parser('benchmark', parents=[common],
                                                 help='Benchmark the move engine')
        benchmark_parser.add_argument('--games', type=int, default=200,
                                      help='Number of random games to play')
        benchmark_parser.add_argument('--seed', type=int, default=None,
                                      help='Seed for the random column picker')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and apply logging settings."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.command is not None:
            debug.set_from_string(self.args.debug_level)
            if self.args.log_file:
                debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI and return the process exit code."""
        if argv is not None or not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'replay':
            return self.replay()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def show(self) -> None:
        state = self.game.state
        if getattr(self.args, 'ascii', False):
            print(format_board(state.board))
        else:
            print(self.game.render())
        print(self.game.status())

    def play_game(self) -> None:
        """Play a Connect Four game between two players at one terminal."""
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{COLUMNS - 1}) to drop a disc.")
        print("Other commands: 'q' to quit, 'r' to reset.")

        self.game.reset()
        self.show()

        while True:
            move = self.get_human_move()

            if move is None:
                continue
            if move == QUIT:
                print("Quitting game.")
                return
            if move == RESET:
                self.game.reset()
                print("Game reset.")
                self.show()
                continue

            if self.game.is_game_over():
                print("The game is over. Press 'r' to play again or 'q' to quit.")
                continue

            if self.game.select_column(move):
                self.show()
                if self.game.is_game_over():
                    print("Game over! Press 'r' to play again or 'q' to quit.")
            else:
                print(f"Column {move} is full.")

    def get_human_move(self) -> Optional[int]:
        """
        Read one command or column from the terminal.

        Returns:
            Column index, QUIT, RESET, or None if the input was not understood
        """
        try:
            user_input = input(f"{self.game.get_current_player()} (0-{COLUMNS - 1}, q/r): ")
        except EOFError:
            return QUIT

        user_input = user_input.strip().lower()
        if user_input == 'q':
            return QUIT
        if user_input == 'r':
            return RESET

        try:
            move = int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or command.")
            return None

        if not 0 <= move < COLUMNS:
            print(f"Column must be between 0 and {COLUMNS - 1}.")
            return None
        return move

    def replay(self) -> int:
        """Apply --moves from a fresh game and print the final position."""
        try:
            moves = parse_moves(self.args.moves)
        except ValueError as e:
            print(f"Error parsing moves: {e}")
            return 1

        self.game.reset()
        for i, column in enumerate(moves, start=1):
            player = self.game.get_current_player()
            if not self.game.select_column(column):
                print(f"Move {i}: column {column} rejected for {player}")

        state = self.game.state
        print(format_board(state.board))
        print()
        print(format_winning_discs(state.winning_discs))
        print()
        print(self.game.status())
        return 0

    def benchmark(self) -> None:
        """Time random games played through the engine."""
        games = max(1, self.args.games)
        rng = np.random.default_rng(self.args.seed)
        print(f"Running benchmark with {games} games...")

        debug.start_timer("initial_state")
        for _ in range(games):
            engine.initial_state()
        init_time = debug.end_timer("initial_state", "cli")
        print(f"State initialization: {init_time:.6f} seconds total, "
              f"{init_time / games * 1000:.6f} ms per state")

        outcomes = {'win': 0, 'draw': 0}
        total_moves = 0
        debug.start_timer("games")
        for _ in range(games):
            state = engine.initial_state()
            while not state.is_terminal:
                column = int(rng.choice(engine.valid_columns(state)))
                state = engine.place_disc(state, column)
                total_moves += 1
            outcomes[state.result.value] += 1
        games_time = debug.end_timer("games", "cli")

        print(f"Played {games} games with {total_moves} total moves: "
              f"{games_time:.6f} seconds total, "
              f"{games_time / total_moves * 1000:.6f} ms per move")
        print(f"Wins: {outcomes['win']}, draws: {outcomes['draw']}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
