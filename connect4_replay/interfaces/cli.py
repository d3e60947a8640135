"""
cli.py - Command-line interface for replaying recorded Connect Four games

The replayer takes move tokens such as "A_Red B_Yellow" on the command line
(or falls back to DEFAULT_MOVES), replays them and prints the outcome.
"""

import argparse
import sys
from typing import List, Optional

import numpy as np

from connect4_replay.debug import debug, DebugLevel
from connect4_replay.game.errors import MalformedMoveError
from connect4_replay.game.rules import ConnectFourGame
from connect4_replay.utils import GameState, Player, column_letter, render_board_ascii

# Sample game: Yellow completes column B on the eighth move
DEFAULT_MOVES = [
    "A_Red",
    "B_Yellow",
    "A_Red",
    "B_Yellow",
    "A_Red",
    "B_Yellow",
    "G_Red",
    "B_Yellow",
]

EXIT_OK = 0
EXIT_MALFORMED_INPUT = 2


class ConsoleView:
    """Observer that prints the game outcome, and optionally every board."""

    def __init__(self, show_board: bool = False):
        self.show_board = show_board

    def notify(self, column: Optional[int], player: Optional[Player],
               grid: np.ndarray, state: GameState) -> None:
        if self.show_board:
            if column is not None:
                print(f"{player} plays column {column_letter(column)}")
            print(render_board_ascii(grid, highlight=column))
            print()

        if state.is_terminal():
            print(state.value)


class ReplayCLI:
    """Command-line front end for ConnectFourGame."""

    def __init__(self):
        self.game = ConnectFourGame()
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            description='Replay a recorded Connect Four game and print the result')
        parser.add_argument('moves', nargs='*', metavar='MOVE',
                            help='Move tokens such as A_Red or g_yellow '
                                 '(default: a built-in sample game)')
        parser.add_argument('--show-board', action='store_true',
                            help='Print the board after every move')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (ignored with --debug)')
        parser.add_argument('--log-file', type=str, default=None,
                            help='Also write log messages to this file')
        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Replay the requested moves.

        Returns:
            Process exit code
        """
        if self.args is None:
            self.parse_args(argv)

        moves = self.args.moves or DEFAULT_MOVES
        self.game.add_observer(ConsoleView(show_board=self.args.show_board))

        try:
            state = self.game.resolve(moves)
        except MalformedMoveError as e:
            debug.error(str(e), "cli")
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_MALFORMED_INPUT

        debug.debug(f"Final state: {state.name}", "cli")
        print(f"Result: {state.value}")
        return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    return ReplayCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
