"""
utils.py - Constants, enumerations and helper functions for the Connect Four replayer

The grid is a numpy array indexed [row, column] where row 0 is the bottom
row, so a column fills upwards from index 0.
"""

import re
from enum import Enum
from typing import Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win

EMPTY = 0

# Column letters in board order, A is column 0
COLUMN_LETTERS = "ABCDEFG"

# Move tokens look like "C_Red" or "g_yellow"
MOVE_PATTERN = re.compile(r"([A-G])_(Red|Yellow)", re.IGNORECASE)


class Player(Enum):
    """The two players; the value is the cell marker stored in the grid."""
    RED = 1
    YELLOW = 2

    @property
    def marker(self) -> str:
        return "R" if self is Player.RED else "Y"

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    def __str__(self):
        return self.display_name


class GameState(Enum):
    """Outcome of a replayed move sequence."""
    RED_WINS = "Red"
    YELLOW_WINS = "Yellow"
    DRAW = "Draw"
    ONGOING = "Ongoing"

    def is_terminal(self) -> bool:
        return self is not GameState.ONGOING

    @classmethod
    def win_for(cls, player: Player) -> "GameState":
        return cls.RED_WINS if player is Player.RED else cls.YELLOW_WINS

    def __str__(self):
        return self.value


# Token player names, normalised to lower case before lookup
PLAYER_NAMES = {
    "red": Player.RED,
    "yellow": Player.YELLOW,
}

# All eight directions (row, col); opposite directions are scanned separately
DIRECTION_VECTORS: Tuple[Tuple[int, int], ...] = (
    (1, 0), (-1, 0),
    (0, 1), (0, -1),
    (1, 1), (-1, -1),
    (1, -1), (-1, 1),
)


def is_valid_position(row: int, col: int) -> bool:
    """Check if a position is within the board boundaries."""
    return 0 <= row < ROWS and 0 <= col < COLS


def column_letter(column: int) -> str:
    """
    Get the letter naming a column.

    Args:
        column: Column index

    Returns:
        The letter for in-range columns, otherwise the index as text
    """
    if 0 <= column < COLS:
        return COLUMN_LETTERS[column]
    return str(column)


def empty_grid() -> np.ndarray:
    return np.full((ROWS, COLS), EMPTY, dtype=np.int8)


def cell_marker(value: int) -> str:
    if value == Player.RED.value:
        return Player.RED.marker
    if value == Player.YELLOW.value:
        return Player.YELLOW.marker
    return " "


def render_board_ascii(grid: np.ndarray, highlight: Optional[int] = None) -> str:
    """
    Render the board as ASCII art with the top row first.

    Args:
        grid: The game grid (row 0 at the bottom)
        highlight: Optional column index to mark under the footer

    Returns:
        ASCII representation of the board
    """
    border = "|" + "-" * (COLS * 2 - 1) + "|"
    lines = [border]

    for row in range(ROWS - 1, -1, -1):
        lines.append("|" + " ".join(cell_marker(grid[row, col]) for col in range(COLS)) + "|")

    lines.append(border)
    lines.append("|" + " ".join(COLUMN_LETTERS) + "|")

    if highlight is not None and 0 <= highlight < COLS:
        lines.append(" " + "  " * highlight + "^")

    return "\n".join(lines)
