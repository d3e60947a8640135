"""
board.py - Board representation and win detection for Connect Four

This module implements the Board class, which owns the grid and the per-column
heights, drops pieces under gravity and checks whether the piece just placed
completes a line of CONNECT_N.
"""

from typing import Optional, Tuple

import numpy as np

from connect4_replay.debug import debug
from connect4_replay.game.errors import ColumnFullError, InvalidColumnError
from connect4_replay.utils import (ROWS, COLS, CONNECT_N, EMPTY, DIRECTION_VECTORS,
                                   Player, column_letter, empty_grid,
                                   is_valid_position, render_board_ascii)


class Board:
    """
    Represents a Connect Four game board.

    The grid stores Player values (0 for empty) with row 0 at the bottom.
    column_heights[c] is always the number of pieces in column c.
    """

    def __init__(self):
        debug.debug("Initializing new Board", "board")
        self.grid = empty_grid()
        self.column_heights = np.zeros(COLS, dtype=np.int8)
        self.last_move: Optional[Tuple[int, int]] = None

    @property
    def move_count(self) -> int:
        return int(self.column_heights.sum())

    def column_height(self, column: int) -> int:
        if not 0 <= column < COLS:
            raise InvalidColumnError(column)
        return int(self.column_heights[column])

    def is_full(self) -> bool:
        return self.move_count == ROWS * COLS

    def drop(self, column: int, player: Player) -> bool:
        """
        Drop a piece for player into column.

        Args:
            column: The column to place a piece (0-indexed)
            player: The player making the move

        Returns:
            True if this move completes a line for player, False otherwise

        Raises:
            InvalidColumnError: column is outside 0..COLS-1
            ColumnFullError: column already holds ROWS pieces
        """
        if not 0 <= column < COLS:
            raise InvalidColumnError(column)
        if self.column_heights[column] == ROWS:
            raise ColumnFullError(column)

        row = int(self.column_heights[column])
        debug.trace(f"Placing {player} at ({row}, {column_letter(column)})", "board")
        self.grid[row, column] = player.value
        self.column_heights[column] += 1
        self.last_move = (row, column)

        return self.check_win_at(row, column)

    def check_win_at(self, row: int, column: int) -> bool:
        """
        Check if the piece at (row, column) is the start of a winning run.

        Each of the eight directions is counted on its own: the run starts at
        the placed cell and extends at most CONNECT_N - 1 further cells.

        Args:
            row: Row index of the placed piece
            column: Column index of the placed piece

        Returns:
            True if a run of CONNECT_N is found in any single direction
        """
        player_value = self.grid[row, column]
        if player_value == EMPTY:
            return False

        for dr, dc in DIRECTION_VECTORS:
            count = 1
            for step in range(1, CONNECT_N):
                r, c = row + step * dr, column + step * dc
                if not is_valid_position(r, c) or self.grid[r, c] != player_value:
                    break
                count += 1

            if count == CONNECT_N:
                debug.debug(f"Winning run from ({row}, {column_letter(column)}) "
                            f"towards ({dr}, {dc})", "board")
                return True

        return False

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the grid.

        Returns:
            2D numpy array, row 0 at the bottom
        """
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()


if __name__ == "__main__":
    from connect4_replay.debug import DebugLevel

    debug.configure(level=DebugLevel.TRACE)

    board = Board()
    for col, player in [(0, Player.RED), (1, Player.YELLOW)] * 3 + [(0, Player.RED)]:
        won = board.drop(col, player)
        print(board)
        print(f"{player} won: {won}\n")
