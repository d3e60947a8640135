"""
errors.py - Exceptions raised by the board engine and move parser
"""

from connect4_replay.utils import COLUMN_LETTERS, PLAYER_NAMES, column_letter


class BoardRuleError(ValueError):
    """A move broke a board rule; the replay stops but does not fail."""

    def __init__(self, message: str, column: int):
        super().__init__(message)
        self.column = column


class InvalidColumnError(BoardRuleError):
    def __init__(self, column: int):
        super().__init__(
            f"Tried to drop piece in non existent column: {column_letter(column)}", column)


class ColumnFullError(BoardRuleError):
    def __init__(self, column: int):
        super().__init__(
            f"Tried to drop a piece into already full column: {column_letter(column)}", column)


class MalformedMoveError(ValueError):
    """A move token did not match the <Column>_<Player> grammar."""

    def __init__(self, token):
        players = ", ".join(name.capitalize() for name in PLAYER_NAMES)
        super().__init__(
            f"Invalid input. Input must be column identifier "
            f"{COLUMN_LETTERS[0]}-{COLUMN_LETTERS[-1]} and player name "
            f"({players}), but input was: {token!r}")
        self.token = token
