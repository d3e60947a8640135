"""
connect4_replay.game - Core game mechanics for the Connect Four replayer

This package contains the board engine, the move parser and the sequencer
that turns a recorded move list into a game result.
"""

from connect4_replay.game.board import Board
from connect4_replay.game.errors import (BoardRuleError, ColumnFullError,
                                         InvalidColumnError, MalformedMoveError)
from connect4_replay.game.rules import (ConnectFourGame, Move, ResultObserver,
                                        parse_move, resolve_moves)

__all__ = ['Board', 'ConnectFourGame', 'Move', 'ResultObserver', 'parse_move',
           'resolve_moves', 'BoardRuleError', 'ColumnFullError',
           'InvalidColumnError', 'MalformedMoveError']
