"""
rules.py - Move parsing and replay of recorded Connect Four games

This module provides:
1. parse_move, which turns a token such as "C_Red" into a Move
2. ConnectFourGame, which replays a list of tokens on a Board, classifies the
   result and notifies registered observers after every state change
"""

from typing import Iterable, List, NamedTuple, Optional, Protocol

import numpy as np

from connect4_replay.debug import debug
from connect4_replay.game.board import Board
from connect4_replay.game.errors import BoardRuleError, MalformedMoveError
from connect4_replay.utils import (ROWS, COLS, COLUMN_LETTERS, MOVE_PATTERN, PLAYER_NAMES,
                                   GameState, Player)


class Move(NamedTuple):
    column: int
    player: Player


class ResultObserver(Protocol):
    """Anything with a notify method can watch a replay."""

    def notify(self, column: Optional[int], player: Optional[Player],
               grid: np.ndarray, state: GameState) -> None:
        ...


def parse_move(token: str) -> Move:
    """
    Parse a move token of the form <Column>_<Player>.

    Both parts are case-insensitive, so "a_red" and "A_RED" both give
    Move(0, Player.RED).

    Raises:
        MalformedMoveError: token does not match the grammar
    """
    if not isinstance(token, str):
        raise MalformedMoveError(token)

    match = MOVE_PATTERN.fullmatch(token)
    if match is None:
        raise MalformedMoveError(token)

    letter, name = match.groups()
    return Move(COLUMN_LETTERS.index(letter.upper()), PLAYER_NAMES[name.lower()])


class ConnectFourGame:
    """
    Replays a recorded move list on a fresh board.

    A game object is meant to resolve one move list; create a new one for the
    next game.
    """

    def __init__(self):
        debug.debug("Initializing ConnectFourGame", "rules")
        self.board = Board()
        self.observers: List[ResultObserver] = []

    def add_observer(self, observer: ResultObserver) -> None:
        self.observers.append(observer)

    def remove_observer(self, observer: ResultObserver) -> None:
        """Remove the first registration of observer; unknown observers are ignored."""
        if observer in self.observers:
            self.observers.remove(observer)

    def _notify_observers(self, column: Optional[int], player: Optional[Player],
                          state: GameState) -> None:
        grid = self.board.get_state()
        for observer in self.observers:
            observer.notify(column, player, grid, state)

    def resolve(self, moves: Iterable[str]) -> GameState:
        """
        Replay moves in order and classify the outcome.

        Args:
            moves: Move tokens such as ["A_Red", "B_Yellow"]

        Returns:
            The winner's state, DRAW when exactly ROWS * COLS moves were given
            without a win, otherwise ONGOING

        Raises:
            MalformedMoveError: a token is malformed; moves before it stay applied
        """
        moves = list(moves)
        debug.debug(f"Resolving {len(moves)} moves", "rules")

        won = False
        column: Optional[int] = None
        player: Optional[Player] = None

        debug.start_timer("resolve")
        try:
            for token in moves:
                column, player = parse_move(token)
                try:
                    won = self.board.drop(column, player)
                except BoardRuleError as e:
                    debug.error(f"Error: {e}", "rules")
                    break

                if won:
                    break

                self._notify_observers(column, player, GameState.ONGOING)
        finally:
            debug.end_timer("resolve", "rules")

        if won:
            state = GameState.win_for(player)
            debug.info(f"{player} wins after {self.board.move_count} moves", "rules")
            self._notify_observers(column, player, state)
            return state

        if len(moves) == ROWS * COLS:
            debug.info("Game ends in a draw", "rules")
            self._notify_observers(column, player, GameState.DRAW)
            return GameState.DRAW

        # Observers see DRAW for an unfinished game; the return value is ONGOING.
        debug.info(f"Game unfinished after {self.board.move_count} moves", "rules")
        self._notify_observers(column, player, GameState.DRAW)
        return GameState.ONGOING

    # Older name for resolve
    find_winner = resolve


def resolve_moves(moves: Iterable[str], observers: Iterable[ResultObserver] = ()) -> GameState:
    """Resolve moves on a new game with the given observers registered."""
    game = ConnectFourGame()
    for observer in observers:
        game.add_observer(observer)
    return game.resolve(moves)
