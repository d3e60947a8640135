"""Shared fixtures for the connect4_replay test suite."""

from typing import List, Optional, Tuple

import numpy as np
import pytest

from connect4_replay.debug import debug, DebugLevel
from connect4_replay.game.rules import ConnectFourGame
from connect4_replay.utils import GameState, Player

YELLOW_WINS_MOVES = [
    "A_Red", "B_Yellow", "A_Red", "B_Yellow",
    "A_Red", "B_Yellow", "G_Red", "B_Yellow",
]

RED_WINS_MOVES = [
    "A_Red", "B_Yellow", "A_Red", "B_Yellow",
    "A_Red", "B_Yellow", "A_Red",
]

# Fills all 42 cells without four in a row anywhere
DRAW_MOVES = [
    "A_Red", "B_Yellow", "A_Red", "B_Yellow", "B_Red", "A_Yellow", "B_Red",
    "A_Yellow", "A_Red", "B_Yellow", "A_Red", "B_Yellow", "C_Red", "D_Yellow",
    "C_Red", "D_Yellow", "D_Red", "C_Yellow", "D_Red", "C_Yellow", "C_Red",
    "D_Yellow", "C_Red", "D_Yellow", "E_Red", "F_Yellow", "E_Red", "F_Yellow",
    "F_Red", "E_Yellow", "F_Red", "E_Yellow", "E_Red", "F_Yellow", "E_Red",
    "F_Yellow", "G_Red", "G_Yellow", "G_Red", "G_Yellow", "G_Red", "G_Yellow",
]


class RecordingObserver:
    """Keeps every notification it receives."""

    def __init__(self, name: str = "recorder", log: Optional[list] = None):
        self.name = name
        self.calls: List[Tuple[Optional[int], Optional[Player], np.ndarray, GameState]] = []
        self.log = log

    def notify(self, column, player, grid, state):
        self.calls.append((column, player, grid, state))
        if self.log is not None:
            self.log.append(self.name)

    @property
    def states(self) -> List[GameState]:
        return [call[3] for call in self.calls]


@pytest.fixture(autouse=True)
def reset_debug():
    """Restore the shared debug manager after each test."""
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])


@pytest.fixture
def game():
    return ConnectFourGame()


@pytest.fixture
def recorder(game):
    observer = RecordingObserver()
    game.add_observer(observer)
    return observer
