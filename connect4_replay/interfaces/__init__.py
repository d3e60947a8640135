"""
connect4_replay.interfaces - Console front end for replaying games
"""

from connect4_replay.interfaces.cli import ConsoleView, ReplayCLI

__all__ = ['ConsoleView', 'ReplayCLI']
