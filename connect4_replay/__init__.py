"""
connect4_replay - Replay recorded Connect Four games and classify the outcome

This package provides the board engine, the move sequencer that replays
recorded move tokens, and a small console front end.
"""

# Version number
__version__ = '0.1.0'
