#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four replayer

Usage:
    python run.py                          # replay the built-in sample game
    python run.py A_Red B_Yellow A_Red     # replay the given moves
    python run.py --show-board --debug A_Red B_Yellow
"""

import sys

from connect4_replay.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
