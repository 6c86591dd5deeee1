"""
Headless API package for Minesweeper
Lets scripts and automated players drive a game without a window
"""

from .game_api import HIDDEN, MinesweeperAPI

__all__ = ['MinesweeperAPI', 'HIDDEN']
