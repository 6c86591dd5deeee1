"""
Minesweeper Game - Error Types
Exceptions raised by board construction and the reveal protocol
"""


class MinegridError(Exception):
    """Base class for all game errors"""


class ConfigurationError(MinegridError, ValueError):
    """Board dimensions, bomb count or bomb layout cannot form a playable board"""


class OutOfRangeError(MinegridError, IndexError):
    """A mutation targeted a cell outside the board"""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(f"Cell ({row}, {col}) is outside the {rows}x{cols} board")
        self.row = row
        self.col = col


class InvalidStateError(MinegridError, RuntimeError):
    """The session no longer accepts reveals"""
