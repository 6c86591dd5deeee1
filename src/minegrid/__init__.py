"""
Game package initialization
"""

from .board import Board, BoardGenerator, generate
from .errors import ConfigurationError, InvalidStateError, MinegridError, OutOfRangeError
from .session import BOMB, GameSession, GameState, RevealedCell, RevealKind, RevealOutcome, new_session

__all__ = [
    'Board', 'BoardGenerator', 'generate',
    'GameSession', 'GameState', 'RevealKind', 'RevealOutcome', 'RevealedCell', 'BOMB', 'new_session',
    'MinegridError', 'ConfigurationError', 'OutOfRangeError', 'InvalidStateError'
]
