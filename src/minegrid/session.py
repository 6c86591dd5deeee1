"""
Minesweeper Game - Core Game Logic
Tracks revealed cells, runs the flood-fill reveal and detects win/loss
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board, BoardGenerator, Position
from .errors import ConfigurationError, InvalidStateError, OutOfRangeError

# Display value reported for a bomb cell
BOMB = -1


class GameState(Enum):
    """Enumeration for session outcomes"""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class RevealKind(Enum):
    """Result of a single reveal call"""
    CONTINUING = "continuing"
    WON = "won"
    LOST = "lost"
    ALREADY_REVEALED = "already_revealed"


@dataclass(frozen=True)
class RevealedCell:
    """A cell uncovered by a reveal, with its adjacency count or BOMB"""
    row: int
    col: int
    value: int

    @property
    def is_bomb(self) -> bool:
        return self.value == BOMB


@dataclass(frozen=True)
class RevealOutcome:
    """What a reveal call changed"""
    kind: RevealKind
    newly_revealed: Tuple[RevealedCell, ...] = ()
    # Whole board, only filled in when the reveal lost the game
    disclosure: Tuple[RevealedCell, ...] = ()


class GameSession:
    """Manages the reveal state and outcome of one game"""

    # Difficulty presets (rows, cols, bombs)
    DIFFICULTIES = {
        'beginner': (9, 9, 10),
        'classic': (10, 10, 25),
        'intermediate': (16, 16, 40),
        'expert': (16, 30, 99)
    }

    def __init__(self, rows: int, cols: int, bomb_count: int,
                 rng: Optional[random.Random] = None):
        self._init_from_board(BoardGenerator(rng).generate(rows, cols, bomb_count))

    @classmethod
    def from_board(cls, board: Board) -> 'GameSession':
        """Start a session on an already generated board"""
        session = cls.__new__(cls)
        session._init_from_board(board)
        return session

    @classmethod
    def from_difficulty(cls, difficulty: str,
                        rng: Optional[random.Random] = None) -> 'GameSession':
        """Start a session using one of the DIFFICULTIES presets"""
        if difficulty not in cls.DIFFICULTIES:
            raise ConfigurationError(
                f"Unknown difficulty {difficulty!r}, expected one of {sorted(cls.DIFFICULTIES)}"
            )
        rows, cols, bombs = cls.DIFFICULTIES[difficulty]
        return cls(rows, cols, bombs, rng)

    def _init_from_board(self, board: Board):
        self.board = board
        self.rows = board.rows
        self.cols = board.cols
        self.bomb_count = board.bomb_count
        self.state = GameState.IN_PROGRESS
        self.revealed_count = 0
        self.detonated: Optional[Position] = None
        self._revealed: List[List[bool]] = [[False] * self.cols for _ in range(self.rows)]

    def is_bomb(self, row: int, col: int) -> bool:
        return self.board.is_bomb(row, col)

    def adjacent_count(self, row: int, col: int) -> int:
        return self.board.adjacent_count(row, col)

    def is_revealed(self, row: int, col: int) -> bool:
        if not self.board.in_bounds(row, col):
            return False
        return self._revealed[row][col]

    @property
    def is_over(self) -> bool:
        return self.state in (GameState.WON, GameState.LOST)

    @property
    def remaining_safe_cells(self) -> int:
        return self.board.safe_cell_count - self.revealed_count

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal a cell and handle game logic.

        Raises OutOfRangeError for coordinates off the board and
        InvalidStateError once the game is won or lost; neither touches the
        session. Revealing a zero-count cell also reveals the connected
        zero-count region and its numbered border.
        """
        if not self.board.in_bounds(row, col):
            raise OutOfRangeError(row, col, self.rows, self.cols)

        if self.is_over:
            raise InvalidStateError(f"Game is already {self.state.value}")

        if self._revealed[row][col]:
            return RevealOutcome(RevealKind.ALREADY_REVEALED)

        if self.board.is_bomb(row, col):
            self._revealed[row][col] = True
            self.detonated = (row, col)
            self.state = GameState.LOST
            return RevealOutcome(
                RevealKind.LOST,
                newly_revealed=(RevealedCell(row, col, BOMB),),
                disclosure=self._disclose()
            )

        newly_revealed = self._flood_reveal(row, col)

        if self.revealed_count == self.board.safe_cell_count:
            self.state = GameState.WON
            return RevealOutcome(RevealKind.WON, newly_revealed)

        return RevealOutcome(RevealKind.CONTINUING, newly_revealed)

    def _flood_reveal(self, row: int, col: int) -> Tuple[RevealedCell, ...]:
        """Reveal a safe cell, expanding across zero-count cells with a work list"""
        revealed = []
        self._revealed[row][col] = True
        stack = [(row, col)]

        while stack:
            r, c = stack.pop()
            count = self.board.adjacent_count(r, c)
            revealed.append(RevealedCell(r, c, count))
            self.revealed_count += 1

            if count != 0:
                continue

            for nr, nc in self.board.neighbors(r, c):
                # Marked on push so each cell enters the stack once
                if not self._revealed[nr][nc] and not self.board.is_bomb(nr, nc):
                    self._revealed[nr][nc] = True
                    stack.append((nr, nc))

        return tuple(revealed)

    def _disclose(self) -> Tuple[RevealedCell, ...]:
        """Every cell of the board with its bomb or count value"""
        return tuple(
            RevealedCell(row, col, BOMB if self.board.is_bomb(row, col)
                         else self.board.adjacent_count(row, col))
            for row in range(self.rows)
            for col in range(self.cols)
        )


def new_session(rows: int, cols: int, bomb_count: int,
                rng: Optional[random.Random] = None) -> GameSession:
    """Construct a fresh session; play again by calling this again"""
    return GameSession(rows, cols, bomb_count, rng)
