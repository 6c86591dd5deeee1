"""
Minesweeper Game - Board Generation
Places bombs on a fixed-size grid and derives the adjacency-count grid
"""

import random
from typing import Iterable, List, Optional, Tuple

from .errors import ConfigurationError

Position = Tuple[int, int]


def validate_dimensions(rows: int, cols: int, bomb_count: int):
    """Reject dimensions and bomb counts that cannot form a playable board"""
    for name, value in (('rows', rows), ('cols', cols), ('bomb_count', bomb_count)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"{name} must be an integer, got {value!r}")

    if rows < 1 or cols < 1:
        raise ConfigurationError(f"Board dimensions must be positive, got {rows}x{cols}")

    # At least one cell must stay safe, otherwise placement never finishes
    if not 0 <= bomb_count < rows * cols:
        raise ConfigurationError(
            f"bomb_count must be in [0, {rows * cols}) for a {rows}x{cols} board, "
            f"got {bomb_count}"
        )


class Board:
    """Immutable bomb map and adjacency-count grid"""

    def __init__(self, rows: int, cols: int, bomb_map: List[List[bool]]):
        validate_dimensions(rows, cols, 0)
        if len(bomb_map) != rows or any(len(row) != cols for row in bomb_map):
            raise ConfigurationError(f"Bomb map does not match a {rows}x{cols} board")

        self.rows = rows
        self.cols = cols
        self._bombs: Tuple[Tuple[bool, ...], ...] = tuple(
            tuple(bool(cell) for cell in row) for row in bomb_map
        )
        self.bomb_count = sum(row.count(True) for row in self._bombs)
        validate_dimensions(rows, cols, self.bomb_count)
        self._counts: Tuple[Tuple[int, ...], ...] = tuple(
            tuple(self._count_adjacent_bombs(row, col) for col in range(cols))
            for row in range(rows)
        )

    @classmethod
    def from_bomb_positions(cls, rows: int, cols: int,
                            positions: Iterable[Position]) -> 'Board':
        """Build a board with bombs at the given (row, col) positions"""
        positions = list(positions)
        validate_dimensions(rows, cols, len(positions))

        bomb_map = [[False] * cols for _ in range(rows)]
        for row, col in positions:
            if not (0 <= row < rows and 0 <= col < cols):
                raise ConfigurationError(f"Bomb position ({row}, {col}) is off the board")
            if bomb_map[row][col]:
                raise ConfigurationError(f"Duplicate bomb position ({row}, {col})")
            bomb_map[row][col] = True

        return cls(rows, cols, bomb_map)

    def in_bounds(self, row: int, col: int) -> bool:
        """Integer coordinates on the board"""
        if not (isinstance(row, int) and isinstance(col, int)):
            return False
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbors(self, row: int, col: int) -> List[Position]:
        """In-bounds cells of the 8-neighbourhood, excluding the cell itself"""
        cells = []
        for r in range(max(0, row - 1), min(self.rows - 1, row + 1) + 1):
            for c in range(max(0, col - 1), min(self.cols - 1, col + 1) + 1):
                if (r, c) != (row, col):
                    cells.append((r, c))
        return cells

    def _count_adjacent_bombs(self, row: int, col: int) -> int:
        return sum(1 for r, c in self.neighbors(row, col) if self._bombs[r][c])

    def is_bomb(self, row: int, col: int) -> bool:
        """Bomb at the cell; False for coordinates off the board"""
        if not self.in_bounds(row, col):
            return False
        return self._bombs[row][col]

    def adjacent_count(self, row: int, col: int) -> int:
        """Bombs around the cell; 0 for coordinates off the board"""
        if not self.in_bounds(row, col):
            return 0
        return self._counts[row][col]

    def bomb_positions(self) -> List[Position]:
        return [(row, col)
                for row in range(self.rows)
                for col in range(self.cols)
                if self._bombs[row][col]]

    @property
    def safe_cell_count(self) -> int:
        return self.rows * self.cols - self.bomb_count


class BoardGenerator:
    """
    Generates boards by rejection sampling.

    Random (row, col) pairs are drawn from the whole board until the requested
    number of distinct cells hold a bomb. The random source only needs
    ``randrange``; pass a seeded ``random.Random`` for reproducible layouts.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def generate(self, rows: int, cols: int, bomb_count: int) -> Board:
        validate_dimensions(rows, cols, bomb_count)

        bomb_map = [[False] * cols for _ in range(rows)]
        placed = 0
        while placed < bomb_count:
            row = self.rng.randrange(rows)
            col = self.rng.randrange(cols)
            if not bomb_map[row][col]:
                bomb_map[row][col] = True
                placed += 1

        return Board(rows, cols, bomb_map)


def generate(rows: int, cols: int, bomb_count: int,
             rng: Optional[random.Random] = None) -> Board:
    """Generate a board using a one-off generator"""
    return BoardGenerator(rng).generate(rows, cols, bomb_count)
