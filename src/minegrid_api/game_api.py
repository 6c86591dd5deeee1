"""
Minesweeper Game API for Headless Play
Provides a clean interface for scripts and automated players to drive a game
"""

import json
import random
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from minegrid import BOMB, GameSession, GameState, MinegridError

# Visible value of a cell that has not been revealed yet
HIDDEN = -2


class MinesweeperAPI:
    """
    API for automated players to interact with a Minesweeper game.
    Validates coordinates, reports failures as results and keeps an action history.
    """

    def __init__(self, rows: int = 9, cols: int = 9, bombs: int = 10,
                 seed: Optional[int] = None):
        """
        Initialize the game API

        Args:
            rows: Number of rows in the game board
            cols: Number of columns in the game board
            bombs: Number of bombs to place
            seed: Seed for bomb placement; None draws from OS entropy
        """
        self.rows = rows
        self.cols = cols
        self.bombs = bombs
        self.rng = random.Random(seed) if seed is not None else random.Random()
        self.session = GameSession(rows, cols, bombs, self.rng)
        self.action_history: List[Dict[str, Any]] = []

    def reset_game(self) -> Dict[str, Any]:
        """
        Discard the current session and start a new one with the same settings

        Returns:
            Initial game state
        """
        self.session = GameSession(self.rows, self.cols, self.bombs, self.rng)
        self.action_history.clear()
        return self.get_game_state()

    def reveal(self, row: int, col: int) -> Dict[str, Any]:
        """
        Reveal the cell at the specified coordinates

        Args:
            row: Row coordinate (0-indexed)
            col: Column coordinate (0-indexed)

        Returns:
            Result with success flag, outcome kind, newly revealed cells and the updated state
        """
        action_record = {
            'row': row,
            'col': col,
            'game_state_before': self.session.state.value
        }

        result: Dict[str, Any] = {
            'success': False,
            'coordinates': (row, col),
        }

        try:
            outcome = self.session.reveal(row, col)
        except MinegridError as e:
            result['error'] = str(e)
            action_record.update({'success': False, 'error': str(e)})
        else:
            result.update({
                'success': True,
                'outcome': outcome.kind.value,
                'newly_revealed': [(cell.row, cell.col, cell.value) for cell in outcome.newly_revealed],
            })
            if outcome.disclosure:
                result['disclosure'] = [(cell.row, cell.col, cell.value) for cell in outcome.disclosure]
            action_record.update({'success': True, 'outcome': outcome.kind.value, 'error': None})

        action_record['game_state_after'] = self.session.state.value
        self.action_history.append(action_record)

        result['state'] = self.get_game_state()
        return result

    def get_visible_board(self) -> List[List[int]]:
        """Board as a player sees it (HIDDEN, BOMB or the adjacency count)"""
        visible_board = []
        for row in range(self.rows):
            visible_row = []
            for col in range(self.cols):
                if not self.session.is_revealed(row, col):
                    visible_row.append(HIDDEN)
                elif self.session.is_bomb(row, col):
                    visible_row.append(BOMB)
                else:
                    visible_row.append(self.session.adjacent_count(row, col))
            visible_board.append(visible_row)
        return visible_board

    def get_game_state(self) -> Dict[str, Any]:
        """
        Get the current complete game state

        Returns:
            JSON-serialisable game state information
        """
        state = self.session.state
        is_game_over = self.session.is_over

        full_board = None
        if is_game_over:
            # Bomb layout is only exposed once the game has ended
            full_board = [
                [BOMB if self.session.is_bomb(row, col) else self.session.adjacent_count(row, col)
                 for col in range(self.cols)]
                for row in range(self.rows)
            ]

        return {
            'board_size': (self.rows, self.cols),
            'total_bombs': self.bombs,
            'game_state': state.value,
            'cells_revealed': self.session.revealed_count,
            'remaining_safe_cells': self.session.remaining_safe_cells,
            'detonated': self.session.detonated,
            'visible_board': self.get_visible_board(),  # -2=hidden, -1=bomb, 0-8=counts
            'full_board': full_board,
            'action_count': len(self.action_history),
            'is_game_over': is_game_over,
            'is_won': state == GameState.WON,
            'is_lost': state == GameState.LOST
        }

    def get_board_array(self) -> np.ndarray:
        """
        Get the board as a numpy array for automated players

        Returns:
            3D numpy array: [rows, cols, channels]
            Channels:
            0: Visible value (-2=hidden, -1=bomb, 0-8=counts)
            1: Is revealed (0 or 1)
        """
        visible_board = np.array(self.get_visible_board(), dtype=np.float32)
        revealed_channel = (visible_board != HIDDEN).astype(np.float32)
        return np.stack([visible_board, revealed_channel], axis=-1)

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get every cell that can still be revealed

        Returns:
            List of (row, col) tuples, empty once the game is over
        """
        if self.session.is_over:
            return []

        return [(row, col)
                for row in range(self.rows)
                for col in range(self.cols)
                if not self.session.is_revealed(row, col)]

    def export_game_state(self) -> str:
        """
        Export current game state as JSON string

        Returns:
            JSON string of game state
        """
        return json.dumps(self.get_game_state(), indent=2)

    def get_action_history(self) -> List[Dict[str, Any]]:
        """Get a copy of all actions taken"""
        return self.action_history.copy()
