"""
Tests for the headless runner entry point (main.py)
"""

import json
import sys
from unittest.mock import patch

from main import main


def run_main(*argv):
    with patch.object(sys, 'argv', ['main.py', *argv]):
        return main()


def test_zero_bomb_game_is_won(capsys):
    """Test that a bomb-free board is won on the first reveal"""
    exit_code = run_main('--rows', '4', '--cols', '4', '--bombs', '0', '--seed', '1')

    assert exit_code == 0
    assert 'Won after 1 reveal(s)' in capsys.readouterr().out


def test_seeded_game_is_reproducible(capsys):
    first = run_main('--difficulty', 'beginner', '--seed', '5')
    first_out = capsys.readouterr().out
    second = run_main('--difficulty', 'beginner', '--seed', '5')
    second_out = capsys.readouterr().out

    assert first == second
    assert first in (0, 1)
    assert first_out == second_out


def test_json_output(capsys):
    exit_code = run_main('--rows', '2', '--cols', '3', '--bombs', '0', '--seed', '2', '--json')

    out = capsys.readouterr().out
    start = out.index('{')
    end = out.rindex('}') + 1
    state = json.loads(out[start:end])
    assert exit_code == 0
    assert state['is_won'] is True
    assert state['board_size'] == [2, 3]


def test_invalid_board_exit_code(capsys):
    """Test that an unplayable board is reported instead of hanging"""
    exit_code = run_main('--rows', '2', '--cols', '2', '--bombs', '4')

    assert exit_code == 2
    assert 'Invalid board' in capsys.readouterr().out
