#!/usr/bin/env python3
"""
Minesweeper - Headless Runner
Plays one game by revealing random hidden cells until it is won or lost
"""

import argparse
import random
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from minegrid import ConfigurationError, GameSession
from minegrid_api import MinesweeperAPI


def build_api(args) -> MinesweeperAPI:
    """Create the game API from a difficulty preset or explicit dimensions"""
    rows, cols, bombs = GameSession.DIFFICULTIES[args.difficulty]
    if args.rows is not None:
        rows = args.rows
    if args.cols is not None:
        cols = args.cols
    if args.bombs is not None:
        bombs = args.bombs
    return MinesweeperAPI(rows, cols, bombs, seed=args.seed)


def play(api: MinesweeperAPI, rng: random.Random) -> dict:
    """Reveal random hidden cells until the game ends, returning the final state"""
    state = api.get_game_state()
    while not state['is_game_over']:
        row, col = rng.choice(api.get_valid_actions())
        result = api.reveal(row, col)
        state = result['state']
        print(f"  reveal ({row}, {col}) -> {result['outcome']}, "
              f"{len(result['newly_revealed'])} cell(s) uncovered")
    return state


def main():
    """Main entry point for the headless runner"""
    parser = argparse.ArgumentParser(
        description="Play a Minesweeper game with random reveals",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --difficulty classic --seed 7
  python main.py --rows 5 --cols 5 --bombs 3 --json
        """
    )

    parser.add_argument('--difficulty',
                        choices=sorted(GameSession.DIFFICULTIES),
                        default='classic',
                        help='Board preset (default: classic)')
    parser.add_argument('--rows', type=int, help='Override preset row count')
    parser.add_argument('--cols', type=int, help='Override preset column count')
    parser.add_argument('--bombs', type=int, help='Override preset bomb count')
    parser.add_argument('--seed',
                        type=int,
                        default=None,
                        help='Seed for bomb placement and move choice (default: random)')
    parser.add_argument('--json', action='store_true', help='Print the final game state as JSON')

    args = parser.parse_args()

    try:
        api = build_api(args)
    except ConfigurationError as e:
        print(f"❌ Invalid board: {e}")
        return 2

    print(f"💣 Minesweeper {api.rows}x{api.cols} with {api.bombs} bombs")
    print("=" * 40)

    try:
        state = play(api, random.Random(args.seed))
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1

    if args.json:
        print(api.export_game_state())

    if state['is_won']:
        print(f"\n✅ Won after {state['action_count']} reveal(s)")
        return 0

    print(f"\n💥 Lost on bomb at {tuple(state['detonated'])} "
          f"with {state['remaining_safe_cells']} safe cell(s) left")
    return 1


if __name__ == "__main__":
    sys.exit(main())
