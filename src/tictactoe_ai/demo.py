"""
Demo: pick moves for a board from the command line.

    python -m tictactoe_ai "XOXO....." --player O --all-levels
    tictactoe-ai "____X____" --player O --level novice --seed 7
"""

import argparse
import logging
import sys

import numpy as np

from tictactoe_ai.config import EngineConfig
from tictactoe_ai.engine.alphabeta import NO_MOVE
from tictactoe_ai.engine.difficulty import Difficulty, DifficultySelector
from tictactoe_ai.game.tictactoe import InvalidBoardError, format_board, parse_board


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tictactoe-ai",
        description="Choose a tic-tac-toe move with minimax + alpha-beta"
    )
    parser.add_argument("board", help="9 characters, X / O / . or _ for empty (row-major)")
    parser.add_argument("--player", default="O", type=str.upper, choices=["X", "O"],
                        help="Side the engine plays (default: O)")
    parser.add_argument("--level", default=None, choices=[d.value for d in Difficulty],
                        help="Difficulty level (default: master)")
    parser.add_argument("--all-levels", action="store_true",
                        help="Show the move for every difficulty level")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for novice/random levels")
    parser.add_argument("--stats", action="store_true",
                        help="Log search statistics")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging (root move scores)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        board = parse_board(args.board)
    except InvalidBoardError as e:
        print(f"Invalid board: {e}", file=sys.stderr)
        return 2

    config = EngineConfig.from_dict({'seed': args.seed, 'log_search_stats': args.stats})
    selector = DifficultySelector(rng=np.random.default_rng(args.seed), config=config)

    print(format_board(board))
    print()

    levels = list(Difficulty) if args.all_levels else [Difficulty.parse(args.level or config.default_level)]
    for level in levels:
        move = selector.select(board, args.player, level)
        if move == NO_MOVE:
            print("Game is already over: no move")
            return 0
        print(f"{level.value}: {move}")

    ranking = selector.last_result.candidates
    print("scores (X perspective): " + ", ".join(f"{c.move}={c.score}" for c in ranking))
    return 0


if __name__ == "__main__":
    sys.exit(main())
