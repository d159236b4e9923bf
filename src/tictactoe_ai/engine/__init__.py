"""
Search engine for tic-tac-toe.

Components:
- Move ordering (center, corners, edges)
- Transposition table keyed by board + side to move
- Alpha-beta minimax scored from X's perspective
- Difficulty selector (master / novice / random) and get_best_move()
"""

from tictactoe_ai.engine.move_ordering import MOVE_ORDER, order_moves, move_rank
from tictactoe_ai.engine.transposition_table import TranspositionTable, BoundType, TTEntry, position_key
from tictactoe_ai.engine.alphabeta import MinimaxEngine, SearchResult, ScoredMove, NO_MOVE
from tictactoe_ai.engine.difficulty import Difficulty, DifficultySelector, get_best_move

__all__ = [
    'MOVE_ORDER',
    'order_moves',
    'move_rank',
    'TranspositionTable',
    'BoundType',
    'TTEntry',
    'position_key',
    'MinimaxEngine',
    'SearchResult',
    'ScoredMove',
    'NO_MOVE',
    'Difficulty',
    'DifficultySelector',
    'get_best_move',
]
