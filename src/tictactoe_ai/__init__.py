"""
Tic-tac-toe move engine with master, novice and random difficulty levels.

    >>> from tictactoe_ai import get_best_move
    >>> get_best_move(["", "", "", "", "", "", "", "", ""], "X")
    4
"""

from tictactoe_ai.engine import (
    Difficulty,
    DifficultySelector,
    MinimaxEngine,
    SearchResult,
    get_best_move,
)
from tictactoe_ai.game import InvalidBoardError, InvalidPlayerError, evaluate_terminal

__version__ = "0.1"

__all__ = [
    'Difficulty',
    'DifficultySelector',
    'MinimaxEngine',
    'SearchResult',
    'get_best_move',
    'InvalidBoardError',
    'InvalidPlayerError',
    'evaluate_terminal',
]
