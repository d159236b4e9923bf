"""
Tic-tac-toe board rules: lines, terminal evaluation and input checks.
"""

from tictactoe_ai.game.tictactoe import (
    EMPTY,
    PLAYERS,
    LINES,
    InvalidBoardError,
    InvalidPlayerError,
    evaluate_terminal,
    winner,
    empty_cells,
    is_terminal,
    opponent,
    validate_board,
    validate_player,
    parse_board,
    format_board,
)

__all__ = [
    'EMPTY',
    'PLAYERS',
    'LINES',
    'InvalidBoardError',
    'InvalidPlayerError',
    'evaluate_terminal',
    'winner',
    'empty_cells',
    'is_terminal',
    'opponent',
    'validate_board',
    'validate_player',
    'parse_board',
    'format_board',
]
