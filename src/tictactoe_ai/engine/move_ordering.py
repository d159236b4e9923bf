"""
Move ordering for alpha-beta search.

Tic-tac-toe has a fixed positional preference that is good enough on its own:

    center (4) > corners (0, 2, 6, 8) > edges (1, 3, 5, 7)

A best move cached in the transposition table for the same position (stored
when an earlier window could not reuse its score) is tried before the fixed
order at interior nodes.

The order never changes the minimax value of a position, but it decides how
early cutoffs happen and which move wins a tie at the root (the selector keeps
the first candidate among equal scores). Center-first tie-breaking is what
makes openings look natural.
"""

from typing import List, Optional, Sequence

from tictactoe_ai.game.tictactoe import EMPTY


CENTER = (4,)
CORNERS = (0, 2, 6, 8)
EDGES = (1, 3, 5, 7)

MOVE_ORDER = CENTER + CORNERS + EDGES


def order_moves(board: Sequence[str], tt_move: Optional[int] = None) -> List[int]:
    """
    Empty cells of the board in search order.

    Args:
        board: 9-cell board
        tt_move: Best move cached for this position (searched first if empty)

    Returns:
        Cell indices sorted by priority (TT move, center, corners, edges)
    """
    moves = [i for i in MOVE_ORDER if board[i] == EMPTY]
    if tt_move is not None and tt_move in moves:
        moves.remove(tt_move)
        moves.insert(0, tt_move)
    return moves


def move_rank(move: int) -> int:
    """Position of a cell in MOVE_ORDER (0 = searched first)."""
    return MOVE_ORDER.index(move)
