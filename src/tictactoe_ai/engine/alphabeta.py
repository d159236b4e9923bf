"""
Minimax search with alpha-beta pruning for tic-tac-toe.

Scores are always from X's perspective: X maximizes, O minimizes. The full
game tree is at most 9 plies deep, so the search always runs to the end of
the game (no depth limit, no time budget, no iterative deepening).

Algorithm overview:

    def minimax(board, to_move, alpha, beta, depth):
        if terminal(board):
            return terminal_score(board, depth)

        if (hit := tt.probe(board, to_move, alpha, beta)) is not None:
            return hit

        best = -inf if to_move == X else +inf
        for move in ordered_moves(board, tt.best_move(board, to_move)):
            with placed(board, move, to_move):
                score = minimax(board, opponent, alpha, beta, depth + 1)
            if to_move == X:
                best = max(best, score); alpha = max(alpha, best)
            else:
                best = min(best, score); beta = min(beta, best)
            if alpha >= beta:
                break  # cutoff

        tt.store(board, to_move, best)
        return best

The board is mutated in place and restored by a context manager, so it is
back to its original contents on every exit path: normal return, cutoff, or
an exception raised further down.
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import List, MutableSequence, Optional

from tictactoe_ai.config import DEFAULT_CONFIG, EngineConfig
from tictactoe_ai.engine.move_ordering import order_moves, move_rank
from tictactoe_ai.engine.transposition_table import (
    TranspositionTable,
    classify_bound,
    position_key,
)
from tictactoe_ai.game.tictactoe import (
    EMPTY,
    evaluate_terminal,
    opponent,
    validate_board,
    validate_player,
)

logger = logging.getLogger(__name__)


SCORE_INF = float('inf')
NO_MOVE = -1


@dataclass
class ScoredMove:
    """A root move and the score of the position it leads to."""
    move: int
    score: int


@dataclass
class SearchResult:
    """Result of a root search."""
    best_move: int
    score: Optional[int]
    candidates: List[ScoredMove] = field(default_factory=list)
    nodes_searched: int = 0
    time_ms: int = 0
    tt_stats: dict = field(default_factory=dict)

    @property
    def moves(self) -> List[int]:
        """Ranked root moves, best first."""
        return [c.move for c in self.candidates]


@contextmanager
def placed(board: MutableSequence[str], cell: int, symbol: str):
    """Temporarily put symbol on an empty cell; always restore it."""
    board[cell] = symbol
    try:
        yield board
    finally:
        board[cell] = EMPTY


def rank_candidates(candidates: List[ScoredMove], player: str) -> List[ScoredMove]:
    """
    Order root candidates best-first for player.

    X prefers high scores, O low scores. Equal scores keep move-ordering
    precedence (center, corners, edges).
    """
    sign = -1 if player == "X" else 1
    return sorted(candidates, key=lambda c: (sign * c.score, move_rank(c.move)))


class MinimaxEngine:
    """
    Exhaustive minimax engine with alpha-beta pruning and a transposition table.

    One engine owns one transposition table. search() clears it first, so
    nothing leaks between root searches; use a separate engine per thread.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Initialize the engine.

        Args:
            config: Engine configuration (defaults to ENGINE_CONFIG)
        """
        self.config = config or DEFAULT_CONFIG
        self.tt = TranspositionTable()
        self.nodes_searched = 0

    def search(self, board, player: str) -> SearchResult:
        """
        Score every legal move for player and rank them.

        Args:
            board: 9-cell board; a list is mutated during the search and
                restored before returning, other sequences are copied
            player: Side to move ("X" or "O")

        Returns:
            SearchResult with ranked candidates; best_move is -1 when the
            board is already finished
        """
        start = time.perf_counter()
        self.tt.clear()
        self.nodes_searched = 0

        if self.config.validate_input:
            validate_player(player)
            board = validate_board(board)
        elif not isinstance(board, list):
            board = list(board)

        terminal = evaluate_terminal(board, 0)
        if terminal is not None:
            logger.debug("Board %s is already finished (score %d)", position_key(board, player), terminal)
            return SearchResult(
                best_move=NO_MOVE,
                score=terminal,
                tt_stats=self.tt.get_stats()
            )

        other = opponent(player)
        candidates = []
        for move in order_moves(board):
            with placed(board, move, player):
                score = self.minimax(board, other, -SCORE_INF, SCORE_INF, 1)
            candidates.append(ScoredMove(move, score))
            logger.debug("Root move %d for %s scores %d", move, player, score)

        ranked = rank_candidates(candidates, player)
        elapsed_ms = int((time.perf_counter() - start) * 1000)

        result = SearchResult(
            best_move=ranked[0].move if ranked else NO_MOVE,
            score=ranked[0].score if ranked else None,
            candidates=ranked,
            nodes_searched=self.nodes_searched,
            time_ms=elapsed_ms,
            tt_stats=self.tt.get_stats()
        )

        logger.log(
            logging.INFO if self.config.log_search_stats else logging.DEBUG,
            "Searched %d nodes in %dms (tt hits=%d misses=%d stores=%d)",
            result.nodes_searched, result.time_ms, result.tt_stats['hits'],
            result.tt_stats['misses'], result.tt_stats['stores']
        )
        return result

    def minimax(
        self,
        board: MutableSequence[str],
        to_move: str,
        alpha: float,
        beta: float,
        depth: int
    ) -> int:
        """
        Alpha-beta minimax.

        Args:
            board: Board to search (mutated and restored)
            to_move: Player to move at this node
            alpha: Lower bound X is already guaranteed
            beta: Upper bound O is already guaranteed
            depth: Plies from the root

        Returns:
            Score from X's perspective
        """
        self.nodes_searched += 1

        term = evaluate_terminal(board, depth)
        if term is not None:
            return term

        key = position_key(board, to_move)
        hit = self.tt.probe(key, alpha, beta)
        if hit is not None:
            return hit

        alpha_orig, beta_orig = alpha, beta
        maximizing = to_move == "X"
        best = -SCORE_INF if maximizing else SCORE_INF
        best_move = None
        next_player = opponent(to_move)

        entry = self.tt.get(key)
        tt_move = entry.best_move if entry is not None else None

        for move in order_moves(board, tt_move):
            with placed(board, move, to_move):
                score = self.minimax(board, next_player, alpha, beta, depth + 1)

            if maximizing:
                if score > best:
                    best, best_move = score, move
                alpha = max(alpha, best)
            else:
                if score < best:
                    best, best_move = score, move
                beta = min(beta, best)

            if alpha >= beta:
                break  # Cutoff

        self.tt.store(key, best, classify_bound(best, alpha_orig, beta_orig), best_move)
        return best

    def get_stats(self) -> dict:
        """Get statistics of the last search."""
        return {
            'nodes_searched': self.nodes_searched,
            'tt_stats': self.tt.get_stats(),
        }
