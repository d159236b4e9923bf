"""
Transposition table for caching alpha-beta search results.

The same tic-tac-toe position is reachable through many move orders, so the
search memoizes each position's score under an exact key (board + side to
move). Depth is not part of the key: within one search the ply is fixed by
the number of filled cells.

Scores produced at a pruned node are only bounds on the true value. Every
entry records which kind of value it holds so that a later probe only reuses
it when the current alpha-beta window makes it safe:
- EXACT: true minimax value
- LOWER: true value >= stored score (search stopped on a beta cutoff)
- UPPER: true value <= stored score (every move failed low)

The table lives for a single top-level search; clear it before each one.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Sequence

from tictactoe_ai.game.tictactoe import EMPTY


class BoundType(Enum):
    """Type of bound stored in transposition table entry."""
    EXACT = 0
    LOWER = 1
    UPPER = 2


@dataclass
class TTEntry:
    """Cached score for one position."""
    score: int
    bound: BoundType
    best_move: Optional[int] = None


def position_key(board: Sequence[str], to_move: str) -> str:
    """
    Exact position key, e.g. "XOXO.....|O".

    Two boards differing in any cell or in the side to move never share a key.
    """
    return "".join(cell if cell != EMPTY else "." for cell in board) + "|" + to_move


def classify_bound(score: float, alpha: float, beta: float) -> BoundType:
    """
    Bound type of a fail-soft search result for the window it was searched with.

    Args:
        score: Value returned by the search
        alpha: Alpha at node entry
        beta: Beta at node entry
    """
    if score <= alpha:
        return BoundType.UPPER
    if score >= beta:
        return BoundType.LOWER
    return BoundType.EXACT


class TranspositionTable:
    """
    Dict-backed transposition table keyed by position_key().

    Unbounded: a full tic-tac-toe search visits a few thousand positions at most.
    """

    def __init__(self):
        self.table: Dict[str, TTEntry] = {}

        # Statistics
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def __len__(self) -> int:
        return len(self.table)

    def __contains__(self, key: str) -> bool:
        return key in self.table

    def probe(self, key: str, alpha: float, beta: float) -> Optional[int]:
        """
        Look up a cached score usable inside the window (alpha, beta).

        Args:
            key: Position key
            alpha: Current alpha bound
            beta: Current beta bound

        Returns:
            Cached score, or None on a miss or when the stored bound does not
            settle the current window
        """
        entry = self.table.get(key)

        if entry is None:
            self.misses += 1
            return None

        if (
            entry.bound == BoundType.EXACT
            or (entry.bound == BoundType.LOWER and entry.score >= beta)
            or (entry.bound == BoundType.UPPER and entry.score <= alpha)
        ):
            self.hits += 1
            return entry.score

        self.misses += 1
        return None

    def store(
        self,
        key: str,
        score: int,
        bound: BoundType = BoundType.EXACT,
        best_move: Optional[int] = None
    ):
        """
        Store a search result.

        An EXACT entry is never replaced by a bound for the same position.

        Args:
            key: Position key
            score: Score or bound (X's perspective)
            bound: Type of bound
            best_move: Best move found at this position (None if unknown)
        """
        existing = self.table.get(key)
        if existing is not None and existing.bound == BoundType.EXACT and bound != BoundType.EXACT:
            return

        self.table[key] = TTEntry(score=score, bound=bound, best_move=best_move)
        self.stores += 1

    def get(self, key: str) -> Optional[TTEntry]:
        """Raw entry lookup (no statistics, no bound check)."""
        return self.table.get(key)

    def clear(self):
        """Drop all entries and reset counters (call before every root search)."""
        self.table.clear()
        self._reset_stats()

    def _reset_stats(self):
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def get_stats(self) -> dict:
        """
        Get transposition table statistics.

        Returns:
            Dictionary with hits, misses, hit rate, stores and size
        """
        total_queries = self.hits + self.misses
        hit_rate = self.hits / total_queries if total_queries > 0 else 0.0

        return {
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': hit_rate,
            'stores': self.stores,
            'size_entries': len(self.table),
        }
