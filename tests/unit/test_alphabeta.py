"""
Unit tests for the alpha-beta search engine.

Tests verify:
1. Move ordering is center, corners, edges
2. Transposition table keys, bounds and statistics
3. Engine finds wins, blocks threats and prefers faster wins
4. Root scores match a plain (unpruned, uncached) minimax
5. The board is restored on every exit path
"""

import random
import sys
from functools import lru_cache
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from tictactoe_ai.config import EngineConfig
from tictactoe_ai.engine.alphabeta import MinimaxEngine, ScoredMove, placed, rank_candidates
from tictactoe_ai.engine.move_ordering import MOVE_ORDER, move_rank, order_moves
from tictactoe_ai.engine.transposition_table import (
    BoundType,
    TranspositionTable,
    classify_bound,
    position_key,
)
from tictactoe_ai.game.tictactoe import empty_cells, evaluate_terminal, opponent

_ = ""


@lru_cache(maxsize=None)
def plain_minimax(cells: tuple, to_move: str, depth: int) -> int:
    """Reference minimax: no pruning, no move ordering."""
    term = evaluate_terminal(cells, depth)
    if term is not None:
        return term
    scores = []
    for i in empty_cells(cells):
        child = cells[:i] + (to_move,) + cells[i + 1:]
        scores.append(plain_minimax(child, opponent(to_move), depth + 1))
    return max(scores) if to_move == "X" else min(scores)


def random_positions(count: int, seed: int = 7):
    """Non-terminal positions reached by random alternating play."""
    rng = random.Random(seed)
    positions = []
    while len(positions) < count:
        board = [_] * 9
        player = "X"
        for _ply in range(rng.randint(0, 7)):
            board[rng.choice(empty_cells(board))] = player
            player = opponent(player)
            if evaluate_terminal(board, 0) is not None:
                break
        if evaluate_terminal(board, 0) is None:
            positions.append((board, player))
    return positions


class TestMoveOrdering:

    def test_center_corners_edges(self):
        assert MOVE_ORDER == (4, 0, 2, 6, 8, 1, 3, 5, 7)
        assert order_moves([_] * 9) == list(MOVE_ORDER)

    def test_skips_occupied_cells(self):
        board = [_, _, "X", _, "O", _, _, _, _]
        assert order_moves(board) == [0, 6, 8, 1, 3, 5, 7]

    def test_move_rank(self):
        assert move_rank(4) == 0
        assert move_rank(7) == 8

    def test_tt_move_searched_first(self):
        board = [_, _, "X", _, "O", _, _, _, _]
        assert order_moves(board, 5) == [5, 0, 6, 8, 1, 3, 7]

    def test_occupied_tt_move_ignored(self):
        board = [_, _, "X", _, "O", _, _, _, _]
        assert order_moves(board, 4) == [0, 6, 8, 1, 3, 5, 7]
        assert order_moves(board, None) == order_moves(board)


class TestTranspositionTable:

    def test_position_key(self):
        board = ["X", "O", "X", "O", _, _, _, _, _]
        assert position_key(board, "O") == "XOXO.....|O"
        assert position_key(board, "O") != position_key(board, "X")
        other = ["X", "O", "X", _, "O", _, _, _, _]
        assert position_key(board, "O") != position_key(other, "O")

    def test_store_and_probe_exact(self):
        tt = TranspositionTable()
        tt.store("k", 7, BoundType.EXACT, best_move=4)

        assert tt.probe("k", -100, 100) == 7
        assert tt.get("k").best_move == 4
        assert "k" in tt
        assert len(tt) == 1

    def test_miss(self):
        tt = TranspositionTable()
        assert tt.probe("missing", -100, 100) is None
        assert tt.get_stats()['misses'] == 1

    def test_lower_bound_respects_window(self):
        tt = TranspositionTable()
        tt.store("k", 5, BoundType.LOWER)

        assert tt.probe("k", -100, 4) == 5      # Cutoff: true value >= 5 >= beta
        assert tt.probe("k", -100, 9) is None   # Not enough to settle the window

    def test_upper_bound_respects_window(self):
        tt = TranspositionTable()
        tt.store("k", -3, BoundType.UPPER)

        assert tt.probe("k", 0, 100) == -3
        assert tt.probe("k", -8, 100) is None

    def test_exact_not_replaced_by_bound(self):
        tt = TranspositionTable()
        tt.store("k", 2, BoundType.EXACT)
        tt.store("k", 6, BoundType.LOWER)

        assert tt.get("k").score == 2
        assert tt.get("k").bound == BoundType.EXACT

    def test_classify_bound(self):
        assert classify_bound(-2, -2, 5) == BoundType.UPPER
        assert classify_bound(5, -2, 5) == BoundType.LOWER
        assert classify_bound(0, -2, 5) == BoundType.EXACT
        assert classify_bound(0, float('-inf'), float('inf')) == BoundType.EXACT

    def test_clear_resets_stats(self):
        tt = TranspositionTable()
        tt.store("k", 1)
        tt.probe("k", -1, 1)
        tt.clear()

        assert len(tt) == 0
        assert tt.get_stats() == {
            'hits': 0, 'misses': 0, 'hit_rate': 0.0, 'stores': 0, 'size_entries': 0,
        }


class TestMinimaxEngine:

    def test_empty_board_opens_center(self):
        result = MinimaxEngine().search([_] * 9, "X")

        assert result.best_move == 4
        assert result.score == 0
        assert len(result.candidates) == 9
        assert all(c.score == 0 for c in result.candidates)
        assert result.moves == list(MOVE_ORDER)  # Ties keep move-ordering precedence

    def test_finds_immediate_win(self):
        board = ["X", "X", _,
                 "O", "O", _,
                 _, _, _]
        result = MinimaxEngine().search(board, "X")

        assert result.best_move == 2
        assert result.score == 9  # Win one ply from the root

    def test_o_finds_immediate_win(self):
        board = ["X", "X", _,
                 "O", "O", _,
                 "X", _, _]
        result = MinimaxEngine().search(board, "O")

        assert result.best_move == 5
        assert result.score == -9

    def test_blocks_and_forks(self):
        board = ["O", "O", _,
                 _, "X", _,
                 _, _, "X"]
        result = MinimaxEngine().search(board, "X")

        # Blocking at 2 also creates two X threats (2-4-6 and 2-5-8)
        assert result.best_move == 2
        assert result.score == 7

    def test_o_double_threat(self):
        board = ["X", "O", "X",
                 "O", _, _,
                 _, _, _]
        result = MinimaxEngine().search(board, "O")

        # Center gives O two threats (1-4-7 and 3-4-5): win on the third ply
        assert result.best_move == 4
        assert result.score == -7
        assert result.score == min(c.score for c in result.candidates)

    def test_terminal_board(self):
        board = ["X", "X", "X",
                 "O", "O", _,
                 _, _, _]
        result = MinimaxEngine().search(board, "O")

        assert result.best_move == -1
        assert result.score == 10
        assert result.candidates == []

    def test_scores_match_plain_minimax(self):
        engine = MinimaxEngine()
        for board, player in random_positions(150):
            result = engine.search(board, player)
            for candidate in result.candidates:
                child = list(board)
                child[candidate.move] = player
                expected = plain_minimax(tuple(child), opponent(player), 1)
                assert candidate.score == expected, (board, player, candidate)

    def test_board_unchanged(self):
        board = ["X", _, _, _, "O", _, _, _, _]
        snapshot = list(board)
        MinimaxEngine(EngineConfig(validate_input=False)).search(board, "X")
        assert board == snapshot

    def test_tuple_board_without_validation(self):
        board = ("X", _, _, _, "O", _, _, _, _)
        result = MinimaxEngine(EngineConfig(validate_input=False)).search(board, "X")
        assert result.best_move in empty_cells(board)

    def test_cache_does_not_leak_between_searches(self):
        engine = MinimaxEngine()
        board = ["X", _, _, _, "O", _, _, _, _]

        first = engine.search(board, "X")
        second = engine.search(board, "X")

        assert first.nodes_searched == second.nodes_searched
        assert first.tt_stats == second.tt_stats
        assert first.candidates == second.candidates

    def test_transposition_table_is_used(self):
        result = MinimaxEngine().search([_] * 9, "X")

        assert result.tt_stats['stores'] > 0
        assert result.tt_stats['hits'] > 0
        assert result.nodes_searched > 0

    def test_pruning_visits_fewer_nodes_than_full_tree(self):
        result = MinimaxEngine().search([_] * 9, "X")
        assert result.nodes_searched < 549945  # Nodes in the unpruned game tree

    def test_cached_best_move_is_legal(self):
        engine = MinimaxEngine()
        board = ["X", _, _, _, "O", _, _, _, _]
        engine.search(board, "X")

        assert len(engine.tt) > 0
        for key, entry in engine.tt.table.items():
            cells = key.split("|")[0]
            assert entry.best_move is not None
            assert cells[entry.best_move] == "."

    def test_get_stats(self):
        engine = MinimaxEngine()
        engine.search(["X"] + [_] * 8, "O")
        stats = engine.get_stats()
        assert stats['nodes_searched'] == engine.nodes_searched
        assert stats['tt_stats']['size_entries'] > 0


class TestScopedMutation:

    def test_placed_restores(self):
        board = [_] * 9
        with placed(board, 3, "X"):
            assert board[3] == "X"
        assert board[3] == _

    def test_placed_restores_on_error(self):
        board = [_] * 9
        with pytest.raises(RuntimeError):
            with placed(board, 0, "O"):
                raise RuntimeError("boom")
        assert board == [_] * 9


def test_rank_candidates():
    candidates = [ScoredMove(4, 0), ScoredMove(0, 8), ScoredMove(2, -5), ScoredMove(1, 8)]

    assert [c.move for c in rank_candidates(candidates, "X")] == [0, 1, 4, 2]
    assert [c.move for c in rank_candidates(candidates, "O")] == [2, 4, 0, 1]
