"""
Difficulty-weighted move selection on top of the minimax engine.

Levels:
- master: always the top-ranked move (never loses)
- novice: top-ranked move with probability 0.4, runner-up otherwise
- random: any legal move, uniformly, ignoring the ranking

The random source only has to provide random() -> float in [0, 1).
numpy.random.Generator and random.Random both qualify; pass a seeded one to
make novice/random play reproducible.
"""

import logging
from enum import Enum
from typing import Mapping, Optional

import numpy as np

from tictactoe_ai.config import DEFAULT_CONFIG, EngineConfig
from tictactoe_ai.engine.alphabeta import NO_MOVE, MinimaxEngine, SearchResult

logger = logging.getLogger(__name__)


class Difficulty(str, Enum):
    MASTER = "master"
    NOVICE = "novice"
    RANDOM = "random"

    @classmethod
    def parse(cls, level) -> "Difficulty":
        """Accept a Difficulty or its (case-insensitive) name."""
        if isinstance(level, cls):
            return level
        try:
            return cls(str(level).lower())
        except ValueError:
            raise ValueError(
                f"Unknown difficulty level {level!r}; expected one of {[d.value for d in cls]}"
            ) from None


class DifficultySelector:
    """
    Picks the move returned to the caller from a ranked root search.

    Each call runs a fresh search (new transposition table), so a selector
    carries no position state between calls; only the random generator
    advances.
    """

    def __init__(self, rng=None, config: Optional[EngineConfig] = None):
        """
        Args:
            rng: Random source with random() -> float in [0, 1);
                defaults to numpy.random.default_rng(config.seed)
            config: Engine configuration (defaults to ENGINE_CONFIG)
        """
        self.config = config or DEFAULT_CONFIG
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.last_result: Optional[SearchResult] = None

    def select(self, board, ai_player: str, level=None) -> int:
        """
        Choose a move for ai_player.

        Args:
            board: 9-cell board (left unchanged)
            ai_player: "X" or "O"
            level: Difficulty or its name (default from config)

        Returns:
            Cell index 0-8, or -1 if the board is already finished
        """
        level = Difficulty.parse(level if level is not None else self.config.default_level)

        engine = MinimaxEngine(self.config)
        result = engine.search(board, ai_player)
        self.last_result = result

        candidates = result.candidates
        if not candidates:
            return NO_MOVE

        if level is Difficulty.RANDOM:
            index = min(int(self.rng.random() * len(candidates)), len(candidates) - 1)
            move = candidates[index].move
        elif level is Difficulty.NOVICE and len(candidates) >= 2:
            roll = self.rng.random()
            pick = 0 if roll < self.config.novice_best_probability else 1
            move = candidates[pick].move
            logger.debug("Novice roll %.3f picked rank %d", roll, pick)
        else:
            move = candidates[0].move

        logger.debug(
            "%s plays %d at level %s (ranking: %s)",
            ai_player, move, level.value,
            ", ".join(f"{c.move}:{c.score}" for c in candidates)
        )
        return move


def get_best_move(
    board,
    ai_player: str,
    level=None,
    *,
    options: Optional[Mapping] = None,
    rng=None,
    config: Optional[EngineConfig] = None
) -> int:
    """
    Pick a move for ai_player on a 3x3 tic-tac-toe board.

    Args:
        board: 9 cells, row-major, each "", "X" or "O"
        ai_player: Side the engine plays ("X" or "O")
        level: "master" (default), "novice" or "random", or an options
            mapping such as {"level": "novice"}
        options: Options mapping passed by keyword
        rng: Random source for novice/random levels
        config: Engine configuration

    Returns:
        Index of the chosen empty cell, or -1 if the board is already finished

    Raises:
        InvalidBoardError: malformed board (when validation is enabled)
        InvalidPlayerError: ai_player is not "X" or "O"
        ValueError: unknown difficulty level
    """
    if isinstance(level, Mapping):
        options, level = level, None
    if level is None and options:
        level = options.get("level")
    return DifficultySelector(rng=rng, config=config).select(board, ai_player, level)
