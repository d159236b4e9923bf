"""
Configuration for the tic-tac-toe move engine.
"""

from dataclasses import dataclass
from typing import Optional


# Names of the difficulty levels (values of engine.difficulty.Difficulty)
DIFFICULTY_LEVELS = ("master", "novice", "random")

# Engine Configuration
ENGINE_CONFIG = {
    'default_level': 'master',          # master | novice | random
    'novice_best_probability': 0.4,     # Novice plays the best move 40% of the time, else the runner-up
    'seed': None,                       # Seed for the default random generator (None = OS entropy)
    'validate_input': True,             # Reject malformed boards with InvalidBoardError
    'log_search_stats': False,          # Log node / cache counters after every search
}


@dataclass(frozen=True)
class EngineConfig:
    """Typed view over ENGINE_CONFIG."""
    default_level: str = 'master'
    novice_best_probability: float = 0.4
    seed: Optional[int] = None
    validate_input: bool = True
    log_search_stats: bool = False

    def __post_init__(self):
        if self.default_level not in DIFFICULTY_LEVELS:
            raise ValueError(
                f"default_level must be one of {list(DIFFICULTY_LEVELS)}, got {self.default_level!r}"
            )
        if not 0.0 <= self.novice_best_probability <= 1.0:
            raise ValueError(
                f"novice_best_probability must be in [0, 1], got {self.novice_best_probability}"
            )

    @classmethod
    def from_dict(cls, config: Optional[dict] = None) -> "EngineConfig":
        """
        Build a config from a dict, falling back to ENGINE_CONFIG for missing keys.

        Args:
            config: Overrides (unknown keys raise ValueError)

        Returns:
            EngineConfig instance
        """
        merged = dict(ENGINE_CONFIG)
        if config:
            unknown = set(config) - set(merged)
            if unknown:
                raise ValueError(f"Unknown engine config keys: {sorted(unknown)}")
            merged.update(config)

        return cls(**merged)


DEFAULT_CONFIG = EngineConfig.from_dict()
