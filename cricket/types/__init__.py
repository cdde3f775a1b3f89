"""Data types for Cricket Darts"""

from .game import (
    GamePhase,
    GameState,
    HitOutcome,
    HitStatus,
    Player,
    Target,
    MAX_HIT_COUNT,
    MAX_PLAYERS,
    TARGET_IDS,
    WINNING_SCORE,
)

__all__ = [
    # Game types
    "GamePhase",
    "GameState",
    "HitOutcome",
    "HitStatus",
    "Player",
    "Target",
    # Rule constants
    "MAX_HIT_COUNT",
    "MAX_PLAYERS",
    "TARGET_IDS",
    "WINNING_SCORE",
]
