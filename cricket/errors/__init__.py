"""Error types for Cricket Darts"""

from .exceptions import CricketError, PlayerNotFoundError, TargetNotFoundError

__all__ = [
    "CricketError",
    "PlayerNotFoundError",
    "TargetNotFoundError",
]
