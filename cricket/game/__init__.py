"""Game logic for Cricket Darts"""

from .engine import GameEngine
from .rules import RulesValidator
from .state import StateManager

__all__ = [
    "GameEngine",
    "RulesValidator",
    "StateManager",
]
