"""Game state models for Cricket Darts"""

from enum import Enum
from typing import List, Dict, Any, Optional
from pydantic import BaseModel, Field


# Scorable zones, in display order. "B" is the bullseye.
TARGET_IDS: List[str] = ["20", "19", "18", "17", "16", "15", "B"]
MAX_PLAYERS = 4
MAX_HIT_COUNT = 3
WINNING_SCORE = 21


class GamePhase(str, Enum):
    """Phases of a Cricket match"""
    NEW = "new"
    ON = "on"
    OVER = "over"


class HitStatus(str, Enum):
    """Result tag of a hit registration"""
    APPLIED = "applied"
    NOOP = "noop"


class Target(BaseModel):
    """Hit tally for one scorable zone"""
    id: str = Field(..., description="One of the fixed target ids")
    hit_count: int = Field(0, ge=0, le=MAX_HIT_COUNT)

    @property
    def is_closed(self) -> bool:
        return self.hit_count >= MAX_HIT_COUNT


class Player(BaseModel):
    """A player on the roster"""
    id: int = Field(..., ge=0, description="Unique id, never reused within a state lineage")
    name: str
    score: int = 0
    targets: List[Target] = Field(
        default_factory=lambda: [Target(id=target_id) for target_id in TARGET_IDS]
    )


class GameState(BaseModel):
    """Current state of a Cricket match"""
    phase: GamePhase = Field(GamePhase.NEW)
    players: List[Player] = Field(default_factory=list, description="Roster in insertion order")
    leader: Optional[int] = Field(None, description="Id of the leading player")
    winner: Optional[int] = Field(None, description="Id of the player who reached the winning score")
    notice: str = Field("", description="Latest validation message, empty after a successful command")
    next_player_id: int = Field(0, ge=0, description="Id handed to the next added player")

    def scoreboard(self) -> Dict[str, Any]:
        """Plain view of the state for display."""
        return {
            "phase": self.phase.value,
            "leader": self.leader,
            "winner": self.winner,
            "notice": self.notice,
            "players": [
                {
                    "id": player.id,
                    "name": player.name,
                    "score": player.score,
                    "targets": {t.id: t.hit_count for t in player.targets},
                }
                for player in self.players
            ],
        }


class HitOutcome(BaseModel):
    """Result of registering a hit: the resulting state and whether it changed"""
    status: HitStatus
    state: GameState
    reason: Optional[str] = Field(None, description="Why nothing happened, for no-ops")

    @property
    def applied(self) -> bool:
        return self.status == HitStatus.APPLIED
