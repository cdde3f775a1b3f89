"""Shared test fixtures for Cricket game logic."""

from collections.abc import Callable
from typing import Dict, Iterable, Optional

import pytest

from cricket.game.engine import GameEngine
from cricket.types.game import GamePhase, GameState, Player, Target, TARGET_IDS


@pytest.fixture
def engine() -> GameEngine:
    return GameEngine()


@pytest.fixture
def game_state_factory() -> Callable[..., GameState]:
    """Factory fixture that builds customizable game states for tests."""

    def _factory(
        *,
        names: Optional[Iterable[str]] = None,
        scores: Optional[Dict[str, int]] = None,
        hits: Optional[Dict[str, Dict[str, int]]] = None,
        phase: GamePhase = GamePhase.ON,
        leader: Optional[int] = None,
        winner: Optional[int] = None,
    ) -> GameState:
        names = ["Alice", "Bob"] if names is None else list(names)
        scores = scores or {}
        hits = hits or {}

        players = []
        for player_id, name in enumerate(names):
            tallies = hits.get(name, {})
            players.append(Player(
                id=player_id,
                name=name,
                score=scores.get(name, 0),
                targets=[Target(id=t, hit_count=tallies.get(t, 0)) for t in TARGET_IDS],
            ))

        return GameState(
            phase=phase,
            players=players,
            leader=leader,
            winner=winner,
            next_player_id=len(players),
        )

    return _factory
