"""Rules validation for Cricket Darts commands"""

from typing import Any, Optional
from cricket.types.game import GameState, Target, MAX_PLAYERS


class RulesValidator:
    """Validates that commands follow Cricket rules"""

    @staticmethod
    def can_add_player(name: Any, game_state: GameState) -> tuple[bool, Optional[str]]:
        """
        Check if a player with this name can join the roster.
        Returns (is_valid, notice). The first failing check wins.
        """
        if not name:
            return False, f"invalid player name ({name})"

        if len(game_state.players) >= MAX_PLAYERS:
            return False, f"cannot add player, reached max-players ({MAX_PLAYERS})"

        wanted = name.lower()
        if any(player.name.lower() == wanted for player in game_state.players):
            return False, f"player name already exists ({name})"

        return True, None

    @staticmethod
    def can_start_game(game_state: GameState) -> tuple[bool, Optional[str]]:
        """Check if the match can move into scoring"""
        if not game_state.players:
            return False, "cannot start game, need at least 1 player"
        return True, None

    @staticmethod
    def can_register_hit(target: Target, amount: int) -> tuple[bool, Optional[str]]:
        """
        Check if a hit changes the target.

        A refused hit is a normal tap on a closed or empty zone, so the reason
        is meant for logs and callers, never for the notice.
        """
        if amount > 0 and target.is_closed:
            return False, "target is closed"
        if amount < 0 and target.hit_count == 0:
            return False, "target is empty"
        return True, None
