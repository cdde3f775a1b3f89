"""State management for Cricket Darts"""

from typing import Optional
from cricket.errors import PlayerNotFoundError, TargetNotFoundError
from cricket.types.game import GamePhase, GameState, Player, Target, MAX_HIT_COUNT, WINNING_SCORE


class StateManager:
    """Manages lookups and derived values on a game state"""

    @staticmethod
    def find_player_index(game_state: GameState, player_id: int) -> int:
        """Position of the player on the roster, raising if absent"""
        for index, player in enumerate(game_state.players):
            if player.id == player_id:
                return index
        raise PlayerNotFoundError(player_id)

    @staticmethod
    def find_target(player: Player, target_id: str) -> Target:
        for target in player.targets:
            if target.id == target_id:
                return target
        raise TargetNotFoundError(target_id)

    @staticmethod
    def create_player(game_state: GameState, name: str) -> Player:
        """Build a fresh player and advance the id counter"""
        player = Player(id=game_state.next_player_id, name=name)
        game_state.next_player_id += 1
        return player

    @staticmethod
    def apply_hit(player: Player, target: Target, amount: int) -> None:
        """Move the target tally and the score by amount."""
        target.hit_count = min(max(target.hit_count + amount, 0), MAX_HIT_COUNT)
        player.score += amount

    @staticmethod
    def compute_leader(game_state: GameState) -> Optional[int]:
        """
        Find the player with the highest score.

        Ties go to the player who joined earlier: a later player only takes
        over with a strictly greater score.
        """
        leader: Optional[Player] = None
        for player in game_state.players:
            if leader is None or player.score > leader.score:
                leader = player
        return leader.id if leader else None

    @staticmethod
    def check_winner(game_state: GameState, player: Player) -> bool:
        """Declare the player winner if they sit exactly on the winning score"""
        if player.score != WINNING_SCORE:
            return False
        game_state.winner = player.id
        game_state.phase = GamePhase.OVER
        return True
