"""Main game engine for Cricket Darts"""

from typing import Iterable, Optional
import logging

from cricket.types.game import GamePhase, GameState, HitOutcome, HitStatus, Player
from cricket.game.rules import RulesValidator
from cricket.game.state import StateManager

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Command API for a Cricket match.

    The engine keeps no match state of its own. Every command takes the
    caller's snapshot and returns a new one; the snapshot passed in is never
    modified, so a rejected or failing command leaves it exactly as it was.
    """

    def __init__(self):
        self.rules_validator = RulesValidator()
        self.state_manager = StateManager()

    def create_game(self) -> GameState:
        """Create an empty match in the setup phase."""
        return GameState()

    def seed_players(self, game_state: GameState, names: Iterable[str]) -> GameState:
        """Add each name in turn, as a roster supplied at startup."""
        for name in names:
            game_state = self.add_player(game_state, name)
        return game_state

    def add_player(self, game_state: GameState, name: str) -> GameState:
        """Append a player to the roster, or set a notice explaining why not."""
        new_state = game_state.model_copy(deep=True)

        is_valid, notice = self.rules_validator.can_add_player(name, new_state)
        if not is_valid:
            logger.warning(f"Rejected player: {notice}")
            new_state.notice = notice
            return new_state

        player = self.state_manager.create_player(new_state, name)
        new_state.players.append(player)
        new_state.notice = ""

        logger.info(f"Added player {player.id} ({player.name})")
        return new_state

    def update_player(self, game_state: GameState, player_id: int, new_name: str) -> GameState:
        """
        Rename a player in place.

        The new name is taken as given: it is not checked for emptiness or
        clashes with other players.
        """
        new_state = game_state.model_copy(deep=True)
        idx = self.state_manager.find_player_index(new_state, player_id)

        old_name = new_state.players[idx].name
        new_state.players[idx].name = new_name
        new_state.notice = ""

        logger.info(f"Renamed player {player_id} from {old_name} to {new_name}")
        return new_state

    def remove_player(self, game_state: GameState, player_id: int) -> GameState:
        """Drop a player from the roster. Leader and winner are left as they were."""
        new_state = game_state.model_copy(deep=True)
        idx = self.state_manager.find_player_index(new_state, player_id)

        removed = new_state.players.pop(idx)
        new_state.notice = ""

        logger.info(f"Removed player {removed.id} ({removed.name})")
        return new_state

    def register_hit(
        self,
        game_state: GameState,
        player_id: int,
        target_id: str,
        amount: int = 1
    ) -> HitOutcome:
        """
        Add (or take back) hits on a target for a player.

        Args:
            game_state: Current game state
            player_id: Player who threw
            target_id: One of the scorable zone ids
            amount: +1 for a hit, -1 to undo one

        Returns:
            HitOutcome tagged APPLIED with the new state, or NOOP with the
            untouched input state when the target is closed or empty
        """
        new_state = game_state.model_copy(deep=True)
        idx = self.state_manager.find_player_index(new_state, player_id)
        player = new_state.players[idx]
        target = self.state_manager.find_target(player, target_id)

        is_valid, reason = self.rules_validator.can_register_hit(target, amount)
        if not is_valid:
            logger.debug(f"Ignored hit on {target_id} for player {player_id}: {reason}")
            return HitOutcome(status=HitStatus.NOOP, state=game_state, reason=reason)

        self.state_manager.apply_hit(player, target, amount)
        new_state.notice = ""

        leader = self.state_manager.compute_leader(new_state)
        if leader != new_state.leader:
            logger.debug(f"Leader changed from {new_state.leader} to {leader}")
        new_state.leader = leader

        if self.state_manager.check_winner(new_state, player):
            logger.info(f"Player {player.id} ({player.name}) wins with {player.score}")

        return HitOutcome(status=HitStatus.APPLIED, state=new_state)

    def start_game(self, game_state: GameState) -> GameState:
        """Move from roster setup to scoring."""
        new_state = game_state.model_copy(deep=True)

        is_valid, notice = self.rules_validator.can_start_game(new_state)
        if not is_valid:
            logger.warning(f"Rejected game start: {notice}")
            new_state.notice = notice
            return new_state

        new_state.phase = GamePhase.ON
        new_state.notice = ""

        logger.info(f"Started game with {len(new_state.players)} players")
        return new_state

    def new_game(self, game_state: GameState) -> GameState:
        """
        Go back to roster setup.

        Only the phase is reset. Players keep their names, scores and target
        tallies, and any winner stays recorded.
        """
        new_state = game_state.model_copy(deep=True)
        new_state.phase = GamePhase.NEW
        new_state.notice = ""

        logger.info("Returned to roster setup")
        return new_state

    def get_player(self, game_state: GameState, player_id: int) -> Optional[Player]:
        for player in game_state.players:
            if player.id == player_id:
                return player
        return None

    def get_leader(self, game_state: GameState) -> Optional[Player]:
        if game_state.leader is None:
            return None
        return self.get_player(game_state, game_state.leader)

    def get_winner(self, game_state: GameState) -> Optional[Player]:
        if game_state.winner is None:
            return None
        return self.get_player(game_state, game_state.winner)

    @staticmethod
    def is_phase(game_state: GameState, phase: GamePhase) -> bool:
        return game_state.phase == phase
