"""Line-oriented console front end for Cricket Darts"""

import logging
import shlex
from typing import Iterable, List, Optional

from cricket.errors import CricketError
from cricket.game.engine import GameEngine
from cricket.types.game import GamePhase, GameState, TARGET_IDS, MAX_HIT_COUNT

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  add NAME             add a player (setup)
  rename ID NAME       rename a player (setup)
  remove ID            remove a player (setup)
  hit ID TARGET [-]    register a hit, or take one back with '-'
  start                start scoring (setup)
  new                  back to roster setup
  show                 print the board
  help                 this text
  quit                 leave"""

SETUP_COMMANDS = {"add", "rename", "remove", "start"}
SCORING_COMMANDS = {"hit", "new"}

# Tally marks for 0..3 hits
HIT_MARKS = ["", "/", "X", "(X)"]


def render_roster(game_state: GameState) -> str:
    if not game_state.players:
        return "No players yet."
    return "\n".join(f"  [{p.id}] {p.name}" for p in game_state.players)


def render_board(game_state: GameState) -> str:
    """Target grid with one column per player."""
    name_width = max([len(p.name) for p in game_state.players] + [6])
    header = "Target  " + "".join(p.name.ljust(name_width + 2) for p in game_state.players)
    lines = [header]
    for index, target_id in enumerate(TARGET_IDS):
        row = target_id.ljust(8)
        for player in game_state.players:
            hits = min(player.targets[index].hit_count, MAX_HIT_COUNT)
            row += HIT_MARKS[hits].ljust(name_width + 2)
        lines.append(row.rstrip())
    lines.append("Score   " + "".join(str(p.score).ljust(name_width + 2) for p in game_state.players).rstrip())
    return "\n".join(lines)


def render(engine: GameEngine, game_state: GameState) -> str:
    """Choose the view by phase, the way the scoreboard app does."""
    parts: List[str] = []
    if game_state.notice:
        parts.append(f"! {game_state.notice}")

    if engine.is_phase(game_state, GamePhase.NEW):
        parts.append("Players:")
        parts.append(render_roster(game_state))
    else:
        parts.append(render_board(game_state))
        leader = engine.get_leader(game_state)
        if leader:
            parts.append(f"Leader: {leader.name}")

    if engine.is_phase(game_state, GamePhase.OVER):
        winner = engine.get_winner(game_state)
        parts.append(f"Winner: {winner.name if winner else game_state.winner}")

    return "\n".join(parts)


class ConsoleSession:
    """Holds the latest snapshot and turns text commands into engine calls."""

    def __init__(self, engine: Optional[GameEngine] = None, demo_players: Iterable[str] = ()):
        self.engine = engine or GameEngine()
        self.state = self.engine.seed_players(self.engine.create_game(), demo_players)
        self.finished = False

    def execute(self, line: str) -> str:
        """Run one command line and return what to print."""
        try:
            args = shlex.split(line)
        except ValueError as e:
            return f"error: {e}"
        if not args:
            return ""

        command, params = args[0].lower(), args[1:]
        try:
            return self._dispatch(command, params)
        except CricketError as e:
            logger.error(f"Command failed: {line!r}: {e}")
            return f"error: {e}"
        except ValueError:
            return f"error: bad arguments for '{command}', try 'help'"

    def _dispatch(self, command: str, params: List[str]) -> str:
        engine = self.engine

        if command == "help":
            return HELP_TEXT
        if command == "quit":
            self.finished = True
            return "bye"
        if command == "show":
            return render(engine, self.state)

        # Roster commands belong to setup, scoring commands to the board
        if command in SETUP_COMMANDS and not engine.is_phase(self.state, GamePhase.NEW):
            return "(not in setup)"
        if command in SCORING_COMMANDS and engine.is_phase(self.state, GamePhase.NEW):
            return "(not in scoring)"

        if command == "add" and params:
            self.state = engine.add_player(self.state, " ".join(params))
        elif command == "rename" and len(params) >= 2:
            self.state = engine.update_player(self.state, int(params[0]), " ".join(params[1:]))
        elif command == "remove" and len(params) == 1:
            self.state = engine.remove_player(self.state, int(params[0]))
        elif command == "hit" and len(params) in (2, 3):
            if len(params) == 3 and params[2] != "-":
                raise ValueError(params[2])
            amount = -1 if len(params) == 3 else 1
            outcome = engine.register_hit(self.state, int(params[0]), params[1].upper(), amount)
            self.state = outcome.state
            if not outcome.applied:
                return f"({outcome.reason})"
        elif command == "start":
            self.state = engine.start_game(self.state)
        elif command == "new":
            self.state = engine.new_game(self.state)
        else:
            raise ValueError(command)

        return render(engine, self.state)
