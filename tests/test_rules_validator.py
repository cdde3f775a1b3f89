"""Tests covering the Cricket rules validator."""

from cricket.game.rules import RulesValidator
from cricket.types.game import Target


def test_add_player_accepts_new_name(game_state_factory):
    state = game_state_factory(names=["Alice"])
    valid, notice = RulesValidator.can_add_player("Bob", state)
    assert valid and notice is None


def test_add_player_rejects_falsy_names_first(game_state_factory):
    state = game_state_factory(names=["A", "B", "C", "D"])

    valid, notice = RulesValidator.can_add_player("", state)
    assert not valid
    assert notice == "invalid player name ()"

    valid, notice = RulesValidator.can_add_player(None, state)
    assert not valid
    assert notice == "invalid player name (None)"


def test_add_player_rejects_duplicate_ignoring_case(game_state_factory):
    state = game_state_factory(names=["Alice"])

    valid, notice = RulesValidator.can_add_player("ALICE", state)
    assert not valid
    assert notice == "player name already exists (ALICE)"


def test_start_game_needs_a_player(game_state_factory):
    rules = RulesValidator()

    valid, notice = rules.can_start_game(game_state_factory(names=[]))
    assert not valid
    assert notice == "cannot start game, need at least 1 player"

    valid, notice = rules.can_start_game(game_state_factory(names=["Alice"]))
    assert valid and notice is None


def test_hit_guards():
    rules = RulesValidator()

    assert rules.can_register_hit(Target(id="20", hit_count=2), 1) == (True, None)
    assert rules.can_register_hit(Target(id="20", hit_count=3), 1) == (False, "target is closed")
    assert rules.can_register_hit(Target(id="20", hit_count=3), -1) == (True, None)
    assert rules.can_register_hit(Target(id="20", hit_count=0), -1) == (False, "target is empty")
    assert rules.can_register_hit(Target(id="20", hit_count=0), 1) == (True, None)


def test_duplicate_check_uses_simple_lowercase(game_state_factory):
    state = game_state_factory(names=["Straße"])

    valid, notice = RulesValidator.can_add_player("STRASSE", state)
    assert valid and notice is None

    valid, notice = RulesValidator.can_add_player("STRAßE", state)
    assert not valid
