"""
Exceptions for Cricket Darts.

User input problems (bad names, full roster, starting without players) are
not exceptions: they come back as a notice on the returned state. The errors
here mean the caller handed the engine an identifier that does not exist in
the snapshot it passed, usually because it kept a stale id around.
"""


class CricketError(Exception):
    """Base class for engine faults."""


class PlayerNotFoundError(CricketError, LookupError):
    """No player on the roster has the requested id."""

    def __init__(self, player_id: int):
        self.player_id = player_id
        super().__init__(f"didn't find player id ({player_id})")


class TargetNotFoundError(CricketError, LookupError):
    """The target id is not one of the scorable zones."""

    def __init__(self, target_id: str):
        self.target_id = target_id
        super().__init__(f"didn't find target id ({target_id})")
