"""Typed domain exceptions for contract violations.

Per-round input problems (bad bets, bad trick counts) are never raised:
they come back as ValidationFailure results from the transition functions.
The exceptions here cover callers that break the session contract, such as
starting a game with an invalid roster or resuming from a damaged record.
"""


class GameRuleError(Exception):
    """Base exception for score keeping contract violations."""


class InvalidPlayersError(GameRuleError):
    """Player roster is unusable (wrong count, blank or over-long names)."""


class CorruptHistoryError(GameRuleError):
    """A persisted history entry cannot be turned back into a session."""
