"""State builders shared by score keeper tests."""

from collections.abc import Sequence

from whist.logic.game import start_session, submit_bets, submit_tricks
from whist.logic.scoring import score_round
from whist.logic.state import GameSession, RoundRecord

DEFAULT_NAMES = ("Ana", "Ben", "Cleo")


def create_session(names: Sequence[str] = DEFAULT_NAMES) -> GameSession:
    return start_session(names)


def legal_bets(hand_size: int, num_players: int) -> list[int]:
    """Bets that never sum to the hand size: everybody bids zero."""
    return [0] * num_players


def legal_tricks(hand_size: int, num_players: int) -> list[int]:
    """Seat 0 takes every trick."""
    return [hand_size] + [0] * (num_players - 1)


def play_round(session: GameSession, bets: Sequence[int], tricks: Sequence[int]) -> GameSession:
    """Submit bets then tricks, failing the test if either is rejected."""
    result = submit_bets(session, bets)
    assert result.error is None, result.error
    result = submit_tricks(result.session, tricks)
    assert result.error is None, result.error
    return result.session


def play_rounds(session: GameSession, count: int) -> GameSession:
    """Play count rounds with legal default inputs."""
    for _ in range(count):
        n = session.num_players
        session = play_round(session, legal_bets(session.hand_size, n), legal_tricks(session.hand_size, n))
    return session


def assert_points_consistent(session: GameSession) -> None:
    """Every cached points tuple equals the scoring of its bets and tricks, and totals add up."""
    totals = [0] * session.num_players
    for record in session.rounds:
        assert record.points == score_round(record.bets, record.tricks, record.hand_size)
        totals = [t + p for t, p in zip(totals, record.points, strict=True)]
    assert tuple(totals) == session.cumulative_scores


def make_record(bets: Sequence[int], tricks: Sequence[int], hand_size: int) -> RoundRecord:
    return RoundRecord.build(bets=tuple(bets), tricks=tuple(tricks), hand_size=hand_size)
