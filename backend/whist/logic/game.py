"""
Game progression for Ouiste/Whist score keeping.

The session moves BET -> COLLECT_TRICKS -> BET ... -> FINISHED. Transitions
take the current GameSession and return a TransitionResult: either the next
session, or the unchanged session with a ValidationFailure explaining why
the input was refused. Nothing is mutated in place.
"""

from collections.abc import Sequence
from typing import NamedTuple

import structlog

from whist.logic.enums import GamePhase, ValidationErrorCode
from whist.logic.exceptions import InvalidPlayersError
from whist.logic.rounds import generate_rounds
from whist.logic.rules import MAX_PLAYERS, MIN_PLAYERS
from whist.logic.state import GameSession, Player, RoundRecord
from whist.logic.types import PlayerStanding, ValidationFailure
from whist.logic.validation import validate_bets, validate_player_names, validate_tricks

logger = structlog.get_logger()


class TransitionResult(NamedTuple):
    """
    Outcome of a submit operation.

    On success error is None and session is the new state. On rejection
    session is the input session, untouched, and error says what to fix.
    """

    session: GameSession
    error: ValidationFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def start_session(player_names: Sequence[str]) -> GameSession:
    """
    Start a fresh game for the given players, seated in order.

    Names are trimmed. Scores start at zero and the first round opens for bets.

    Raises:
        InvalidPlayersError: If the player count is outside 3-6 or a name is blank or too long

    """
    names = [name.strip() for name in player_names]
    if not (MIN_PLAYERS <= len(names) <= MAX_PLAYERS):
        raise InvalidPlayersError(f"A game needs {MIN_PLAYERS}-{MAX_PLAYERS} players, got {len(names)}")
    failure = validate_player_names(names)
    if failure is not None:
        raise InvalidPlayersError(failure.message)

    session = GameSession(
        players=tuple(Player(seat=seat, name=name) for seat, name in enumerate(names)),
        round_spec=generate_rounds(len(names)),
        cumulative_scores=(0,) * len(names),
    )
    logger.info("game started", players=names, total_rounds=session.total_rounds)
    return session


def _reject(session: GameSession, failure: ValidationFailure, action: str) -> TransitionResult:
    logger.debug(
        "input rejected",
        action=action,
        code=failure.code,
        reason=failure.message,
        round_number=session.round_number,
        phase=session.phase,
    )
    return TransitionResult(session=session, error=failure)


def _wrong_phase(session: GameSession, action: str) -> ValidationFailure:
    return ValidationFailure(
        code=ValidationErrorCode.WRONG_PHASE,
        message=f"Cannot {action} while the game is in phase {session.phase.value}",
    )


def submit_bets(session: GameSession, bets: Sequence[int | None]) -> TransitionResult:
    """
    Lock the bids for the current round and open it for trick counts.

    Scores do not change until the tricks are submitted.
    """
    if session.phase != GamePhase.BET:
        return _reject(session, _wrong_phase(session, "submit bets"), "submit_bets")

    failure = validate_bets(bets, session.hand_size, session.num_players)
    if failure is not None:
        return _reject(session, failure, "submit_bets")

    locked = tuple(bet for bet in bets if bet is not None)
    new_session = session.model_copy(update={"phase": GamePhase.COLLECT_TRICKS, "pending_bets": locked})
    logger.info(
        "bets locked",
        round_number=session.round_number,
        hand_size=session.hand_size,
        bets=list(locked),
    )
    return TransitionResult(session=new_session)


def submit_tricks(session: GameSession, tricks: Sequence[int | None]) -> TransitionResult:
    """
    Score the current round from the locked bids and the tricks won.

    Appends the round to the history, adds its points to the cumulative
    scores, then opens the next round for bets or finishes the game after
    the last round.
    """
    if session.phase != GamePhase.COLLECT_TRICKS or session.pending_bets is None:
        return _reject(session, _wrong_phase(session, "submit tricks"), "submit_tricks")

    failure = validate_tricks(tricks, session.hand_size, session.num_players)
    if failure is not None:
        return _reject(session, failure, "submit_tricks")

    record = RoundRecord.build(
        bets=session.pending_bets,
        tricks=tuple(won for won in tricks if won is not None),
        hand_size=session.hand_size,
    )
    scores = tuple(total + points for total, points in zip(session.cumulative_scores, record.points, strict=True))
    updates: dict[str, object] = {
        "cumulative_scores": scores,
        "rounds": (*session.rounds, record),
        "pending_bets": None,
    }

    is_last_round = session.current_round_index + 1 == session.total_rounds
    if is_last_round:
        updates["phase"] = GamePhase.FINISHED
    else:
        updates["phase"] = GamePhase.BET
        updates["current_round_index"] = session.current_round_index + 1

    new_session = session.model_copy(update=updates)
    logger.info(
        "round scored",
        round_number=session.round_number,
        hand_size=session.hand_size,
        points=list(record.points),
        scores=list(scores),
    )
    if is_last_round:
        logger.info(
            "game finished",
            scores=list(scores),
            winners=[new_session.players[seat].name for seat in get_winners(new_session)],
        )
    return TransitionResult(session=new_session)


def get_winners(session: GameSession) -> tuple[int, ...]:
    """Return the seats sharing the highest cumulative score. Ties are not broken."""
    top = max(session.cumulative_scores)
    return tuple(seat for seat, score in enumerate(session.cumulative_scores) if score == top)


def get_standings(session: GameSession) -> tuple[PlayerStanding, ...]:
    """
    Return players ordered by score, best first.

    Equal scores keep seat order and share a rank (1, 1, 3, ...).
    """
    order = sorted(range(session.num_players), key=lambda seat: -session.cumulative_scores[seat])
    standings: list[PlayerStanding] = []
    for position, seat in enumerate(order):
        score = session.cumulative_scores[seat]
        rank = standings[-1].rank if standings and standings[-1].score == score else position + 1
        standings.append(PlayerStanding(seat=seat, name=session.players[seat].name, score=score, rank=rank))
    return tuple(standings)
