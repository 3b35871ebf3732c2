"""
Semantic validation of round inputs.

Each check returns the first ValidationFailure it finds, or None when the
input may be applied. Raw entries are int or None (a field left empty).
"""

from collections.abc import Sequence

from whist.logic.enums import ValidationErrorCode
from whist.logic.rules import MAX_NAME_LENGTH
from whist.logic.types import ValidationFailure


def _check_entries(
    values: Sequence[int | None],
    num_players: int,
    label: str,
) -> ValidationFailure | None:
    """Check the input has one filled-in whole number per player."""
    if len(values) != num_players:
        return ValidationFailure(
            code=ValidationErrorCode.PLAYER_COUNT_MISMATCH,
            message=f"Expected {num_players} {label}, got {len(values)}",
        )
    for seat, value in enumerate(values):
        if value is None:
            return ValidationFailure(
                code=ValidationErrorCode.INCOMPLETE_INPUT,
                message=f"Missing {label} for seat {seat}",
                seat=seat,
            )
        if isinstance(value, bool) or not isinstance(value, int):
            return ValidationFailure(
                code=ValidationErrorCode.OUT_OF_RANGE,
                message=f"{label.capitalize()} for seat {seat} must be a whole number, got {value!r}",
                seat=seat,
            )
    return None


def validate_bets(bets: Sequence[int | None], hand_size: int, num_players: int) -> ValidationFailure | None:
    """
    Check bids for a round.

    Every bid must be within 0 to hand_size, and the bids together must not
    add up to hand_size (somebody always has to miss).
    """
    failure = _check_entries(bets, num_players, "bets")
    if failure is not None:
        return failure

    for seat, bet in enumerate(bets):
        if not (0 <= bet <= hand_size):  # type: ignore[operator]
            return ValidationFailure(
                code=ValidationErrorCode.OUT_OF_RANGE,
                message=f"Bet {bet} for seat {seat} must be between 0 and {hand_size}",
                seat=seat,
            )

    total = sum(bets)  # type: ignore[arg-type]
    if total == hand_size:
        return ValidationFailure(
            code=ValidationErrorCode.FORBIDDEN_BET_SUM,
            message=f"Total bets cannot equal the number of cards ({hand_size})",
        )
    return None


def validate_tricks(tricks: Sequence[int | None], hand_size: int, num_players: int) -> ValidationFailure | None:
    """Check trick counts for a round: each within 0 to hand_size and no more than hand_size in total."""
    failure = _check_entries(tricks, num_players, "tricks")
    if failure is not None:
        return failure

    for seat, won in enumerate(tricks):
        if won < 0:  # type: ignore[operator]
            return ValidationFailure(
                code=ValidationErrorCode.OUT_OF_RANGE,
                message=f"Tricks {won} for seat {seat} cannot be negative",
                seat=seat,
            )
        if won > hand_size:  # type: ignore[operator]
            return ValidationFailure(
                code=ValidationErrorCode.TRICK_OVER_LIMIT,
                message=f"Tricks {won} for seat {seat} exceed the {hand_size} cards dealt",
                seat=seat,
            )

    total = sum(tricks)  # type: ignore[arg-type]
    if total > hand_size:
        return ValidationFailure(
            code=ValidationErrorCode.TRICK_SUM_OVER_LIMIT,
            message=f"Total tricks {total} exceed the {hand_size} cards dealt",
        )
    return None


def validate_player_names(names: Sequence[str]) -> ValidationFailure | None:
    """Check every (trimmed) player name is filled in and short enough."""
    for seat, name in enumerate(names):
        trimmed = name.strip()
        if not trimmed:
            return ValidationFailure(
                code=ValidationErrorCode.INCOMPLETE_INPUT,
                message=f"Missing name for seat {seat}",
                seat=seat,
            )
        if len(trimmed) > MAX_NAME_LENGTH:
            return ValidationFailure(
                code=ValidationErrorCode.NAME_TOO_LONG,
                message=f"Name for seat {seat} is longer than {MAX_NAME_LENGTH} characters",
                seat=seat,
            )
    return None
