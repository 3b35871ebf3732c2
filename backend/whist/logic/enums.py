"""
String enum definitions for score keeping concepts.
"""

from enum import Enum


class GamePhase(str, Enum):
    """Phase of a score keeping session."""

    BET = "bet"
    COLLECT_TRICKS = "collect_tricks"
    FINISHED = "finished"


class ValidationErrorCode(str, Enum):
    """Reasons a submitted round input is rejected."""

    OUT_OF_RANGE = "out_of_range"
    FORBIDDEN_BET_SUM = "forbidden_bet_sum"
    TRICK_OVER_LIMIT = "trick_over_limit"
    TRICK_SUM_OVER_LIMIT = "trick_sum_over_limit"
    INCOMPLETE_INPUT = "incomplete_input"
    WRONG_PHASE = "wrong_phase"
    PLAYER_COUNT_MISMATCH = "player_count_mismatch"
    NAME_TOO_LONG = "name_too_long"
