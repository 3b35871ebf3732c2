"""
Round scoring for Ouiste/Whist.

Each player's points depend only on their own bid, their own tricks and the
shared hand size:
- zero bid: +5 when no trick is taken, otherwise -10 per trick taken
- bid met: +10 per bid trick (+20 when the bid equals the whole hand)
- bid missed: -10 per trick of difference (-20 when the bid equals the whole hand)
"""

from collections.abc import Sequence

from whist.logic.rules import (
    POINTS_PER_TRICK,
    SLAM_POINTS_PER_TRICK,
    ZERO_BID_PENALTY_PER_TRICK,
    ZERO_BID_REWARD,
)


def is_slam_bid(bet: int, hand_size: int) -> bool:
    """True if the bid claims every trick of the hand."""
    return bet == hand_size


def score_player(bet: int, won: int, hand_size: int) -> int:
    """Points for one player in one round."""
    if bet == 0:
        if won == 0:
            return ZERO_BID_REWARD
        return -ZERO_BID_PENALTY_PER_TRICK * won

    rate = SLAM_POINTS_PER_TRICK if is_slam_bid(bet, hand_size) else POINTS_PER_TRICK
    if won == bet:
        return bet * rate
    return -abs(won - bet) * rate


def score_round(bets: Sequence[int], tricks: Sequence[int], hand_size: int) -> tuple[int, ...]:
    """
    Return each player's points for a round, indexed like the inputs.

    Raises:
        ValueError: If bets and tricks have different lengths

    """
    if len(bets) != len(tricks):
        raise ValueError(f"bets and tricks must have the same length, got {len(bets)} and {len(tricks)}")
    return tuple(score_player(bet, won, hand_size) for bet, won in zip(bets, tricks, strict=True))
