"""Round sequence generation: the hand size dealt in every round of a game."""

from whist.logic.rules import FULL_HAND_SIZE, RAMP_DOWN_START, RAMP_UP_MAX, validate_player_count


def generate_rounds(player_count: int) -> tuple[int, ...]:
    """
    Return the ordered hand sizes for a whole game.

    The game climbs from one card to RAMP_UP_MAX, holds at FULL_HAND_SIZE
    for one round per player, then descends from RAMP_DOWN_START back to one.
    """
    validate_player_count(player_count)
    ramp_up = range(1, RAMP_UP_MAX + 1)
    hold = (FULL_HAND_SIZE,) * player_count
    ramp_down = range(RAMP_DOWN_START, 0, -1)
    return (*ramp_up, *hold, *ramp_down)
