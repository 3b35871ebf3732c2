"""Fixed ruleset constants for Ouiste/Whist scoring.

The ruleset is not configurable: every game uses the same round shape and
the same point values.
"""

MIN_PLAYERS = 3
MAX_PLAYERS = 6

# --- Round Shape ---
RAMP_UP_MAX = 7  # ascending hand sizes 1..7
FULL_HAND_SIZE = 8  # hold rounds, one per player
RAMP_DOWN_START = 7  # descending hand sizes 7..1

# --- Scoring ---
ZERO_BID_REWARD = 5
ZERO_BID_PENALTY_PER_TRICK = 10
POINTS_PER_TRICK = 10
SLAM_POINTS_PER_TRICK = 20  # bid equal to the whole hand

# --- Setup ---
MAX_NAME_LENGTH = 16


def validate_player_count(player_count: int) -> None:
    """Validate player_count is within the supported range (MIN_PLAYERS to MAX_PLAYERS)."""
    if not (MIN_PLAYERS <= player_count <= MAX_PLAYERS):
        raise ValueError(f"player_count must be {MIN_PLAYERS}-{MAX_PLAYERS}, got {player_count}")
