import pytest

from whist.logic.rounds import generate_rounds
from whist.logic.rules import FULL_HAND_SIZE, MAX_PLAYERS, MIN_PLAYERS


class TestGenerateRounds:
    @pytest.mark.parametrize("player_count", range(MIN_PLAYERS, MAX_PLAYERS + 1))
    def test_shape_for_every_supported_player_count(self, player_count):
        rounds = generate_rounds(player_count)

        assert len(rounds) == 7 + player_count + 7
        assert rounds == (1, 2, 3, 4, 5, 6, 7, *([8] * player_count), 7, 6, 5, 4, 3, 2, 1)

    def test_three_players_play_seventeen_rounds(self):
        assert len(generate_rounds(3)) == 17

    def test_hold_rounds_use_full_hand(self):
        rounds = generate_rounds(5)
        assert rounds.count(FULL_HAND_SIZE) == 5

    def test_every_hand_size_is_positive(self):
        assert all(size >= 1 for size in generate_rounds(6))

    def test_same_count_gives_same_sequence(self):
        assert generate_rounds(4) == generate_rounds(4)

    @pytest.mark.parametrize("player_count", [0, 2, 7, -1])
    def test_rejects_unsupported_player_count(self, player_count):
        with pytest.raises(ValueError, match="player_count must be 3-6"):
            generate_rounds(player_count)
