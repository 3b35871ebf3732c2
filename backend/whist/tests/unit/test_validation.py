from itertools import permutations

import pytest

from whist.logic.enums import ValidationErrorCode
from whist.logic.validation import validate_bets, validate_player_names, validate_tricks


class TestValidateBets:
    def test_accepts_legal_bets(self):
        assert validate_bets([1, 0, 3], hand_size=5, num_players=3) is None

    @pytest.mark.parametrize("bets", sorted(set(permutations([0, 2, 3]))))
    def test_rejects_every_ordering_summing_to_hand_size(self, bets):
        failure = validate_bets(list(bets), hand_size=5, num_players=3)

        assert failure is not None
        assert failure.code == ValidationErrorCode.FORBIDDEN_BET_SUM

    def test_accepts_sum_above_hand_size(self):
        assert validate_bets([3, 3, 3], hand_size=5, num_players=3) is None

    def test_rejects_bet_above_hand_size(self):
        failure = validate_bets([0, 6, 0], hand_size=5, num_players=3)

        assert failure is not None
        assert failure.code == ValidationErrorCode.OUT_OF_RANGE
        assert failure.seat == 1

    def test_rejects_negative_bet(self):
        failure = validate_bets([0, 0, -1], hand_size=5, num_players=3)

        assert failure is not None
        assert failure.code == ValidationErrorCode.OUT_OF_RANGE
        assert failure.seat == 2

    def test_rejects_missing_bet(self):
        failure = validate_bets([0, None, 1], hand_size=5, num_players=3)

        assert failure is not None
        assert failure.code == ValidationErrorCode.INCOMPLETE_INPUT
        assert failure.seat == 1

    @pytest.mark.parametrize("bad", [1.5, "1", True])
    def test_rejects_non_integer_bet(self, bad):
        failure = validate_bets([0, bad, 0], hand_size=5, num_players=3)

        assert failure is not None
        assert failure.code == ValidationErrorCode.OUT_OF_RANGE
        assert failure.seat == 1
        assert "whole number" in failure.message

    def test_rejects_wrong_number_of_bets(self):
        failure = validate_bets([0, 0], hand_size=5, num_players=3)

        assert failure is not None
        assert failure.code == ValidationErrorCode.PLAYER_COUNT_MISMATCH

    def test_failure_message_is_user_readable(self):
        failure = validate_bets([1, 0, 0], hand_size=1, num_players=3)

        assert failure is not None
        assert "cannot equal the number of cards (1)" in failure.message


class TestValidateTricks:
    def test_accepts_tricks_summing_to_hand_size(self):
        assert validate_tricks([2, 2, 1], hand_size=5, num_players=3) is None

    def test_accepts_tricks_summing_below_hand_size(self):
        assert validate_tricks([0, 0, 0], hand_size=5, num_players=3) is None

    def test_rejects_single_count_over_hand_size(self):
        failure = validate_tricks([6, 0, 0], hand_size=5, num_players=3)

        assert failure is not None
        assert failure.code == ValidationErrorCode.TRICK_OVER_LIMIT
        assert failure.seat == 0

    def test_rejects_total_over_hand_size(self):
        failure = validate_tricks([3, 3, 0], hand_size=5, num_players=3)

        assert failure is not None
        assert failure.code == ValidationErrorCode.TRICK_SUM_OVER_LIMIT

    def test_rejects_negative_count(self):
        failure = validate_tricks([0, -1, 0], hand_size=5, num_players=3)

        assert failure is not None
        assert failure.code == ValidationErrorCode.OUT_OF_RANGE

    def test_rejects_missing_count(self):
        failure = validate_tricks([None, 0, 0], hand_size=5, num_players=3)

        assert failure is not None
        assert failure.code == ValidationErrorCode.INCOMPLETE_INPUT


class TestValidatePlayerNames:
    def test_accepts_filled_names(self):
        assert validate_player_names(["Ana", "Ben", "Cleo"]) is None

    def test_rejects_whitespace_only_name(self):
        failure = validate_player_names(["Ana", "   ", "Cleo"])

        assert failure is not None
        assert failure.code == ValidationErrorCode.INCOMPLETE_INPUT
        assert failure.seat == 1

    def test_surrounding_whitespace_does_not_count_toward_length(self):
        assert validate_player_names(["  " + "x" * 16 + "  ", "Ben", "Cleo"]) is None

    def test_rejects_long_name(self):
        failure = validate_player_names(["Ana", "Ben", "x" * 17])

        assert failure is not None
        assert failure.code == ValidationErrorCode.NAME_TOO_LONG
