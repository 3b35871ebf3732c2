"""
Game state models for Ouiste/Whist score keeping.

All models are frozen. Transitions in whist.logic.game build new instances
with model_copy instead of mutating the current one.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from whist.logic.enums import GamePhase
from whist.logic.rules import MAX_NAME_LENGTH
from whist.logic.scoring import score_round


class Player(BaseModel):
    """A seated player. Seats are 0-based and fixed for the whole session."""

    model_config = ConfigDict(frozen=True)

    seat: int = Field(ge=0)
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)


def _is_int_list(value: object) -> bool:
    return isinstance(value, list | tuple) and all(isinstance(v, int) for v in value)


class RoundRecord(BaseModel):
    """
    Locked result of one round.

    points is a cached copy of score_round(bets, tricks, hand_size). It is
    backfilled when absent from the input and rejected when it disagrees.
    Field names serialize in camelCase for the persisted history format.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    bets: tuple[int, ...]
    tricks: tuple[int, ...]
    points: tuple[int, ...]
    hand_size: int = Field(ge=1)

    @classmethod
    def build(cls, bets: tuple[int, ...], tricks: tuple[int, ...], hand_size: int) -> RoundRecord:
        """Create a record with points computed by the scoring function."""
        return cls(bets=bets, tricks=tricks, points=score_round(bets, tricks, hand_size), hand_size=hand_size)

    @model_validator(mode="before")
    @classmethod
    def _backfill_points(cls, data: Any) -> Any:  # noqa: ANN401
        if not isinstance(data, dict) or data.get("points") is not None:
            return data
        bets = data.get("bets")
        tricks = data.get("tricks")
        hand_size = data.get("hand_size", data.get("handSize"))
        if _is_int_list(bets) and _is_int_list(tricks) and isinstance(hand_size, int) and len(bets) == len(tricks):
            return {**data, "points": score_round(bets, tricks, hand_size)}
        return data

    @model_validator(mode="after")
    def _validate_round(self) -> Self:
        if not (len(self.bets) == len(self.tricks) == len(self.points)):
            raise ValueError("bets, tricks and points must have one entry per player")
        if any(not (0 <= bet <= self.hand_size) for bet in self.bets):
            raise ValueError(f"bets must be within 0-{self.hand_size}")
        if any(not (0 <= won <= self.hand_size) for won in self.tricks):
            raise ValueError(f"tricks must be within 0-{self.hand_size}")
        if sum(self.bets) == self.hand_size:
            raise ValueError(f"bets must not sum to the hand size ({self.hand_size})")
        if sum(self.tricks) > self.hand_size:
            raise ValueError(f"tricks must not sum above the hand size ({self.hand_size})")
        if self.points != score_round(self.bets, self.tricks, self.hand_size):
            raise ValueError("points do not match the scoring of bets and tricks")
        return self


class GameSession(BaseModel):
    """
    Full state of one game.

    Lifecycle:
    - Created by start_session (round 0, phase BET, all scores zero)
      or rehydrated from a history entry
    - submit_bets locks pending_bets and moves to COLLECT_TRICKS
    - submit_tricks appends a RoundRecord, adds its points to
      cumulative_scores, then moves to the next round's BET or to FINISHED
    """

    model_config = ConfigDict(frozen=True)

    players: tuple[Player, ...]
    round_spec: tuple[int, ...]
    current_round_index: int = 0
    phase: GamePhase = GamePhase.BET
    cumulative_scores: tuple[int, ...]
    rounds: tuple[RoundRecord, ...] = ()
    pending_bets: tuple[int, ...] | None = None  # bets locked for the current round

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def player_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.players)

    @property
    def total_rounds(self) -> int:
        return len(self.round_spec)

    @property
    def round_number(self) -> int:
        """1-based number of the current round, for "Round X / N" displays."""
        return self.current_round_index + 1

    @property
    def hand_size(self) -> int:
        """Cards dealt in the current round (the last round once finished)."""
        return self.round_spec[self.current_round_index]

    @property
    def is_finished(self) -> bool:
        return self.phase == GamePhase.FINISHED

    @model_validator(mode="after")
    def _validate_session(self) -> Self:
        if not self.players:
            raise ValueError("a session needs at least one player")
        if len(self.cumulative_scores) != len(self.players):
            raise ValueError("cumulative_scores must have one entry per player")
        if not (0 <= self.current_round_index < len(self.round_spec)):
            raise ValueError(f"current_round_index {self.current_round_index} is outside the round sequence")
        if (self.pending_bets is not None) != (self.phase == GamePhase.COLLECT_TRICKS):
            raise ValueError("pending_bets must be set exactly while collecting tricks")
        return self
