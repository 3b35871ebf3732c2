"""Persistence models for saved games."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from whist.logic.state import RoundRecord


class HistoryEntry(BaseModel):
    """
    Snapshot of a game saved to the history collection.

    Serialized with camelCase keys (gameName, playerNames, finalScores,
    currentRoundIndex, inProgress). Entries are never edited after saving;
    saving the same game again adds another entry.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    date: datetime  # always timezone-aware, naive input is read as UTC
    game_name: str | None = None
    player_names: tuple[str, ...] = Field(min_length=1)
    rounds: tuple[RoundRecord, ...] = ()
    final_scores: tuple[int, ...]
    current_round_index: int = Field(ge=0)
    in_progress: bool

    @field_validator("date")
    @classmethod
    def _assume_utc(cls, v: datetime) -> datetime:
        return v if v.tzinfo is not None else v.replace(tzinfo=UTC)
