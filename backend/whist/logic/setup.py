"""Pre-game setup: choosing the number of players and their names."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from whist.logic.game import start_session
from whist.logic.rounds import generate_rounds
from whist.logic.rules import MAX_NAME_LENGTH, MIN_PLAYERS, validate_player_count
from whist.logic.state import GameSession
from whist.logic.types import ValidationFailure
from whist.logic.validation import validate_player_names


class GameSetup(BaseModel):
    """
    Draft roster edited before a game starts.

    The round sequence follows the player count, so changing the count
    changes round_spec. Names may be blank while editing; start() requires
    every name to be filled in.
    """

    model_config = ConfigDict(frozen=True)

    player_names: tuple[str, ...]

    @classmethod
    def create(cls, player_count: int = MIN_PLAYERS) -> GameSetup:
        validate_player_count(player_count)
        return cls(player_names=("",) * player_count)

    @property
    def player_count(self) -> int:
        return len(self.player_names)

    @property
    def round_spec(self) -> tuple[int, ...]:
        return generate_rounds(self.player_count)

    @property
    def can_start(self) -> bool:
        return self.check_roster() is None

    def with_player_count(self, player_count: int) -> GameSetup:
        """Resize the roster, keeping names already typed for the remaining seats."""
        validate_player_count(player_count)
        names = self.player_names[:player_count]
        padding = ("",) * (player_count - len(names))
        return self.model_copy(update={"player_names": (*names, *padding)})

    def with_player_name(self, seat: int, name: str) -> GameSetup:
        if not (0 <= seat < self.player_count):
            raise ValueError(f"Invalid seat {seat}, expected 0-{self.player_count - 1}")
        # Surrounding whitespace is trimmed at start, so it does not count here.
        length = len(name.strip())
        if length > MAX_NAME_LENGTH:
            raise ValueError(f"Name must be at most {MAX_NAME_LENGTH} characters, got {length}")
        names = list(self.player_names)
        names[seat] = name
        return self.model_copy(update={"player_names": tuple(names)})

    def check_roster(self) -> ValidationFailure | None:
        return validate_player_names(self.player_names)

    def start(self) -> GameSession:
        return start_session(self.player_names)
