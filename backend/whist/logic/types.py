"""
Pydantic models for values that cross the core/presentation boundary.

Contains the validation failure reported when a round input is rejected and
the per-player standing shown on score screens.
"""

from pydantic import BaseModel, ConfigDict

from whist.logic.enums import ValidationErrorCode


class ValidationFailure(BaseModel):
    """Why a submitted input was rejected. The session is left unchanged."""

    model_config = ConfigDict(frozen=True)

    code: ValidationErrorCode
    message: str
    seat: int | None = None  # offending seat for per-player problems


class PlayerStanding(BaseModel):
    """A player's position on the score table."""

    model_config = ConfigDict(frozen=True)

    seat: int
    name: str
    score: int
    rank: int  # 1-based, tied scores share a rank
