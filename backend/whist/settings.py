"""Score keeper configuration via environment variables."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from shared.logging import VALID_LOG_LEVELS
from shared.storage import validate_key
from whist.history.repository import DEFAULT_HISTORY_KEY


class WhistSettings(BaseSettings):
    model_config = {"env_prefix": "WHIST_"}

    history_dir: str = Field(default="backend/data/history", min_length=1)
    history_key: str = DEFAULT_HISTORY_KEY
    log_dir: str | None = None
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    @field_validator("history_key")
    @classmethod
    def validate_history_key(cls, v: str) -> str:
        return validate_key(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level
