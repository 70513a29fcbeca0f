import os
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _bool(name: str, default: bool) -> bool:
    """
    Helper to parse boolean environment variables.
    Accepts: 1, true, yes, on (case-insensitive).
    """
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "on")


class Config(BaseSettings):
    """
    Application configuration loaded from environment variables.
    A local .env file is read when present.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    LOG_LEVEL: str = Field("WARNING", description="Root log level for the CLI")
    LOG_FILE_ENCODING: str = Field("utf-8", description="Encoding of exercise log files")
    OUTPUT_FORMAT: Literal["text", "json"] = Field("text", description="Default CLI output")

    # Feature flags
    FF_STRICT_TARGET_RANGE: bool = Field(
        default_factory=lambda: _bool("FF_STRICT_TARGET_RANGE", False),
        description="Reject targets whose min reps exceed max reps",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        level = str(v or "").strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LEVELS)}")
        return level


SETTINGS = Config()  # pyright: ignore[reportCallIssue]
