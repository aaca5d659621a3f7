"""Environment-based configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings

from locker.constants import DEFAULT_LOCK_PATH, OutputFormat

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Reads from .env file and LOCKER_* environment variables."""

    # Lock file used when no path is given on the command line
    lock_path: Path = Path(DEFAULT_LOCK_PATH)

    # Logging
    log_level: str = "WARNING"

    # Report
    output_format: OutputFormat = OutputFormat.TEXT

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        if v not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of: {', '.join(_LOG_LEVELS)}"
            )
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "LOCKER_",
        "extra": "ignore",
    }
