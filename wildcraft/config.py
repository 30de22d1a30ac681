"""Runtime settings loaded from the environment (and an optional .env file)."""

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
from rich.logging import RichHandler


ENV_PREFIX = "WILDCRAFT_"


class Settings(BaseModel):
    """User adjustable settings."""
    tick_seconds: float = Field(default=3.0, gt=0, description="Real seconds between ticks")
    tick_minutes: int = Field(default=1, ge=1, description="Game minutes per tick")
    auto_restart: bool = Field(default=False, description="Reset the session when the player dies")
    log_level: str = "WARNING"
    history_dir: Path = Field(default_factory=lambda: Path.home() / ".wildcraft")

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level


def load_settings(env_file: Optional[str | Path] = None) -> Settings:
    """Build Settings from WILDCRAFT_* environment variables.

    Values in *env_file* (default: a .env in the working directory) fill in
    variables that are not already set.
    """
    load_dotenv(env_file)

    values = {}
    for name in Settings.model_fields:
        raw = os.getenv(ENV_PREFIX + name.upper())
        if raw is not None and raw != "":
            values[name] = raw

    if "history_dir" in values:
        values["history_dir"] = Path(values["history_dir"]).expanduser()

    return Settings(**values)


def configure_logging(level: str = "WARNING") -> None:
    """Send log records through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
