"""
Configuration: typed, validated runner settings loaded from environment/.env.

Uses pydantic-settings so every knob can be overridden without touching the
command line, which stays a single exercise name:

    FP_EXERCISES_BUILD_DIR=/tmp/fp-build fp-exercises exo3-either

All settings have defaults; an invalid value is reported at startup.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the .env file relative to the project root (two levels above this file).
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"


class RunnerSettings(BaseSettings):
    """
    Exercise runner settings.

    Load order (highest priority first):
      1. Environment variables prefixed with FP_EXERCISES_
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="FP_EXERCISES_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    build_dir: Path = Field(
        default=Path("dist"),
        description="Directory receiving the byte-compiled exercise artifacts",
    )
    exercises_package: str = Field(
        default="fp_exercises.exercises",
        description="Dotted package holding the exercise modules",
    )
    python_executable: str = Field(
        default=sys.executable,
        description="Interpreter used to execute compiled exercises",
    )
    timeout_seconds: float = Field(default=60, gt=0)
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept only the standard logging level names (case-insensitive)."""
        normalized = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized
