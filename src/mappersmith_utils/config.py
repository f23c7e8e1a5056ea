"""Configuration management using Pydantic Settings.

This module defines the `Settings` class, which loads the few tunable
parameters of the command-line front end from environment variables and a
`.env` file. The library functions themselves take no configuration; only the
CLI reads these values.

The `get_settings` function provides a cached, singleton instance of the
configuration, and `build_clock` turns the clock settings into a `Clock`.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict as _SettingsConfigDict

from .clock import Clock, FixedClock, WallClock

logger = logging.getLogger(__name__)

__all__ = ["Settings", "get_settings", "build_clock"]


class Settings(BaseSettings):
    """Defines all configuration parameters of the CLI.

    `CLOCK=fixed` freezes `performance_now` at `FIXED_CLOCK_AT`, which makes
    timing output reproducible in scripts and snapshots.
    """

    model_config = _SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = Field(default="WARNING", description="Logging level")
    CLOCK: Literal["wall", "fixed"] = Field(
        default="wall",
        description="Time source for `now`: 'wall' (monotonic wall clock) or 'fixed'",
    )
    FIXED_CLOCK_AT: Optional[str] = Field(
        default=None,
        description="ISO-8601 instant used when CLOCK=fixed, e.g. 2017-08-08T20:57:00Z",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> str:
        """Upper-case the level name; blank falls back to WARNING."""
        if isinstance(v, str) and v.strip():
            return v.strip().upper()
        return "WARNING"

    @field_validator("CLOCK", mode="before")
    @classmethod
    def normalize_clock(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def require_fixed_instant(self) -> "Settings":
        """A fixed clock needs an instant to be frozen at."""
        if self.CLOCK == "fixed" and not self.FIXED_CLOCK_AT:
            raise ValueError("FIXED_CLOCK_AT is required when CLOCK=fixed")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:  # pragma: no cover - trivial
    """Return a cached, singleton instance of the settings."""
    return Settings()


def build_clock(settings: Settings) -> Clock:
    """Return the clock selected by ``settings``."""
    if settings.CLOCK == "fixed" and settings.FIXED_CLOCK_AT:
        logger.debug("Using fixed clock at %s", settings.FIXED_CLOCK_AT)
        return FixedClock.from_iso(settings.FIXED_CLOCK_AT)
    return WallClock()
