"""
Application settings.

Values come from the environment (``TIMESCOPE_*``) or a local ``.env`` file,
falling back to the defaults below.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from timescope.time_utils import DEFAULT_WEEK_START


class Settings(BaseSettings):
    """Runtime configuration for the CLI and the formatter factory."""

    model_config = SettingsConfigDict(
        env_prefix="TIMESCOPE_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "timescope"
    app_env: str = "development"
    debug: bool = False
    log_level: str = Field(default="WARNING", description="Root log level for the CLI")
    use_local_time: bool = Field(default=False, description="Format in local time, not UTC")
    week_start: int = Field(
        default=DEFAULT_WEEK_START,
        ge=0,
        le=6,
        description="First day of the week (0 = Monday ... 6 = Sunday)",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
