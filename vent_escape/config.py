"""
Runtime configuration for Vent Escape.
Uses pydantic-settings for environment variable parsing.

Gameplay tuning lives in gameplay/constants.py; this only covers how the
game is run (frame rate, seed, window, logging).
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from VENT_ESCAPE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VENT_ESCAPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Simulation
    fps: int = Field(
        default=60,
        gt=0,
        description="Frames per second; the simulation steps once per frame"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Seed for vent generation, tank placement and particles. None means random"
    )

    # Display
    window_title: str = Field(default="Vent Escape")
    fullscreen: bool = Field(default=False)
    show_fps: bool = Field(
        default=False,
        description="Draw the measured frame rate in the HUD"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR)"
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Call get_settings.cache_clear() after changing the environment.
    """
    return Settings()
