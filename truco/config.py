"""Match configuration loaded from the environment."""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PLAYER_NAMES = ("Player 1", "Player 2")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings read from TRUCO_* environment variables or a local .env file."""

    model_config = SettingsConfigDict(
        env_prefix="TRUCO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    player1_name: str = Field(default=DEFAULT_PLAYER_NAMES[0], description="Display name for seat 0")
    player2_name: str = Field(default=DEFAULT_PLAYER_NAMES[1], description="Display name for seat 1")
    seed: Optional[int] = Field(default=None, description="Shuffle seed; random when unset")
    hand_size: int = Field(default=3, ge=1, le=3, description="Cards dealt to each player per hand")
    target_score: int = Field(default=12, ge=1, le=99, description="Points needed to win the match")
    alternate_hand_leader: bool = Field(
        default=False,
        description="Alternate the seat that leads the first trick of each hand.",
    )
    log_level: str = Field(default="INFO", description="Logging level for the engine loggers")

    @field_validator("player1_name", mode="before")
    @classmethod
    def default_first_name(cls, value: Any) -> str:
        return display_name(value, DEFAULT_PLAYER_NAMES[0])

    @field_validator("player2_name", mode="before")
    @classmethod
    def default_second_name(cls, value: Any) -> str:
        return display_name(value, DEFAULT_PLAYER_NAMES[1])

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized


def display_name(value: Any, placeholder: str) -> str:
    if value is None:
        return placeholder
    name = str(value).strip()
    return name or placeholder


def load_settings(**overrides: Any) -> Settings:
    """Build settings from the environment, with keyword overrides on top."""
    return Settings(**overrides)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )
    logging.getLogger("truco").setLevel(level)
