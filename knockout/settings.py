"""
Application configuration using pydantic-settings.

Environment variables (prefix: KNOCKOUT_):
    KNOCKOUT_NUM_PLAYERS    - Number of players (default: 2)
    KNOCKOUT_DICE_SIDES     - Sides per die (default: 6)
    KNOCKOUT_DICE_COUNT     - Dice thrown per turn (default: 2)
    KNOCKOUT_KNOCK_OUT_MIN  - Lowest knock-out number (default: 6)
    KNOCKOUT_KNOCK_OUT_MAX  - Highest knock-out number (default: 9)
    KNOCKOUT_WINNING_SCORE  - Score that wins the game (default: 100)
    KNOCKOUT_SEED           - Optional random seed
    KNOCKOUT_MAX_TURNS      - Optional safety cap on turns
    KNOCKOUT_LOG_LEVEL      - Logging level for the CLI (default: WARNING)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from knockout.config import GameConfig


class KnockOutSettings(BaseSettings):
    """Game defaults loaded from the environment or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="KNOCKOUT_",
    )

    num_players: int = Field(default=2, ge=1, description="Number of players.")
    dice_sides: int = Field(default=6, ge=1, description="Sides per die.")
    dice_count: int = Field(default=2, ge=1, description="Dice thrown per turn.")
    knock_out_min: int = Field(default=6, description="Lowest knock-out number.")
    knock_out_max: int = Field(default=9, description="Highest knock-out number.")
    winning_score: int = Field(default=100, gt=0, description="Score that ends the game.")
    seed: Optional[int] = Field(default=None, description="Random seed for reproducible games.")
    max_turns: Optional[int] = Field(default=None, gt=0, description="Safety cap on turns.")
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept any case, store the upper-case level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def check_knock_out_range(self) -> "KnockOutSettings":
        if self.knock_out_min > self.knock_out_max:
            raise ValueError("knock_out_min must not exceed knock_out_max")
        return self

    def to_game_config(self, **overrides) -> GameConfig:
        """Build a GameConfig from these settings, with optional overrides."""
        values = {
            "num_players": self.num_players,
            "dice_sides": self.dice_sides,
            "dice_count": self.dice_count,
            "knock_out_min": self.knock_out_min,
            "knock_out_max": self.knock_out_max,
            "winning_score": self.winning_score,
            "seed": self.seed,
            "max_turns": self.max_turns,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return GameConfig(**values)


@lru_cache
def get_settings() -> KnockOutSettings:
    """Return cached settings instance."""
    return KnockOutSettings()
