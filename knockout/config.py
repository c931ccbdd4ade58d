"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import Optional

from knockout.exceptions import InvalidConfigurationError


@dataclass
class GameConfig:
    """Configuration for a Knock Out! game."""

    num_players: int = 2

    dice_sides: int = 6
    dice_count: int = 2

    knock_out_min: int = 6
    knock_out_max: int = 9

    winning_score: int = 100

    seed: Optional[int] = None

    # Safety cap for deterministic sources that never produce a terminal roll
    max_turns: Optional[int] = None

    def validate(self) -> None:
        """Raise InvalidConfigurationError if any parameter is unusable."""
        if self.num_players < 1:
            raise InvalidConfigurationError("Game requires at least 1 player")
        if self.dice_sides < 1:
            raise InvalidConfigurationError(f"Dice need a positive side count, got {self.dice_sides}")
        if self.dice_count < 1:
            raise InvalidConfigurationError(f"At least one die must be thrown, got {self.dice_count}")
        if self.knock_out_min > self.knock_out_max:
            raise InvalidConfigurationError(
                f"Empty knock-out range [{self.knock_out_min}, {self.knock_out_max}]"
            )
        if self.winning_score < 1:
            raise InvalidConfigurationError(f"Winning score must be positive, got {self.winning_score}")
        if self.max_turns is not None and self.max_turns < 1:
            raise InvalidConfigurationError(f"max_turns must be positive, got {self.max_turns}")
