"""
Player state.
"""

import random


class PlayerState:
    """Represents the complete state of a player in the game."""

    def __init__(self, player_id: int, knock_out_number: int):
        self.player_id = player_id
        self.knock_out_number = knock_out_number
        self.score = 0
        self.knocked_out = False

    @property
    def is_active(self) -> bool:
        """A player stays in the rotation until knocked out."""
        return not self.knocked_out

    def __repr__(self) -> str:
        return (
            f"PlayerState(id={self.player_id}, knock_out_number={self.knock_out_number}, "
            f"score={self.score}, knocked_out={self.knocked_out})"
        )


def draw_knock_out_number(rng: random.Random, low: int, high: int) -> int:
    """Pick a knock-out number uniformly from [low, high]."""
    return rng.randint(low, high)
