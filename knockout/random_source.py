"""
Sources of random integers used to drive the dice.
"""

import random
from abc import ABC, abstractmethod
from typing import Optional


class RandomSource(ABC):
    """
    Produces integers uniformly distributed over a fixed closed range.

    Dice only depend on this interface, so tests can inject
    deterministic sequences.
    """

    @abstractmethod
    def random(self) -> int:
        """Return the next integer from the source."""
        pass


class OneThroughTen(RandomSource):
    """Uniform integers in [1, 10]."""

    low = 1
    high = 10

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def random(self) -> int:
        return self.rng.randint(self.low, self.high)

    def __repr__(self) -> str:
        return f"OneThroughTen(low={self.low}, high={self.high})"
