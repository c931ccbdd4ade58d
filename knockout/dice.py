"""
Dice rolling on top of an injected RandomSource.
"""

from knockout.exceptions import InvalidConfigurationError
from knockout.random_source import RandomSource


class Dice:
    """
    A die with a fixed number of sides.

    A face is computed as ``generator.random() % sides + 1``. When the
    generator's range is not a multiple of ``sides`` some faces come up
    more often (with OneThroughTen and six sides, faces 2-5 have
    probability 2/10 and faces 1 and 6 have 1/10). The weighting is
    part of the game rules and affects how often knock-out numbers come up.
    """

    def __init__(self, sides: int, generator: RandomSource):
        if sides < 1:
            raise InvalidConfigurationError(f"Dice need a positive side count, got {sides}")
        self.sides = sides
        self.generator = generator

    def roll(self) -> int:
        """Roll once and return a face in [1, sides]."""
        return self.generator.random() % self.sides + 1

    def __repr__(self) -> str:
        return f"Dice(sides={self.sides}, generator={self.generator!r})"
