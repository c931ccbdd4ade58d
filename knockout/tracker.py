"""
Reference observer that counts turns.
"""

import logging

from knockout.observer import GameObserver

logger = logging.getLogger(__name__)


class TurnCounter(GameObserver):
    """Counts the turns of a game and reports the total when it ends."""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose
        self.number_of_turns = 0

    def on_game_start(self, game) -> None:
        self.number_of_turns = 0
        logger.debug("Turn counter reset")
        if self.verbose:
            print("Started a new game!")

    def on_turn_rolled(self, game, roll_sum: int) -> None:
        self.number_of_turns += 1
        logger.debug(f"Turn {self.number_of_turns}: rolled {roll_sum}")
        if self.verbose:
            print(f"Rolled a {roll_sum}")

    def on_game_end(self, game) -> None:
        logger.debug(f"Game ended after {self.number_of_turns} turns")
        if self.verbose:
            print(f"The game lasted {self.number_of_turns} turns.")
