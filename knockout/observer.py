"""Observer interface for game lifecycle notifications."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from knockout.game import GameState


class GameObserver(ABC):
    """
    Abstract base class for components that follow a game.

    Notifications are delivered synchronously, in this order:

    - ``on_game_start`` once, before the first roll.
    - ``on_turn_rolled`` once per turn, after the dice are rolled and
      before the knock-out or score effect is applied.
    - ``on_game_end`` once, when the game reaches a terminal condition.

    Observers may inspect the game but must not modify it. Exceptions
    raised from a notification are logged by the game and otherwise ignored.
    """

    @abstractmethod
    def on_game_start(self, game: "GameState") -> None:
        """
        Called when play begins.

        Args:
            game: The game being played.
        """
        pass

    @abstractmethod
    def on_turn_rolled(self, game: "GameState", roll_sum: int) -> None:
        """
        Called after the acting player has rolled.

        Args:
            game: The game being played. ``game.current_player`` is the roller.
            roll_sum: Sum of all dice thrown this turn.
        """
        pass

    @abstractmethod
    def on_game_end(self, game: "GameState") -> None:
        """
        Called exactly once when the game is over.

        Args:
            game: The finished game. ``winner`` and ``end_reason`` are set.
        """
        pass
