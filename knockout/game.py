"""
Main game engine and state management.
"""

import logging
import random
from enum import Enum
from typing import List, Optional, Sequence

from knockout.config import GameConfig
from knockout.dice import Dice
from knockout.events import EventLog, EventType
from knockout.exceptions import InvalidActionError, InvalidConfigurationError
from knockout.observer import GameObserver
from knockout.player import PlayerState, draw_knock_out_number
from knockout.random_source import OneThroughTen, RandomSource

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Lifecycle of a game."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    ENDED = "ended"


class EndReason(Enum):
    """Why a game ended."""

    ALL_KNOCKED_OUT = "all_knocked_out"
    WINNING_SCORE = "winning_score"
    TURN_LIMIT = "turn_limit"


class GameState:
    """
    Represents the complete state of a Knock Out! game.
    This is the main interface for the game engine.

    Players act in ascending id order. Each turn the acting player throws
    ``config.dice_count`` dice; rolling their own knock-out number removes
    them, any other sum is added to their score. The game ends when every
    player is knocked out or somebody reaches ``config.winning_score``.
    """

    def __init__(
        self,
        config: GameConfig,
        generator: Optional[RandomSource] = None,
        knock_out_numbers: Optional[Sequence[int]] = None,
        observer: Optional[GameObserver] = None,
    ):
        config.validate()
        self.config = config
        self.event_log = EventLog()

        # Initialize RNG
        self.rng = random.Random(config.seed)

        if knock_out_numbers is None:
            knock_out_numbers = [
                draw_knock_out_number(self.rng, config.knock_out_min, config.knock_out_max)
                for _ in range(config.num_players)
            ]
        self._check_knock_out_numbers(knock_out_numbers)

        # Initialize players, ids start at 1
        self.players: List[PlayerState] = [
            PlayerState(i, number) for i, number in enumerate(knock_out_numbers, start=1)
        ]

        if generator is None:
            generator = OneThroughTen(self.rng)
        self.dice = Dice(config.dice_sides, generator)

        self.observer: Optional[GameObserver] = observer

        # Game state
        self.phase = GamePhase.NOT_STARTED
        self.turn_number = 0
        self.current_player: Optional[PlayerState] = None
        self.last_roll: Optional[List[int]] = None
        self.winner: Optional[PlayerState] = None
        self.end_reason: Optional[EndReason] = None

    def _check_knock_out_numbers(self, numbers: Sequence[int]) -> None:
        low, high = self.config.knock_out_min, self.config.knock_out_max
        if len(numbers) != self.config.num_players:
            raise InvalidConfigurationError(
                f"Expected {self.config.num_players} knock-out numbers, got {len(numbers)}"
            )
        for number in numbers:
            if not low <= number <= high:
                raise InvalidConfigurationError(
                    f"Knock-out number {number} is outside [{low}, {high}]"
                )

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.ENDED

    def set_observer(self, observer: Optional[GameObserver]) -> None:
        """Attach an observer, replacing the current one. Pass None to detach."""
        self.observer = observer

    def get_player(self, player_id: int) -> PlayerState:
        """Look up a player by id."""
        for player in self.players:
            if player.player_id == player_id:
                return player
        raise KeyError(player_id)

    def get_active_players(self) -> List[PlayerState]:
        """Get all players that have not been knocked out."""
        return [p for p in self.players if p.is_active]

    def roll_dice(self) -> List[int]:
        """
        Throw every die once and return the faces.
        Updates game state with the roll.
        """
        faces = [self.dice.roll() for _ in range(self.config.dice_count)]
        self.last_roll = faces
        return faces

    def play(self) -> Optional[PlayerState]:
        """
        Play the game to completion.

        Returns:
            The winning player, or None if nobody reached the winning score.

        Raises:
            InvalidActionError: If the game has already been started.
        """
        if self.phase != GamePhase.NOT_STARTED:
            raise InvalidActionError(f"Cannot play a game in phase '{self.phase.value}'")

        self.phase = GamePhase.RUNNING
        self.event_log.log(
            EventType.GAME_START,
            players=[p.player_id for p in self.players],
            winning_score=self.config.winning_score,
            seed=self.config.seed,
        )
        logger.info(
            f"Starting game with {len(self.players)} players "
            f"(winning score {self.config.winning_score})"
        )
        self._notify("on_game_start")

        while self.phase == GamePhase.RUNNING:
            for player in self.players:
                if player.knocked_out:
                    continue
                self.take_turn(player)
                if self.phase != GamePhase.RUNNING:
                    break

        return self.winner

    def take_turn(self, player: PlayerState) -> None:
        """
        Roll for one player and apply the knock-out or score effect.

        Raises:
            InvalidActionError: If the game is not running or the player
                has been knocked out.
        """
        if self.phase != GamePhase.RUNNING:
            raise InvalidActionError(f"Cannot take a turn in phase '{self.phase.value}'")
        if not player.is_active:
            raise InvalidActionError(f"Player {player.player_id} has been knocked out")

        self.current_player = player
        self.turn_number += 1

        faces = self.roll_dice()
        roll_sum = sum(faces)
        self.event_log.log(
            EventType.DICE_ROLL,
            player_id=player.player_id,
            turn=self.turn_number,
            dice=faces,
            total=roll_sum,
        )
        logger.debug(f"Turn {self.turn_number}: player {player.player_id} rolled {faces} = {roll_sum}")

        self._notify("on_turn_rolled", roll_sum)

        if roll_sum == player.knock_out_number:
            player.knocked_out = True
            self.event_log.log(
                EventType.KNOCK_OUT,
                player_id=player.player_id,
                knock_out_number=player.knock_out_number,
                final_score=player.score,
            )
            logger.info(f"Player {player.player_id} rolled {roll_sum} and is knocked out")

            if not self.get_active_players():
                logger.info("All players have been knocked out!")
                self._end_game(EndReason.ALL_KNOCKED_OUT)
                return
        else:
            player.score += roll_sum
            self.event_log.log(
                EventType.SCORE,
                player_id=player.player_id,
                amount=roll_sum,
                new_score=player.score,
            )

            if player.score >= self.config.winning_score:
                self.winner = player
                logger.info(f"Player {player.player_id} has won with a final score of {player.score}")
                self._end_game(EndReason.WINNING_SCORE)
                return

        if self.config.max_turns is not None and self.turn_number >= self.config.max_turns:
            logger.warning(f"Turn limit of {self.config.max_turns} reached without a result")
            self._end_game(EndReason.TURN_LIMIT)

    def _end_game(self, reason: EndReason) -> None:
        self.phase = GamePhase.ENDED
        self.end_reason = reason
        self.event_log.log(
            EventType.GAME_END,
            player_id=self.winner.player_id if self.winner else None,
            reason=reason.value,
            turns=self.turn_number,
        )
        self._notify("on_game_end")

    def _notify(self, method: str, *args) -> None:
        """Deliver a notification; observer failures never reach the game loop."""
        if self.observer is None:
            return
        try:
            getattr(self.observer, method)(self, *args)
        except Exception:
            logger.exception(f"Observer {type(self.observer).__name__}.{method} failed")


def create_game(
    config: GameConfig,
    *,
    generator: Optional[RandomSource] = None,
    knock_out_numbers: Optional[Sequence[int]] = None,
    observer: Optional[GameObserver] = None,
) -> GameState:
    """
    Create a new game with the specified configuration.

    Args:
        config: Game configuration
        generator: Source driving the dice (default: seeded OneThroughTen)
        knock_out_numbers: One number per player, in turn order
            (default: drawn uniformly from the configured range)
        observer: Optional observer to attach

    Returns:
        Initialized GameState

    Raises:
        InvalidConfigurationError: If the configuration cannot produce a game.
    """
    return GameState(config, generator=generator, knock_out_numbers=knock_out_numbers, observer=observer)
