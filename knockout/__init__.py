"""
Knock Out! Rules Engine

A deterministic-when-seeded implementation of the Knock Out! dice game.
"""

from .config import GameConfig
from .dice import Dice
from .events import EventLog, EventType, GameEvent
from .exceptions import InvalidActionError, InvalidConfigurationError, KnockOutError
from .game import EndReason, GamePhase, GameState, create_game
from .observer import GameObserver
from .player import PlayerState
from .random_source import OneThroughTen, RandomSource
from .snapshot import serialize_snapshot
from .tracker import TurnCounter

__all__ = [
    "GameConfig",
    "Dice",
    "EventLog",
    "EventType",
    "GameEvent",
    "KnockOutError",
    "InvalidActionError",
    "InvalidConfigurationError",
    "EndReason",
    "GamePhase",
    "GameState",
    "create_game",
    "GameObserver",
    "PlayerState",
    "OneThroughTen",
    "RandomSource",
    "serialize_snapshot",
    "TurnCounter",
]
