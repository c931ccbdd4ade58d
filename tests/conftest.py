"""Shared test fixtures for Knock Out! tests."""

from itertools import cycle
from typing import Dict, List, Sequence, Tuple

import pytest

from knockout import GameConfig, GameObserver, RandomSource
from knockout.settings import KnockOutSettings, get_settings


class SequenceSource(RandomSource):
    """Deterministic source that repeats a fixed sequence forever."""

    def __init__(self, values: Sequence[int]):
        self.values = list(values)
        self._it = cycle(self.values)
        self.calls = 0

    def random(self) -> int:
        self.calls += 1
        return next(self._it)


class RecordingObserver(GameObserver):
    """Observer that records every notification it receives."""

    def __init__(self):
        self.calls: List[str] = []
        self.rolls: List[Tuple[int, int]] = []
        # state of the roller at notification time: (score, knocked_out)
        self.roller_state: List[Tuple[int, bool]] = []
        # scores of knocked-out players seen at each turn
        self.frozen_scores: List[Dict[int, int]] = []

    def on_game_start(self, game) -> None:
        self.calls.append("start")

    def on_turn_rolled(self, game, roll_sum: int) -> None:
        self.calls.append("turn")
        player = game.current_player
        self.rolls.append((player.player_id, roll_sum))
        self.roller_state.append((player.score, player.knocked_out))
        self.frozen_scores.append({p.player_id: p.score for p in game.players if p.knocked_out})

    def on_game_end(self, game) -> None:
        self.calls.append("end")

    def count(self, name: str) -> int:
        return self.calls.count(name)


def die_values(*faces: int) -> List[int]:
    """Source values that make a six-sided die show the given faces (face = value % 6 + 1)."""
    return [face - 1 for face in faces]


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def game_config():
    """Default game configuration with fixed seed for reproducibility."""
    return GameConfig(num_players=4, seed=42)


@pytest.fixture
def single_player_config():
    """One player, low winning score."""
    return GameConfig(num_players=1, winning_score=10)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Drop every KNOCKOUT_* variable and the cached settings around each test."""
    for name in KnockOutSettings.model_fields:
        monkeypatch.delenv(f"KNOCKOUT_{name.upper()}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
