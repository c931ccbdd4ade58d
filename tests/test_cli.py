"""
Tests for the play_knockout command line driver.
"""

import pytest

from knockout import EndReason
from play_knockout import main, run_batch, simulate_game


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)


def test_simulate_game_verbose(capsys):
    game = simulate_game(num_players=3, seed=1)

    out = capsys.readouterr().out
    assert game.is_over
    assert "Started a new game!" in out
    assert "GAME OVER" in out
    assert f"Total Turns: {game.turn_number}" in out
    if game.end_reason == EndReason.ALL_KNOCKED_OUT:
        assert "All players have been knocked out!" in out
    else:
        assert f"Player {game.winner.player_id} has won with a final score of {game.winner.score}" in out


def test_simulate_game_quiet(capsys):
    game = simulate_game(num_players=2, seed=3, verbose=False)

    assert game.is_over
    assert capsys.readouterr().out == ""


def test_run_batch_counts_every_game(capsys):
    outcomes = run_batch(games=20, num_players=4, seed=10)

    assert sum(outcomes.values()) == 20
    assert "BATCH SUMMARY (20 games)" in capsys.readouterr().out


def test_main_single_game(capsys):
    main(["--players", "2", "--seed", "5", "--winning-score", "30"])

    assert "GAME OVER" in capsys.readouterr().out


def test_main_batch(capsys):
    main(["--games", "3", "--seed", "5"])

    assert "BATCH SUMMARY (3 games)" in capsys.readouterr().out


def test_main_rejects_bad_config(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--players", "0"])

    assert exc.value.code == 2
    assert "error:" in capsys.readouterr().err


@pytest.mark.parametrize("games", ["0", "-3"])
def test_main_rejects_non_positive_game_count(games, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--games", games])

    assert exc.value.code == 2
    assert "--games must be at least 1" in capsys.readouterr().err


def test_main_reports_bad_environment(monkeypatch, capsys):
    monkeypatch.setenv("KNOCKOUT_NUM_PLAYERS", "many")

    with pytest.raises(SystemExit) as exc:
        main(["--quiet"])

    assert exc.value.code == 2
    assert "invalid KNOCKOUT_* environment settings" in capsys.readouterr().err


def test_simulate_game_uses_default_settings():
    game = simulate_game(seed=4, verbose=False)

    assert game.config.num_players == 2
    assert game.config.dice_sides == 6
    assert game.config.dice_count == 2
    assert game.config.max_turns is None
