"""
Public snapshot serialization of GameState.

Produces a plain, JSON-friendly view of a game for observers, the CLI
and tests.
"""

from __future__ import annotations

from typing import Any, Dict, List

from knockout.game import GameState


def serialize_snapshot(game: GameState) -> Dict[str, Any]:
    """Serialize a GameState into a stable JSON dict.

    The snapshot includes:
    - phase, turn_number and current_player_id
    - winner_id and end_reason (None until the game is over)
    - players with knock-out number, score and status
    """
    players: List[Dict[str, Any]] = []
    for pstate in game.players:
        players.append(
            {
                "player_id": pstate.player_id,
                "knock_out_number": pstate.knock_out_number,
                "score": pstate.score,
                "knocked_out": pstate.knocked_out,
            }
        )

    snapshot: Dict[str, Any] = {
        "phase": game.phase.value,
        "turn_number": game.turn_number,
        "current_player_id": game.current_player.player_id if game.current_player else None,
        "last_roll": list(game.last_roll) if game.last_roll else None,
        "winner_id": game.winner.player_id if game.winner else None,
        "end_reason": game.end_reason.value if game.end_reason else None,
        "winning_score": game.config.winning_score,
        "players": players,
    }

    return snapshot
