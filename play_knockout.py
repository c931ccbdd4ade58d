#!/usr/bin/env python3
"""
Minimal CLI for simulating Knock Out! games.

Usage:
    # One verbose game with 15 players
    python play_knockout.py --players 15

    # 1000 quiet games, aggregate outcomes only
    python play_knockout.py --games 1000 --seed 7 --quiet
"""

import argparse
import logging
from collections import Counter
from typing import List, Optional

from pydantic import ValidationError

from knockout import EndReason, GameState, KnockOutError, TurnCounter, create_game
from knockout.settings import get_settings


def print_game_summary(game: GameState) -> None:
    """Print final game summary."""
    print("\n" + "=" * 60)
    print("GAME OVER")
    print("=" * 60)

    if game.end_reason == EndReason.ALL_KNOCKED_OUT:
        print("\nAll players have been knocked out!")
    elif game.winner is not None:
        print(f"\nPlayer {game.winner.player_id} has won with a final score of {game.winner.score}")
    else:
        print(f"\nNo winner after {game.turn_number} turns (turn limit)")

    print("\nFinal Standings:")
    for player in sorted(game.players, key=lambda p: p.score, reverse=True):
        status = "KNOCKED OUT" if player.knocked_out else "in play"
        print(
            f"  Player {player.player_id}: {player.score} points | "
            f"knock-out number {player.knock_out_number} | {status}"
        )

    print(f"\nTotal Turns: {game.turn_number}")


def simulate_game(
    num_players: Optional[int] = None,
    seed: Optional[int] = None,
    verbose: bool = True,
    winning_score: Optional[int] = None,
    dice_sides: Optional[int] = None,
    max_turns: Optional[int] = None,
) -> GameState:
    """
    Simulate a complete game of Knock Out!.

    Arguments left as None fall back to the environment settings.

    Args:
        num_players: Number of players
        seed: Random seed for reproducibility
        verbose: Whether to print every roll and the final summary
        winning_score: Score that wins the game
        dice_sides: Sides per die
        max_turns: Safety cap on turns

    Returns:
        The finished game
    """
    config = get_settings().to_game_config(
        num_players=num_players,
        seed=seed,
        winning_score=winning_score,
        dice_sides=dice_sides,
        max_turns=max_turns,
    )
    game = create_game(config, observer=TurnCounter(verbose=verbose))

    if verbose:
        print(f"Starting game with {config.num_players} players")
        print(f"Seed: {config.seed}")

    game.play()

    if verbose:
        print_game_summary(game)

    return game


def run_batch(
    games: int,
    num_players: Optional[int] = None,
    seed: Optional[int] = None,
    winning_score: Optional[int] = None,
    dice_sides: Optional[int] = None,
    max_turns: Optional[int] = None,
) -> Counter:
    """
    Play several quiet games and count how they ended.

    Game i uses ``seed + i`` when a seed is given.

    Returns:
        Counter keyed by EndReason value
    """
    outcomes: Counter = Counter()
    turns: List[int] = []
    for i in range(games):
        game = simulate_game(
            num_players=num_players,
            seed=None if seed is None else seed + i,
            verbose=False,
            winning_score=winning_score,
            dice_sides=dice_sides,
            max_turns=max_turns,
        )
        outcomes[game.end_reason.value] += 1
        turns.append(game.turn_number)

    print("\n" + "=" * 60)
    print(f"BATCH SUMMARY ({games} games)")
    print("=" * 60)
    for reason in EndReason:
        print(f"  {reason.value}: {outcomes[reason.value]}")
    if turns:
        print(f"\nAverage turns: {sum(turns) / len(turns):.1f}")

    return outcomes


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(description="Simulate a Knock Out! dice game")
    parser.add_argument("--players", type=int, default=None, help="Number of players")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--winning-score", type=int, default=None, help="Score that wins the game")
    parser.add_argument("--sides", type=int, default=None, help="Sides per die")
    parser.add_argument(
        "--max-turns",
        type=int,
        default=None,
        help="Stop a game after this many turns",
    )
    parser.add_argument("--games", type=int, default=1, help="Number of games to simulate")
    parser.add_argument("--quiet", action="store_true", help="Reduce output verbosity")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: KNOCKOUT_LOG_LEVEL)",
    )

    args = parser.parse_args(argv)
    if args.games < 1:
        parser.error("--games must be at least 1")

    try:
        settings = get_settings()
    except ValidationError as e:
        parser.exit(2, f"error: invalid KNOCKOUT_* environment settings\n{e}\n")

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.games > 1:
            run_batch(
                games=args.games,
                num_players=args.players,
                seed=args.seed,
                winning_score=args.winning_score,
                dice_sides=args.sides,
                max_turns=args.max_turns,
            )
        else:
            simulate_game(
                num_players=args.players,
                seed=args.seed,
                verbose=not args.quiet,
                winning_score=args.winning_score,
                dice_sides=args.sides,
                max_turns=args.max_turns,
            )
    except KnockOutError as e:
        parser.exit(2, f"error: {e}\n")


if __name__ == "__main__":
    main()
