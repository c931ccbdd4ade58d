"""
Custom exception hierarchy for the Knock Out! engine.

Provides typed errors that callers can handle consistently across
the engine, settings layer and CLI.
"""


class KnockOutError(Exception):
    """Base exception for all game-related errors."""


class InvalidConfigurationError(KnockOutError):
    """Game parameters are out of range or inconsistent."""


class InvalidActionError(KnockOutError):
    """Action is not legal in the current state."""
