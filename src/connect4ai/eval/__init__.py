"""Evaluation module."""

from .arena import Arena, ArenaResult, outcome_of, play_match, play_session, should_accept

__all__ = [
    "Arena",
    "ArenaResult",
    "outcome_of",
    "play_match",
    "play_session",
    "should_accept",
]
