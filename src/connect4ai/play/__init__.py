"""Play module - difficulty, players, and game sessions."""

from .difficulty import (
    Difficulty,
    DifficultyConfig,
    DIFFICULTY_PRESETS,
    get_difficulty_config,
    parse_difficulty,
    difficulty_from_slider,
    AdaptiveDifficulty,
)
from .players import Player, HumanPlayer, AIPlayer, RandomPlayer
from .session import GameSession, GameStatus, GameOverError, Idle, Pending, MoveStage

__all__ = [
    "Difficulty",
    "DifficultyConfig",
    "DIFFICULTY_PRESETS",
    "get_difficulty_config",
    "parse_difficulty",
    "difficulty_from_slider",
    "AdaptiveDifficulty",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "RandomPlayer",
    "GameSession",
    "GameStatus",
    "GameOverError",
    "Idle",
    "Pending",
    "MoveStage",
]
