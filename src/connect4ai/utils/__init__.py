"""Utilities module."""

from .config import (
    Config,
    SearchConfig,
    SessionConfig,
    ArenaConfig,
    get_default_config,
)
from .seed import player_seeds
from .logging import (
    Logger,
    GameMetrics,
    console,
    setup_logging,
    create_progress,
    print_config,
    print_board,
    print_arena_summary,
)

__all__ = [
    "Config",
    "SearchConfig",
    "SessionConfig",
    "ArenaConfig",
    "get_default_config",
    "player_seeds",
    "Logger",
    "GameMetrics",
    "console",
    "setup_logging",
    "create_progress",
    "print_config",
    "print_board",
    "print_arena_summary",
]
