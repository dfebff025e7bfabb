"""
Configuration management for the Connect 4 AI.

Uses dataclasses for clean configuration with sensible defaults.
Supports loading from YAML files.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional
import yaml

from ..play.difficulty import DifficultyConfig, get_difficulty_config, parse_difficulty


@dataclass
class SearchConfig:
    """AI search configuration."""

    difficulty: str = "medium"
    depth: Optional[int] = None  # Overrides the difficulty preset when set

    def preset(self) -> DifficultyConfig:
        return get_difficulty_config(parse_difficulty(self.difficulty))

    def resolve_depth(self) -> int:
        """Search depth to use: explicit depth, else the preset's."""
        if self.depth is not None:
            if self.depth < 1:
                raise ValueError("Search depth must be at least 1")
            return self.depth
        return self.preset().depth


@dataclass
class SessionConfig:
    """Interactive game configuration."""

    move_delay_ticks: Optional[int] = None  # Overrides the difficulty preset when set
    human_first: bool = True


@dataclass
class ArenaConfig:
    """Arena configuration."""

    num_games: int = 20
    seed: int = 42


@dataclass
class Config:
    """Full application configuration."""

    search: SearchConfig = field(default_factory=SearchConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)

    log_dir: str = "runs"

    def save(self, path: str) -> None:
        """Save config to YAML file."""
        with open(path, "w") as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    @classmethod
    def load(cls, path: str) -> Config:
        """Load config from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls(
            search=SearchConfig(**data.get("search", {})),
            session=SessionConfig(**data.get("session", {})),
            arena=ArenaConfig(**data.get("arena", {})),
            log_dir=data.get("log_dir", "runs"),
        )

    def resolve_move_delay(self) -> int:
        """Ticks an AI move stays pending: explicit session delay, else the preset's."""
        delay = self.session.move_delay_ticks
        if delay is not None:
            if delay < 0:
                raise ValueError("Move delay must be non-negative")
            return delay
        return self.search.preset().move_delay_ticks

    def ensure_dirs(self) -> None:
        """Create output directories if they don't exist."""
        Path(self.log_dir).mkdir(parents=True, exist_ok=True)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
