"""
Difficulty system for the AI player.

Difficulty is the search depth: how many plies the AI looks ahead before
falling back to the static run-histogram estimate. Each extra ply
multiplies the work by up to 7.

Higher depth = stronger play (sees forced wins and losses further out)

The system supports:
- Preset difficulties (Easy, Medium, Hard, Impossible)
- Continuous slider (0-100 mapped to depth)
- Adaptive difficulty (adjusts based on player win rate)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

MIN_DEPTH = 1
MAX_DEPTH = 5

# Upper slider bound (exclusive) for each label
SLIDER_LABELS = (
    (25, "Beginner"),
    (50, "Intermediate"),
    (75, "Advanced"),
    (95, "Expert"),
    (float("inf"), "Maximum"),
)


class Difficulty(Enum):
    """Preset difficulty levels."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    IMPOSSIBLE = "impossible"


@dataclass
class DifficultyConfig:
    """
    Configuration for AI difficulty.

    Attributes:
        depth: Search depth passed to the AI
        move_delay_ticks: Host ticks a computed move waits before it is played
        name: Human-readable name
        description: Description for UI
    """
    depth: int
    move_delay_ticks: int = 0
    name: str = ""
    description: str = ""

    def __post_init__(self):
        if self.depth < MIN_DEPTH:
            raise ValueError(f"Depth must be at least {MIN_DEPTH}")
        if self.move_delay_ticks < 0:
            raise ValueError("Move delay must be non-negative")


DIFFICULTY_PRESETS: dict[Difficulty, DifficultyConfig] = {
    Difficulty.EASY: DifficultyConfig(
        depth=1,
        move_delay_ticks=2,
        name="Easy",
        description="Takes wins it can see, misses most threats",
    ),
    Difficulty.MEDIUM: DifficultyConfig(
        depth=2,
        move_delay_ticks=2,
        name="Medium",
        description="Looks one reply ahead",
    ),
    Difficulty.HARD: DifficultyConfig(
        depth=3,
        move_delay_ticks=1,
        name="Hard",
        description="Spots most immediate traps",
    ),
    Difficulty.IMPOSSIBLE: DifficultyConfig(
        depth=4,
        move_delay_ticks=0,
        name="Impossible",
        description="Deepest search, slowest moves",
    ),
}


def get_difficulty_config(difficulty: Difficulty) -> DifficultyConfig:
    """Get the preset configuration for a difficulty level."""
    return DIFFICULTY_PRESETS[difficulty]


def parse_difficulty(name: str) -> Difficulty:
    """Look up a preset by its value ("easy", "hard", ...)."""
    try:
        return Difficulty(name.lower())
    except ValueError:
        choices = ", ".join(d.value for d in Difficulty)
        raise ValueError(f"Unknown difficulty {name!r}, expected one of: {choices}") from None


def difficulty_from_slider(
    value: float,
    min_depth: int = MIN_DEPTH,
    max_depth: int = MAX_DEPTH,
) -> DifficultyConfig:
    """
    Create difficulty config from a continuous slider value.

    Maps a 0-100 slider linearly onto the depth range, rounding down, so
    each depth owns an equal share of the slider.

    Args:
        value: Slider value from 0 to 100
        min_depth: Depth at value=0
        max_depth: Depth at value=100

    Returns:
        DifficultyConfig for the slider position
    """
    value = max(0.0, min(100.0, value))

    span = max_depth - min_depth + 1
    depth = min(max_depth, min_depth + int(value / 100.0 * span))

    name = next(label for bound, label in SLIDER_LABELS if value < bound)

    return DifficultyConfig(
        depth=depth,
        name=name,
        description=f"search depth {depth}",
    )


class AdaptiveDifficulty:
    """
    Adaptive difficulty that adjusts based on player performance.

    Tracks win/loss record and moves the search depth one step at a time
    toward a target win rate for the player (default 50%).
    """

    def __init__(
        self,
        target_win_rate: float = 0.5,
        min_depth: int = MIN_DEPTH,
        max_depth: int = MAX_DEPTH,
        initial_depth: int = 2,
        tolerance: float = 0.1,
        window_size: int = 10,
    ):
        """
        Initialize adaptive difficulty.

        Args:
            target_win_rate: Target player win rate (0.5 = 50%)
            min_depth: Minimum search depth
            max_depth: Maximum search depth
            initial_depth: Starting depth
            tolerance: Win rate deviation tolerated before adjusting
            window_size: Number of recent games to consider
        """
        if not min_depth <= initial_depth <= max_depth:
            raise ValueError("initial_depth must lie within [min_depth, max_depth]")

        self.target_win_rate = target_win_rate
        self.min_depth = min_depth
        self.max_depth = max_depth
        self.initial_depth = initial_depth
        self.current_depth = initial_depth
        self.tolerance = tolerance
        self.window_size = window_size

        # Track recent results (1 = player win, 0 = player loss, 0.5 = draw)
        self.results: list[float] = []

    def record_result(self, player_won: bool, draw: bool = False) -> None:
        """
        Record game result.

        Args:
            player_won: True if human player won
            draw: True if game was a draw
        """
        self.results.append(0.5 if draw else float(player_won))
        del self.results[:-self.window_size]

        self._adjust()

    def _adjust(self) -> None:
        """Step the depth toward the target win rate."""
        if len(self.results) < 3:
            return

        error = self.current_win_rate - self.target_win_rate

        # Player winning too much = search deeper
        if error > self.tolerance:
            self.current_depth = min(self.max_depth, self.current_depth + 1)
        elif error < -self.tolerance:
            self.current_depth = max(self.min_depth, self.current_depth - 1)

    def get_config(self) -> DifficultyConfig:
        """Get current difficulty configuration."""
        return DifficultyConfig(
            depth=self.current_depth,
            name="Adaptive",
            description=f"Adapting to your skill (depth {self.current_depth})",
        )

    @property
    def current_win_rate(self) -> Optional[float]:
        """Get player's recent win rate."""
        if not self.results:
            return None
        return sum(self.results) / len(self.results)

    def reset(self) -> None:
        """Reset tracking (start fresh)."""
        self.results = []
        self.current_depth = self.initial_depth
