"""
Logging utilities with rich formatting.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Optional, Any

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TaskProgressColumn,
    TimeElapsedColumn,
    MofNCompleteColumn,
)
from rich.panel import Panel


console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Route library log records through rich; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


@dataclass
class GameMetrics:
    """Metrics for one finished game."""

    game: int
    blue: str
    red: str
    winner: Optional[str]
    num_moves: int
    moves: list[int]
    duration: float
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now().isoformat()


class Logger:
    """
    Game logger with rich output and JSON logging.

    Args:
        log_dir: Directory for log files
        verbose: Whether to print to console
    """

    def __init__(self, log_dir: str = "runs", verbose: bool = True):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.verbose = verbose

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_file = self.log_dir / f"games_{timestamp}.jsonl"

        self.metrics_history: list[GameMetrics] = []

    def log_game(self, metrics: GameMetrics) -> None:
        """Log metrics for one game."""
        self.metrics_history.append(metrics)

        with open(self.log_file, "a") as f:
            f.write(json.dumps(asdict(metrics)) + "\n")

        if self.verbose:
            self._print_game(metrics)

    def _print_game(self, m: GameMetrics) -> None:
        """Print game summary to console."""
        table = Table(title=f"Game {m.game}", show_header=False, box=None)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Blue", m.blue)
        table.add_row("Red", m.red)
        table.add_row("Winner", m.winner or "[yellow]draw[/]")
        table.add_row("Moves", str(m.num_moves))
        table.add_row("Duration", f"{m.duration:.2f}s")

        console.print(table)


def create_progress() -> Progress:
    """Create a rich progress bar with elapsed time."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_config(config: Any) -> None:
    """Print configuration in a nice format."""
    table = Table(title="Configuration", show_header=True)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="white")

    def add_dict(d: dict, prefix: str = "") -> None:
        for k, v in d.items():
            key = f"{prefix}{k}" if prefix else k
            if isinstance(v, dict):
                add_dict(v, f"{key}.")
            else:
                table.add_row(key, str(v))

    add_dict(asdict(config))
    console.print(table)


def print_board(board_str: str, title: str = "Board") -> None:
    """Print a game board in a panel."""
    console.print(Panel(board_str, title=title, border_style="blue"))


def print_arena_summary(result: Any, candidate: str, opponent: str) -> None:
    """Print an arena result from the candidate's side."""
    table = Table(title=f"{candidate} vs {opponent}", show_header=True)
    table.add_column("Wins", style="green", justify="right")
    table.add_column("Losses", style="red", justify="right")
    table.add_column("Draws", style="yellow", justify="right")
    table.add_column("Score", style="cyan", justify="right")

    table.add_row(
        str(result.wins),
        str(result.losses),
        str(result.draws),
        f"{result.score * 100:.1f}%",
    )
    console.print(table)
