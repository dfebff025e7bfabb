"""Game module - Connect 4 board and run detection."""

from .board import (
    COLS,
    ROWS,
    WIN_LENGTH,
    OFF_BOARD,
    TEAMS,
    Team,
    Position,
    Board,
    other_team,
    render,
)

from .runs import (
    DIRECTIONS,
    run_length_in_direction,
    runs_from_point,
    has_winning_run,
)

__all__ = [
    "COLS",
    "ROWS",
    "WIN_LENGTH",
    "OFF_BOARD",
    "TEAMS",
    "Team",
    "Position",
    "Board",
    "other_team",
    "render",
    "DIRECTIONS",
    "run_length_in_direction",
    "runs_from_point",
    "has_winning_run",
]
