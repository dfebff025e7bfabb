"""
Host-side game session.

The session owns the real board, alternates teams, and checks for a win
(a four through the disc just dropped) or a draw (board full) after
every move.

Computer moves are staged across host ticks so a front end can show the
AI "thinking" before its disc drops:

    Idle --tick--> Pending(column, 0) --tick--> ... --tick--> Idle (move played)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from ..game import Board, Team, TEAMS, has_winning_run, other_team
from .players import Player


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class GameOverError(RuntimeError):
    """Raised when a move is attempted after the game has ended."""


@dataclass(frozen=True)
class Idle:
    """No computer move in flight."""


@dataclass(frozen=True)
class Pending:
    """A computed move waiting to be played."""

    column: int
    ticks_elapsed: int = 0


MoveStage = Union[Idle, Pending]


class GameSession:
    """
    One game between two players.

    Args:
        players: Player for each team (Team.BLUE, Team.RED)
        move_delay_ticks: Ticks a computed move stays pending before it is played
        first_team: Team that moves first
    """

    def __init__(
        self,
        players: dict[int, Player],
        move_delay_ticks: int = 0,
        first_team: int = Team.BLUE,
    ):
        if set(players) != set(TEAMS):
            raise ValueError("A session needs exactly one player per team")
        if first_team not in TEAMS:
            raise ValueError(f"Invalid team {first_team}")
        if move_delay_ticks < 0:
            raise ValueError("Move delay must be non-negative")

        self.players = players
        self.move_delay_ticks = move_delay_ticks
        self.first_team = first_team
        self.board = Board()
        self.reset()

    def reset(self) -> None:
        """Start a new game on the same board ("play again")."""
        self.board.reset()
        self.active_team = self.first_team
        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[int] = None
        self.moves: list[tuple[int, int]] = []
        self.stage: MoveStage = Idle()

    @property
    def current_player(self) -> Player:
        return self.players[self.active_team]

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def last_move(self) -> int:
        return self.moves[-1][1] if self.moves else -1

    def play(self, column: int) -> bool:
        """
        Drop a disc for the active team.

        Args:
            column: Column index (0-6)

        Returns:
            False if the column is full (nothing changes), True otherwise
        """
        if self.is_over:
            raise GameOverError(f"Game is over ({self.status.value})")

        team = self.active_team
        if not self.board.insert(column, team):
            return False

        self.moves.append((team, column))
        self.stage = Idle()

        runs = self.board.runs_from_point(self.board.last_insert_position(column), team)
        if has_winning_run(runs):
            self.status = GameStatus.WON
            self.winner = team
        elif self.board.is_full():
            self.status = GameStatus.DRAW
        else:
            self.active_team = other_team(team)
        return True

    def tick(self) -> Optional[int]:
        """
        Advance a computer player's staged move by one host tick.

        Returns:
            The column played on this tick, or None if no move was played
            (human turn, or the move is still pending)
        """
        if self.is_over:
            raise GameOverError(f"Game is over ({self.status.value})")

        player = self.current_player
        if player.is_human:
            return None

        if isinstance(self.stage, Idle):
            column = player.choose_move(self.board, self.active_team)
            if column < 0:
                self.status = GameStatus.DRAW
                return None
            self.stage = Pending(column)
        else:
            self.stage = replace(self.stage, ticks_elapsed=self.stage.ticks_elapsed + 1)

        if self.stage.ticks_elapsed < self.move_delay_ticks:
            return None

        column = self.stage.column
        if not self.play(column):
            raise RuntimeError(f"{player!r} chose full column {column}")
        return column
