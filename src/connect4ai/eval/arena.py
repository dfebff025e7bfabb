"""
Arena for comparing players through head-to-head matches.

Used to measure how much a deeper search buys over a shallower one (or
over random play).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..game import Team
from ..play import GameSession, GameStatus, Player


@dataclass
class ArenaResult:
    """Results from arena evaluation."""

    wins: int
    losses: int
    draws: int
    total_games: int
    win_rate: float

    @property
    def score(self) -> float:
        """Win rate counting draws as half."""
        return (self.wins + 0.5 * self.draws) / self.total_games if self.total_games > 0 else 0.0


def play_session(player1: Player, player2: Player) -> GameSession:
    """Play one game between two computer players and return the finished session."""
    if player1.is_human or player2.is_human:
        raise ValueError("Arena games need two computer players")

    session = GameSession({Team.BLUE: player1, Team.RED: player2})

    while not session.is_over:
        session.tick()

    return session


def outcome_of(session: GameSession) -> float:
    """+1 if blue (player 1) won, -1 if red won, 0 for a draw."""
    if session.status is GameStatus.DRAW:
        outcome = 0.0
    elif session.winner == Team.BLUE:
        outcome = 1.0
    else:
        outcome = -1.0
    return outcome


def play_match(player1: Player, player2: Player) -> Tuple[float, int]:
    """
    Play one game between two computer players.

    Args:
        player1: Moves first (blue)
        player2: Moves second (red)

    Returns:
        (outcome, num_moves) where outcome is +1 if player 1 wins, -1 if loses, 0 draw
    """
    session = play_session(player1, player2)
    return outcome_of(session), len(session.moves)


class Arena:
    """
    Arena for evaluation matches.

    Args:
        num_games: Default number of games per evaluation
    """

    def __init__(self, num_games: int = 20):
        self.num_games = num_games

    def evaluate(
        self,
        candidate: Player,
        opponent: Player,
        num_games: Optional[int] = None,
        progress_callback: Callable[[int, str], None] = None,
        game_callback: Callable[[int, GameSession], None] = None,
    ) -> ArenaResult:
        """
        Evaluate candidate against opponent.

        Plays num_games matches, alternating who goes first.

        Args:
            candidate: Player being measured
            opponent: Reference player
            num_games: Number of games to play (defaults to the arena's)
            progress_callback: Optional callback(games_completed, result)
            game_callback: Optional callback(games_completed, finished_session)

        Returns:
            ArenaResult from candidate's perspective
        """
        if num_games is None:
            num_games = self.num_games

        wins = 0
        losses = 0
        draws = 0

        for i in range(num_games):
            if i % 2 == 0:
                session = play_session(candidate, opponent)
                outcome = outcome_of(session)
            else:
                session = play_session(opponent, candidate)
                outcome = -outcome_of(session)  # Flip to candidate's perspective

            if game_callback:
                game_callback(i + 1, session)

            if outcome > 0:
                wins += 1
                result = "W"
            elif outcome < 0:
                losses += 1
                result = "L"
            else:
                draws += 1
                result = "D"

            if progress_callback:
                progress_callback(i + 1, result)

        total = wins + losses + draws
        win_rate = wins / total if total > 0 else 0.0

        return ArenaResult(
            wins=wins,
            losses=losses,
            draws=draws,
            total_games=total,
            win_rate=win_rate,
        )


def should_accept(result: ArenaResult, threshold: float = 0.55) -> bool:
    """
    Determine if candidate beat the opponent convincingly.

    Args:
        result: Arena evaluation result
        threshold: Minimum score to accept (default 55%)

    Returns:
        True if candidate's score reaches the threshold
    """
    return result.score >= threshold
