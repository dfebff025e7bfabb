"""
Players that can sit at a game session.

Human players are driven by the host (the session waits for play());
computer players choose their own columns.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

import numpy as np

from ..game import Board
from ..search import AI


class Player(ABC):
    """Base class for session players."""

    name: str = "player"
    is_human: bool = False

    @abstractmethod
    def choose_move(self, board: Board, team: int) -> int:
        """Return a column for `team` to play, or -1 if none is available."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class HumanPlayer(Player):
    """
    Player whose moves come from outside.

    Args:
        name: Display name
        prompt: Optional callback asking the human for a column
    """

    is_human = True

    def __init__(self, name: str = "human", prompt: Optional[Callable[[Board], int]] = None):
        self.name = name
        self.prompt = prompt

    def choose_move(self, board: Board, team: int) -> int:
        if self.prompt is None:
            raise RuntimeError("Human moves are played through the session, not chosen")
        return self.prompt(board)


class AIPlayer(Player):
    """
    Lookahead AI player.

    Args:
        depth: Search depth (difficulty)
        name: Display name
    """

    def __init__(self, depth: int, name: Optional[str] = None):
        if depth < 1:
            raise ValueError("Depth must be at least 1")
        self.depth = depth
        self.name = name or f"ai-d{depth}"
        self._ais: dict[int, AI] = {}

    def choose_move(self, board: Board, team: int) -> int:
        ai = self._ais.get(team)
        if ai is None:
            ai = self._ais[team] = AI(team, self.depth)
        return ai.pick_best_move(board)


class RandomPlayer(Player):
    """
    Uniformly random player, for testing and baselines.

    Args:
        seed: Seed for a private numpy generator
        name: Display name
    """

    def __init__(self, seed: Optional[int] = None, name: str = "random"):
        self.name = name
        self.rng = np.random.default_rng(seed)

    def choose_move(self, board: Board, team: int) -> int:
        available = board.available_columns()
        if not available:
            return -1
        return int(self.rng.choice(available))
