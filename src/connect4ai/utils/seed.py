"""
Seeding for reproducible arena runs.
"""

from __future__ import annotations

import numpy as np


def player_seeds(seed: int, count: int = 2) -> list[int]:
    """
    Derive independent seeds for the random players of one run.

    Every player stream follows from the single run seed, so a run is
    repeated exactly by passing the same --seed.

    Args:
        seed: Run seed
        count: Number of seeds to derive

    Returns:
        List of `count` integer seeds
    """
    children = np.random.SeedSequence(seed).spawn(count)
    return [int(child.generate_state(1)[0]) for child in children]
