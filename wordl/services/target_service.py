"""
Target Service

Picks the hidden word for a new game from the length-filtered target pool,
either at random or reproducibly from a shared seed.
"""

import random
from typing import List, Optional

from ..config.game_settings import WILDCARD


class WordPoolExhaustedError(RuntimeError):
    """The pool has no pickable target of the requested length (configuration error)."""


class TargetSelector:
    """
    Chooses targets from a word pool.

    Without a seed every pick is session-random. With a seed, the pick is a
    pure function of (seed, length, game_number) so that every player sharing
    those three values gets the same target.
    """

    def __init__(self, pool: List[str], rng: Optional[random.Random] = None):
        self.pool = list(pool)
        self.rng = rng or random.Random()

    def eligible(self, length: int) -> List[str]:
        return [word for word in self.pool if len(word) == length]

    def pick_target(self, length: int, seed: Optional[int] = None, game_number: int = 1) -> str:
        """
        Selects a target of the given length.

        Wildcard entries are skipped by drawing again from the same generator.

        Raises:
            WordPoolExhaustedError: If no pickable entry of that length exists
        """
        candidates = self.eligible(length)
        if not any(WILDCARD not in word for word in candidates):
            raise WordPoolExhaustedError(f"No pickable target of length {length} in the word pool")

        rng = self.rng if seed is None else random.Random(f"{seed}:{length}:{game_number}")

        candidate = rng.choice(candidates)
        while WILDCARD in candidate:
            candidate = rng.choice(candidates)
        return candidate
