from __future__ import annotations
import random
from typing import List, MutableSequence, Optional, TypeVar

T = TypeVar("T")


class RandomSeed:
    """Seeded random stream owned by a single generation call.

    Every draw goes through this object so a layout depends only on the seed
    and on the order of calls made by the generators.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = random.SystemRandom().randrange(0, 2 ** 31)
        self.seed = int(seed)
        self._rng = random.Random(self.seed)

    def __repr__(self) -> str:
        return f"RandomSeed(seed={self.seed})"

    def next(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi)."""
        return self._rng.randrange(lo, hi)

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        self._rng.shuffle(items)
        return items

    def sample(self, items: List[T], k: int) -> List[T]:
        return self._rng.sample(items, k)

    def chance_satisfied(self, chance: float) -> bool:
        return self._rng.random() < chance
