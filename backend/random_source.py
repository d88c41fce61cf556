"""Seedable source for every random choice the chat engine makes."""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Thin wrapper over ``random.Random``.

    Template selection, Fisher-Yates shuffles and the personalization coin
    flip all draw from one instance, so a seeded source replays a whole
    conversation deterministically.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rnd = random.Random(seed)

    def random(self) -> float:
        return self._rnd.random()

    def randrange(self, stop: int) -> int:
        return self._rnd.randrange(stop)

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("cannot choose from an empty sequence")
        return items[self._rnd.randrange(len(items))]

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a uniformly permuted copy of *items* (Fisher-Yates)."""
        out = list(items)
        for i in range(len(out) - 1, 0, -1):
            j = self._rnd.randrange(i + 1)
            out[i], out[j] = out[j], out[i]
        return out
