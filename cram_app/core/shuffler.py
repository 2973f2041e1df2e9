"""Copy-on-write Fisher-Yates shuffle with an injectable random source."""

from __future__ import annotations

from collections.abc import Iterable
import random
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def shuffle(items: Iterable[T], rng: RandomSource | None = None) -> list[T]:
    """Return a uniformly shuffled copy of ``items``.

    Args:
        items: Elements to shuffle. Never modified.
        rng: Source of ``randint``; a ``random.Random(seed)`` gives
            reproducible permutations. Defaults to an OS-seeded generator.

    Returns:
        A new list holding the same elements.
    """
    source = rng if rng is not None else random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = source.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
