"""Random selection primitives shared by the task generators.

Every function takes an explicit ``random.Random`` so callers can seed it.
"""

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def pick_random(items: Sequence[T], rng: random.Random) -> T:
    """Return one element chosen uniformly from a non-empty sequence."""
    if not items:
        raise ValueError("cannot pick from an empty sequence")
    return items[rng.randrange(len(items))]


def shuffle(items: list[T], rng: random.Random) -> list[T]:
    """Fisher-Yates shuffle in place. Returns the same list for chaining."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def sample_distinct(items: Sequence[T], count: int, rng: random.Random) -> list[T]:
    """Draw ``count`` distinct elements without replacement (fewer if short)."""
    pool = list(items)
    picked: list[T] = []
    while len(picked) < count and pool:
        picked.append(pool.pop(rng.randrange(len(pool))))
    return picked


def prefer_review(
    pool: Sequence[T],
    review: Sequence[T],
    rng: random.Random,
    probability: float = 0.5,
) -> T:
    """Pick from ``review`` with ``probability`` when it is non-empty, else from ``pool``.

    The coin is flipped only when review candidates exist.
    """
    if review and rng.random() < probability:
        return pick_random(review, rng)
    return pick_random(pool, rng)
