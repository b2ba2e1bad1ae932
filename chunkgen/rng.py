"""Random source helpers.

Every draw made by the generator goes through ``rng.random()``, so any
object exposing that single method can stand in for the random source.
Production callers pass a ``random.Random``; tests pass a
:class:`FixedSequence` to replay known draws.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything with a uniform ``random() -> [0, 1)`` method."""

    def random(self) -> float:
        """Return the next float in [0, 1)."""
        ...


class FixedSequence:
    """Replays a fixed list of draws.

    Cycles back to the start when exhausted unless ``cycle`` is False, in
    which case running out raises ``IndexError``.
    """

    def __init__(self, values: Iterable[float], cycle: bool = True):
        self._values = [float(v) for v in values]
        if not self._values:
            raise ValueError("FixedSequence needs at least one value")
        self._cycle = cycle
        self._index = 0
        self.calls = 0

    def random(self) -> float:
        if self._index >= len(self._values):
            if not self._cycle:
                raise IndexError("FixedSequence exhausted")
            self._index = 0
        value = self._values[self._index]
        self._index += 1
        self.calls += 1
        return value


def _index(rng: RandomSource, n: int) -> int:
    """Uniform index in [0, n)."""
    return min(int(math.floor(rng.random() * n)), n - 1)


def rand_int(rng: RandomSource, low: int, high: int) -> int:
    """Uniform integer in [low, high], both ends inclusive."""
    if high < low:
        low, high = high, low
    return low + _index(rng, high - low + 1)


def choice(rng: RandomSource, items: Sequence[T]) -> Optional[T]:
    """Pick one element uniformly, or None from an empty sequence."""
    if not items:
        return None
    return items[_index(rng, len(items))]


def shuffle(rng: RandomSource, items: Iterable[T]) -> List[T]:
    """Return a shuffled copy (Fisher-Yates, so every order is equally likely)."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = _index(rng, i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def sample(rng: RandomSource, items: Iterable[T], k: int) -> List[T]:
    """Draw ``k`` distinct elements without replacement."""
    return shuffle(rng, items)[: max(0, k)]


def weighted_choice(rng: RandomSource, options: Sequence[Tuple[T, float]]) -> T:
    """Pick an option with probability proportional to its weight.

    Negative weights count as zero.  When every weight is zero the first
    option is returned.
    """
    if not options:
        raise ValueError("weighted_choice needs at least one option")
    total = sum(max(0.0, w) for _, w in options)
    if total <= 0:
        return options[0][0]
    r = rng.random() * total
    acc = 0.0
    for item, w in options:
        acc += max(0.0, w)
        if r < acc:
            return item
    return options[-1][0]
