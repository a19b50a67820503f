"""Seeded pseudo-random generator shared by every deterministic generator."""

from typing import List, MutableSequence, Sequence, TypeVar

T = TypeVar("T")

_MULTIPLIER = 1664525
_INCREMENT = 1013904223
_MASK = 0xFFFFFFFF


class SeededRandom:
    """
    32-bit linear congruential generator.

    Produces the same sequence for the same seed on every platform, which
    ``random.Random`` does not promise across Python versions for all methods.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._state = abs(seed) & _MASK

    def next(self) -> int:
        """Advance the generator and return the new 32-bit state."""
        self._state = (self._state * _MULTIPLIER + _INCREMENT) & _MASK
        return self._state

    def next_float(self) -> float:
        """Uniform float in [0, 1)."""
        return self.next() / (_MASK + 1)

    def next_int(self, low: int, high: int) -> int:
        """
        Integer in [low, high).

        Raises:
            ValueError: If the range is empty
        """
        width = high - low
        if width <= 0:
            raise ValueError(f"Empty range [{low}, {high})")
        # Multiply-shift maps the 32-bit state onto [0, width) from its high bits
        return low + ((self.next() * width) >> 32)

    def next_bool(self) -> bool:
        return self.next() >> 31 == 1

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("Cannot choose from an empty sequence")
        return items[self.next_int(0, len(items))]

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Fisher-Yates shuffle in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(0, i + 1)
            items[i], items[j] = items[j], items[i]

    def sample(self, items: Sequence[T], k: int) -> List[T]:
        pool = list(items)
        self.shuffle(pool)
        return pool[:k]
