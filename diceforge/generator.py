"""Base class shared by every pseudo-random number generator in the package."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from bisect import bisect_right
from collections.abc import MutableSequence, Sequence
from itertools import accumulate
from typing import ClassVar, Optional, TypeVar

T = TypeVar("T")


class Generator(ABC):
    """A source of unsigned random integers with helpers built on top of it.

    Subclasses set ``bits`` to the width of the integers they produce and
    implement ``_generate`` and ``_reseed``.
    """

    bits: ClassVar[int] = 64

    @property
    def max_value(self) -> int:
        """Largest integer the generator can produce."""
        return (1 << self.bits) - 1

    @abstractmethod
    def _generate(self) -> int:
        """Produce the next raw random integer."""

    @abstractmethod
    def _reseed(self, seed: int) -> None:
        """Re-initialise the internal state from ``seed``."""

    def next(self) -> int:
        """Return a random unsigned integer of ``bits`` width."""
        return self._generate() & self.max_value

    def next_unit(self) -> float:
        """Return a random real number in [0, 1)."""
        scale = float(self.max_value)
        while True:
            x = self.next() / scale
            if x != 1.0:
                return x

    def next_in_range(self, low: int, high: int) -> int:
        """Return a random integer between ``low`` and ``high``, both inclusive."""
        if high < low:
            raise ValueError("high must not be less than low")
        return math.floor(self.next_unit() * (high - low + 1)) + low

    def next_in_crange(self, low: float, high: float) -> float:
        """Return a random real number in [low, high)."""
        if low == high:
            raise ValueError("low and high must differ")
        while True:
            x = (high - low) * self.next_unit() + low
            if x != high:
                return x

    def reset_seed(self, seed: int) -> None:
        """Re-initialise the generator with ``seed``."""
        self._reseed(seed)

    def choice(self, seq: Sequence[T], weights: Optional[Sequence[float]] = None) -> T:
        """Return a random element of ``seq``, optionally weighted by ``weights``."""
        if weights is None:
            if not seq:
                raise IndexError("cannot choose from an empty sequence")
            return seq[self.next_in_range(0, len(seq) - 1)]

        if len(seq) != len(weights):
            raise ValueError("Lengths of sequence and weight sequence must be equal!")
        if not seq:
            raise ValueError("Sequence must have non-zero length!")

        cumulative = list(accumulate(weights))
        total = cumulative[-1]
        if total <= 0:
            raise ValueError("weights must sum to a positive value")
        index = bisect_right(cumulative, self.next_unit() * total)
        return seq[min(index, len(seq) - 1)]

    def shuffle(self, seq: MutableSequence[T]) -> None:
        """Shuffle ``seq`` in place."""
        pool = list(seq)
        seq[:] = [pool.pop(self.next_in_range(0, len(pool) - 1)) for _ in range(len(pool))]