"""Linear feedback shift register generators built on a 128-bit register."""

from __future__ import annotations

import time

from diceforge.generator import Generator

_MASK64 = (1 << 64) - 1
_MULTIPLIER = 0x2545F4914F6CDD1D


class _LFSR(Generator):
    """A 128-bit Fibonacci LFSR, held as two 64-bit halves, emitting one bit per shift.

    The register is seeded from the seed (or from the current time when the
    seed is zero) and then run for a number of warm-up outputs, since the
    first 128 bits shifted out are only the seed reversed.
    """

    _warmup: int = 0

    def __init__(self, seed: int) -> None:
        self._high = 0
        self._low = 0
        self._reseed(seed)

    def _initial_halves(self, seed: int) -> int:
        """Return the value both register halves start from for a non-zero ``seed``."""
        return seed

    def _reseed(self, seed: int) -> None:
        seed &= self.max_value
        if seed == 0:
            self._high = time.time_ns() & _MASK64
            self._low = time.time_ns() & _MASK64
        else:
            self._high = self._low = self._initial_halves(seed) & _MASK64
        for _ in range(self._warmup):
            self._generate()

    def _generate(self) -> int:
        mask = self.max_value
        high, low = self._high, self._low
        result = 0
        for _ in range(self.bits):
            new_bit = (low ^ (low >> 1) ^ (low >> 2) ^ (low >> 7)) & 1
            low = (low >> 1) | ((high << 63) & _MASK64)
            high = (high >> 1) | (new_bit << 63)
            result = ((result << 1) | (low & 1)) & mask
        self._high, self._low = high, low
        return (result * _MULTIPLIER) & mask


class LFSR64(_LFSR):
    """Linear feedback shift register producing 64-bit unsigned integers.

    A seed of zero takes the current time as the seed.
    """

    bits = 64
    _warmup = 102


class LFSR32(_LFSR):
    """Linear feedback shift register producing 32-bit unsigned integers.

    A seed of zero takes the current time as the seed.
    """

    bits = 32
    _warmup = 204

    def _initial_halves(self, seed: int) -> int:
        return (seed << 32) | seed