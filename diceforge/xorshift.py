"""XORShift* pseudo-random number generators."""

from __future__ import annotations

import time

from diceforge.generator import Generator

_MULTIPLIER = 0x2545F4914F6CDD1D


class XORShift32(Generator):
    """Marsaglia's XORShift followed by a multiplicative transform; 32-bit output.

    A seed of zero takes the current time as the seed.
    """

    bits = 32

    def __init__(self, seed: int) -> None:
        self._state = 0
        self._reseed(seed)

    def _reseed(self, seed: int) -> None:
        mask = self.max_value
        seed &= mask
        if seed == 0:
            seed = (time.time_ns() & mask) or 1
        self._state = seed

    def _generate(self) -> int:
        mask = self.max_value
        s = self._state
        s ^= (s << 13) & mask
        s ^= s >> 17
        s ^= (s << 5) & mask
        self._state = s
        return (s * _MULTIPLIER) & mask


class XORShift64(Generator):
    """Marsaglia's XORShift followed by a multiplicative transform; 64-bit output.

    A seed of zero takes the current time as the seed.
    """

    bits = 64

    def __init__(self, seed: int) -> None:
        self._state = 0
        self._reseed(seed)

    def _reseed(self, seed: int) -> None:
        mask = self.max_value
        seed &= mask
        if seed == 0:
            seed = (time.time_ns() & mask) or 1
        self._state = seed

    def _generate(self) -> int:
        mask = self.max_value
        s = self._state
        s ^= (s << 13) & mask
        s ^= s >> 7
        s ^= (s << 17) & mask
        self._state = s
        return (s * _MULTIPLIER) & mask