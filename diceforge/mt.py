"""Mersenne Twister generators in 32-bit and 64-bit variants."""

from __future__ import annotations

import time
from typing import ClassVar

from diceforge.generator import Generator

_SEED_MASK = 0x7FFFFFFF
_SEED_MULTIPLIER = 69069


class _MersenneTwister(Generator):
    """Shared Mersenne Twister machinery; subclasses supply the parameters."""

    _n: ClassVar[int]
    _m: ClassVar[int]
    _a: ClassVar[int]
    _upper: ClassVar[int]
    _lower: ClassVar[int]
    _mask_b: ClassVar[int]
    _mask_c: ClassVar[int]
    _shift_u: ClassVar[int]
    _shift_s: ClassVar[int]
    _shift_t: ClassVar[int]
    _shift_l: ClassVar[int]

    def __init__(self, seed: int) -> None:
        self._state = [0] * self._n
        self._index = self._n + 1
        self._reseed(seed)

    def _reseed(self, seed: int) -> None:
        seed &= self.max_value
        if seed == 0:
            seed = int(time.time()) & self.max_value
        value = seed & _SEED_MASK
        state = [value]
        for _ in range(1, self._n):
            value = (value * _SEED_MULTIPLIER) & _SEED_MASK
            state.append(value)
        self._state = state
        self._index = self._n + 1

    def _twist(self) -> None:
        mt = self._state
        n, m = self._n, self._m
        upper, lower = self._upper, self._lower
        matrix = (0, self._a)
        for k in range(n):
            y = (mt[k] & upper) | (mt[(k + 1) % n] & lower)
            mt[k] = mt[(k + m) % n] ^ (y >> 1) ^ matrix[y & 1]
        self._index = 0

    def _temper(self, y: int) -> int:
        mask = self.max_value
        y ^= y >> self._shift_u
        y ^= (y << self._shift_s) & self._mask_b & mask
        y ^= (y << self._shift_t) & self._mask_c & mask
        y ^= y >> self._shift_l
        return y

    def _generate(self) -> int:
        if self._index >= self._n:
            self._twist()
        y = self._temper(self._state[self._index])
        self._index += 1
        return y


class MT32(_MersenneTwister):
    """Mersenne Twister producing 32-bit unsigned integers.

    A seed of zero takes the current time as the seed.
    """

    bits = 32
    _n = 624
    _m = 397
    _a = 0x9908B0DF
    _upper = 0x80000000
    _lower = 0xFFFFFFFF
    _mask_b = 0x9D2C5680
    _mask_c = 0xEFC60000
    _shift_u = 11
    _shift_s = 7
    _shift_t = 15
    _shift_l = 18


class MT64(_MersenneTwister):
    """Mersenne Twister producing 64-bit unsigned integers.

    A seed of zero takes the current time as the seed.
    """

    bits = 64
    _n = 312
    _m = 156
    _a = 0xB5026F5AA96619E9
    _upper = 0xFFFFFFFF80000000
    _lower = 0x7FFFFFFF
    _mask_b = 0xD66B5EF5B4DA0000
    _mask_c = 0xFDED6BE000000000
    _shift_u = 29
    _shift_s = 17
    _shift_t = 37
    _shift_l = 41