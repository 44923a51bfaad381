"""Naor-Reingold pseudo-random function used as a counter-mode generator."""

from __future__ import annotations

import time

from diceforge.generator import Generator

L = 9999929
P = 4279969613
G = 9999918
KEY = (
    650051, 3948705, 3142325, 4036110, 1141941, 5739231, 5725758,
    8299330, 1776388, 1423550, 9260804, 156410, 1190436, 61218,
    2382500, 1738876, 7978879, 6010478, 310917, 4280253, 24724,
    7087659, 796099, 8383655, 7638286, 1390415, 7899225, 5628976,
    1472292, 4284966, 9708041, 4179835, 3635954,
)

_MASK64 = (1 << 64) - 1
_FACTORS = tuple(pow(G, k, P) for k in KEY[:32])
# The top bit test also covers every bit above it of the 64-bit counter.
_BIT_MASKS = tuple(1 << i for i in range(31)) + (_MASK64 ^ ((1 << 31) - 1),)


class NaorReingold(Generator):
    """Evaluates the Naor-Reingold function on an incrementing counter; 32-bit output.

    The key is fixed; the seed only sets the starting counter. A seed of zero
    takes the current time as the seed.
    """

    bits = 32

    def __init__(self, seed: int) -> None:
        self._state = 0
        self._reseed(seed)

    def _reseed(self, seed: int) -> None:
        seed &= self.max_value
        self._state = seed if seed else time.time_ns() & _MASK64

    def _generate(self) -> int:
        state = self._state
        res = 1
        for mask, factor in zip(_BIT_MASKS, _FACTORS):
            if state & mask:
                res = (res * factor) % P
        self._state = (state + 1) & _MASK64
        return res