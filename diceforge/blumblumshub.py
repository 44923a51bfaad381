"""Blum-Blum-Shub pseudo-random number generators."""

from __future__ import annotations

from diceforge.bigint import BigInt128
from diceforge.generator import Generator

P = 4294967291
Q = 4294967279
MODULUS = P * Q

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1
# Added to the state when it collapses to 0 or 1 so that it cannot stay there.
_NUDGE = 429496737


class _BlumBlumShub(Generator):
    """Squares the state modulo ``MODULUS`` and emits its low byte once per step."""

    def __init__(self, seed: int) -> None:
        self._state = BigInt128()
        self._reseed(seed)

    def _reseed(self, seed: int) -> None:
        seed &= self.max_value
        self._state = BigInt128(seed & _MASK32, seed >> 32)

    def _propagate(self) -> None:
        state = self._state
        state.square()
        state.mod(MODULUS)
        data = state.data
        if data[0] in (0, 1) and data[1] != 0:
            data[0] = (data[0] + _NUDGE) & _MASK64
            data[1] = (data[1] + (data[0] >> 32)) & _MASK64
            data[0] &= _MASK32

    def _generate(self) -> int:
        mask = self.max_value
        num = 0
        for _ in range(self.bits // 8):
            self._propagate()
            num = ((num << 8) | (self._state.data[0] & 0xFF)) & mask
        return num


class BlumBlumShub32(_BlumBlumShub):
    """Blum-Blum-Shub generator producing 32-bit unsigned integers."""

    bits = 32


class BlumBlumShub64(_BlumBlumShub):
    """Blum-Blum-Shub generator producing 64-bit unsigned integers."""

    bits = 64