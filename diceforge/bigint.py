"""A 128-bit integer held as four 32-bit limbs, used by the Blum-Blum-Shub generators."""

from __future__ import annotations

MASK32 = 0xFFFFFFFF
MASK64 = (1 << 64) - 1
TWO_32 = 1 << 32


class BigInt128:
    """Four limbs, least significant first; each limb is stored in 64 bits."""

    def __init__(self, d0: int = 0, d1: int = 0, d2: int = 0, d3: int = 0) -> None:
        self.data = [d & MASK64 for d in (d0, d1, d2, d3)]

    def __int__(self) -> int:
        return sum(limb << (32 * i) for i, limb in enumerate(self.data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInt128):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"BigInt128({', '.join(map(str, self.data))})"

    def __str__(self) -> str:
        return " ".join(str(limb) for limb in reversed(self.data))

    def square(self) -> None:
        """Square the number in place, keeping the lower four 32-bit limbs.

        Intermediate sums wrap at 64 bits, and carries are propagated after
        every partial product exactly as the generator's state update expects.
        """
        product = [0] * 8
        data = self.data
        for i in range(4):
            for j in range(4):
                product[i + j] = (product[i + j] + data[i] * data[j]) & MASK64
                product[i + j + 1] = (product[i + j + 1] + (product[i + j] >> 32)) & MASK64
        self.data = [p & MASK32 for p in product[:4]]

    def mod(self, n: int) -> None:
        """Reduce the number modulo ``n`` in place when it exceeds ``n``."""
        high, low = n >> 32, n % TWO_32
        d0, d1, d2, d3 = self.data
        if d3 > 0 or d2 > 0 or d1 > high or (d1 == high and d0 > low):
            res = 0
            for limb in reversed(self.data):
                res = ((res * TWO_32) % n + limb % n) % n
            self.data = [res & MASK32, res >> 32, 0, 0]