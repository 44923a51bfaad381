"""All generators of the package, their short aliases and the default generator."""

from __future__ import annotations

from functools import lru_cache

from diceforge.blumblumshub import BlumBlumShub32, BlumBlumShub64
from diceforge.generator import Generator
from diceforge.lfsr import LFSR32, LFSR64
from diceforge.mt import MT32, MT64
from diceforge.naor_reingold import NaorReingold
from diceforge.xorshift import XORShift32, XORShift64

BlumBlumShub = BlumBlumShub64
LFSR = LFSR64
MT = MT64
NaorReingold32 = NaorReingold
XORShift = XORShift64

__all__ = [
    "Generator",
    "BlumBlumShub",
    "BlumBlumShub32",
    "BlumBlumShub64",
    "LFSR",
    "LFSR32",
    "LFSR64",
    "MT",
    "MT32",
    "MT64",
    "NaorReingold",
    "NaorReingold32",
    "XORShift",
    "XORShift32",
    "XORShift64",
    "default_generator",
]


@lru_cache(maxsize=None)
def default_generator() -> XORShift64:
    """Return the shared, time-seeded XORShift64 generator."""
    return XORShift64(0)