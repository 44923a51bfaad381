"""Pseudo-random number generators (XORShift, Mersenne Twister, LFSR,
Blum-Blum-Shub, Naor-Reingold) and Gauss-Legendre integration helpers."""

__version__ = "1.0.0"

__all__ = [
    "bigint",
    "blumblumshub",
    "generator",
    "generators",
    "integrate",
    "lfsr",
    "mt",
    "naor_reingold",
    "xorshift",
]