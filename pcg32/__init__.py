"""Public package surface for the pcg32 generator."""

from .prng import DEFAULT_INC, DEFAULT_STATE, MUL, PCG32

__all__ = [
    "DEFAULT_INC",
    "DEFAULT_STATE",
    "MUL",
    "PCG32",
]
