"""Randomness: the 32-bit mixer, the Xorshift128+ generator and seed derivation."""

from pick3_predictor.rng.mixer import MASK32, mix32
from pick3_predictor.rng.prng import PRNGState, Xorshift128Plus, unique_in_range

__all__ = ["MASK32", "mix32", "PRNGState", "Xorshift128Plus", "unique_in_range"]
