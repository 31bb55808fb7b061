from __future__ import annotations

MASK32 = 0xFFFFFFFF


def mix32(x: int) -> int:
    """
    32-bit avalanche finalizer (the MurmurHash3 ``fmix32`` step).

    Input is truncated to 32 bits first, so any Python int is accepted.
    ``mix32(0) == 0``.
    """
    h = x & MASK32
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & MASK32
    h ^= h >> 16
    return h
