"""
Seed derivation: turn clock readings, text, dates and digits into 32-bit seeds.

Everything here is pure except the functions that read the clock
(``from_wall_clock``, ``from_combined_entropy``, ``from_gaussian``).
"""

from __future__ import annotations

import datetime as dt
import math
import time
from typing import Sequence

from pick3_predictor.rng.mixer import MASK32, mix32

MASTER_NUMBERS = frozenset({11, 22, 33})
MAX_PACKED_DIGITS = 8


def from_wall_clock() -> int:
    """Monotonic nanosecond counter XOR wall-clock milliseconds, truncated to 32 bits."""
    return (time.monotonic_ns() ^ (time.time_ns() // 1_000_000)) & MASK32


def from_text(text: str) -> int:
    """DJB2 hash (``h = h * 33 + byte``) of the UTF-8 bytes of ``text``."""
    if not isinstance(text, str):
        raise TypeError(f"Text seed source must be str, got {type(text).__name__}")
    h = 5381
    for byte in text.encode("utf-8"):
        h = (h * 33 + byte) & MASK32
    return h


def _validated_date(year: int, month: int, day: int) -> dt.date:
    try:
        return dt.date(int(year), int(month), int(day))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid calendar date: year={year}, month={month}, day={day}") from e


def from_calendar_date(year: int, month: int, day: int) -> int:
    """``mix32(YYYYMMDD)`` for a valid calendar date."""
    date = _validated_date(year, month, day)
    return mix32(date.year * 10000 + date.month * 100 + date.day)


def from_digits(digits: Sequence[int]) -> int:
    """
    Pack up to 8 digits into nibbles (digit ``i`` in bits ``4i..4i+3``) and mix.

    Digits past the eighth do not fit in 32 bits and are ignored.
    """
    packed = 0
    for index, digit in enumerate(list(digits)[:MAX_PACKED_DIGITS]):
        if not 0 <= int(digit) <= 9:
            raise ValueError(f"Digit seed source must contain values 0-9, got {digit!r}")
        packed |= int(digit) << (index * 4)
    return mix32(packed)


def from_combined_entropy(text: str | None = None, digits: Sequence[int] | None = None) -> int:
    """Wall-clock seed XOR the optional text and digit seeds."""
    # Validate before reading the clock so bad input fails the same way every time.
    text_seed = from_text(text) if text else 0
    digit_seed = from_digits(digits) if digits else 0
    return (from_wall_clock() ^ text_seed ^ digit_seed) & MASK32


def box_muller_seed(u1: float, u2: float, mean: float, stddev: float) -> int:
    """
    Map two uniforms to a seed with the Box-Muller transform.

    ``u1`` is clamped to at least 1e-4 so ``log`` stays finite. The scaled
    value is truncated toward zero and wrapped to 32 bits.
    """
    z0 = math.sqrt(-2.0 * math.log(max(u1, 0.0001))) * math.cos(2.0 * math.pi * u2)
    return int(z0 * stddev + mean) & MASK32


def from_gaussian(mean: float = 5000.0, stddev: float = 1000.0) -> int:
    """Gaussian-distributed seed from two clock-derived uniforms."""
    u1 = (time.monotonic_ns() % 10000) / 10000.0
    u2 = ((time.time_ns() // 1_000_000) % 10000) / 10000.0
    return box_muller_seed(u1, u2, mean, stddev)


def _digit_sum(n: int) -> int:
    return sum(int(c) for c in str(abs(int(n))))


def life_path_number(month: int, day: int, year: int) -> int:
    """
    Numerology life path: digit sums of month, day and year, reduced until a
    single digit or a master number (11, 22, 33) remains.
    """
    total = _digit_sum(month) + _digit_sum(day) + _digit_sum(year)
    while total > 9 and total not in MASTER_NUMBERS:
        total = _digit_sum(total)
    return total


def from_birth_date(month: int, day: int, year: int) -> int:
    """``(month * 1_000_000 + day * 10_000 + year % 100) * life_path``, truncated to 32 bits."""
    date = _validated_date(year, month, day)
    life_path = life_path_number(date.month, date.day, date.year)
    base = date.month * 1_000_000 + date.day * 10_000 + date.year % 100
    return (base * life_path) & MASK32
