from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Hashable, Iterable

import numpy as np
import pandas as pd
import structlog

from pick3_predictor.config import ENGINE_CONFIG, EngineConfig
from pick3_predictor.rng.mixer import MASK32, mix32

logger = structlog.get_logger(__name__)

_TWO_POW_32 = 4294967296.0


@dataclass(frozen=True)
class PRNGState:
    """
    Snapshot of the generator registers.

    Attributes
    ----------
    seed:
        The 32-bit seed passed to the last ``seed()`` call.
    s0, s1:
        The two 32-bit state words.
    iterations:
        Number of ``next()`` calls since seeding (warm-up excluded).
    """

    seed: int
    s0: int
    s1: int
    iterations: int

    def to_dict(self) -> dict[str, int]:
        return {"seed": self.seed, "s0": self.s0, "s1": self.s1, "iterations": self.iterations}


class Xorshift128Plus:
    """
    Xorshift128+ over two 32-bit words, seeded through ``mix32``.

    This is the one shared randomness source of the engine. Every strategy
    draws from the same instance, so call order is part of the output: the
    same seed and the same sequence of calls always give the same numbers.
    ``next()`` holds an exclusive lock so concurrent callers serialize.

    Not suitable for anything security related.
    """

    def __init__(self, seed: int = 0, config: EngineConfig | None = None) -> None:
        if config is None:
            config = ENGINE_CONFIG
        self.config = config
        self._lock = threading.Lock()
        self._seed = 0
        self._s0 = 0
        self._s1 = 0
        self.iterations = 0
        self.seed(seed)

    # ------------------------------------------------------------------
    # Seeding / state
    # ------------------------------------------------------------------
    def seed(self, value: int) -> int:
        """
        Reset the generator from ``value`` (truncated to 32 bits).

        The state words are ``mix32(seed)`` and ``mix32(s0)``; the first
        ``config.warmup_steps`` outputs are discarded and the iteration
        counter is reset afterwards. Returns the truncated seed.
        """
        value = int(value) & MASK32
        with self._lock:
            self._seed = value
            self._s0 = mix32(value)
            self._s1 = mix32(self._s0)
            for _ in range(self.config.warmup_steps):
                self._step()
            self.iterations = 0
        return value

    @property
    def current_seed(self) -> int:
        return self._seed

    def get_state(self) -> PRNGState:
        with self._lock:
            return PRNGState(seed=self._seed, s0=self._s0, s1=self._s1, iterations=self.iterations)

    def set_state(self, state: PRNGState) -> None:
        """Restore a snapshot taken with ``get_state()``."""
        with self._lock:
            self._seed = state.seed & MASK32
            self._s0 = state.s0 & MASK32
            self._s1 = state.s1 & MASK32
            self.iterations = int(state.iterations)

    # ------------------------------------------------------------------
    # Draws
    # ------------------------------------------------------------------
    def _step(self) -> int:
        x = self._s0
        y = self._s1
        self._s0 = y
        x ^= (x << 23) & MASK32
        x ^= x >> 17
        x ^= y
        x ^= y >> 26
        self._s1 = x
        return (self._s0 + self._s1) & MASK32

    def next(self) -> int:
        """Next raw 32-bit output."""
        with self._lock:
            self.iterations += 1
            return self._step()

    def next_in_range(self, lo: int, hi: int) -> int:
        """
        Integer in ``[lo, hi]`` as ``lo + next() % (hi - lo + 1)``.

        The modulo bias for ranges that are not a power of two is kept on
        purpose; changing it would change every downstream result.
        Callers guarantee ``hi >= lo``.
        """
        return lo + self.next() % (hi - lo + 1)

    def next_float(self) -> float:
        """Float in ``[0, 1)``."""
        return self.next() / _TWO_POW_32

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def entropy(values: Iterable[Hashable]) -> float:
        """Shannon entropy in bits of the observed symbol frequencies (0.0 for empty input)."""
        observed = pd.Series(list(values), dtype=object)
        if observed.empty:
            return 0.0
        p = observed.value_counts(normalize=True).to_numpy(dtype=float)
        return float(-(p * np.log2(p)).sum())


def unique_in_range(prng: Xorshift128Plus, count: int, lo: int, hi: int) -> list[int]:
    """
    Draw ``count`` distinct integers in ``[lo, hi]`` by rejection, sorted ascending.

    Raises
    ------
    ValueError
        If ``lo > hi`` or ``count`` exceeds the number of values in the range.
        Nothing is drawn in that case.
    """
    if lo > hi:
        raise ValueError(f"Empty range: lo={lo} > hi={hi}")
    span = hi - lo + 1
    if count < 0 or count > span:
        raise ValueError(f"Cannot draw {count} unique values from range [{lo}, {hi}]")

    picked: set[int] = set()
    while len(picked) < count:
        picked.add(prng.next_in_range(lo, hi))
    return sorted(picked)
