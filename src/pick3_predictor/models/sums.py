from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import pandas as pd
import structlog

from pick3_predictor.config import ENGINE_CONFIG, EngineConfig
from pick3_predictor.data.draws import Draw, draws_frame, validate_draws
from pick3_predictor.rng.prng import Xorshift128Plus

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SumFrequency:
    """How often a digit-sum occurred; ``percentage`` is of all draws."""

    total: int
    count: int
    percentage: float


@dataclass(frozen=True)
class SumStatistics:
    average: float
    min_sum: int
    max_sum: int
    hot_sums: list[SumFrequency]
    cold_sums: list[SumFrequency]


@dataclass(frozen=True)
class CombinationType:
    """
    Box type of a three-digit combination.

    ``odds`` and ``ways`` are fixed display constants, not computed
    probabilities.
    """

    name: str
    pattern: str
    odds: str
    ways: int


TRIPLE = CombinationType("Triple", "0-0-0", "1:1000", 1)
DOUBLE = CombinationType("Double", "X-X-Y", "1:333", 3)
STRAIGHT_RUN = CombinationType("Straight Run", "1-2-3", "1:125", 8)
SIX_WAY_BOX = CombinationType("6-Way Box", "X-Y-Z", "1:167", 6)


def classify(digits: Sequence[int]) -> CombinationType:
    """
    Triple (all equal), Double (two distinct values), Straight Run
    (consecutive ascending after sorting) or 6-Way Box.
    """
    if len(digits) != 3:
        raise ValueError(f"classify expects exactly 3 digits, got {len(digits)}")
    ordered = sorted(digits)
    distinct = len(set(ordered))
    if distinct == 1:
        return TRIPLE
    if distinct == 2:
        return DOUBLE
    if ordered[0] + 1 == ordered[1] and ordered[1] + 1 == ordered[2]:
        return STRAIGHT_RUN
    return SIX_WAY_BOX


class SumModel:
    """Distribution of digit-sums (0..27) across the draw history."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        if config is None:
            config = ENGINE_CONFIG
        self.config = config
        self.total_draws = 0
        # Insertion order = first appearance in history; used as tie-break.
        self._counts: dict[int, int] = {}

    def initialize(self, draws: Sequence[Draw]) -> None:
        draws = validate_draws(draws)
        counts: dict[int, int] = {}
        for total in draws_frame(draws)["digit_sum"]:
            counts[int(total)] = counts.get(int(total), 0) + 1
        self._counts = counts
        self.total_draws = len(draws)
        logger.debug("sum_model_initialized", draws=self.total_draws, distinct_sums=len(counts))

    def _frequency(self, total: int, count: int) -> SumFrequency:
        pct = count / self.total_draws * 100 if self.total_draws else 0.0
        return SumFrequency(total=total, count=count, percentage=pct)

    def statistics(self) -> SumStatistics:
        if self.total_draws == 0:
            return SumStatistics(0.0, 0, 0, [], [])

        entries = list(self._counts.items())
        average = sum(s * c for s, c in entries) / self.total_draws
        hot = sorted(entries, key=lambda e: -e[1])[:5]
        cold = sorted(entries, key=lambda e: e[1])[:5]
        return SumStatistics(
            average=average,
            min_sum=min(self._counts),
            max_sum=max(self._counts),
            hot_sums=[self._frequency(s, c) for s, c in hot],
            cold_sums=[self._frequency(s, c) for s, c in cold],
        )

    def probability(self, total: int) -> float:
        """Percentage of draws whose digits summed to ``total``."""
        return self._frequency(total, self._counts.get(total, 0)).percentage

    def all_frequencies(self) -> list[SumFrequency]:
        return [
            self._frequency(s, self._counts.get(s, 0))
            for s in range(self.config.max_sum + 1)
        ]

    def frequencies_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [(f.total, f.count, f.percentage) for f in self.all_frequencies()],
            columns=["digit_sum", "count", "percentage"],
        )

    def combinations_for_sum(self, target: int) -> list[tuple[int, int, int]]:
        """Distinct sorted triples of digits summing to ``target``, in first-found order."""
        if not 0 <= target <= self.config.max_sum:
            raise ValueError(
                f"Target sum must be within [0, {self.config.max_sum}], got {target}"
            )
        digits = self.config.digits
        seen: dict[tuple[int, int, int], None] = {}
        for i in digits:
            for j in digits:
                for k in digits:
                    if i + j + k == target:
                        seen.setdefault(tuple(sorted((i, j, k))), None)
        return list(seen)

    def generate_for_sum(self, prng: Xorshift128Plus, target: int) -> list[int]:
        """
        Pick one combination summing to ``target`` uniformly (one PRNG draw).

        Every target in ``[0, 27]`` has at least one combination; anything
        else raises ``ValueError`` before the generator is touched.
        """
        combos = self.combinations_for_sum(target)
        return list(combos[prng.next_in_range(0, len(combos) - 1)])
