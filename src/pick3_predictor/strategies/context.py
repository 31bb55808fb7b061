from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, List

from pick3_predictor.config import ENGINE_CONFIG, EngineConfig
from pick3_predictor.data.draws import Draw
from pick3_predictor.models.frequency import FrequencyModel
from pick3_predictor.models.sampling import sample_without_replacement
from pick3_predictor.models.sums import SumModel
from pick3_predictor.rng.prng import Xorshift128Plus


def wall_clock_millis() -> int:
    return time.time_ns() // 1_000_000


@dataclass
class StrategyContext:
    """
    Everything a strategy reads or consumes, passed explicitly.

    Attributes
    ----------
    prng:
        The shared generator. Strategies draw from it in a fixed order.
    frequency, sums:
        Models rebuilt from ``draws`` on every engine initialization.
    draws:
        History, oldest first.
    clock:
        Millisecond clock used to timestamp checksums. Tests inject a
        constant.
    """

    prng: Xorshift128Plus
    frequency: FrequencyModel
    sums: SumModel
    draws: List[Draw] = field(default_factory=list)
    config: EngineConfig = ENGINE_CONFIG
    clock: Callable[[], int] = wall_clock_millis

    @property
    def last_draw(self) -> Draw:
        if not self.draws:
            raise ValueError("Strategy requires at least one historical draw; engine has none loaded.")
        return self.draws[-1]

    def weighted_pick(self, k: int, exclude: frozenset[int] = frozenset()) -> list[int]:
        rankings = [r for r in self.frequency.rankings() if r.digit not in exclude]
        return sample_without_replacement(self.prng, rankings, k)

    def uniform_digit(self) -> int:
        return self.prng.next_in_range(self.config.digit_min, self.config.digit_max)
