from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from pick3_predictor.integrity.checksum import ChecksumResult
from pick3_predictor.strategies.context import StrategyContext


@dataclass(frozen=True)
class StrategyResult:
    """Output of one named strategy: three sorted digits plus display details."""

    name: str
    prediction: tuple[int, ...]
    confidence: float
    details: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ConsensusResult:
    """Majority vote over several strategies, stamped with a checksum."""

    prediction: tuple[int, ...]
    strategies: tuple[StrategyResult, ...]
    confidence: float
    checksum: ChecksumResult


def majority_vote(digits: Iterable[int], k: int = 3) -> list[int]:
    """
    The ``k`` most frequent digits, ascending.

    Ties on count go to the smaller digit. May return fewer than ``k`` when
    the pool has fewer distinct digits.
    """
    counts = Counter(digits)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return sorted(d for d, _ in ranked[:k])


def pad_uniform(ctx: StrategyContext, digits: Sequence[int]) -> tuple[int, ...]:
    """
    First ``picks_per_draw`` digits, topped up with uniform PRNG draws, sorted.

    Padding may repeat a digit already present.
    """
    k = ctx.config.picks_per_draw
    out = list(digits)[:k]
    while len(out) < k:
        out.append(ctx.uniform_digit())
    return tuple(sorted(out))


def joined(digits: Iterable[int]) -> str:
    return ",".join(str(d) for d in digits)
