from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

from pick3_predictor.rng.prng import Xorshift128Plus


@dataclass(frozen=True)
class DistributionReport:
    """
    Uniformity check of ``next_in_range`` output.

    Attributes:
        counts: Observed count per value, indexed lo..hi.
        expected: Expected count per value under a uniform distribution.
        chi_square: Pearson chi-square statistic of counts vs expected.
        quality: "EXCELLENT" (chi² < 2·range), "GOOD" (< 5·range) or "FAIR".
    """

    counts: pd.Series
    expected: float
    chi_square: float
    quality: str


def distribution_check(
    prng: Xorshift128Plus,
    samples: int = 10_000,
    lo: int = 0,
    hi: int = 9,
) -> DistributionReport:
    """
    Draw ``samples`` values in ``[lo, hi]`` and measure how far they are
    from uniform.

    This consumes ``samples`` draws from ``prng``; run it on a dedicated
    generator (or snapshot/restore the state) when the engine stream must
    stay untouched.

    Raises:
        ValueError if samples < 1 or lo > hi.
    """
    if samples < 1:
        raise ValueError(f"samples must be positive, got {samples}")
    if lo > hi:
        raise ValueError(f"Empty range: lo={lo} > hi={hi}")

    span = hi - lo + 1
    values = np.fromiter((prng.next_in_range(lo, hi) for _ in range(samples)), dtype=np.int64, count=samples)
    counts = pd.Series(values).value_counts().reindex(range(lo, hi + 1), fill_value=0).astype(int)

    expected = samples / span
    chi_square = float(((counts.to_numpy() - expected) ** 2 / expected).sum())

    if chi_square < span * 2:
        quality = "EXCELLENT"
    elif chi_square < span * 5:
        quality = "GOOD"
    else:
        quality = "FAIR"

    return DistributionReport(counts=counts, expected=expected, chi_square=chi_square, quality=quality)
