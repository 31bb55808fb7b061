from __future__ import annotations

from typing import Sequence

from pick3_predictor.models.frequency import ScoreRecord
from pick3_predictor.rng.prng import Xorshift128Plus


def sample_without_replacement(
    prng: Xorshift128Plus,
    rankings: Sequence[ScoreRecord],
    k: int,
) -> list[int]:
    """
    Draw up to ``k`` distinct digits, weighted by IDA score.

    Each pick consumes one ``next_float()``:

    - total weight is recomputed over the digits still in the pool,
    - ``r = next_float() * total`` is walked down the pool in ranking order,
      subtracting each score, and the digit where ``r <= 0`` is taken.

    If rounding leaves ``r`` positive after the whole pool, the last
    candidate is taken, so every draw removes one digit and the loop always
    ends (including all-zero pools, where the first candidate wins).

    Returns:
        The picked digits in ascending order (fewer than ``k`` only when the
        pool runs out).
    """
    if k < 0:
        raise ValueError(f"Sample size must be non-negative, got {k}")

    pool = list(rankings)
    picked: list[int] = []

    while len(picked) < k and pool:
        total_weight = sum(r.ida_score for r in pool)
        r = prng.next_float() * total_weight

        chosen = len(pool) - 1
        for i, record in enumerate(pool):
            r -= record.ida_score
            if r <= 0:
                chosen = i
                break

        picked.append(pool.pop(chosen).digit)

    return sorted(picked)
