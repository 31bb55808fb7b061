from __future__ import annotations

from dataclasses import dataclass

import structlog

from pick3_predictor.integrity.checksum import ChecksumResult, generate
from pick3_predictor.strategies.context import StrategyContext

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class MonteCarloCombo:
    digits: tuple[int, int, int]
    count: int
    probability: float  # percent of iterations


@dataclass(frozen=True)
class MonteCarloResult:
    prediction: tuple[int, ...]
    iterations: int
    confidence: float
    top_combinations: tuple[MonteCarloCombo, ...]
    checksum: ChecksumResult


def monte_carlo(ctx: StrategyContext, iterations: int | None = None) -> MonteCarloResult:
    """
    Tally ``iterations`` independent uniform triples (as sorted boxes).

    Runs as one uninterrupted block of ``3 * iterations`` PRNG draws. The
    prediction is the most frequent box; ties go to the box seen first.
    """
    if iterations is None:
        iterations = ctx.config.monte_carlo_iterations
    if iterations < 1:
        raise ValueError(f"Monte Carlo needs at least one iteration, got {iterations}")

    draw = ctx.uniform_digit
    tally: dict[tuple[int, int, int], int] = {}
    for _ in range(iterations):
        combo = tuple(sorted((draw(), draw(), draw())))
        tally[combo] = tally.get(combo, 0) + 1

    ranked = sorted(tally.items(), key=lambda item: -item[1])[: ctx.config.monte_carlo_top_n]
    top = [
        MonteCarloCombo(digits=combo, count=count, probability=count / iterations * 100)
        for combo, count in ranked
    ]
    best = top[0].digits

    logger.info(
        "monte_carlo_completed",
        iterations=iterations,
        distinct=len(tally),
        top=best,
        count=top[0].count,
    )
    return MonteCarloResult(
        prediction=best,
        iterations=iterations,
        confidence=top[0].probability,
        top_combinations=tuple(top),
        checksum=generate(best, ctx.prng.current_seed, ctx.clock()),
    )
