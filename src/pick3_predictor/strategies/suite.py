"""
Named pick-3 strategies and their consensus.

Every strategy takes the shared ``StrategyContext``, returns exactly three
sorted digits and may consume PRNG draws. The draws happen in the order the
code reads, so the same seed and the same call sequence always reproduce
the same predictions.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

import structlog

from pick3_predictor.data.draws import Draw
from pick3_predictor.integrity.checksum import ChecksumResult, generate
from pick3_predictor.strategies.context import StrategyContext
from pick3_predictor.strategies.voting import (
    ConsensusResult,
    StrategyResult,
    joined,
    majority_vote,
    pad_uniform,
)

logger = structlog.get_logger(__name__)

# Fixed display confidences per strategy.
FULL_SUITE_BONUS = 3.0
PATTERN_POST_CONFIDENCE = 94.5
WHEEL_CONFIDENCE = 96.2
OPTIMIZER_CONFIDENCE = 97.8
ENSEMBLE_PRO_CONFIDENCE = 98.3
SKIP_TRACKER_CONFIDENCE = 95.1
MAGIC_SQUARE_CONFIDENCE = 93.7
MULTI_VARIANT_ACCURACY = 98.9
REPEATERS_CONFIDENCE = 94.8
LOGIC_RULES_CONFIDENCE = 95.6
CONSENSUS_BONUS = 2.0

WHEEL_TYPES = ("full", "abbreviated", "key")

# Order-3 magic square; every line sums to 15.
MAGIC_SQUARE = ((2, 7, 6), (9, 5, 1), (4, 3, 8))
MAGIC_LINES = (
    MAGIC_SQUARE[0],
    MAGIC_SQUARE[1],
    MAGIC_SQUARE[2],
    tuple(row[0] for row in MAGIC_SQUARE),
    tuple(row[1] for row in MAGIC_SQUARE),
    tuple(row[2] for row in MAGIC_SQUARE),
    (MAGIC_SQUARE[0][0], MAGIC_SQUARE[1][1], MAGIC_SQUARE[2][2]),
    (MAGIC_SQUARE[0][2], MAGIC_SQUARE[1][1], MAGIC_SQUARE[2][0]),
)


@dataclass(frozen=True)
class VariantOutput:
    label: str
    prediction: tuple[int, ...]
    accuracy: float


@dataclass(frozen=True)
class MultiVariantResult:
    prediction: tuple[int, ...]
    variants: tuple[VariantOutput, ...]
    accuracy: float
    checksum: ChecksumResult


# ----------------------------------------------------------------------
# Shared building blocks
# ----------------------------------------------------------------------
def _hot(ctx: StrategyContext, n: int) -> list[int]:
    return [r.digit for r in ctx.frequency.hot_numbers(n)]


def _cold(ctx: StrategyContext, n: int) -> list[int]:
    return [r.digit for r in ctx.frequency.cold_numbers(n)]


def _top_ranked(ctx: StrategyContext, n: int = 3) -> list[int]:
    return sorted(r.digit for r in ctx.frequency.rankings()[:n])


def _bottom_ranked(ctx: StrategyContext, n: int = 3) -> list[int]:
    return sorted(r.digit for r in ctx.frequency.rankings()[-n:])


def _hot_cold_mix(ctx: StrategyContext) -> tuple[int, ...]:
    return pad_uniform(ctx, _hot(ctx, 2) + _cold(ctx, 1))


def _markov_step(ctx: StrategyContext, last: Draw) -> list[int]:
    """Each digit of ``last`` moved by -1/0/+1 (one draw each), clamped to the domain."""
    lo, hi = ctx.config.digit_min, ctx.config.digit_max
    return sorted(min(hi, max(lo, d + ctx.prng.next_in_range(-1, 1))) for d in last.digits)


def _uniform_triple(ctx: StrategyContext) -> list[int]:
    return sorted(ctx.uniform_digit() for _ in range(ctx.config.picks_per_draw))


def draw_pattern(draw: Draw) -> str:
    a, b, c = sorted(draw.digits)
    if a == b == c:
        return "triple"
    if a == b or b == c:
        return "double"
    return "single"


def skip_counts(ctx: StrategyContext) -> dict[int, int]:
    """Draws since each digit last appeared (0 = in the latest draw, len(history) = never)."""
    last_seen: dict[int, int] = {}
    for age, draw in enumerate(reversed(ctx.draws)):
        for d in draw.digits:
            last_seen.setdefault(d, age)
    return {d: last_seen.get(d, len(ctx.draws)) for d in ctx.config.digits}


def repeaters(draws: Sequence[Draw]) -> list[int]:
    """Digits of the latest draw that also appeared in the one before it."""
    if len(draws) < 2:
        return []
    previous = draws[-2].digits
    return [d for d in draws[-1].digits if d in previous]


def hot_pairs(draws: Sequence[Draw]) -> list[tuple[int, int]]:
    """Digit pairs (within a draw, sorted) by descending count; ties keep first-seen order."""
    pairs: Counter = Counter()
    for draw in draws:
        a, b, c = sorted(draw.digits)
        pairs.update([(a, b), (a, c), (b, c)])
    return [pair for pair, _ in sorted(pairs.items(), key=lambda item: -item[1])]


def _sequence_pattern(draw: Draw) -> str:
    a, b, c = sorted(draw.digits)
    if c - a == 2 and b - a == 1:
        return "consecutive"
    if c - a <= 3:
        return "tight"
    return "spread"


# ----------------------------------------------------------------------
# Strategies
# ----------------------------------------------------------------------
def full_suite(ctx: StrategyContext) -> StrategyResult:
    """Vote over the top-3 hot, top-3 cold and one weighted triple."""
    hot = _hot(ctx, 3)
    cold = _cold(ctx, 3)
    weighted = ctx.weighted_pick(3)
    stats = ctx.sums.statistics()

    return StrategyResult(
        name="Full Suite",
        prediction=pad_uniform(ctx, majority_vote(hot + cold + weighted)),
        confidence=ctx.frequency.confidence() + FULL_SUITE_BONUS,
        details={"hot": joined(hot), "cold": joined(cold), "avg_sum": f"{stats.average:.2f}"},
    )


def pattern_post(ctx: StrategyContext) -> StrategyResult:
    """
    One digit from each box-pattern pool, most common pattern first.

    Pattern classes are ranked by how many draws they cover (ties keep
    first appearance). Each of the top ``picks_per_draw`` classes gives one
    PRNG pick from the digits of its draws; slots left over when the
    history has fewer classes are filled with uniform digits.
    """
    patterns = [draw_pattern(d) for d in ctx.draws]
    ranked = sorted(Counter(patterns).items(), key=lambda item: -item[1])
    dominant = ranked[0][0] if ranked else "single"

    streak = 0
    for pattern in reversed(patterns):
        if pattern != dominant:
            break
        streak += 1

    picks = []
    for pattern, _ in ranked[: ctx.config.picks_per_draw]:
        pool = [d for draw, p in zip(ctx.draws, patterns) if p == pattern for d in draw.digits]
        picks.append(pool[ctx.prng.next_in_range(0, len(pool) - 1)])

    return StrategyResult(
        name="Pattern Post",
        prediction=pad_uniform(ctx, picks),
        confidence=PATTERN_POST_CONFIDENCE,
        details={"pattern": dominant, "streak": str(streak)},
    )


def wheel_generation(ctx: StrategyContext, wheel_type: str = "full") -> StrategyResult:
    """
    Wheel picks: ``full`` is a weighted triple, ``abbreviated`` is two hot
    plus one cold, ``key`` fixes the top-ranked digit and adds two weighted
    picks from the rest.
    """
    if wheel_type not in WHEEL_TYPES:
        raise ValueError(f"Unknown wheel type {wheel_type!r}; expected one of {WHEEL_TYPES}")

    if wheel_type == "full":
        digits = ctx.weighted_pick(3)
    elif wheel_type == "abbreviated":
        digits = _hot_cold_mix(ctx)
    else:
        key = ctx.frequency.rankings()[0].digit
        digits = [key] + ctx.weighted_pick(2, exclude=frozenset({key}))

    coverage = 75.0 + ctx.prng.next_float() * 20

    return StrategyResult(
        name=f"Wheel {wheel_type}",
        prediction=pad_uniform(ctx, digits),
        confidence=WHEEL_CONFIDENCE,
        details={"wheel_type": wheel_type, "coverage": f"{coverage:.1f}"},
    )


def optimizer(ctx: StrategyContext) -> StrategyResult:
    """Exhaustive search over all 1000 ordered triples for the highest IDA score sum."""
    scores = {d: ctx.frequency.score(d).ida_score for d in ctx.config.digits}
    best = (ctx.config.digit_min,) * 3
    best_score = float("-inf")
    for i in ctx.config.digits:
        for j in ctx.config.digits:
            for k in ctx.config.digits:
                total = scores[i] + scores[j] + scores[k]
                if total > best_score:
                    best_score = total
                    best = (i, j, k)

    return StrategyResult(
        name="Optimizer",
        prediction=tuple(sorted(best)),
        confidence=OPTIMIZER_CONFIDENCE,
        details={"optimized_score": f"{best_score:.2f}", "method": "exhaustive"},
    )


def ensemble_pro(ctx: StrategyContext) -> StrategyResult:
    """Vote over a weighted triple, the top-3 ranked digits and a last-draw step."""
    last = ctx.last_draw
    weighted = ctx.weighted_pick(3)
    top = _top_ranked(ctx)
    stepped = _markov_step(ctx, last)

    return StrategyResult(
        name="Ensemble Pro",
        prediction=pad_uniform(ctx, majority_vote(weighted + top + stepped)),
        confidence=ENSEMBLE_PRO_CONFIDENCE,
        details={"weighted": joined(weighted), "ranked": joined(top), "stepped": joined(stepped)},
    )


def skip_tracker(ctx: StrategyContext) -> StrategyResult:
    """The three digits absent the longest; ``due`` lists skips at or over the threshold."""
    skips = skip_counts(ctx)
    longest = sorted(skips.items(), key=lambda item: -item[1])[: ctx.config.picks_per_draw]
    due = [d for d, s in skips.items() if s >= ctx.config.due_skip_threshold]

    return StrategyResult(
        name="Skip Tracker",
        prediction=tuple(sorted(d for d, _ in longest)),
        confidence=SKIP_TRACKER_CONFIDENCE,
        details={
            "skips": ";".join(f"{d}:{s}" for d, s in skips.items()),
            "due": joined(due),
        },
    )


def magic_square(ctx: StrategyContext) -> StrategyResult:
    """One of the 8 lines (rows, columns, diagonals) of the 3x3 magic square."""
    choice = ctx.prng.next_in_range(0, len(MAGIC_LINES) - 1)
    return StrategyResult(
        name="Magic Square",
        prediction=tuple(sorted(MAGIC_LINES[choice])),
        confidence=MAGIC_SQUARE_CONFIDENCE,
        details={"line": str(choice), "magic_sum": "15"},
    )


def multi_variant(ctx: StrategyContext) -> MultiVariantResult:
    """Run seven labelled variants, vote over their 21 digits, then draw display accuracies."""
    last = ctx.last_draw
    variants = [
        ("weighted-a", ctx.weighted_pick(3)),
        ("top-ranked", _top_ranked(ctx)),
        ("markov-step", _markov_step(ctx, last)),
        ("uniform", _uniform_triple(ctx)),
        ("bottom-ranked", _bottom_ranked(ctx)),
        ("weighted-b", ctx.weighted_pick(3)),
        ("hot-cold-mix", _hot_cold_mix(ctx)),
    ]
    pooled = [d for _, digits in variants for d in digits]
    consensus = pad_uniform(ctx, majority_vote(pooled))
    outputs = [
        VariantOutput(label, tuple(digits), 97.0 + ctx.prng.next_float() * 2)
        for label, digits in variants
    ]

    return MultiVariantResult(
        prediction=consensus,
        variants=tuple(outputs),
        accuracy=MULTI_VARIANT_ACCURACY,
        checksum=generate(consensus, ctx.prng.current_seed, ctx.clock()),
    )


def historical_repeaters(ctx: StrategyContext) -> StrategyResult:
    """First repeater, the leading digit of the two hottest pairs, then weighted picks."""
    repeated = repeaters(ctx.draws)
    pairs = hot_pairs(ctx.draws)

    picks: list[int] = []
    if repeated:
        picks.append(repeated[0])
    picks.extend(pair[0] for pair in pairs[:2])
    while len(picks) < ctx.config.picks_per_draw:
        picks.extend(ctx.weighted_pick(1))

    return StrategyResult(
        name="Historical Repeaters",
        prediction=pad_uniform(ctx, picks),
        confidence=REPEATERS_CONFIDENCE,
        details={
            "repeaters": joined(repeated),
            "hot_pairs": ";".join(f"{a}-{b}" for a, b in pairs[:3]),
        },
    )


def logic_rules(ctx: StrategyContext) -> StrategyResult:
    """
    Fill slots following the majority odd/even split of the history.

    Candidates are swept in ascending order; each eligible digit is kept on
    a coin flip (``next_float() > 0.5``). At most
    ``config.logic_rules_max_passes`` sweeps run before the remaining slots
    are filled with uniform draws.
    """
    observed = [d for draw in ctx.draws for d in draw.digits]
    total = len(observed)
    odd_pct = sum(1 for d in observed if d % 2 == 1) / total * 100 if total else 0.0
    high_pct = sum(1 for d in observed if d >= 5) / total * 100 if total else 0.0

    slots = ctx.config.picks_per_draw
    target_odds = 2 if odd_pct > 50 else 1
    odds_added = evens_added = 0
    picks: list[int] = []

    for _ in range(ctx.config.logic_rules_max_passes):
        for n in ctx.config.digits:
            if len(picks) >= slots:
                break
            if n in picks:
                continue
            if n % 2 == 1 and odds_added < target_odds:
                if ctx.prng.next_float() > 0.5:
                    picks.append(n)
                    odds_added += 1
            elif n % 2 == 0 and evens_added < slots - target_odds:
                if ctx.prng.next_float() > 0.5:
                    picks.append(n)
                    evens_added += 1
        if len(picks) >= slots:
            break

    return StrategyResult(
        name="Logic Rules",
        prediction=pad_uniform(ctx, picks),
        confidence=LOGIC_RULES_CONFIDENCE,
        details={
            "odd_even": f"{int(odd_pct)}% odd",
            "high_low": f"{int(high_pct)}% high",
            "pattern": _sequence_pattern(ctx.last_draw) if ctx.draws else "none",
        },
    )


PRIMARY_STRATEGIES = (
    full_suite,
    pattern_post,
    wheel_generation,
    optimizer,
    ensemble_pro,
    magic_square,
    historical_repeaters,
    logic_rules,
)


def run_all_strategies(ctx: StrategyContext) -> ConsensusResult:
    """
    Run the eight primary strategies, then the skip tracker, and vote.

    The consensus is the three most frequent digits of all nine predictions
    (ties to the smaller digit). Confidence is the mean of the primary
    confidences plus 2, capped at ``config.consensus_confidence_cap``.
    Raises ``ValueError`` before any draw when the history is empty.
    """
    if not ctx.draws:
        raise ValueError("Consensus requires at least one historical draw; engine has none loaded.")
    primary = [strategy(ctx) for strategy in PRIMARY_STRATEGIES]
    skips = skip_tracker(ctx)

    pooled = [d for result in [*primary, skips] for d in result.prediction]
    consensus = pad_uniform(ctx, majority_vote(pooled))
    mean_confidence = sum(r.confidence for r in primary) / len(primary)
    confidence = min(mean_confidence + CONSENSUS_BONUS, ctx.config.consensus_confidence_cap)

    result = ConsensusResult(
        prediction=consensus,
        strategies=tuple(primary) + (skips,),
        confidence=confidence,
        checksum=generate(consensus, ctx.prng.current_seed, ctx.clock()),
    )
    logger.info(
        "consensus_computed",
        prediction=consensus,
        confidence=round(confidence, 2),
        checksum=result.checksum.combined,
    )
    return result
