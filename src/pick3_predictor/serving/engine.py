from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Callable, List, Optional

import structlog

from pick3_predictor.config import ENGINE_CONFIG, EngineConfig
from pick3_predictor.data.draws import Draw, load_draws
from pick3_predictor.integrity.checksum import generate, verify
from pick3_predictor.models.frequency import FrequencyModel
from pick3_predictor.models.sampling import sample_without_replacement
from pick3_predictor.models.sums import SumModel
from pick3_predictor.rng import seeds
from pick3_predictor.rng.prng import Xorshift128Plus
from pick3_predictor.serving.model_catalog import MODEL_CATALOG, ModelLabel
from pick3_predictor.strategies.context import StrategyContext, wall_clock_millis
from pick3_predictor.strategies.monte_carlo import MonteCarloResult, monte_carlo
from pick3_predictor.strategies.suite import (
    MultiVariantResult,
    StrategyResult,
    multi_variant,
    run_all_strategies,
    skip_tracker,
    wheel_generation,
)
from pick3_predictor.strategies.voting import ConsensusResult

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Prediction:
    """
    One stamped prediction.

    Attributes:
        digits: Sorted digits.
        checksum: ``XXXXXXXX-YYYY`` code over digits, seed and timestamp.
        seed: Generator seed in effect when the prediction was made.
        confidence: IDA confidence at that time.
        timestamp: Millisecond timestamp embedded in the checksum.
    """

    digits: tuple[int, ...]
    checksum: str
    seed: int
    confidence: float
    timestamp: int


@dataclass(frozen=True)
class ModelPrediction:
    model: ModelLabel
    prediction: Prediction


class PredictionEngine:
    """
    Owns the generator, the models and the draw history.

    Every public operation goes through the same ``StrategyContext``, so
    results depend on the seed and on the order of calls, nothing else.

    Typical usage
    -------------
        engine = PredictionEngine()
        engine.initialize(seed=12345)
        prediction = engine.generate_prediction()
        consensus = engine.run_all_strategies()
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        if config is None:
            config = ENGINE_CONFIG
        self.config = config
        self.context = StrategyContext(
            prng=Xorshift128Plus(0, config=config),
            frequency=FrequencyModel(config),
            sums=SumModel(config),
            config=config,
            clock=clock or wall_clock_millis,
        )
        self.predictions: List[Prediction] = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self, seed: Optional[int] = None, draws: Optional[List[Draw]] = None) -> int:
        """
        Load the history, seed the generator, rebuild both models and
        start a fresh prediction history.

        Args:
            seed: Explicit seed; if None a wall-clock seed is derived.
            draws: History override (defaults to the embedded table).

        Returns:
            The 32-bit seed in effect.
        """
        history = load_draws() if draws is None else list(draws)
        # Models validate the draws before anything is replaced.
        frequency = FrequencyModel(self.config)
        frequency.initialize(history)
        sums = SumModel(self.config)
        sums.initialize(history)

        if seed is None:
            seed = seeds.from_wall_clock()
        used = self.context.prng.seed(seed)

        self.context.draws = history
        self.context.frequency = frequency
        self.context.sums = sums
        self.predictions.clear()
        logger.info("engine_initialized", seed=used, draws=len(history))
        return used

    @property
    def prng(self) -> Xorshift128Plus:
        return self.context.prng

    @property
    def frequency(self) -> FrequencyModel:
        return self.context.frequency

    @property
    def sums(self) -> SumModel:
        return self.context.sums

    # ------------------------------------------------------------------
    # Predictions
    # ------------------------------------------------------------------
    def generate_prediction(self, use_weighting: bool = True, count: int = 3) -> Prediction:
        """
        IDA-weighted distinct digits (``use_weighting``) or uniform digits
        with repeats, sorted and stamped with a checksum.

        Raises:
            ValueError if count < 1, or a weighted request asks for more
            distinct digits than the domain has.
        """
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        if use_weighting and count > self.config.domain_size:
            raise ValueError(
                f"Cannot draw {count} distinct digits from a domain of {self.config.domain_size}"
            )

        ctx = self.context
        if use_weighting:
            digits = sample_without_replacement(ctx.prng, ctx.frequency.rankings(), count)
        else:
            digits = sorted(ctx.uniform_digit() for _ in range(count))

        now = ctx.clock()
        seed = ctx.prng.current_seed
        prediction = Prediction(
            digits=tuple(digits),
            checksum=generate(digits, seed, now).combined,
            seed=seed,
            confidence=ctx.frequency.confidence(),
            timestamp=now,
        )
        self.predictions.append(prediction)
        logger.debug("prediction_generated", digits=prediction.digits, checksum=prediction.checksum)
        return prediction

    def run_all_models(self) -> List[ModelPrediction]:
        """One weighted prediction per catalog label, in catalog order."""
        return [
            ModelPrediction(model=label, prediction=self.generate_prediction(use_weighting=True))
            for label in MODEL_CATALOG
        ]

    @staticmethod
    def verify(prediction: Prediction) -> bool:
        return verify(prediction.digits, prediction.checksum, prediction.seed, prediction.timestamp)

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------
    def run_all_strategies(self) -> ConsensusResult:
        return run_all_strategies(self.context)

    def wheel(self, wheel_type: str = "full") -> StrategyResult:
        return wheel_generation(self.context, wheel_type)

    def skip_tracker(self) -> StrategyResult:
        return skip_tracker(self.context)

    def multi_variant(self) -> MultiVariantResult:
        return multi_variant(self.context)

    def monte_carlo(self, iterations: Optional[int] = None) -> MonteCarloResult:
        return monte_carlo(self.context, iterations)

    def generate_for_sum(self, target: int) -> List[int]:
        return self.context.sums.generate_for_sum(self.context.prng, target)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def export(self) -> dict:
        """JSON-friendly snapshot of generator state, model summaries and issued predictions."""
        stats = self.context.sums.statistics()
        return {
            "prng_state": self.context.prng.get_state().to_dict(),
            "frequency_summary": self.context.frequency.summary(),
            "sum_statistics": asdict(stats),
            "predictions": [asdict(p) for p in self.predictions],
            "total_predictions": len(self.predictions),
        }
