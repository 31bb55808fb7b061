from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Sequence

import pandas as pd
import structlog

from pick3_predictor.config import ENGINE_CONFIG, EngineConfig
from pick3_predictor.data.draws import Draw, draws_frame, validate_draws

logger = structlog.get_logger(__name__)

HOT = "HOT"
COLD = "COLD"


@dataclass(frozen=True)
class ScoreRecord:
    """
    IDA score of one digit.

    Attributes
    ----------
    digit:
        The digit being scored.
    frequency:
        Occurrences across every position of every draw.
    expected_frequency:
        ``total observations / 10``.
    deviation_percent:
        ``(expected - frequency) / max(expected, 1) * 100``; positive when
        the digit is under-represented.
    ida_score:
        ``1 / (frequency + 1) * (1 + deviation factor) * 100``. Higher means
        more "due".
    status:
        ``COLD`` when frequency is below expected, otherwise ``HOT``.
    """

    digit: int
    frequency: int
    expected_frequency: float
    deviation_percent: float
    ida_score: float
    status: str


class FrequencyModel:
    """
    Inverse Distribution Algorithm (IDA) over the draw history.

    ``initialize`` rebuilds the digit counts from scratch; there are no
    incremental updates. Before the first ``initialize`` every digit has a
    count of zero and ``confidence()`` is 0.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        if config is None:
            config = ENGINE_CONFIG
        self.config = config
        self.total_draws = 0
        self._counts: dict[int, int] = {d: 0 for d in config.digits}

    def initialize(self, draws: Sequence[Draw]) -> None:
        draws = validate_draws(draws)
        df = draws_frame(draws)
        observed = pd.concat([df["n1"], df["n2"], df["n3"]], ignore_index=True)
        counts = observed.value_counts().reindex(self.config.digits, fill_value=0)

        self._counts = {int(d): int(c) for d, c in counts.items()}
        self.total_draws = len(draws)
        logger.debug("frequency_model_initialized", draws=self.total_draws, counts=self._counts)

    @property
    def total_observations(self) -> int:
        return self.total_draws * self.config.picks_per_draw

    def frequency_table(self) -> dict[int, int]:
        return dict(self._counts)

    def score(self, digit: int) -> ScoreRecord:
        freq = self._counts.get(digit, 0)
        expected = self.total_observations / self.config.domain_size
        base = 1.0 / (freq + 1)
        deviation_factor = (expected - freq) / max(expected, 1.0)
        return ScoreRecord(
            digit=digit,
            frequency=freq,
            expected_frequency=expected,
            deviation_percent=deviation_factor * 100,
            ida_score=base * (1 + deviation_factor) * 100,
            status=COLD if freq < expected else HOT,
        )

    def rankings(self) -> list[ScoreRecord]:
        """All digits by descending IDA score; ties keep ascending digit order."""
        return sorted((self.score(d) for d in self.config.digits), key=lambda r: -r.ida_score)

    def rankings_frame(self) -> pd.DataFrame:
        return pd.DataFrame([asdict(r) for r in self.rankings()])

    def confidence(self) -> float:
        if self.total_draws == 0:
            return 0.0
        rankings = self.rankings()
        mean_abs_dev = sum(abs(r.deviation_percent) for r in rankings) / len(rankings)
        return min(self.config.ida_confidence_cap, 50.0 + mean_abs_dev / 2.0)

    def hot_numbers(self, n: int = 5) -> list[ScoreRecord]:
        return [r for r in self.rankings() if r.status == HOT][:n]

    def cold_numbers(self, n: int = 5) -> list[ScoreRecord]:
        return [r for r in self.rankings() if r.status == COLD][:n]

    def summary(self) -> dict:
        """Headline figures for exports and check scripts."""
        rankings = self.rankings()
        return {
            "total_draws": self.total_draws,
            "total_observations": self.total_observations,
            "hot_count": sum(1 for r in rankings if r.status == HOT),
            "cold_count": sum(1 for r in rankings if r.status == COLD),
            "most_overdue": asdict(rankings[0]),
            "most_frequent": asdict(rankings[-1]),
            "confidence": self.confidence(),
            "mean_abs_deviation": sum(abs(r.deviation_percent) for r in rankings) / len(rankings),
        }
