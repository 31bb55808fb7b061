import pytest
import structlog

from pick3_predictor.data.draws import load_draws
from pick3_predictor.serving.engine import PredictionEngine

FIXED_NOW = 1_700_000_000_000
SEED = 12345


@pytest.fixture
def fixed_clock():
    """Millisecond clock frozen at FIXED_NOW so checksums are reproducible."""
    return lambda: FIXED_NOW


@pytest.fixture
def engine(fixed_clock) -> PredictionEngine:
    """Engine on the embedded history, seeded with 12345, nothing drawn yet."""
    eng = PredictionEngine(clock=fixed_clock)
    eng.initialize(seed=SEED)
    return eng


@pytest.fixture
def draws():
    return load_draws()


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()
