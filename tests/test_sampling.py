import pytest

from pick3_predictor.models.frequency import HOT, FrequencyModel, ScoreRecord
from pick3_predictor.models.sampling import sample_without_replacement
from pick3_predictor.rng.prng import Xorshift128Plus


@pytest.fixture
def rankings(draws):
    model = FrequencyModel()
    model.initialize(draws)
    return model.rankings()


def _zero_record(digit: int) -> ScoreRecord:
    return ScoreRecord(digit, 0, 0.0, 0.0, 0.0, HOT)


def test_pinned_weighted_picks(rankings):
    prng = Xorshift128Plus(12345)
    assert sample_without_replacement(prng, rankings, 3) == [0, 2, 8]
    assert sample_without_replacement(prng, rankings, 3) == [1, 5, 6]

    prng.seed(2024)
    assert sample_without_replacement(prng, rankings, 3) == [3, 5, 7]


def test_one_draw_per_pick(rankings):
    prng = Xorshift128Plus(1)
    sample_without_replacement(prng, rankings, 4)
    assert prng.iterations == 4


def test_stops_when_pool_runs_out(rankings):
    prng = Xorshift128Plus(1)
    assert sample_without_replacement(prng, rankings, 15) == list(range(10))
    assert prng.iterations == 10


def test_zero_weights_take_pool_order():
    pool = [_zero_record(d) for d in (4, 1, 7)]
    assert sample_without_replacement(Xorshift128Plus(3), pool, 2) == [1, 4]


def test_k_zero_and_negative(rankings):
    prng = Xorshift128Plus(1)
    assert sample_without_replacement(prng, rankings, 0) == []
    with pytest.raises(ValueError):
        sample_without_replacement(prng, rankings, -1)
    assert prng.iterations == 0
