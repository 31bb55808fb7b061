import pytest

from pick3_predictor.evaluation.distribution import distribution_check
from pick3_predictor.rng.prng import Xorshift128Plus


def test_distribution_check_defaults():
    prng = Xorshift128Plus(12345)
    report = distribution_check(prng)

    assert report.counts.index.tolist() == list(range(10))
    assert int(report.counts.sum()) == 10_000
    assert report.expected == pytest.approx(1000.0)
    assert report.chi_square >= 0.0
    assert report.quality in {"EXCELLENT", "GOOD", "FAIR"}
    assert prng.iterations == 10_000


def test_distribution_check_custom_range():
    report = distribution_check(Xorshift128Plus(7), samples=600, lo=1, hi=6)
    assert report.counts.index.tolist() == [1, 2, 3, 4, 5, 6]
    assert int(report.counts.sum()) == 600
    assert report.expected == pytest.approx(100.0)


def test_degenerate_generator_is_flagged():
    # seed 0 always yields 0, so every sample lands on lo
    report = distribution_check(Xorshift128Plus(0), samples=1000)
    assert int(report.counts[0]) == 1000
    assert report.quality == "FAIR"


@pytest.mark.parametrize("samples, lo, hi", [(0, 0, 9), (10, 5, 4)])
def test_distribution_check_rejects_bad_arguments(samples, lo, hi):
    prng = Xorshift128Plus(1)
    with pytest.raises(ValueError):
        distribution_check(prng, samples=samples, lo=lo, hi=hi)
    assert prng.iterations == 0
