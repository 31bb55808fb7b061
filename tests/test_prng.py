import threading

import pytest

from pick3_predictor.rng import MASK32, PRNGState, Xorshift128Plus, mix32, unique_in_range


def test_mix32_known_values():
    assert mix32(0) == 0
    assert mix32(1) == 1364076727
    assert mix32(12345) == 1011272156


def test_mix32_truncates_input():
    assert mix32(12345 + (1 << 32)) == mix32(12345)


def test_seed_12345_first_outputs():
    """Pinned stream for seed 12345 (after the 20-step warm-up)."""
    prng = Xorshift128Plus(12345)
    assert [prng.next() for _ in range(5)] == [
        833318783,
        3683048985,
        1776873875,
        2645284085,
        3850848279,
    ]


def test_seed_zero_is_degenerate():
    """mix32(0) == 0, so both state words start at zero and stay there."""
    prng = Xorshift128Plus(0)
    assert [prng.next() for _ in range(10)] == [0] * 10


def test_seed_returns_truncated_value_and_resets_counter():
    prng = Xorshift128Plus(1)
    prng.next()
    prng.next()
    assert prng.iterations == 2

    used = prng.seed(12345 + (1 << 32))
    assert used == 12345
    assert prng.current_seed == 12345
    assert prng.iterations == 0
    assert prng.next() == 833318783


def test_state_snapshot_restores_stream():
    prng = Xorshift128Plus(777)
    for _ in range(7):
        prng.next()

    state = prng.get_state()
    expected = [prng.next() for _ in range(20)]

    prng.seed(1)
    prng.set_state(state)
    assert [prng.next() for _ in range(20)] == expected
    assert prng.iterations == state.iterations + 20


def test_state_to_dict():
    state = PRNGState(seed=1, s0=2, s1=3, iterations=4)
    assert state.to_dict() == {"seed": 1, "s0": 2, "s1": 3, "iterations": 4}


def test_next_in_range_and_float_bounds():
    prng = Xorshift128Plus(2024)
    for _ in range(500):
        assert 0 <= prng.next_in_range(0, 9) <= 9
        assert -1 <= prng.next_in_range(-1, 1) <= 1
        assert 0.0 <= prng.next_float() < 1.0


def test_uniform_digits_for_seed_12345():
    prng = Xorshift128Plus(12345)
    assert sorted(prng.next_in_range(0, 9) for _ in range(3)) == [3, 5, 5]


def test_outputs_fit_in_32_bits():
    prng = Xorshift128Plus(99)
    assert all(0 <= prng.next() <= MASK32 for _ in range(1000))


def test_concurrent_callers_share_one_stream():
    """Interleaved callers see exactly the values a single caller would."""
    expected = Xorshift128Plus(4242)
    sequential = sorted(expected.next() for _ in range(1000))

    prng = Xorshift128Plus(4242)
    collected = []
    lock = threading.Lock()

    def worker():
        values = [prng.next() for _ in range(250)]
        with lock:
            collected.extend(values)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(collected) == sequential
    assert prng.iterations == 1000


def test_entropy():
    assert Xorshift128Plus.entropy([]) == 0.0
    assert Xorshift128Plus.entropy([3, 3, 3]) == 0.0
    assert Xorshift128Plus.entropy([0, 1]) == pytest.approx(1.0)
    assert Xorshift128Plus.entropy(range(8)) == pytest.approx(3.0)


def test_unique_in_range_distinct_sorted():
    prng = Xorshift128Plus(5)
    values = unique_in_range(prng, 5, 0, 9)
    assert len(values) == 5
    assert values == sorted(set(values))
    assert all(0 <= v <= 9 for v in values)

    assert unique_in_range(prng, 10, 0, 9) == list(range(10))
    assert unique_in_range(prng, 0, 0, 9) == []


@pytest.mark.parametrize("count, lo, hi", [(11, 0, 9), (1, 5, 4), (-1, 0, 9)])
def test_unique_in_range_rejects_before_drawing(count, lo, hi):
    prng = Xorshift128Plus(5)
    with pytest.raises(ValueError):
        unique_in_range(prng, count, lo, hi)
    assert prng.iterations == 0
