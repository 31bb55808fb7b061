"""
Property-Based Tests for the engine building blocks.

Uses Hypothesis to check invariants that must hold for ALL inputs:
- Mixer / PRNG: 32-bit outputs, seed reproducibility, range bounds
- Checksums: agreement with zlib's CRC-32 and Adler-32
- Sums: every generated combination hits its target and classifies by digit multiplicity
- Voting / sampling: outputs are sorted subsets of their inputs
"""

import zlib

from hypothesis import given, settings
from hypothesis import strategies as st

from pick3_predictor.data.draws import load_draws
from pick3_predictor.integrity.checksum import adler32, crc32
from pick3_predictor.models.frequency import FrequencyModel
from pick3_predictor.models.sampling import sample_without_replacement
from pick3_predictor.models.sums import SumModel, classify
from pick3_predictor.rng import MASK32, Xorshift128Plus, mix32, unique_in_range
from pick3_predictor.rng import seeds
from pick3_predictor.strategies.voting import majority_vote

_model = FrequencyModel()
_model.initialize(load_draws())
RANKINGS = _model.rankings()

uint32 = st.integers(min_value=0, max_value=MASK32)
digit = st.integers(min_value=0, max_value=9)


# ── Mixer / PRNG Properties ───────────────────────────────────────────


class TestPRNGProperties:
    @given(x=st.integers(min_value=-(2**40), max_value=2**40))
    @settings(max_examples=100)
    def test_mix32_is_32_bit_and_truncates(self, x):
        assert 0 <= mix32(x) <= MASK32
        assert mix32(x) == mix32(x & MASK32)

    @given(seed=uint32)
    @settings(max_examples=50)
    def test_same_seed_same_stream(self, seed):
        a = Xorshift128Plus(seed)
        b = Xorshift128Plus(seed)
        assert [a.next() for _ in range(10)] == [b.next() for _ in range(10)]

    @given(seed=uint32, lo=st.integers(-50, 50), width=st.integers(0, 100))
    @settings(max_examples=50)
    def test_next_in_range_bounds(self, seed, lo, width):
        prng = Xorshift128Plus(seed)
        hi = lo + width
        assert all(lo <= prng.next_in_range(lo, hi) <= hi for _ in range(20))

    @given(seed=uint32, count=st.integers(0, 10))
    @settings(max_examples=50)
    def test_unique_in_range_distinct(self, seed, count):
        values = unique_in_range(Xorshift128Plus(seed), count, 0, 9)
        assert len(values) == count
        assert values == sorted(set(values))


# ── Seed Properties ───────────────────────────────────────────────────


class TestSeedProperties:
    @given(text=st.text(max_size=50))
    @settings(max_examples=50)
    def test_text_seed_is_32_bit(self, text):
        assert 0 <= seeds.from_text(text) <= MASK32

    @given(digits=st.lists(digit, max_size=12))
    @settings(max_examples=50)
    def test_digit_seed_uses_first_eight(self, digits):
        assert seeds.from_digits(digits) == seeds.from_digits(digits[:8])


# ── Checksum Properties ───────────────────────────────────────────────


class TestChecksumProperties:
    @given(data=st.binary(max_size=200))
    @settings(max_examples=100)
    def test_crc32_matches_zlib(self, data):
        assert crc32(data) == f"{zlib.crc32(data) & MASK32:08X}"

    @given(data=st.binary(max_size=200))
    @settings(max_examples=100)
    def test_adler32_matches_zlib(self, data):
        assert adler32(data) == f"{zlib.adler32(data) & MASK32:08X}"


# ── Sum / Classification Properties ───────────────────────────────────


class TestSumProperties:
    @given(seed=uint32, target=st.integers(0, 27))
    @settings(max_examples=50)
    def test_generated_combination_hits_target(self, seed, target):
        digits = SumModel().generate_for_sum(Xorshift128Plus(seed), target)
        assert sum(digits) == target
        assert digits == sorted(digits)
        assert all(0 <= d <= 9 for d in digits)

    @given(seed=uint32, target=st.integers(0, 27))
    @settings(max_examples=100)
    def test_generated_combination_classified_by_multiplicity(self, seed, target):
        digits = SumModel().generate_for_sum(Xorshift128Plus(seed), target)
        name = classify(digits).name
        distinct = len(set(digits))
        a, b, c = sorted(digits)

        assert (name == "Triple") == (distinct == 1)
        assert (name == "Double") == (distinct == 2)
        if distinct == 3:
            consecutive = b == a + 1 and c == b + 1
            assert name == ("Straight Run" if consecutive else "6-Way Box")

    @given(triple=st.lists(digit, min_size=3, max_size=3))
    @settings(max_examples=50)
    def test_classify_ignores_order(self, triple):
        assert classify(triple) == classify(sorted(triple, reverse=True))
        assert classify(triple).ways in {1, 3, 6, 8}


# ── Voting / Sampling Properties ──────────────────────────────────────


class TestSelectionProperties:
    @given(pool=st.lists(digit, max_size=30))
    @settings(max_examples=50)
    def test_majority_vote_sorted_subset(self, pool):
        voted = majority_vote(pool)
        assert voted == sorted(set(voted))
        assert set(voted) <= set(pool)
        assert len(voted) == min(3, len(set(pool)))

    @given(seed=uint32, k=st.integers(0, 10))
    @settings(max_examples=50)
    def test_weighted_sample_is_distinct(self, seed, k):
        picks = sample_without_replacement(Xorshift128Plus(seed), RANKINGS, k)
        assert len(picks) == k
        assert picks == sorted(set(picks))
