import pytest

from pick3_predictor.rng import MASK32, mix32
from pick3_predictor.rng import seeds


def test_from_text_djb2():
    assert seeds.from_text("") == 5381
    assert seeds.from_text("hello") == 261238937
    assert seeds.from_text("lucky") == 266547789


def test_from_text_rejects_non_text():
    with pytest.raises(TypeError):
        seeds.from_text(12345)


def test_from_calendar_date():
    assert seeds.from_calendar_date(2024, 11, 8) == 360591399
    assert seeds.from_calendar_date(2024, 11, 8) == mix32(20241108)


@pytest.mark.parametrize("year, month, day", [(2024, 2, 30), (2024, 13, 1), (2023, 0, 10)])
def test_from_calendar_date_rejects_invalid(year, month, day):
    with pytest.raises(ValueError):
        seeds.from_calendar_date(year, month, day)


def test_from_digits_packs_nibbles():
    # 2 | 8 << 4 | 4 << 8 == 1154
    assert seeds.from_digits([2, 8, 4]) == mix32(1154)
    assert seeds.from_digits([2, 8, 4]) == 4017975444


def test_from_digits_ignores_digits_past_eighth():
    assert seeds.from_digits([2, 8, 4, 0, 0, 0, 0, 0, 7]) == seeds.from_digits([2, 8, 4])


@pytest.mark.parametrize("digits", [[1, 10], [-1], [3, 4, 42]])
def test_from_digits_rejects_out_of_range(digits):
    with pytest.raises(ValueError):
        seeds.from_digits(digits)


def test_life_path_numbers():
    assert seeds.life_path_number(7, 4, 1990) == 3
    assert seeds.life_path_number(11, 29, 1992) == 7
    # 1+2 + 2+5 + 1+9+8+5 = 33, a master number, not reduced
    assert seeds.life_path_number(12, 25, 1985) == 33


def test_from_birth_date():
    assert seeds.from_birth_date(7, 4, 1990) == 21120270
    assert seeds.from_birth_date(11, 29, 1992) == 79030644
    assert seeds.from_birth_date(12, 25, 1985) == 404252805


def test_from_birth_date_rejects_invalid():
    with pytest.raises(ValueError):
        seeds.from_birth_date(2, 30, 1990)


def test_box_muller_seed():
    # log(1) == 0 so z0 == 0 and the seed is the mean
    assert seeds.box_muller_seed(1.0, 0.0, 5000.0, 1000.0) == 5000
    # u1 clamped to 1e-4: sqrt(-2 ln 1e-4) ~= 4.29
    assert seeds.box_muller_seed(0.0, 0.0, 0.0, 1.0) == 4
    # negative values wrap to 32 bits
    assert seeds.box_muller_seed(1.0, 0.0, -1.0, 1.0) == MASK32


def test_clock_seeds_fit_in_32_bits():
    assert 0 <= seeds.from_wall_clock() <= MASK32
    assert 0 <= seeds.from_gaussian() <= MASK32
    assert 0 <= seeds.from_combined_entropy("lucky", [1, 2, 3]) <= MASK32


def test_combined_entropy_validates_inputs():
    with pytest.raises(ValueError):
        seeds.from_combined_entropy(digits=[12])
