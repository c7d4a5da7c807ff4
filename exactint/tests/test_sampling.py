"""
Tests for uniform random sampling over inclusive ranges.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from exactint import BASE, BigInteger, make_rng
from exactint.sampling import default_rng, rand_between
from exactint.validate import CHI_SQUARE_CRITICAL_DF9, chi_square_statistic


def constant(u):
    return lambda: u


class TestBounds:
    def test_small_range_stays_in_bounds(self):
        rng = make_rng(1)
        samples = [rand_between(-3, 6, rng) for _ in range(2000)]
        assert min(samples) == -3
        assert max(samples) == 6

    def test_reversed_arguments(self):
        rng = make_rng(2)
        for _ in range(500):
            assert 10 <= rand_between(20, 10, rng) <= 20

    def test_single_value_range(self):
        assert rand_between(5, 5, make_rng(3)) == 5
        assert BigInteger.rand_between(-(10 ** 40), -(10 ** 40)) == -(10 ** 40)

    @pytest.mark.parametrize("low,high", [
        (0, BASE - 1),
        (0, BASE),
        (-(10 ** 30), 10 ** 30 + 17),
        (2 ** 200, 2 ** 201),
    ])
    def test_wide_ranges(self, low, high):
        rng = make_rng(4)
        for _ in range(300):
            assert low <= rand_between(low, high, rng) <= high

    def test_extreme_draws_hit_the_ends(self):
        """rng values 0 and just below 1 map to the range's two ends."""
        top = 1.0 - 1e-12
        for low, high in [(0, 9), (-3, 6), (0, BASE + 4), (7, 7 + 3 * BASE + 2)]:
            assert rand_between(low, high, constant(0.0)) == low
            assert rand_between(low, high, constant(top)) == high

    def test_top_reachable_past_a_zero_digit(self):
        """Range sizes with inner zero digits still reach the top values."""
        top = 1.0 - 2.0 ** -53
        for low, high in [(0, BASE ** 2 + 4), (-5, BASE ** 3 + 7 * BASE - 6)]:
            assert rand_between(low, high, constant(0.0)) == low
            assert rand_between(low, high, constant(top)) == high

    def test_inner_zero_digit_is_sampled(self):
        """Values at and above BASE**2 get their share of draws."""
        rng = make_rng(5)
        high = BASE ** 2 + BASE ** 2 // 2
        hits = sum(rand_between(0, high, rng) >= BASE ** 2 for _ in range(3000))
        # expected share is 1/3
        assert 800 < hits < 1200


class TestUniformity:
    def test_chi_square(self):
        rng = make_rng(2024)
        samples = [rand_between(-3, 6, rng) for _ in range(5000)]
        assert chi_square_statistic(samples, -3, 6) < CHI_SQUARE_CRITICAL_DF9

    def test_seeded_streams_repeat(self):
        a = [rand_between(0, 10 ** 20, make_rng(9)) for _ in range(3)]
        b = [rand_between(0, 10 ** 20, make_rng(9)) for _ in range(3)]
        assert a == b

    def test_default_rng(self):
        draw = default_rng()
        assert 0.0 <= draw() < 1.0
        assert 0 <= BigInteger.rand_between(0, 100) <= 100


class TestInvalidRng:
    @pytest.mark.parametrize("u", [1.0, -0.5, 2.0, float("nan")])
    def test_out_of_range_values_rejected(self, u):
        with pytest.raises(ValueError):
            rand_between(0, 10, constant(u))
