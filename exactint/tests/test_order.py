"""
Tests for the comparator and the extended order with +-infinity sentinels.
"""

import math
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from exactint import (
    BigInteger, Finite, NEGATIVE_INFINITY, POSITIVE_INFINITY, compare_extended,
)
from exactint.order import compare, compare_abs


class TestFiniteComparison:
    def test_compare_values(self):
        assert BigInteger(5).compare(3) == 1
        assert BigInteger(3).compare(5) == -1
        assert BigInteger(-5).compare(-5) == 0
        assert BigInteger(10 ** 40).compare(10 ** 40 + 1) == -1

    def test_derived_predicates(self):
        a = BigInteger(7)
        assert a.equals(7)
        assert a.not_equals(8)
        assert a.greater(6)
        assert a.lesser(8)
        assert a.greater_or_equal(7)
        assert a.lesser_or_equal(7)

    def test_rich_comparisons(self):
        a, b = BigInteger(-2), BigInteger(3)
        assert a < b and b > a
        assert a <= -2 and a >= -2
        assert a != b
        assert 3 == b
        assert sorted([BigInteger(5), 1, BigInteger(-9)]) == [-9, 1, 5]

    def test_compare_abs(self):
        assert BigInteger(-7).compare_abs(5) == 1
        assert BigInteger(-5).compare_abs(5) == 0
        assert compare_abs(3, -4) == -1

    def test_float_comparison_is_exact(self):
        assert BigInteger(2) < 2.5
        assert BigInteger(3) > 2.5
        assert BigInteger(2 ** 53 + 1) > float(2 ** 53)
        assert not (BigInteger(1) == float("nan"))


class TestSentinels:
    @pytest.mark.parametrize("n", [0, 1, -1, 10 ** 100, -(10 ** 100)])
    def test_finite_between_sentinels(self, n):
        v = BigInteger(n)
        assert v.compare(POSITIVE_INFINITY) == -1
        assert v.compare(NEGATIVE_INFINITY) == 1
        assert v < POSITIVE_INFINITY
        assert v > NEGATIVE_INFINITY
        assert POSITIVE_INFINITY > v
        assert NEGATIVE_INFINITY < v

    def test_float_infinities_are_sentinels(self):
        v = BigInteger(10 ** 400)
        assert v.compare(math.inf) == -1
        assert v.compare(-math.inf) == 1
        assert v < math.inf

    def test_finite_wrapper(self):
        assert BigInteger(4).compare(Finite(BigInteger(4))) == 0
        assert compare(4, Finite(5)) == -1

    def test_compare_extended_total_order(self):
        ordered = [NEGATIVE_INFINITY, Finite(-3), Finite(BigInteger(0)), 7,
                   POSITIVE_INFINITY]
        for i, a in enumerate(ordered):
            for j, b in enumerate(ordered):
                expected = (i > j) - (i < j)
                assert compare_extended(a, b) == expected, (a, b)

    def test_sentinel_equals_itself(self):
        assert compare_extended(POSITIVE_INFINITY, math.inf) == 0
        assert compare_extended(NEGATIVE_INFINITY, NEGATIVE_INFINITY) == 0
