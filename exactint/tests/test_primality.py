"""
Unit tests for Miller-Rabin primality.

Verdicts are checked against sympy.isprime: exhaustively for small n, then
on pseudoprimes, the 2^64 boundary and large Mersenne numbers.
"""

import unittest
import sys
import os

import sympy

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from exactint import BigInteger, make_rng
from exactint.primality import (
    heuristic_witness_count, is_basic_prime, is_prime, is_probable_prime,
    miller_rabin_test,
)

CARMICHAEL = [561, 1105, 1729, 2465, 2821, 6601, 8911, 41041, 825265]
# strong pseudoprimes to every base up to 2, 7, 13, 23 respectively
STRONG_PSEUDOPRIMES = [2047, 3215031751, 3474749660383, 3825123056546413051]


class TestBasicPrime(unittest.TestCase):

    def test_small_verdicts(self):
        self.assertFalse(is_basic_prime(0))
        self.assertFalse(is_basic_prime(1))
        self.assertTrue(is_basic_prime(2))
        self.assertTrue(is_basic_prime(-5))
        self.assertFalse(is_basic_prime(25))
        self.assertTrue(is_basic_prime(47))
        self.assertIsNone(is_basic_prime(49))
        self.assertIsNone(is_basic_prime(10007))


class TestIsPrime(unittest.TestCase):

    def test_literal_scenarios(self):
        self.assertTrue(BigInteger(7).is_prime())
        self.assertFalse(BigInteger(1).is_prime())
        self.assertFalse(BigInteger(0).is_prime())

    def test_agrees_with_sympy_below_10000(self):
        for n in range(10000):
            self.assertEqual(is_prime(n), sympy.isprime(n), f"n={n}")

    def test_negative_inputs_use_magnitude(self):
        for n in (2, 3, 7, 97, 7919, 2 ** 61 - 1):
            self.assertTrue(is_prime(-n))
        self.assertFalse(is_prime(-91))

    def test_pseudoprimes_rejected(self):
        for n in CARMICHAEL + STRONG_PSEUDOPRIMES:
            self.assertFalse(is_prime(n), f"n={n}")

    def test_around_2_64(self):
        """Deterministic witnesses at and below 64 bits, heuristic above."""
        cases = [
            2 ** 61 - 1,
            2 ** 64 - 59,            # largest prime below 2^64
            2 ** 64 - 1,
            2 ** 64 + 13,            # smallest prime above 2^64
            2 ** 64 + 1,
            (2 ** 31 - 1) * (2 ** 61 - 1),
        ]
        for n in cases:
            self.assertEqual(is_prime(n), sympy.isprime(n), f"n={n}")

    def test_large_mersenne(self):
        for p in (89, 107, 127, 521):
            self.assertTrue(BigInteger(2 ** p - 1).is_prime(), f"M{p}")
        for p in (67, 101, 128):
            self.assertFalse(BigInteger(2 ** p - 1).is_prime(), f"M{p}")

    def test_strict_mode(self):
        n = 2 ** 127 - 1
        self.assertTrue(is_prime(n, strict=True))
        self.assertTrue(BigInteger(n).is_prime(strict=True))
        self.assertFalse(is_prime((2 ** 89 - 1) * (2 ** 107 - 1), strict=True))

    def test_heuristic_witness_count(self):
        self.assertEqual(heuristic_witness_count(65), 46)
        self.assertEqual(heuristic_witness_count(65, strict=True), 91)
        self.assertGreater(heuristic_witness_count(4096),
                           heuristic_witness_count(1024))


class TestMillerRabin(unittest.TestCase):

    def test_witness_at_or_above_n_is_skipped(self):
        self.assertTrue(miller_rabin_test(53, [53, 100]))

    def test_single_witness_fooled_by_strong_pseudoprime(self):
        self.assertTrue(miller_rabin_test(2047, [2]))
        self.assertFalse(miller_rabin_test(2047, [2, 3]))


class TestProbablePrime(unittest.TestCase):

    def test_seeded_verdicts(self):
        rng = make_rng(12345)
        self.assertTrue(is_probable_prime(2 ** 89 - 1, 10, rng))
        self.assertTrue(is_probable_prime(1000003, 10, rng))
        self.assertFalse(is_probable_prime((2 ** 61 - 1) * (2 ** 31 - 1), 10, rng))
        self.assertFalse(is_probable_prime(561, 10, rng))

    def test_iterations_must_be_positive(self):
        for iterations in (0, -3):
            with self.assertRaises(ValueError):
                BigInteger(49).is_probable_prime(iterations)
            with self.assertRaises(ValueError):
                is_probable_prime(7, iterations)

    def test_small_values_need_no_witnesses(self):
        self.assertTrue(BigInteger(7).is_probable_prime())
        self.assertFalse(BigInteger(1).is_probable_prime(iterations=1))
        self.assertFalse(BigInteger(-9).is_probable_prime(rng=make_rng(0)))


if __name__ == "__main__":
    unittest.main()
