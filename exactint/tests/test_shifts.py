"""
Unit tests for the power-of-two table and shifts.

Shifts are checked against Python's native << and >>, including amounts
that need several steps through the table.
"""

import unittest
import random
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from exactint import BASE, BigInteger, InvalidShiftAmountError
from exactint.powers import highest_power_of_two, powers_of_two
from exactint.shifts import shift_left, shift_right


class TestPowersOfTwo(unittest.TestCase):

    def test_table_contents(self):
        """Entry i is 2**i, ending at the largest power not above BASE."""
        table = powers_of_two()
        self.assertEqual(len(table), 24)
        self.assertEqual(table[0], 1)
        for i, p in enumerate(table):
            self.assertEqual(p, 2 ** i)
        self.assertLessEqual(table[-1], BASE)
        self.assertGreater(2 * table[-1], BASE)
        self.assertEqual(highest_power_of_two(), 2 ** 23)

    def test_table_is_shared(self):
        self.assertIs(powers_of_two(), powers_of_two())


class TestShifts(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(1234)

    def test_literal_scenarios(self):
        self.assertEqual(BigInteger(1).shift_left(10), 1024)
        self.assertEqual(BigInteger(-1).shift_right(5), -1)
        self.assertEqual(BigInteger(-5).shift_right(1), -3)
        self.assertEqual(BigInteger(5).shift_right(1), 2)

    def test_matches_native_shifts(self):
        for _ in range(300):
            n = self.rng.randint(-10 ** 50, 10 ** 50)
            k = self.rng.randint(0, 300)
            self.assertEqual(shift_left(n, k), n << k, f"{n} << {k}")
            self.assertEqual(shift_right(n, k), n >> k, f"{n} >> {k}")

    def test_amounts_beyond_table(self):
        """Amounts of 24 and above take several table steps."""
        for k in (23, 24, 46, 47, 48, 100, 1000):
            self.assertEqual(shift_left(3, k), 3 << k)
            self.assertEqual(shift_right(-(7 << k) - 1, k), (-(7 << k) - 1) >> k)

    def test_negative_amount_reverses_direction(self):
        self.assertEqual(shift_left(1024, -3), 128)
        self.assertEqual(shift_right(3, -4), 48)
        self.assertEqual(BigInteger(-9).shift_left(-1), -5)

    def test_fixed_points(self):
        for k in (0, 1, 50, BASE):
            self.assertEqual(shift_right(-1, k), -1)
            self.assertEqual(shift_right(0, k), 0)
        self.assertEqual(shift_left(0, BASE), 0)
        self.assertEqual(shift_right(12345, 10 ** 6), 0)
        self.assertEqual(shift_right(-12345, 10 ** 6), -1)

    def test_amount_too_large(self):
        for k in (BASE + 1, -(BASE + 1), 10 ** 20):
            with self.assertRaises(InvalidShiftAmountError):
                shift_left(1, k)
            with self.assertRaises(InvalidShiftAmountError):
                BigInteger(1).shift_right(k)

    def test_shift_error_carries_amount(self):
        with self.assertRaises(InvalidShiftAmountError) as ctx:
            shift_left(1, BASE + 1)
        self.assertEqual(ctx.exception.amount, BASE + 1)
        self.assertIsInstance(ctx.exception, ValueError)


if __name__ == "__main__":
    unittest.main()
