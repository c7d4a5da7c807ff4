"""
Micro-benchmarks for the hot paths (run with pytest --benchmark-only).
"""

import math
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

pytest.importorskip("pytest_benchmark")

from exactint import BigInteger, make_rng
from exactint.bitwise import bitwise_and
from exactint.number_theory import gcd, mod_pow
from exactint.primality import is_prime
from exactint.radix import parse, to_base_string
from exactint.sampling import rand_between

A = 3 ** 400 + 17
B = -(7 ** 300) - 1


def test_bench_to_base_string(benchmark):
    text = benchmark(to_base_string, A, 36)
    assert parse(text, 36) == A


def test_bench_bitwise_and(benchmark):
    assert benchmark(bitwise_and, A, B) == A & B


def test_bench_gcd(benchmark):
    assert benchmark(gcd, A * 12, B * 18) == math.gcd(A * 12, B * 18)


def test_bench_mod_pow(benchmark):
    m = 2 ** 521 - 1
    assert benchmark(mod_pow, A, B, m) == pow(A, B, m)


def test_bench_is_prime_mersenne(benchmark):
    assert benchmark(is_prime, 2 ** 127 - 1)


def test_bench_rand_between(benchmark):
    rng = make_rng(0)
    low, high = -A, A
    assert low <= benchmark(rand_between, low, high, rng) <= high


def test_bench_shift_left(benchmark):
    x = BigInteger(A)
    assert benchmark(x.shift_left, 1000) == A << 1000
