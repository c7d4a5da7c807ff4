"""
Numeric constants shared by the exactint modules.

BASE bounds the per-step work of shifting, bitwise emulation and random
sampling: the power-of-two table stops at the largest power of two not
exceeding it, and random draws are made one base-BASE digit at a time.
"""

from typing import Tuple

# Arithmetic base
BASE = 10 ** 7

DEFAULT_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

# Caps the "rough lowest set bit" probe used by binary gcd at 2^30
LOBMASK = 1 << 30

# Miller-Rabin witnesses that are deterministic for every n < 2^64
DETERMINISTIC_WITNESSES: Tuple[int, ...] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37,
)
DETERMINISTIC_MAX_BITS = 64

DEFAULT_PROBABLE_PRIME_ITERATIONS = 5
