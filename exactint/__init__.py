"""
exactint: immutable arbitrary-precision integers with exact number theory.

Built on Python's int as the exact-arithmetic substrate:
  - comparison with extended-order sentinels (+-infinity)
  - arbitrary-base conversion with custom alphabets and <digit> escapes
  - power-of-two shifts and two's-complement bitwise emulation
  - gcd / lcm / modular inverse / modular exponentiation / exact powers
  - Miller-Rabin primality (deterministic below 2^64, heuristic above)
  - uniform random sampling over an inclusive range
"""

__version__ = "0.3.0"

from .constants import BASE, DEFAULT_ALPHABET
from .config import IntegerConfig, load_config, DEFAULT_CONFIG
from .errors import (
    BigIntegerError, ValidationError, InvalidDigitError, InvalidBaseError,
    NotCoprimeError, ZeroModulusError, InvalidShiftAmountError,
)
from .order import (
    Sentinel, Finite, NEGATIVE_INFINITY, POSITIVE_INFINITY, compare_extended,
)
from .radix import DigitArray, to_base, to_base_string, parse, stringify
from .powers import powers_of_two, highest_power_of_two
from .sampling import make_rng
from .value import BigInteger, QuotientRemainder, coerce

__all__ = [
    "BASE", "DEFAULT_ALPHABET",
    "IntegerConfig", "load_config", "DEFAULT_CONFIG",
    "BigIntegerError", "ValidationError", "InvalidDigitError",
    "InvalidBaseError", "NotCoprimeError", "ZeroModulusError",
    "InvalidShiftAmountError",
    "Sentinel", "Finite", "NEGATIVE_INFINITY", "POSITIVE_INFINITY",
    "compare_extended",
    "DigitArray", "to_base", "to_base_string", "parse", "stringify",
    "powers_of_two", "highest_power_of_two",
    "make_rng",
    "BigInteger", "QuotientRemainder", "coerce",
]
