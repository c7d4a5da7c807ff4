"""
BigInteger: an immutable arbitrary-precision signed integer.

Each instance wraps one Python int (the exact-arithmetic substrate) and is
never mutated; every operation returns a new BigInteger or a primitive.
Division is truncating (quotient rounded toward zero, remainder with the
sign of the dividend), which is why ``//`` and ``%`` are not overloaded:
use ``divide``, ``mod`` and ``divmod`` instead.

Usage:
    a = BigInteger.from_text("ff", 16)        # 255
    a.to_string(2)                            # '11111111'
    BigInteger(7).is_prime()                  # True
    BigInteger(3).mod_pow(-1, 7)              # 5
    BigInteger(-1) < POSITIVE_INFINITY        # True
"""

import math
import operator
import re
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from . import bitwise, number_theory, order, primality, radix, sampling, shifts
from .config import DEFAULT_CONFIG
from .errors import ValidationError
from .radix import DigitArray
from .substrate import tdivmod

IntegerLike = Union["BigInteger", int, str, float]

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class QuotientRemainder:
    quotient: "BigInteger"
    remainder: "BigInteger"

    def __iter__(self):
        return iter((self.quotient, self.remainder))


def _decimal_string(n: int) -> str:
    # CPython >= 3.11 refuses str() on very large ints
    try:
        return str(n)
    except ValueError:
        return radix.to_base_string(n, 10)


def _parse_decimal(text: str) -> int:
    body = text.strip()
    if not _DECIMAL_RE.fullmatch(body):
        raise ValidationError(f"Invalid integer literal: {text!r}")
    try:
        return int(body)
    except ValueError:
        # beyond the int-from-str digit limit
        negative = body.startswith("-")
        return radix.parse(body.lstrip("+-"), 10) * (-1 if negative else 1)


class BigInteger:
    """Immutable exact integer.  Construct from anything with __index__."""

    __slots__ = ("_value",)

    zero: "BigInteger"
    one: "BigInteger"
    minus_one: "BigInteger"

    def __init__(self, value: Any = 0):
        if isinstance(value, BigInteger):
            n = value._value
        else:
            n = operator.index(value)
        object.__setattr__(self, "_value", int(n))

    def __setattr__(self, name, value):
        raise AttributeError("BigInteger is immutable")

    def __delattr__(self, name):
        raise AttributeError("BigInteger is immutable")

    def __reduce__(self):
        return (BigInteger, (self._value,))

    # -- named constructors ---------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        return cls(value)

    @classmethod
    def from_instance(cls, value: "BigInteger") -> "BigInteger":
        return cls(value._value)

    @classmethod
    def from_text(
        cls,
        text: str,
        base: int = 10,
        alphabet: Optional[str] = None,
        case_sensitive: bool = False,
    ) -> "BigInteger":
        """Parse text; base 10 with the default alphabet accepts [+-]?digits."""
        if base == 10 and alphabet is None:
            return cls(_parse_decimal(text))
        alphabet = alphabet or DEFAULT_CONFIG.alphabet
        return cls(radix.parse(text, base, alphabet, case_sensitive))

    @classmethod
    def from_number(cls, value: Union[int, float]) -> "BigInteger":
        """Exact conversion of an int or integral float."""
        if isinstance(value, float):
            if not math.isfinite(value) or not value.is_integer():
                raise ValidationError(f"{value!r} is not an integer")
            return cls(int(value))
        return cls(value)

    @classmethod
    def from_digits(
        cls,
        digits: Sequence[int],
        base: int,
        is_negative: bool = False,
    ) -> "BigInteger":
        return cls(radix.from_digits(digits, base, is_negative))

    # -- conversions ----------------------------------------------------

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __float__(self) -> float:
        return float(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return _decimal_string(self._value)

    def __repr__(self) -> str:
        return f"BigInteger({_decimal_string(self._value)})"

    def to_string(self, base: int = 10, alphabet: Optional[str] = None) -> str:
        """Format in any base; out-of-alphabet digits render as <digit>."""
        if base == 10 and alphabet is None:
            return _decimal_string(self._value)
        return radix.to_base_string(self._value, base,
                                    alphabet or DEFAULT_CONFIG.alphabet)

    def to_array(self, base: int) -> DigitArray:
        return radix.to_base(self._value, base)

    # -- arithmetic -----------------------------------------------------

    def add(self, other: IntegerLike) -> "BigInteger":
        return BigInteger(self._value + coerce(other)._value)

    def subtract(self, other: IntegerLike) -> "BigInteger":
        return BigInteger(self._value - coerce(other)._value)

    def multiply(self, other: IntegerLike) -> "BigInteger":
        return BigInteger(self._value * coerce(other)._value)

    def negate(self) -> "BigInteger":
        return BigInteger(-self._value)

    def abs(self) -> "BigInteger":
        return BigInteger(abs(self._value))

    def square(self) -> "BigInteger":
        return BigInteger(self._value * self._value)

    def cube(self) -> "BigInteger":
        return BigInteger(self._value * self._value * self._value)

    def divmod(self, other: IntegerLike) -> QuotientRemainder:
        """Truncating (quotient, remainder)."""
        q, r = tdivmod(self._value, coerce(other)._value)
        return QuotientRemainder(BigInteger(q), BigInteger(r))

    def divide(self, other: IntegerLike) -> "BigInteger":
        return self.divmod(other).quotient

    def mod(self, other: IntegerLike) -> "BigInteger":
        return self.divmod(other).remainder

    def successor(self) -> "BigInteger":
        return BigInteger(self._value + 1)

    def predecessor(self) -> "BigInteger":
        return BigInteger(self._value - 1)

    def pow(self, exponent: IntegerLike) -> "BigInteger":
        return BigInteger(number_theory.int_pow(self._value, coerce(exponent)._value))

    def mod_pow(self, exponent: IntegerLike, modulus: IntegerLike) -> "BigInteger":
        return BigInteger(number_theory.mod_pow(
            self._value, coerce(exponent)._value, coerce(modulus)._value,
        ))

    def mod_inv(self, modulus: IntegerLike) -> "BigInteger":
        return BigInteger(number_theory.mod_inv(self._value, coerce(modulus)._value))

    # -- predicates -----------------------------------------------------

    def is_zero(self) -> bool:
        return self._value == 0

    def is_positive(self) -> bool:
        return self._value > 0

    def is_negative(self) -> bool:
        return self._value < 0

    def is_unit(self) -> bool:
        return abs(self._value) == 1

    def is_even(self) -> bool:
        return self._value & 1 == 0

    def is_odd(self) -> bool:
        return self._value & 1 == 1

    def is_divisible_by(self, other: IntegerLike) -> bool:
        n = coerce(other)
        if n.is_zero():
            return False
        if n.is_unit():
            return True
        if n.compare_abs(2) == 0:
            return self.is_even()
        return self.mod(n).is_zero()

    def is_prime(self, strict: Optional[bool] = None) -> bool:
        if strict is None:
            strict = DEFAULT_CONFIG.strict_primality
        return primality.is_prime(self._value, strict)

    def is_probable_prime(
        self,
        iterations: Optional[int] = None,
        rng: Optional[sampling.Rng] = None,
    ) -> bool:
        if iterations is None:
            iterations = DEFAULT_CONFIG.probable_prime_iterations
        return primality.is_probable_prime(self._value, iterations, rng)

    # -- comparison -----------------------------------------------------

    def compare(self, other: Any) -> int:
        """-1, 0 or 1; also accepts the extended-order sentinels."""
        if order.as_sentinel(other) is not None:
            return order.compare(self._value, other)
        if isinstance(other, order.Finite):
            other = other.value
        if isinstance(other, float):
            if math.isnan(other):
                raise ValidationError("Cannot compare with NaN")
            # int/float comparison in Python is exact
            return order.compare_ints(self._value, other)
        return order.compare_ints(self._value, coerce(other)._value)

    def compare_abs(self, other: IntegerLike) -> int:
        return order.compare_abs(self._value, coerce(other)._value)

    def equals(self, other: Any) -> bool:
        return self.compare(other) == 0

    def not_equals(self, other: Any) -> bool:
        return self.compare(other) != 0

    def greater(self, other: Any) -> bool:
        return self.compare(other) > 0

    def lesser(self, other: Any) -> bool:
        return self.compare(other) < 0

    def greater_or_equal(self, other: Any) -> bool:
        return self.compare(other) >= 0

    def lesser_or_equal(self, other: Any) -> bool:
        return self.compare(other) <= 0

    def _compare_or_none(self, other: Any) -> Optional[int]:
        # text is not coerced here so that == stays consistent with __hash__
        if isinstance(other, str):
            return None
        try:
            return self.compare(other)
        except (TypeError, ValidationError):
            return None

    def __eq__(self, other: Any):
        c = self._compare_or_none(other)
        return NotImplemented if c is None else c == 0

    def __ne__(self, other: Any):
        c = self._compare_or_none(other)
        return NotImplemented if c is None else c != 0

    def __lt__(self, other: Any):
        c = self._compare_or_none(other)
        return NotImplemented if c is None else c < 0

    def __le__(self, other: Any):
        c = self._compare_or_none(other)
        return NotImplemented if c is None else c <= 0

    def __gt__(self, other: Any):
        c = self._compare_or_none(other)
        return NotImplemented if c is None else c > 0

    def __ge__(self, other: Any):
        c = self._compare_or_none(other)
        return NotImplemented if c is None else c >= 0

    # -- shifts and bitwise ---------------------------------------------

    def shift_left(self, amount: IntegerLike) -> "BigInteger":
        return BigInteger(shifts.shift_left(self._value, coerce(amount)._value))

    def shift_right(self, amount: IntegerLike) -> "BigInteger":
        return BigInteger(shifts.shift_right(self._value, coerce(amount)._value))

    def bitwise_not(self) -> "BigInteger":
        return BigInteger(bitwise.bitwise_not(self._value))

    def bitwise_and(self, other: IntegerLike) -> "BigInteger":
        return BigInteger(bitwise.bitwise_and(self._value, coerce(other)._value))

    def bitwise_or(self, other: IntegerLike) -> "BigInteger":
        return BigInteger(bitwise.bitwise_or(self._value, coerce(other)._value))

    def bitwise_xor(self, other: IntegerLike) -> "BigInteger":
        return BigInteger(bitwise.bitwise_xor(self._value, coerce(other)._value))

    def bit_length(self) -> int:
        return number_theory.bit_length(self._value)

    # -- operator overloads ---------------------------------------------

    def _binary(self, other: Any, method, reflected: bool = False):
        try:
            other = coerce(other)
        except (TypeError, ValidationError):
            return NotImplemented
        return method(other, self) if reflected else method(self, other)

    def __add__(self, other):
        return self._binary(other, BigInteger.add)

    def __radd__(self, other):
        return self._binary(other, BigInteger.add, reflected=True)

    def __sub__(self, other):
        return self._binary(other, BigInteger.subtract)

    def __rsub__(self, other):
        return self._binary(other, BigInteger.subtract, reflected=True)

    def __mul__(self, other):
        return self._binary(other, BigInteger.multiply)

    def __rmul__(self, other):
        return self._binary(other, BigInteger.multiply, reflected=True)

    def __pow__(self, exponent, modulus=None):
        if modulus is None:
            return self._binary(exponent, BigInteger.pow)
        return self.mod_pow(exponent, modulus)

    def __rpow__(self, other):
        return self._binary(other, BigInteger.pow, reflected=True)

    def __lshift__(self, amount):
        return self._binary(amount, BigInteger.shift_left)

    def __rshift__(self, amount):
        return self._binary(amount, BigInteger.shift_right)

    def __and__(self, other):
        return self._binary(other, BigInteger.bitwise_and)

    def __rand__(self, other):
        return self._binary(other, BigInteger.bitwise_and, reflected=True)

    def __or__(self, other):
        return self._binary(other, BigInteger.bitwise_or)

    def __ror__(self, other):
        return self._binary(other, BigInteger.bitwise_or, reflected=True)

    def __xor__(self, other):
        return self._binary(other, BigInteger.bitwise_xor)

    def __rxor__(self, other):
        return self._binary(other, BigInteger.bitwise_xor, reflected=True)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    def __invert__(self):
        return self.bitwise_not()

    # -- class helpers --------------------------------------------------

    @staticmethod
    def max(a: IntegerLike, b: IntegerLike) -> "BigInteger":
        a, b = coerce(a), coerce(b)
        return a if a.greater(b) else b

    @staticmethod
    def min(a: IntegerLike, b: IntegerLike) -> "BigInteger":
        a, b = coerce(a), coerce(b)
        return a if a.lesser(b) else b

    @staticmethod
    def gcd(a: IntegerLike, b: IntegerLike) -> "BigInteger":
        return BigInteger(number_theory.gcd(coerce(a)._value, coerce(b)._value))

    @staticmethod
    def lcm(a: IntegerLike, b: IntegerLike) -> "BigInteger":
        return BigInteger(number_theory.lcm(coerce(a)._value, coerce(b)._value))

    @staticmethod
    def rand_between(
        a: IntegerLike,
        b: IntegerLike,
        rng: Optional[sampling.Rng] = None,
    ) -> "BigInteger":
        return BigInteger(sampling.rand_between(coerce(a)._value, coerce(b)._value, rng))


BigInteger.zero = BigInteger(0)
BigInteger.one = BigInteger(1)
BigInteger.minus_one = BigInteger(-1)


def coerce(value: IntegerLike) -> BigInteger:
    """Convert one of the accepted input forms to a BigInteger.

    BigInteger -> itself; str -> decimal text; float -> exact integral
    value; anything else must implement __index__.

    Raises:
        TypeError for unsupported types.
        ValidationError for malformed text or non-integral floats.
    """
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, str):
        return BigInteger.from_text(value)
    if isinstance(value, float):
        return BigInteger.from_number(value)
    try:
        return BigInteger(operator.index(value))
    except TypeError:
        raise TypeError(
            f"Cannot interpret {type(value).__name__} as an integer"
        ) from None
