"""
Number-theoretic operations over Python ints.

All routines are exact.  Modular results follow truncating remainder
semantics (see substrate.py): a negative base can yield a negative residue,
congruent to the floor-mod result.
"""

from typing import Tuple

from .constants import LOBMASK
from .errors import NotCoprimeError, ZeroModulusError
from .substrate import tdiv, tmod


# ---------------------------------------------------------------------------
# gcd / lcm
# ---------------------------------------------------------------------------

def rough_lowest_set_bit(v: int) -> int:
    """Lowest set bit of v, capped at LOBMASK (a power of two dividing v)."""
    x = v | LOBMASK
    return x & -x


def gcd(a: int, b: int) -> int:
    """Binary gcd.  gcd(0, b) == |b|; the result is never negative."""
    a, b = abs(a), abs(b)
    if a == b:
        return a
    if a == 0:
        return b
    if b == 0:
        return a

    common = 1
    while a & 1 == 0 and b & 1 == 0:
        d = min(rough_lowest_set_bit(a), rough_lowest_set_bit(b))
        a //= d
        b //= d
        common *= d
    while a & 1 == 0:
        a //= rough_lowest_set_bit(a)
    while True:
        while b & 1 == 0:
            b //= rough_lowest_set_bit(b)
        if a > b:
            a, b = b, a
        b -= a
        if b == 0:
            break
    return a if common == 1 else a * common


def lcm(a: int, b: int) -> int:
    """Least common multiple of |a| and |b|; lcm with 0 is 0."""
    a, b = abs(a), abs(b)
    g = gcd(a, b)
    if g == 0:
        return 0
    return (a // g) * b


# ---------------------------------------------------------------------------
# Modular arithmetic
# ---------------------------------------------------------------------------

def mod_inv(a: int, n: int) -> int:
    """Inverse of a modulo n by the extended Euclidean algorithm.

    Returns t in [0, |n|) with a*t == 1 (mod n), negated when a < 0.

    Raises:
        NotCoprimeError if gcd(a, n) != 1.
    """
    m = abs(n)
    t, new_t = 0, 1
    r, new_r = m, abs(a)
    while new_r != 0:
        q = tdiv(r, new_r)
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r != 1:
        raise NotCoprimeError(a, n)
    if t < 0:
        t += m
    if a < 0:
        return -t
    return t


def mod_pow(base: int, exp: int, mod: int) -> int:
    """base**exp reduced modulo mod by square-and-multiply.

    A negative exponent inverts the base first.

    Raises:
        ZeroModulusError if mod == 0.
        NotCoprimeError for a negative exponent with a non-invertible base.
    """
    if mod == 0:
        raise ZeroModulusError("Cannot take mod_pow with modulus 0")
    result = tmod(1, mod)
    base = tmod(base, mod)
    if exp < 0:
        exp = -exp
        base = mod_inv(base, mod)
    while exp > 0:
        if base == 0:
            return 0
        if exp & 1:
            result = tmod(result * base, mod)
        exp = tdiv(exp, 2)
        base = tmod(base * base, mod)
    return result


def int_pow(base: int, exp: int) -> int:
    """Exact integer power; never fractional.

    exp == 0 -> 1, base 0 -> 0, base 1 -> 1, base -1 -> +-1 by parity,
    any other base with a negative exponent -> 0.
    """
    if exp == 0:
        return 1
    if base == 0:
        return 0
    if base == 1:
        return 1
    if base == -1:
        return 1 if exp & 1 == 0 else -1
    if exp < 0:
        return 0

    x, y = base, 1
    while True:
        if exp & 1:
            y *= x
            exp -= 1
        if exp == 0:
            break
        exp //= 2
        x *= x
    return y


# ---------------------------------------------------------------------------
# Logarithms
# ---------------------------------------------------------------------------

def integer_logarithm(value: int, base: int) -> Tuple[int, int]:
    """Largest (base**e, e) with base**e <= value, by recursive squaring."""
    if base <= value:
        p, e = integer_logarithm(value, base * base)
        t = p * base
        return (t, 2 * e + 1) if t <= value else (p, 2 * e)
    return 1, 0


def bit_length(n: int) -> int:
    """Number of bits in |n|; 0 for 0."""
    n = abs(n)
    if n == 0:
        return 0
    return integer_logarithm(n, 2)[1] + 1
