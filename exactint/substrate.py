"""
Truncating division over Python ints.

Python's ``//`` and ``%`` round toward negative infinity. The algorithms in
this package are written against truncating division instead:

    a == b * tdiv(a, b) + tmod(a, b)

with the quotient rounded toward zero and the remainder carrying the sign
of the dividend (or zero).
"""

from typing import Tuple


def tdivmod(a: int, b: int) -> Tuple[int, int]:
    """Truncating (quotient, remainder).  Raises ZeroDivisionError for b == 0."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - b * q


def tdiv(a: int, b: int) -> int:
    return tdivmod(a, b)[0]


def tmod(a: int, b: int) -> int:
    return tdivmod(a, b)[1]
