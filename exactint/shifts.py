"""
Multiply or divide by powers of two without native bit shifts.

Shifts step through the power-of-two table: each full step multiplies (or
floor-divides) by the table's highest entry, and one final step uses the
entry for the remaining amount.  Right shifts round toward negative
infinity, matching an arithmetic shift on a two's-complement value.
"""

from .constants import BASE
from .errors import InvalidShiftAmountError
from .powers import powers_of_two
from .substrate import tdivmod


def _check_amount(n: int) -> None:
    if abs(n) > BASE:
        raise InvalidShiftAmountError(n)


def _floor_div(value: int, divisor: int) -> int:
    quotient, remainder = tdivmod(value, divisor)
    return quotient - 1 if remainder < 0 else quotient


def shift_left(value: int, n: int) -> int:
    """value * 2**n; negative n shifts right."""
    _check_amount(n)
    if n < 0:
        return shift_right(value, -n)
    if value == 0:
        return value
    powers = powers_of_two()
    step = len(powers) - 1
    while n >= len(powers):
        value *= powers[-1]
        n -= step
    return value * powers[n]


def shift_right(value: int, n: int) -> int:
    """floor(value / 2**n); negative n shifts left."""
    _check_amount(n)
    if n < 0:
        return shift_left(value, -n)
    powers = powers_of_two()
    step = len(powers) - 1
    while n >= len(powers):
        if value == 0 or value == -1:
            return value
        value = _floor_div(value, powers[-1])
        n -= step
    if value == 0 or value == -1:
        return value
    return _floor_div(value, powers[n])
