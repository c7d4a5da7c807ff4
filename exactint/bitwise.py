"""
Two's-complement bitwise operations on unbounded integers.

Operands are split into chunks of ``highest_power_of_two()`` values.  A
negative operand x is handled through its complement -(x+1), whose chunks
are inverted (chunk - 1 - digit) to recover the two's-complement bits.  The
result is reassembled with Horner's rule, seeded with -1 when the boolean
function applied to the two sign flags is true, which reproduces the
infinite run of leading ones of a negative result.
"""

from typing import Callable, List

from .powers import highest_power_of_two
from .substrate import tdivmod

ChunkFn = Callable[[int, int], int]


def bitwise_not(x: int) -> int:
    """~x computed as negate-then-predecessor."""
    return -x - 1


def bitwise(x: int, y: int, fn: ChunkFn) -> int:
    """Apply a per-chunk boolean function across two's-complement chunks."""
    chunk = highest_power_of_two()
    x_sign, y_sign = x < 0, y < 0
    x_rem = bitwise_not(x) if x_sign else x
    y_rem = bitwise_not(y) if y_sign else y

    result: List[int] = []
    while x_rem != 0 or y_rem != 0:
        x_rem, x_digit = tdivmod(x_rem, chunk)
        if x_sign:
            x_digit = chunk - 1 - x_digit
        y_rem, y_digit = tdivmod(y_rem, chunk)
        if y_sign:
            y_digit = chunk - 1 - y_digit
        result.append(fn(x_digit, y_digit))

    total = -1 if fn(int(x_sign), int(y_sign)) != 0 else 0
    for digit in reversed(result):
        total = total * chunk + digit
    return total


def bitwise_and(x: int, y: int) -> int:
    return bitwise(x, y, lambda a, b: a & b)


def bitwise_or(x: int, y: int) -> int:
    return bitwise(x, y, lambda a, b: a | b)


def bitwise_xor(x: int, y: int) -> int:
    return bitwise(x, y, lambda a, b: a ^ b)
