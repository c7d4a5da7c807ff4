"""
Uniform random integers over an inclusive range of any size.

The range size is written in base BASE and a result is drawn one digit at a
time, most-significant first.  While every earlier digit has matched the
range's digit ("restricted"), a position's bound is the range digit plus the
whole remaining tail of the range as a fraction of one digit, so each
candidate digit is picked with probability proportional (to float
resolution) to the number of values that still fit under the range.  Once a
drawn digit falls strictly below the range's digit every later position is
unconstrained and draws from [0, BASE).  The result is always strictly below
the range size, so no draw is ever discarded.

`rng` is any zero-argument callable returning floats in [0, 1); the default
is a numpy Generator.  Deterministic callers pass ``make_rng(seed)``.
"""

from typing import Callable, List, Optional

import numpy as np

from .constants import BASE
from .radix import from_digits, to_base

Rng = Callable[[], float]

_default_generator = np.random.default_rng()


def make_rng(seed: Optional[int] = None) -> Rng:
    """Return a uniform [0, 1) source backed by numpy's default Generator."""
    return np.random.default_rng(seed).random


def default_rng() -> Rng:
    return _default_generator.random


def _draw(rng: Rng, top: float) -> int:
    u = float(rng())
    if not 0.0 <= u < 1.0:
        raise ValueError(f"rng must return values in [0, 1), got {u!r}")
    return int(u * top)


def _tail_fraction(digits, start: int) -> float:
    """digits[start:] as a fraction in [0, 1) of one digit at start - 1."""
    tail = digits[start:]
    if not tail:
        return 0.0
    return from_digits(tail, BASE) / BASE ** len(tail)


def rand_between(a: int, b: int, rng: Optional[Rng] = None) -> int:
    """Uniform integer in [min(a, b), max(a, b)]."""
    rng = rng or default_rng()
    low, high = min(a, b), max(a, b)
    digits = to_base(high - low + 1, BASE).digits

    result: List[int] = []
    restricted = True
    for i, bound in enumerate(digits):
        if restricted:
            top = bound + _tail_fraction(digits, i + 1)
        else:
            top = BASE
        digit = _draw(rng, top)
        result.append(digit)
        if digit < bound:
            restricted = False
    return low + from_digits(result, BASE)
