"""
Total order over integers extended with two unbounded sentinels.

An extended value is one of:

  Sentinel.NEGATIVE_INFINITY  <  Finite(v)  <  Sentinel.POSITIVE_INFINITY

Finite-finite comparison is exact.  The float infinities ``-math.inf`` and
``math.inf`` are accepted wherever a sentinel is, since they are the
unbounded values Python code already compares against.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class Sentinel(Enum):
    """Unbounded ends of the extended order."""
    NEGATIVE_INFINITY = -1
    POSITIVE_INFINITY = 1

    def __repr__(self) -> str:
        return f"Sentinel.{self.name}"


NEGATIVE_INFINITY = Sentinel.NEGATIVE_INFINITY
POSITIVE_INFINITY = Sentinel.POSITIVE_INFINITY


@dataclass(frozen=True)
class Finite:
    """A finite point of the extended order (anything int() accepts)."""
    value: Any

    def __int__(self) -> int:
        return int(self.value)


Extended = Union[Sentinel, Finite]


def compare_ints(a: int, b: int) -> int:
    return 0 if a == b else (1 if a > b else -1)


def compare_abs(a: int, b: int) -> int:
    """Compare magnitudes only."""
    return compare_ints(abs(a), abs(b))


def as_sentinel(x: Any) -> Union[Sentinel, None]:
    """Map a sentinel or float infinity to its Sentinel, else None."""
    if isinstance(x, Sentinel):
        return x
    if isinstance(x, float) and math.isinf(x):
        return POSITIVE_INFINITY if x > 0 else NEGATIVE_INFINITY
    return None


def compare(a: int, other: Union[Extended, int, float]) -> int:
    """Compare a finite integer against a finite or unbounded value.

    Any finite value is less than POSITIVE_INFINITY and greater than
    NEGATIVE_INFINITY, unconditionally.
    """
    s = as_sentinel(other)
    if s is not None:
        return -s.value
    return compare_ints(a, int(other))


def compare_extended(a: Union[Extended, int, float],
                     b: Union[Extended, int, float]) -> int:
    """Total order over two extended values; a sentinel equals itself."""
    sa, sb = as_sentinel(a), as_sentinel(b)
    if sa is not None and sb is not None:
        return compare_ints(sa.value, sb.value)
    if sa is not None:
        return sa.value
    if sb is not None:
        return -sb.value
    return compare_ints(int(a), int(b))
