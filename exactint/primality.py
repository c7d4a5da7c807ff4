"""
Miller-Rabin primality testing.

Three witness strategies share one Miller-Rabin core:

  - deterministic: fixed witnesses 2..37, exact for every n < 2^64
  - heuristic (is_prime, n >= 2^64): witnesses 2..t+1 with
    t = ceil(c * ln(2) * bit_length(n)), c = 2 in strict mode else 1
  - probabilistic (is_probable_prime): caller-chosen count of witnesses
    drawn uniformly from [2, n-2]

A "prime" verdict for n >= 2^64 is heuristic: a composite can pass every
witness.  That is a property of the chosen confidence level, not an error.
"""

import logging
import math
from typing import Iterable, Optional

from .constants import (
    DEFAULT_PROBABLE_PRIME_ITERATIONS, DETERMINISTIC_MAX_BITS,
    DETERMINISTIC_WITNESSES,
)
from .number_theory import bit_length, mod_pow
from .sampling import Rng, rand_between

logger = logging.getLogger(__name__)


def is_basic_prime(n: int) -> Optional[bool]:
    """Cheap verdict from small factors, or None when undecided."""
    n = abs(n)
    if n == 1:
        return False
    if n in (2, 3, 5):
        return True
    if n % 2 == 0 or n % 3 == 0 or n % 5 == 0:
        return False
    if n < 49:
        return True
    return None


def miller_rabin_test(n: int, witnesses: Iterable[int]) -> bool:
    """Run Miller-Rabin on odd n > 2 for each witness; False means composite."""
    n_prev = n - 1
    d, r = n_prev, 0
    while d % 2 == 0:
        d //= 2
        r += 1

    for a in witnesses:
        if n <= a:
            continue
        x = mod_pow(a, d, n)
        if x == 1 or x == n_prev:
            continue
        for _ in range(r - 1):
            x = x * x % n
            if x == 1:
                return False
            if x == n_prev:
                break
        else:
            return False
    return True


def heuristic_witness_count(bits: int, strict: bool = False) -> int:
    c = 2 if strict else 1
    return math.ceil(c * math.log(2) * bits)


def is_prime(n: int, strict: bool = False) -> bool:
    """Primality of |n|: exact below 2^64, heuristic above."""
    basic = is_basic_prime(n)
    if basic is not None:
        return basic
    n = abs(n)
    bits = bit_length(n)
    if bits <= DETERMINISTIC_MAX_BITS:
        return miller_rabin_test(n, DETERMINISTIC_WITNESSES)

    t = heuristic_witness_count(bits, strict)
    logger.debug("is_prime: %d-bit candidate, %d heuristic witnesses (strict=%s)",
                 bits, t, strict)
    return miller_rabin_test(n, range(2, t + 2))


def is_probable_prime(
    n: int,
    iterations: int = DEFAULT_PROBABLE_PRIME_ITERATIONS,
    rng: Optional[Rng] = None,
) -> bool:
    """Miller-Rabin with `iterations` random witnesses from [2, n-2].

    Raises:
        ValueError if iterations < 1.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")
    basic = is_basic_prime(n)
    if basic is not None:
        return basic
    n = abs(n)
    logger.debug("is_probable_prime: %d-bit candidate, %d random witnesses",
                 bit_length(n), iterations)
    witnesses = [rand_between(2, n - 2, rng) for _ in range(iterations)]
    return miller_rabin_test(n, witnesses)
