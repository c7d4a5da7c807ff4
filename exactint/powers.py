"""
Process-wide table of ascending powers of two.

Entry i holds 2**i, up to the largest power of two not exceeding BASE
(2**23 for BASE = 10**7).  Its length and last entry bound the per-step
work of shifting and of the bitwise chunk decomposition.  The table is
built on first access behind a lock and is read-only afterwards.
"""

import logging
import threading
from typing import Optional, Tuple

from .constants import BASE

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_powers: Optional[Tuple[int, ...]] = None


def _build() -> Tuple[int, ...]:
    values = [1]
    while 2 * values[-1] <= BASE:
        values.append(2 * values[-1])
    return tuple(values)


def powers_of_two() -> Tuple[int, ...]:
    """Return the cached table, building it exactly once."""
    global _powers
    if _powers is None:
        with _lock:
            if _powers is None:
                _powers = _build()
                logger.debug("powers-of-two table built: %d entries, highest %d",
                             len(_powers), _powers[-1])
    return _powers


def highest_power_of_two() -> int:
    return powers_of_two()[-1]
