"""
Runtime defaults for formatting, parsing and primality testing.

Values come from the environment once, at import time:

  EXACTINT_ALPHABET           digit alphabet used when none is passed
  EXACTINT_PRIME_ITERATIONS   default witness count for is_probable_prime
  EXACTINT_STRICT_PRIMALITY   "1"/"true"/"yes" doubles heuristic witnesses

The arithmetic base is fixed; the power-of-two
table is derived from it once per process.
"""

import os
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional

from .constants import DEFAULT_ALPHABET, DEFAULT_PROBABLE_PRIME_ITERATIONS

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class IntegerConfig:
    """Defaults applied when a BigInteger method is called without them."""
    alphabet: str = DEFAULT_ALPHABET
    probable_prime_iterations: int = DEFAULT_PROBABLE_PRIME_ITERATIONS
    strict_primality: bool = False

    def __post_init__(self):
        if len(self.alphabet) < 2:
            raise ValueError(
                f"alphabet needs at least 2 characters, got {self.alphabet!r}"
            )
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError(f"alphabet has duplicate characters: {self.alphabet!r}")
        if self.probable_prime_iterations < 1:
            raise ValueError(
                "probable_prime_iterations must be positive, "
                f"got {self.probable_prime_iterations}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def load_config(environ: Optional[Mapping[str, str]] = None) -> IntegerConfig:
    """Build an IntegerConfig from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ).

    Returns:
        IntegerConfig with defaults for any variable that is not set.

    Raises:
        ValueError if a variable is set to a malformed value.
    """
    env = os.environ if environ is None else environ
    kwargs: Dict[str, Any] = {}

    alphabet = env.get("EXACTINT_ALPHABET")
    if alphabet:
        kwargs["alphabet"] = alphabet

    iterations = env.get("EXACTINT_PRIME_ITERATIONS")
    if iterations:
        try:
            kwargs["probable_prime_iterations"] = int(iterations)
        except ValueError:
            raise ValueError(
                f"EXACTINT_PRIME_ITERATIONS must be an integer, got {iterations!r}"
            ) from None

    strict = env.get("EXACTINT_STRICT_PRIMALITY")
    if strict is not None:
        kwargs["strict_primality"] = _parse_bool("EXACTINT_STRICT_PRIMALITY", strict)

    return IntegerConfig(**kwargs)


DEFAULT_CONFIG = load_config()
