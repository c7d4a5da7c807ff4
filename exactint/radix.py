"""
Arbitrary-base conversion with custom alphabets.

Digit arrays are most-significant first and carry a separate sign flag.
Besides the usual bases |b| >= 2 (including negative bases), three
degenerate bases are supported:

  base  0   only zero is representable -> (0,)
  base  1   unary: |v| ones, sign in is_negative
  base -1   sign encoded structurally: -m -> (1,0)*m, +m -> (1,) + (0,1)*(m-1)

Digits at or beyond the alphabet's length are written as ``<digit>``, so
any base can be formatted with any alphabet and parsed back.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .constants import DEFAULT_ALPHABET
from .errors import InvalidBaseError, InvalidDigitError, ValidationError
from .substrate import tdivmod


@dataclass(frozen=True)
class DigitArray:
    """Digits of a value in some base, most-significant first."""
    digits: Tuple[int, ...]
    is_negative: bool = False

    def __len__(self) -> int:
        return len(self.digits)


# ---------------------------------------------------------------------------
# Value -> digits
# ---------------------------------------------------------------------------

def to_base(n: int, base: int) -> DigitArray:
    """Decompose n into digits of the given base.

    Raises:
        InvalidBaseError if base is 0 and n is nonzero.
    """
    if base == 0:
        if n == 0:
            return DigitArray((0,))
        raise InvalidBaseError("Cannot convert nonzero numbers to base 0.")

    if base == -1:
        if n == 0:
            return DigitArray((0,))
        if n < 0:
            return DigitArray((1, 0) * -n)
        return DigitArray((1,) + (0, 1) * (n - 1))

    neg = False
    if n < 0 and base > 0:
        neg = True
        n = -n

    if base == 1:
        if n == 0:
            return DigitArray((0,))
        return DigitArray((1,) * n, neg)

    out: List[int] = []
    left = n
    while left < 0 or abs(left) >= abs(base):
        left, digit = tdivmod(left, base)
        if digit < 0:
            # compensated division keeps negative-base digits non-negative
            digit += abs(base)
            left += 1
        out.append(digit)
    out.append(left)
    out.reverse()
    return DigitArray(tuple(out), neg)


def stringify(digit: int, alphabet: Optional[str] = None) -> str:
    alphabet = alphabet or DEFAULT_ALPHABET
    if digit < len(alphabet):
        return alphabet[digit]
    return f"<{digit}>"


def format_digits(arr: DigitArray, alphabet: Optional[str] = None) -> str:
    return ("-" if arr.is_negative else "") + "".join(
        stringify(d, alphabet) for d in arr.digits
    )


def to_base_string(n: int, base: int, alphabet: Optional[str] = None) -> str:
    """Format n in the given base, e.g. to_base_string(255, 16) == 'ff'."""
    return format_digits(to_base(n, base), alphabet)


# ---------------------------------------------------------------------------
# Digits -> value
# ---------------------------------------------------------------------------

def from_digits(digits: Sequence[int], base: int, is_negative: bool = False) -> int:
    """Evaluate digits (most-significant first) with Horner's rule."""
    value = 0
    for d in digits:
        value = value * base + int(d)
    return -value if is_negative else value


def _tokenize(body: str, base: int, values: Dict[str, int]) -> List[int]:
    digits: List[int] = []
    abs_base = abs(base)
    i = 0
    while i < len(body):
        c = body[i]
        if c == "<":
            end = body.find(">", i + 1)
            if end == -1:
                raise ValidationError(f"Unterminated digit literal in {body!r}")
            literal = body[i + 1:end]
            if not (literal.isascii() and literal.isdigit()):
                raise ValidationError(f"Invalid digit literal <{literal}>")
            digits.append(int(literal))
            i = end + 1
            continue
        if c == "-":
            raise ValidationError(f"Misplaced sign in {body!r}")
        if c not in values:
            raise InvalidDigitError(c, base)
        v = values[c]
        if v >= abs_base and not (c == "1" and abs_base == 1):
            raise InvalidDigitError(c, base)
        digits.append(v)
        i += 1
    return digits


def parse(
    text: str,
    base: int,
    alphabet: Optional[str] = None,
    case_sensitive: bool = False,
) -> int:
    """Parse text written in the given base.

    Args:
        text: Optional leading '-', then alphabet characters or <N> literals.
        base: Any integer base.
        alphabet: Digit characters in value order (default 0-9a-z).
        case_sensitive: If False, text and alphabet are lower-cased first.

    Raises:
        InvalidDigitError for characters that are not digits of the base.
        ValidationError for empty or otherwise malformed text.
    """
    alphabet = alphabet or DEFAULT_ALPHABET
    text = str(text)
    if not case_sensitive:
        text = text.lower()
        alphabet = alphabet.lower()

    values = {c: i for i, c in enumerate(alphabet)}
    is_negative = text.startswith("-")
    body = text[1:] if is_negative else text
    if not body:
        raise ValidationError(f"No digits in {text!r}")

    return from_digits(_tokenize(body, base, values), base, is_negative)
