"""
Exception hierarchy for exactint.

Every error is an input or programmer error raised at the call that
triggered it. All of them derive from ValueError so callers that already
guard numeric parsing with ``except ValueError`` keep working.
"""


class BigIntegerError(ValueError):
    """Base class for all exactint errors."""


class ValidationError(BigIntegerError):
    """Malformed text or a value that cannot be represented exactly."""


class InvalidDigitError(ValidationError):
    """A character that is not a valid digit in the requested base."""

    def __init__(self, char: str, base: int):
        self.char = char
        self.base = base
        super().__init__(f"{char!r} is not a valid digit in base {base}.")


class InvalidBaseError(BigIntegerError):
    """Conversion of a nonzero value to base 0."""


class NotCoprimeError(BigIntegerError):
    """Modular inverse requested for operands with gcd != 1."""

    def __init__(self, value: int, modulus: int):
        self.value = value
        self.modulus = modulus
        super().__init__(f"{value} and {modulus} are not co-prime")


class ZeroModulusError(BigIntegerError, ZeroDivisionError):
    """Modular exponentiation with modulus 0."""


class InvalidShiftAmountError(BigIntegerError):
    """Shift magnitude larger than the arithmetic base."""

    def __init__(self, amount: int):
        self.amount = amount
        super().__init__(f"{amount} is too large for shifting.")
