"""
Exceptions raised by the fraction engine.

Every error also derives from the closest builtin, so callers that catch
ValueError or ZeroDivisionError keep working.
"""


class FractionError(Exception):
    """Base class for all fraction errors."""


class InvalidArgument(FractionError, ValueError):
    """Zero denominator, out-of-range native integer or bad argument type."""


class DivisionByZero(FractionError, ZeroDivisionError):
    """Division by zero, reciprocal of zero or zero to a negative power."""


class ParseError(FractionError, ValueError):
    """Text is not a valid integer or fraction literal."""


class AllocationFailure(FractionError, MemoryError):
    pass


class Unrepresentable(FractionError, ValueError):
    """Value can't be expressed in the requested representation (NaN, inf, int64)."""


class ReleasedError(FractionError, RuntimeError):
    """Fraction was used after its last reference was released."""
