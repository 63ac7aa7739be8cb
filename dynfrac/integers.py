"""
Integer collaborator.

Python int is already an immutable arbitrary-precision integer, so only the
parts of the contract with stricter semantics than the builtins live here:
literal parsing/rendering in a given base, saturating float conversion and
fixed-width conversion with a success flag.
"""

import math
import re
import string

from .errors import InvalidArgument, ParseError


INT32_MIN = -2**31
INT32_MAX = 2**31 - 1
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

_DIGITS = string.digits + string.ascii_lowercase
_literal_cache = {}


def _literal_re(base: int) -> re.Pattern:
    regex = _literal_cache.get(base)
    if regex is None:
        if not 2 <= base <= 36:
            raise InvalidArgument("base must be in range 2..36, got {}".format(base))
        allowed = re.escape(_DIGITS[:base] + _DIGITS[10:base].upper())
        regex = _literal_cache[base] = re.compile(r'[+-]?[{}]+'.format(allowed))
    return regex


def parse(text: str, base: int = 10) -> int:
    """
    Parse an integer literal.

    Only an optional sign followed by digits of the given base is accepted:
    no surrounding whitespace, underscores or 0x-like prefixes.
    """
    if not isinstance(text, str):
        raise ParseError("expected str, got {}".format(type(text).__name__))
    if not _literal_re(base).fullmatch(text):
        raise ParseError("invalid base-{} integer literal: {!r}".format(base, text))
    return int(text, base)


def render(value: int, base: int = 10) -> str:
    _literal_re(base)  # validate base
    if base == 10:
        return str(value)
    if value == 0:
        return '0'
    sign = '-' if value < 0 else ''
    value = abs(value)
    digits = []
    while value:
        value, rem = divmod(value, base)
        digits.append(_DIGITS[rem])
    return sign + ''.join(reversed(digits))


def true_div(n: int, d: int) -> float:
    """Nearest float to n/d; saturates to +-inf instead of raising OverflowError."""
    try:
        return n / d
    except OverflowError:
        # n / d can only overflow away from zero, d is never zero here
        return math.inf if (n > 0) == (d > 0) else -math.inf


def to_double(value: int) -> float:
    return true_div(value, 1)


def to_fixed_width(value: int, bits: int) -> tuple[bool, int]:
    """Signed two's complement conversion: (ok, value), value is 0 if not ok."""
    lo = -(1 << (bits - 1))
    hi = (1 << (bits - 1)) - 1
    if lo <= value <= hi:
        return True, value
    return False, 0


def fits_int32(value: int) -> bool:
    return INT32_MIN <= value <= INT32_MAX


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def floor_div(n: int, d: int) -> int:
    # rounds toward -inf
    return n // d


def gcd(a: int, b: int) -> int:
    return math.gcd(a, b)


def compare(a: int, b: int) -> int:
    return (a > b) - (a < b)
