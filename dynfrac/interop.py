"""
Conversions between Fraction and other rational types.
"""

from quicktions import Fraction as QFraction  # type: ignore

from .errors import InvalidArgument
from .fraction import Fraction


def from_rational(value) -> Fraction:
    """
    Fraction from any exact rational: int, quicktions/fractions Fraction, etc.

    The value must expose integer numerator and denominator attributes.
    """
    if isinstance(value, Fraction):
        return value.copy()
    try:
        numerator, denominator = value.numerator, value.denominator
    except AttributeError:
        raise InvalidArgument("not a rational: {!r}".format(value)) from None
    if not isinstance(numerator, int) or not isinstance(denominator, int):
        raise InvalidArgument("not a rational: {!r}".format(value))
    return Fraction(numerator, denominator)


def to_quicktions(f: Fraction) -> QFraction:
    return QFraction(f.numerator, f.denominator)
