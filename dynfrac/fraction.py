"""
This module provides the Fraction class: exact rationals over Python ints.

A Fraction is always kept in canonical form: positive denominator,
numerator and denominator coprime (zero is 0/1). Every operation builds a
fresh value through the constructor, so the invariant holds system-wide.

Fractions are immutable, but carry an explicit reference count for handles
shared across ownership boundaries: retain() adds a holder, release() drops
one and destroys the value when the last holder is gone. A destroyed
fraction raises ReleasedError on any further use. Code that never calls
retain() may ignore the count and let the garbage collector do its job.
"""

from __future__ import annotations
import functools
import logging
import math

from . import integers
from ._continued_fractions import best_convergent
from .errors import AllocationFailure, DivisionByZero, InvalidArgument, ReleasedError, Unrepresentable
from .settings import ConversionSettings, DEFAULT_SETTINGS


logger = logging.getLogger(__name__)

_HASH_MASK = 2**64 - 1


def _allocating(method):
    # MemoryError from the integer products is reported as AllocationFailure
    @functools.wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except AllocationFailure:
            raise
        except MemoryError as exc:
            raise AllocationFailure("out of memory in {}".format(method.__name__)) from exc
    return wrapper


class Fraction:
    """Exact rational number n/d in lowest terms, d > 0."""

    __slots__ = ('_n', '_d', '_refcount', '_hash')

    _n: int | None
    _d: int | None

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        """
        Create a fraction from arbitrary-precision integers.

        The value is normalized (sign moved to the numerator) and reduced.
        Raises InvalidArgument for a zero denominator or non-int arguments.
        """
        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise InvalidArgument("numerator and denominator must be int, got {} and {}".format(
                type(numerator).__name__, type(denominator).__name__,
            ))
        if denominator == 0:
            raise InvalidArgument("denominator cannot be zero")

        n, d = numerator, denominator
        try:
            if d < 0:
                n, d = -n, -d
            g = integers.gcd(n, d)
            if g != 1:
                n //= g
                d //= g
        except MemoryError as exc:
            raise AllocationFailure("out of memory while building a fraction") from exc

        self._n = n
        self._d = d
        self._refcount = 1
        self._hash = None

    @classmethod
    def from_ints(cls, numerator: int, denominator: int = 1) -> Fraction:
        """Create a fraction from native (signed 64-bit) integers."""
        for value in (numerator, denominator):
            if isinstance(value, bool) or not isinstance(value, int) or not integers.fits_int64(value):
                raise InvalidArgument("not a signed 64-bit integer: {!r}".format(value))
        return cls(numerator, denominator)

    @classmethod
    def from_int(cls, value: int) -> Fraction:
        return cls.from_ints(value, 1)

    @classmethod
    def zero(cls) -> Fraction:
        return cls(0, 1)

    @classmethod
    def one(cls) -> Fraction:
        return cls(1, 1)

    @classmethod
    def neg_one(cls) -> Fraction:
        return cls(-1, 1)

    @classmethod
    def from_double(cls, value: float, max_denominator: int | None = None, settings: ConversionSettings = DEFAULT_SETTINGS) -> Fraction:
        """
        Approximate a float by a continued fraction convergent.

        Args:
            value: finite float
            max_denominator: bound on the denominator; None or <= 0 means unbounded
            settings: tolerance and overflow guard of the expansion

        Returns:
            the last convergent with denominator within the bound, see best_convergent

        Raises Unrepresentable for NaN, infinities and ints beyond the float range,
        InvalidArgument for non-numeric values.
        """
        if isinstance(value, (str, bytes)):
            raise InvalidArgument("expected a number, got {}".format(type(value).__name__))
        try:
            value = float(value)
        except OverflowError as exc:
            raise Unrepresentable("value is out of the float range") from exc
        except (TypeError, ValueError) as exc:
            raise InvalidArgument("expected a number, got {}".format(type(value).__name__)) from exc
        if not math.isfinite(value):
            raise Unrepresentable("can't convert {} to a fraction".format(value))
        return cls(*best_convergent(value, max_denominator, settings))

    @classmethod
    def parse(cls, text: str) -> Fraction:
        """
        Parse canonical text: "n" or "n/d" with decimal integer literals.

        The text is split at the first '/'; both halves must be valid integer
        literals (ParseError otherwise), the denominator must not be zero
        (InvalidArgument). No whitespace or other leniency is allowed.
        """
        if not isinstance(text, str):
            raise InvalidArgument("expected str, got {}".format(type(text).__name__))
        num_text, sep, den_text = text.partition('/')
        numerator = integers.parse(num_text)
        denominator = integers.parse(den_text) if sep else 1
        if denominator == 0:
            raise InvalidArgument("denominator cannot be zero: {!r}".format(text))
        return cls(numerator, denominator)

    # lifecycle

    def _parts(self) -> tuple[int, int]:
        if self._refcount == 0:
            raise ReleasedError("fraction was released")
        return self._n, self._d

    @property
    def refcount(self) -> int:
        return self._refcount

    @property
    def alive(self) -> bool:
        return self._refcount > 0

    def copy(self) -> Fraction:
        """Independent fraction with the same value and its own refcount."""
        n, d = self._parts()
        return Fraction(n, d)

    def retain(self) -> Fraction:
        """Add a holder; returns the same object."""
        self._parts()
        self._refcount += 1
        return self

    def release(self) -> None:
        """
        Drop a holder; the last release destroys the value.

        Always returns None, use as `f = f.release()`.
        """
        self._parts()
        self._refcount -= 1
        if self._refcount == 0:
            logger.debug('destroying fraction %d/%d', self._n, self._d)
            self._n = None
            self._d = None
            self._hash = None

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    # accessors and predicates

    @property
    def numerator(self) -> int:
        return self._parts()[0]

    @property
    def denominator(self) -> int:
        return self._parts()[1]

    def is_zero(self) -> bool:
        return self._parts()[0] == 0

    def is_one(self) -> bool:
        n, d = self._parts()
        return n == d

    def is_negative(self) -> bool:
        return self._parts()[0] < 0

    def is_positive(self) -> bool:
        return self._parts()[0] > 0

    def is_integer(self) -> bool:
        return self._parts()[1] == 1

    # arithmetic

    @_allocating
    def add(self, other: Fraction | int) -> Fraction:
        a, b = self._parts()
        c, d = _require(other)._parts()
        return Fraction(a * d + c * b, b * d)

    @_allocating
    def sub(self, other: Fraction | int) -> Fraction:
        a, b = self._parts()
        c, d = _require(other)._parts()
        return Fraction(a * d - c * b, b * d)

    @_allocating
    def mul(self, other: Fraction | int) -> Fraction:
        a, b = self._parts()
        c, d = _require(other)._parts()
        return Fraction(a * c, b * d)

    @_allocating
    def div(self, other: Fraction | int) -> Fraction:
        a, b = self._parts()
        c, d = _require(other)._parts()
        if c == 0:
            raise DivisionByZero("division by zero")
        # sign of c is moved to the numerator by the constructor
        return Fraction(a * d, b * c)

    def negate(self) -> Fraction:
        n, d = self._parts()
        return Fraction(-n, d)

    def abs(self) -> Fraction:
        n, d = self._parts()
        return Fraction(abs(n), d)

    def reciprocal(self) -> Fraction:
        n, d = self._parts()
        if n == 0:
            raise DivisionByZero("reciprocal of zero")
        return Fraction(d, n)

    @_allocating
    def pow(self, exponent: int) -> Fraction:
        """Integer power by repeated squaring; negative exponents invert the base."""
        if not isinstance(exponent, int):
            raise InvalidArgument("exponent must be int, got {}".format(type(exponent).__name__))
        self._parts()
        if exponent == 0:
            return Fraction.one()
        if exponent == 1:
            return self.copy()
        if exponent < 0:
            if self.is_zero():
                raise DivisionByZero("zero to a negative power")
            return self.reciprocal().pow(-exponent)

        result = Fraction.one()
        base = self.copy()
        while exponent > 0:
            if exponent & 1:
                result = result.mul(base)
            exponent >>= 1
            if exponent > 0:
                base = base.mul(base)
        return result

    # comparison

    @_allocating
    def cmp(self, other: Fraction | int) -> int:
        """-1, 0 or 1; cross-multiplication is order-preserving as denominators are positive."""
        a, b = self._parts()
        c, d = _require(other)._parts()
        return integers.compare(a * d, c * b)

    def eq(self, other: Fraction | int) -> bool:
        return self.cmp(other) == 0

    def ne(self, other: Fraction | int) -> bool:
        return self.cmp(other) != 0

    def lt(self, other: Fraction | int) -> bool:
        return self.cmp(other) < 0

    def le(self, other: Fraction | int) -> bool:
        return self.cmp(other) <= 0

    def gt(self, other: Fraction | int) -> bool:
        return self.cmp(other) > 0

    def ge(self, other: Fraction | int) -> bool:
        return self.cmp(other) >= 0

    def sign(self) -> int:
        n = self._parts()[0]
        if n == 0:
            return 0
        return -1 if n < 0 else 1

    # conversions

    def to_double(self) -> float:
        n, d = self._parts()
        return integers.true_div(n, d)

    def to_int64(self) -> int:
        n, d = self._parts()
        if d != 1:
            raise Unrepresentable("{} is not an integer".format(self))
        ok, value = integers.to_fixed_width(n, 64)
        if not ok:
            raise Unrepresentable("{} does not fit in 64 bits".format(self))
        return value

    def fits_int32(self) -> bool:
        n, d = self._parts()
        return d == 1 and integers.fits_int32(n)

    def fits_int64(self) -> bool:
        n, d = self._parts()
        return d == 1 and integers.fits_int64(n)

    def fits_double(self, settings: ConversionSettings = DEFAULT_SETTINGS) -> bool:
        # round trip through float and a bounded continued fraction; not a bit-exact IEEE check
        value = self.to_double()
        if not math.isfinite(value):
            return False
        return self.eq(Fraction.from_double(value, settings.fits_double_bound, settings))

    def to_string(self) -> str:
        n, d = self._parts()
        if d == 1:
            return integers.render(n)
        return '{}/{}'.format(integers.render(n), integers.render(d))

    # rounding

    def whole_part(self) -> int:
        """Integer part, truncated toward zero."""
        n, d = self._parts()
        q = integers.floor_div(n, d)
        # floor division rounds toward -inf
        if n < 0 and d != 1:
            q += 1
        return q

    def fractional_part(self) -> Fraction:
        """self - whole_part(self), keeps the sign of self: -7/3 -> -1/3."""
        if self.is_integer():
            return Fraction.zero()
        return self.sub(Fraction(self.whole_part()))

    def floor(self) -> Fraction:
        n, d = self._parts()
        if d == 1:
            return self.copy()
        return Fraction(integers.floor_div(n, d))

    def ceil(self) -> Fraction:
        n, d = self._parts()
        if d == 1:
            return self.copy()
        return Fraction(integers.floor_div(n, d) + 1)

    def trunc(self) -> Fraction:
        if self.is_integer():
            return self.copy()
        return Fraction(self.whole_part())

    def round(self) -> Fraction:
        """Round to the nearest integer, ties to even."""
        if self.is_integer():
            return self.copy()

        half = Fraction(1, 2)
        if self.fractional_part().abs().eq(half):
            whole = self.whole_part()
            if whole % 2 == 0:
                return Fraction(whole)
            # step away from zero to the even neighbour
            return Fraction(whole - 1 if self.is_negative() else whole + 1)

        signed_half = half.negate() if self.is_negative() else half
        return self.add(signed_half).trunc()

    # hashing

    def frac_hash(self) -> int:
        """64-bit hash of the canonical pair: djb2 of both decimal renderings."""
        n, d = self._parts()
        if self._hash is None:
            self._hash = _djb2(integers.render(n)) ^ ((_djb2(integers.render(d)) << 1) & _HASH_MASK)
        return self._hash

    # python protocols

    def __add__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.sub(other)

    def __rsub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.sub(self)

    def __mul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.mul(other)

    def __rmul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.mul(self)

    def __truediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.div(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.div(self)

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self.copy()

    def __abs__(self):
        return self.abs()

    def __eq__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.eq(other)

    def __lt__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.le(other)

    def __gt__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.ge(other)

    def __hash__(self):
        return self.frac_hash()

    def __bool__(self):
        return not self.is_zero()

    def __float__(self):
        return self.to_double()

    # compliant with int(float): truncates toward zero
    def __int__(self):
        return self.whole_part()

    def __trunc__(self):
        return self.whole_part()

    def __floor__(self):
        n, d = self._parts()
        return integers.floor_div(n, d)

    def __ceil__(self):
        n, d = self._parts()
        return -integers.floor_div(-n, d)

    def __round__(self, ndigits=None):
        if ndigits is not None:
            raise InvalidArgument("rounding to digits is not supported")
        return self.round().numerator

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        if not self.alive:
            return 'Fraction(<released>)'
        return 'Fraction({}, {})'.format(self._n, self._d)


def _coerce(value) -> Fraction | None:
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value)
    return None


def _require(value) -> Fraction:
    fraction = _coerce(value)
    if fraction is None:
        raise InvalidArgument("expected Fraction or int, got {}".format(type(value).__name__))
    return fraction


def _djb2(text: str) -> int:
    h = 0
    for ch in text.encode('ascii'):
        h = (h * 33 + ch) & _HASH_MASK
    return h


def cmp(a: Fraction, b: Fraction) -> int:
    return a.cmp(b)


def fmin(a: Fraction, b: Fraction) -> Fraction:
    """Smaller operand, as an independent copy."""
    return a.copy() if a.lt(b) else _require(b).copy()


def fmax(a: Fraction, b: Fraction) -> Fraction:
    """Larger operand, as an independent copy."""
    return a.copy() if a.gt(b) else _require(b).copy()


def frac_hash(f: Fraction) -> int:
    return f.frac_hash()
