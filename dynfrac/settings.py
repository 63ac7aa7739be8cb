"""
Tunable constants for float conversions.
"""

from dataclasses import dataclass

from .errors import InvalidArgument


@dataclass(frozen=True)
class ConversionSettings:
    # stop the continued fraction expansion once the convergent is this close
    tolerance: float = 1e-15
    # abort the expansion when the running reciprocal grows past this
    overflow_guard: float = 1e15
    # max denominator used by fits_double for the reconstruction
    fits_double_bound: int = 1_000_000

    def __post_init__(self):
        if not self.tolerance >= 0:
            raise InvalidArgument("tolerance must be non-negative")
        if not self.overflow_guard > 0:
            raise InvalidArgument("overflow_guard must be positive")
        if self.fits_double_bound <= 0:
            raise InvalidArgument("fits_double_bound must be positive")


DEFAULT_SETTINGS = ConversionSettings()
