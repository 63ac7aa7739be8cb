import logging
import math

from .settings import ConversionSettings, DEFAULT_SETTINGS


logger = logging.getLogger(__name__)


def best_convergent(value: float, max_denominator: int | None = None, settings: ConversionSettings = DEFAULT_SETTINGS) -> tuple[int, int]:
    # Last continued fraction convergent h/k of a finite float with k <= max_denominator.
    # max_denominator=None (or <= 0) means no bound.
    # The sign is stripped before the expansion and re-applied to h.
    # This is not the certified best rational approximation (semiconvergents are never tried).
    if math.isnan(value) or math.isinf(value):
        raise ValueError("finite value expected")
    if max_denominator is not None and max_denominator <= 0:
        max_denominator = None

    negative = value < 0
    value = abs(value)

    h0, h1 = 0, 1
    k0, k1 = 1, 0
    x = value
    steps = 0
    reason = 'bound'
    while max_denominator is None or k1 <= max_denominator:
        a = math.floor(x)
        h2 = a * h1 + h0
        k2 = a * k1 + k0
        if max_denominator is not None and k2 > max_denominator:
            break

        h0, h1 = h1, h2
        k0, k1 = k1, k2
        steps += 1

        if abs(value - h1 / k1) < settings.tolerance:
            reason = 'tolerance'
            break
        rem = x - a
        if rem == 0:
            reason = 'exact'
            break
        x = 1.0 / rem
        if x > settings.overflow_guard:
            reason = 'overflow guard'
            break

    logger.debug('convergent %d/%d for %r after %d steps (stop: %s)', h1, k1, value, steps, reason)
    return (-h1 if negative else h1), k1
