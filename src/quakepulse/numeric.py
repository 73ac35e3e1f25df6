"""
Numeric Guards
==============

Small helpers that keep every derived value finite.

Feed values arrive as arbitrary JSON; these helpers are the single place
where NaN, infinities, booleans and non-numeric values are coerced.
"""

import math
from typing import Any, Optional


# 10 ** 300 still fits in a float
MAX_POW10_EXPONENT = 300.0


def as_real(value: Any) -> Optional[float]:
    """Return value as a finite float, or None if it is not one."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    value = float(value)
    if not math.isfinite(value):
        return None
    return value


def finite_or(value: Any, default: float = 0.0) -> float:
    """Finite float, or ``default`` for missing/non-numeric/non-finite input."""
    real = as_real(value)
    return default if real is None else real


def clamp(value: float, low: float, high: float) -> float:
    """Clamp into [low, high]; NaN collapses to ``low``."""
    if value != value:
        return low
    return max(low, min(high, value))


def safe_pow10(exponent: float) -> float:
    """10 ** exponent with the exponent capped so the result stays finite."""
    exponent = finite_or(exponent)
    return 10.0 ** clamp(exponent, -MAX_POW10_EXPONENT, MAX_POW10_EXPONENT)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a dashboard would (0.05 -> 0.1), not banker's rounding."""
    factor = 10 ** digits
    scaled = value * factor + 0.5
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled) / factor
