"""
Density Mapping
===============

Per-event heatmap weights from a log-energy proxy.

Each event contributes raw energy ``10^(1.5 * magnitude)``; the weight is
``log10(raw + 1)`` normalized across the batch into [0.1, 1.0]:

    weight = 0.1 + 0.9 * (w - min) / (max - min)

When every event shares one magnitude the denominator is replaced by 1,
so a single-event or uniform batch maps to 0.1 everywhere.

``log10(10^x + 1)`` is evaluated as ``logaddexp(x * ln10, 0) / ln10`` so
that large magnitudes never overflow to infinity.
"""

import logging
import math
from typing import List, Sequence

import numpy as np

from quakepulse.models.event import EnrichedEvent
from quakepulse.models.layers import DensityPoint


logger = logging.getLogger(__name__)


WEIGHT_FLOOR = 0.1
WEIGHT_SPAN = 0.9

_LN10 = math.log(10.0)


def log_energy_weights(magnitudes: Sequence[float]) -> np.ndarray:
    """
    Compute ``log10(10^(1.5 * m) + 1)`` for each magnitude.

    Args:
        magnitudes: Event magnitudes (non-finite values count as 0)

    Returns:
        Array of finite log weights, same length as input
    """
    mags = np.nan_to_num(np.asarray(magnitudes, dtype=float), nan=0.0, posinf=0.0, neginf=0.0)
    # Bound the exponent so logaddexp stays finite
    mags = np.clip(mags, -1e6, 1e6)
    return np.logaddexp(1.5 * mags * _LN10, 0.0) / _LN10


def normalize_weights(log_weights: np.ndarray) -> np.ndarray:
    """Min-max normalize into [0.1, 1.0] with a unit denominator fallback."""
    if log_weights.size == 0:
        return log_weights
    low = float(np.min(log_weights))
    span = float(np.max(log_weights)) - low
    if span == 0 or not math.isfinite(span):
        span = 1.0
    weights = WEIGHT_FLOOR + (log_weights - low) / span * WEIGHT_SPAN
    return np.clip(np.nan_to_num(weights, nan=WEIGHT_FLOOR), WEIGHT_FLOOR, 1.0)


def generate_density_points(events: Sequence[EnrichedEvent]) -> List[DensityPoint]:
    """
    Map every event to a weighted heatmap point.

    No filtering and no cap: output length always equals input length.
    """
    if not events:
        return []

    weights = normalize_weights(log_energy_weights([e.magnitude for e in events]))

    points = [
        DensityPoint(latitude=e.latitude, longitude=e.longitude, weight=float(w))
        for e, w in zip(events, weights)
    ]
    logger.debug(
        f"Density: {len(points)} points, weight range "
        f"[{float(weights.min()):.3f}, {float(weights.max()):.3f}]"
    )
    return points
