"""
Ripple Selection
================

Chooses the most significant events for concentric ring annotation.

Bigger events get bigger, slower rings; fresher events repeat faster:

    max_radius        = min(8, 0.8 * magnitude)
    propagation_speed = max(1, 6 - 0.5 * magnitude)
    repeat_period_ms  = clamp(200 * age_hours + 400, 600, 3000)
"""

import logging
import time
from typing import List, Optional, Sequence, Tuple

from quakepulse.config import RippleConfig
from quakepulse.models.event import EnrichedEvent
from quakepulse.models.layers import RippleAnnotation, RippleBand
from quakepulse.numeric import clamp


logger = logging.getLogger(__name__)


MAX_RING_RADIUS = 8.0

BAND_COLORS = {
    RippleBand.HOT: (255, 50, 50),
    RippleBand.WARM: (255, 165, 0),
    RippleBand.COOL: (100, 200, 255),
}


def ripple_band(magnitude: float) -> RippleBand:
    if magnitude >= 6:
        return RippleBand.HOT
    if magnitude >= 4.5:
        return RippleBand.WARM
    return RippleBand.COOL


def ripple_geometry(magnitude: float, age_hours: float) -> Tuple[float, float, float]:
    """Return (max_radius, propagation_speed, repeat_period_ms)."""
    max_radius = min(MAX_RING_RADIUS, magnitude * 0.8)
    speed = max(1.0, 6.0 - magnitude * 0.5)
    repeat = clamp(age_hours * 200.0 + 400.0, 600.0, 3000.0)
    return max_radius, speed, repeat


def generate_ripples(
    events: Sequence[EnrichedEvent],
    config: Optional[RippleConfig] = None,
    now_ms: Optional[float] = None,
) -> List[RippleAnnotation]:
    """
    Build ring annotations for the strongest qualifying events.

    Args:
        events: Enriched events
        config: Minimum magnitude and ring cap
        now_ms: Evaluation time in epoch ms (defaults to now)

    Returns:
        At most ``config.max_count`` annotations, strongest first; equal
        magnitudes keep their input order
    """
    config = config or RippleConfig()
    if now_ms is None:
        now_ms = time.time() * 1000

    significant = sorted(
        (e for e in events if e.magnitude >= config.min_magnitude),
        key=lambda e: e.magnitude,
        reverse=True,
    )[: config.max_count]

    ripples = []
    for event in significant:
        band = ripple_band(event.magnitude)
        max_radius, speed, repeat = ripple_geometry(event.magnitude, event.age_hours(now_ms))
        ripples.append(
            RippleAnnotation(
                latitude=event.latitude,
                longitude=event.longitude,
                magnitude=event.magnitude,
                max_radius=max_radius,
                propagation_speed=speed,
                repeat_period_ms=repeat,
                band=band,
                base_color=BAND_COLORS[band],
            )
        )

    logger.debug(f"Ripples: {len(ripples)} of {len(events)} events selected")
    return ripples
