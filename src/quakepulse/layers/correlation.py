"""
Event Correlation
=================

Links events that are close in both space and time, revealing cascading
sequences along a fault.

Algorithm:
    1. Keep events at or above the minimum magnitude; sort by origin time.
    2. For each event i, scan later events j. Because the list is
       time-sorted, the first j whose gap exceeds the time limit ends the
       scan for i: every later j is further away in time.
    3. Keep pairs whose great-circle separation is within the distance
       limit.
    4. Stop all scanning once the edge cap is reached.

Complexity is O(n * k) where k is the number of events inside one time
window; only a tightly clustered burst approaches O(n^2), and the edge cap
bounds that case.

Visual weights:
    proximity = 1 - distance / max_distance      (1 = coincident)
    alpha     = 0.3 + 0.5 * proximity
    stroke    = 0.3 + 0.15 * max(mag_a, mag_b)
    altitude  = 0.02 + 0.06 * proximity
"""

import logging
import random
from typing import List, Optional, Sequence

from quakepulse.config import CorrelationConfig
from quakepulse.geometry.distance import haversine_km
from quakepulse.models.event import EnrichedEvent
from quakepulse.models.layers import CorrelationEdge


logger = logging.getLogger(__name__)


MS_PER_HOUR = 3_600_000


def arc_color(magnitude: float, alpha: float) -> str:
    """Arc endpoint color: blue < M4 <= purple < M5 <= amber < M6 <= red."""
    if magnitude >= 6:
        rgb = "239, 68, 68"
    elif magnitude >= 5:
        rgb = "245, 158, 11"
    elif magnitude >= 4:
        rgb = "168, 85, 247"
    else:
        rgb = "96, 165, 250"
    return f"rgba({rgb}, {alpha:.3f})"


def _build_edge(
    a: EnrichedEvent,
    b: EnrichedEvent,
    distance_km: float,
    time_gap_hours: float,
    max_distance_km: float,
    rng: random.Random,
) -> CorrelationEdge:
    proximity = max(0.0, min(1.0, 1.0 - distance_km / max_distance_km))
    alpha = 0.3 + proximity * 0.5
    combined = max(a.magnitude, b.magnitude)

    return CorrelationEdge(
        start_lat=a.latitude,
        start_lng=a.longitude,
        end_lat=b.latitude,
        end_lng=b.longitude,
        distance_km=distance_km,
        time_gap_hours=time_gap_hours,
        proximity=proximity,
        alpha=alpha,
        stroke=0.3 + combined * 0.15,
        altitude=0.02 + proximity * 0.06,
        colors=(arc_color(a.magnitude, alpha), arc_color(b.magnitude, alpha)),
        dash_animate_ms=2000.0 + rng.random() * 2000.0,
        label=(
            f"M{a.magnitude:.1f} → M{b.magnitude:.1f} · "
            f"{distance_km:.0f} km · {time_gap_hours:.1f}h"
        ),
    )


def generate_correlation_edges(
    events: Sequence[EnrichedEvent],
    config: Optional[CorrelationConfig] = None,
    rng: Optional[random.Random] = None,
) -> List[CorrelationEdge]:
    """
    Generate arcs between spatially and temporally close events.

    Args:
        events: Enriched events in any order
        config: Distance/time/magnitude limits and the edge cap
        rng: Source for the cosmetic dash animation period

    Returns:
        At most ``config.max_edges`` edges, each starting at the earlier
        event of its pair
    """
    config = config or CorrelationConfig()
    rng = rng or random.Random()

    # Time order is required by the early exit below
    eligible = sorted(
        (e for e in events if e.magnitude >= config.min_magnitude),
        key=lambda e: e.occurred_at,
    )
    if len(eligible) < 2 or config.max_edges <= 0:
        return []

    edges: List[CorrelationEdge] = []
    pairs_checked = 0

    for i, a in enumerate(eligible):
        for j in range(i + 1, len(eligible)):
            b = eligible[j]

            time_gap_hours = (b.occurred_at - a.occurred_at) / MS_PER_HOUR
            if time_gap_hours > config.max_time_gap_hours:
                break

            pairs_checked += 1
            distance_km = haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)
            if distance_km > config.max_distance_km:
                continue

            edges.append(
                _build_edge(a, b, distance_km, time_gap_hours, config.max_distance_km, rng)
            )
            if len(edges) >= config.max_edges:
                break

        if len(edges) >= config.max_edges:
            break

    logger.debug(
        f"Correlation: {len(eligible)} eligible, {pairs_checked} pairs checked, "
        f"{len(edges)} edges (cap {config.max_edges})"
    )
    return edges
