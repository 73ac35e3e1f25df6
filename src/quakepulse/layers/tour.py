"""
Tour Ranking
============

Orders events by magnitude for the guided tour and cinematic autoplay.

No magnitude or recency filter: with fewer events than stops, even
micro-events appear.
"""

import logging
import time
from typing import List, Optional, Sequence

from quakepulse.analytics.descriptions import (
    depth_description,
    freshness_label,
    human_impact,
    magnitude_description,
)
from quakepulse.analytics.mood import emotional_context
from quakepulse.config import TourConfig
from quakepulse.models.event import EnrichedEvent
from quakepulse.models.layers import TourStop


logger = logging.getLogger(__name__)


DEFAULT_TOUR_COUNT = 8


def tour_stops(events: Sequence[EnrichedEvent], count: int = DEFAULT_TOUR_COUNT) -> List[EnrichedEvent]:
    """Strongest ``count`` events, stable for equal magnitudes."""
    if count <= 0:
        return []
    return sorted(events, key=lambda e: e.magnitude, reverse=True)[:count]


def build_tour(
    events: Sequence[EnrichedEvent],
    count: int = DEFAULT_TOUR_COUNT,
    now_ms: Optional[float] = None,
) -> List[TourStop]:
    """Wrap the ranked events as numbered stops with display labels."""
    if now_ms is None:
        now_ms = time.time() * 1000
    ranked = tour_stops(events, count)
    return [
        TourStop(
            event_id=event.id,
            latitude=event.latitude,
            longitude=event.longitude,
            magnitude=event.magnitude,
            place=event.place,
            index=index,
            total=len(ranked),
            magnitude_label=magnitude_description(event.magnitude),
            depth_label=depth_description(event.depth),
            impact=human_impact(event),
            freshness=freshness_label(event, now_ms),
            context=emotional_context(event, now_ms),
        )
        for index, event in enumerate(ranked)
    ]


def cinematic_stops(
    events: Sequence[EnrichedEvent],
    config: Optional[TourConfig] = None,
    now_ms: Optional[float] = None,
) -> List[TourStop]:
    """Longer ranking used by the cinematic autoplay."""
    config = config or TourConfig()
    return build_tour(events, config.cinematic_count, now_ms)
