"""
Batch Statistics
================

Summary aggregates over one enriched event batch, plus the time-window
helpers used before aggregation.

Region extraction:
    "10km NE of Ridgecrest, CA" -> "Ridgecrest"
    "Central Alaska"            -> "Central Alaska"
    "Fiji region, Fiji"         -> "Fiji region"

The most active region is the most frequent token; on a tie, the token
seen first at the maximum count wins. An empty token falls back to
"Global".
"""

import logging
import sys
import time
from typing import Dict, List, Optional, Sequence

from quakepulse.models.event import EnrichedEvent
from quakepulse.models.summary import SummaryStatistics
from quakepulse.numeric import finite_or, round_half_up


logger = logging.getLogger(__name__)


NO_EVENT_LABEL = "None"
GLOBAL_REGION = "Global"


def extract_region(place: str) -> str:
    """Trailing location token of a place string."""
    if " of " in place:
        place = place.rsplit(" of ", 1)[1]
    return place.split(",", 1)[0]


def most_active_region(events: Sequence[EnrichedEvent]) -> str:
    counts: Dict[str, int] = {}
    for event in events:
        region = extract_region(event.place)
        counts[region] = counts.get(region, 0) + 1

    best_region, best_count = "", 0
    for region, count in counts.items():
        if count > best_count:
            best_region, best_count = region, count
    return best_region or GLOBAL_REGION


def calculate_statistics(events: Sequence[EnrichedEvent]) -> SummaryStatistics:
    """
    Compute summary statistics for a batch.

    Args:
        events: Enriched events (may be empty)

    Returns:
        SummaryStatistics; an empty batch yields zeros with the "None" and
        "Global" fallback labels
    """
    if not events:
        return SummaryStatistics(
            total_events=0,
            largest_magnitude=0.0,
            largest_place=NO_EVENT_LABEL,
            most_active_region=GLOBAL_REGION,
            average_depth=0.0,
            total_felt=0,
            tsunami_warnings=0,
            significance_score=0.0,
        )

    largest = events[0]
    for event in events[1:]:
        if event.magnitude > largest.magnitude:
            largest = event

    # Divide before summing so huge depths cannot overflow the total
    average_depth = finite_or(sum(e.depth / len(events) for e in events), sys.float_info.max)
    significance = finite_or(sum(e.significance for e in events), sys.float_info.max)

    stats = SummaryStatistics(
        total_events=len(events),
        largest_magnitude=largest.magnitude,
        largest_place=largest.place,
        most_active_region=most_active_region(events),
        average_depth=round_half_up(average_depth, 1),
        total_felt=sum(e.felt or 0 for e in events),
        tsunami_warnings=sum(1 for e in events if e.tsunami),
        significance_score=significance,
    )
    logger.debug(
        f"Statistics: {stats.total_events} events, largest M{stats.largest_magnitude:.1f}, "
        f"region={stats.most_active_region}"
    )
    return stats


def filter_by_time_range(
    events: Sequence[EnrichedEvent],
    hours_back: float,
    now_ms: Optional[float] = None,
) -> List[EnrichedEvent]:
    """Events whose origin time is within ``hours_back`` of now (future included)."""
    if now_ms is None:
        now_ms = time.time() * 1000
    cutoff = now_ms - hours_back * 3_600_000
    return [e for e in events if e.occurred_at >= cutoff]


def sort_by_time(events: Sequence[EnrichedEvent]) -> List[EnrichedEvent]:
    """Oldest first."""
    return sorted(events, key=lambda e: e.occurred_at)
