"""
Analytics Module
================

Batch aggregates (statistics, mood) and per-event interpretation
(energy, descriptions).
"""

from quakepulse.analytics.statistics import (
    calculate_statistics,
    extract_region,
    filter_by_time_range,
    sort_by_time,
)
from quakepulse.analytics.mood import calculate_mood, emotional_context
from quakepulse.analytics.energy import energy_comparison, magnitude_to_joules
from quakepulse.analytics.descriptions import (
    depth_description,
    distance_to_observer,
    freshness_label,
    human_impact,
    magnitude_description,
)

__all__ = [
    "calculate_statistics",
    "extract_region",
    "filter_by_time_range",
    "sort_by_time",
    "calculate_mood",
    "emotional_context",
    "energy_comparison",
    "magnitude_to_joules",
    "depth_description",
    "distance_to_observer",
    "freshness_label",
    "human_impact",
    "magnitude_description",
]
