"""
Data Models
===========

Data models for the QuakePulse engine.

Models:
    Event:
        - EnrichedEvent: Canonical normalized event (frozen dataclass)

    Layers:
        - CorrelationEdge: Link between related events
        - DensityPoint: Heatmap sample
        - RippleAnnotation, RippleBand: Ring parameters
        - TourStop: Ranked stop for tours

    Summary:
        - SummaryStatistics: Batch aggregates
        - Mood, MoodState: Batch severity
        - EnergyComparison, EnergyReference: Human-scale energy

    Output:
        - FeedAnalysis: Complete per-snapshot output
"""

from quakepulse.models.event import ALERT_LEVELS, EnrichedEvent
from quakepulse.models.layers import (
    CorrelationEdge,
    DensityPoint,
    RippleAnnotation,
    RippleBand,
    TourStop,
)
from quakepulse.models.summary import (
    EnergyComparison,
    EnergyReference,
    Mood,
    MoodState,
    SummaryStatistics,
)
from quakepulse.models.output import FeedAnalysis

__all__ = [
    # Event
    "ALERT_LEVELS",
    "EnrichedEvent",
    # Layers
    "CorrelationEdge",
    "DensityPoint",
    "RippleAnnotation",
    "RippleBand",
    "TourStop",
    # Summary
    "SummaryStatistics",
    "Mood",
    "MoodState",
    "EnergyComparison",
    "EnergyReference",
    # Output
    "FeedAnalysis",
]
