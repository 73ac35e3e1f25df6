"""
Feed Analysis Output
====================

Complete output contract for one feed snapshot.

Output Contract:
    {
        "generated_at": 1770500938284,
        "accepted": 480,
        "dropped": 3,
        "events": [...],
        "arcs": [...],
        "heatmap": [...],
        "ripples": [...],
        "tour": [...],
        "statistics": {...},
        "mood": {...},
        "largest_energy": {...} | null
    }

All layers are computed independently from the same immutable event
batch; no layer reads another layer's output.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from quakepulse.models.layers import (
    CorrelationEdge,
    DensityPoint,
    RippleAnnotation,
    TourStop,
)
from quakepulse.models.summary import EnergyComparison, MoodState, SummaryStatistics


class FeedAnalysis(BaseModel):
    """Every derived layer for one snapshot."""

    generated_at: int = Field(..., description="Evaluation time, epoch ms")
    accepted: int = Field(..., ge=0, description="Features accepted by validation")
    dropped: int = Field(..., ge=0, description="Malformed features dropped")
    events: List[Dict[str, Any]] = Field(default_factory=list)
    arcs: List[CorrelationEdge] = Field(default_factory=list)
    heatmap: List[DensityPoint] = Field(default_factory=list)
    ripples: List[RippleAnnotation] = Field(default_factory=list)
    tour: List[TourStop] = Field(default_factory=list)
    statistics: SummaryStatistics
    mood: MoodState
    largest_energy: Optional[EnergyComparison] = None
