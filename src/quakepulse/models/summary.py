"""
Summary Models
==============

Batch-level aggregates: summary statistics, mood and energy comparison.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class SummaryStatistics(BaseModel):
    """
    Aggregate statistics over one batch.

    Attributes:
        total_events: Number of events
        largest_magnitude: Largest magnitude (0 for an empty batch)
        largest_place: Place of the largest event ("None" when empty)
        most_active_region: Most frequent region token ("Global" fallback)
        average_depth: Mean depth in km, one decimal
        total_felt: Summed felt reports
        tsunami_warnings: Events carrying a tsunami flag
        significance_score: Summed significance
    """

    total_events: int = Field(..., ge=0)
    largest_magnitude: float
    largest_place: str
    most_active_region: str
    average_depth: float = Field(..., ge=0.0)
    total_felt: int = Field(..., ge=0)
    tsunami_warnings: int = Field(..., ge=0)
    significance_score: float = Field(..., ge=0.0)


class Mood(str, Enum):
    """
    Batch severity bands, ordered calmest to most severe.

    Attributes:
        SERENE: Little or no activity
        QUIET: A handful of small events
        STIRRING: Elevated count or energy
        RESTLESS: A recent M5+ or substantial energy
        VOLATILE: A recent M6+ or very high energy
        FIERCE: A recent M7.5+
    """

    SERENE = "serene"
    QUIET = "quiet"
    STIRRING = "stirring"
    RESTLESS = "restless"
    VOLATILE = "volatile"
    FIERCE = "fierce"

    @property
    def rank(self) -> int:
        return list(Mood).index(self)


class MoodState(BaseModel):
    """Batch mood with normalized intensity."""

    mood: Mood
    intensity: float = Field(..., ge=0.0, le=1.0)
    description: str
    color: str
    recent_biggest: float = Field(
        ...,
        description="Largest magnitude among events under 48 hours old",
    )


class EnergyReference(BaseModel):
    """A single human-scale comparison."""

    icon: str
    label: str
    detail: str


class EnergyComparison(BaseModel):
    """Seismic energy of one magnitude with human-scale comparisons."""

    magnitude: float
    joules: float = Field(..., gt=0.0)
    tnt_tons: float = Field(..., gt=0.0)
    comparisons: List[EnergyReference] = Field(default_factory=list)
