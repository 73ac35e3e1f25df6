"""
Layer Models
============

Output contracts for the derived visualization layers.

These are plain data handed to the presentation layer (globe renderer,
panels, audio/haptic driver). Nothing here holds a reference to an
EnrichedEvent except TourStop; arcs are matched by coordinates.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field


class CorrelationEdge(BaseModel):
    """
    Link between two spatially and temporally close events.

    The start is always the earlier of the two events.

    Attributes:
        start_lat, start_lng: Earlier event location
        end_lat, end_lng: Later event location
        distance_km: Great-circle separation
        time_gap_hours: Time between the two events
        proximity: 1 at coincidence, 0 at the distance threshold
        alpha: Opacity derived from proximity
        stroke: Line width derived from the larger magnitude
        altitude: Arc height derived from proximity
        colors: (start, end) rgba gradient
        label: Human-readable summary
    """

    start_lat: float
    start_lng: float
    end_lat: float
    end_lng: float
    distance_km: float = Field(..., ge=0.0)
    time_gap_hours: float = Field(..., ge=0.0)
    proximity: float = Field(..., ge=0.0, le=1.0)
    alpha: float = Field(..., ge=0.0, le=1.0)
    stroke: float
    altitude: float = Field(..., gt=0.0)
    colors: Tuple[str, str]
    dash_length: float = 0.4
    dash_gap: float = 0.2
    dash_animate_ms: float = Field(
        default=3000.0,
        description="Animation period; randomized per edge, cosmetic only",
    )
    label: str


class DensityPoint(BaseModel):
    """Heatmap sample: event location with a log-energy weight."""

    latitude: float
    longitude: float
    weight: float = Field(..., ge=0.1, le=1.0)


class RippleBand(str, Enum):
    """Magnitude band controlling ripple color."""

    HOT = "hot"
    WARM = "warm"
    COOL = "cool"


class RippleAnnotation(BaseModel):
    """
    Concentric ring parameters for one significant event.

    The ring color is a function of animation progress in [0, 1]:
    the band's base RGB at alpha ``1 - progress``. Consumers call
    ``color_at`` per frame.
    """

    latitude: float
    longitude: float
    magnitude: float
    max_radius: float = Field(..., le=8.0)
    propagation_speed: float = Field(..., ge=1.0)
    repeat_period_ms: float = Field(..., ge=600.0, le=3000.0)
    band: RippleBand
    base_color: Tuple[int, int, int]

    def alpha_at(self, progress: float) -> float:
        """Linear fade from opaque at 0 to transparent at 1."""
        if progress != progress:
            progress = 0.0
        return 1.0 - max(0.0, min(1.0, progress))

    def color_at(self, progress: float) -> str:
        r, g, b = self.base_color
        return f"rgba({r},{g},{b},{self.alpha_at(progress):g})"


class TourStop(BaseModel):
    """One stop of a guided tour or cinematic autoplay."""

    event_id: str
    latitude: float
    longitude: float
    magnitude: float
    place: str
    index: int = Field(..., ge=0)
    total: int = Field(..., ge=1)
    magnitude_label: str
    depth_label: str
    impact: str = ""
    freshness: Optional[str] = Field(default=None, description="Set for events under three hours old")
    context: Optional[str] = Field(default=None, description="Narrative line for notable events")
