"""
Event Models
============

The canonical enriched event produced by the normalizer.

Every derived layer (correlation, density, ripples, tour, statistics,
mood) consumes a list of these and nothing else.
"""

import math
from dataclasses import dataclass
from typing import Optional


ALERT_LEVELS = ("green", "yellow", "orange", "red")


@dataclass(frozen=True, slots=True)
class EnrichedEvent:
    """
    Normalized seismic event.

    Created once per accepted feed record; immutable; replaced wholesale on
    the next fetch.

    Attributes:
        latitude: Degrees in [-90, 90]
        longitude: Degrees in [-180, 180]
        magnitude: Event magnitude (negative for micro-events)
        depth: Absolute hypocentre depth in km
        place: Free-text location, possibly empty
        occurred_at: Origin time in epoch milliseconds
        id: Stable unique identifier
        color: Depth color hint (hex)
        size: Magnitude size hint in [0.1, 2.0]
        felt: Number of felt reports, if reported
        cdi: Community intensity (1-12), if reported
        alert: Impact alert level, if issued
        tsunami: Whether a tsunami flag was raised
        significance: Significance score (>= 0)
        url: Event detail page
    """

    latitude: float
    longitude: float
    magnitude: float
    depth: float
    place: str
    occurred_at: int
    id: str
    color: str = "#ff4444"
    size: float = 0.1
    felt: Optional[int] = None
    cdi: Optional[float] = None
    alert: Optional[str] = None
    tsunami: bool = False
    significance: float = 0.0
    url: str = ""

    def __post_init__(self) -> None:
        """Validate invariants."""
        for name in ("latitude", "longitude", "magnitude", "depth", "size", "significance"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite")
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError("latitude must be in [-90, 90]")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError("longitude must be in [-180, 180]")
        if self.depth < 0:
            raise ValueError("depth must be non-negative")
        if self.alert is not None and self.alert not in ALERT_LEVELS:
            raise ValueError(f"unknown alert level: {self.alert}")

    def age_hours(self, now_ms: float) -> float:
        """Hours elapsed since origin time (negative for future timestamps)."""
        return (now_ms - self.occurred_at) / 3_600_000

    def to_dict(self) -> dict:
        """Export as dictionary for serialization."""
        return {
            "id": self.id,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "magnitude": self.magnitude,
            "depth": self.depth,
            "place": self.place,
            "occurred_at": self.occurred_at,
            "color": self.color,
            "size": round(self.size, 4),
            "felt": self.felt,
            "cdi": self.cdi,
            "alert": self.alert,
            "tsunami": self.tsunami,
            "significance": self.significance,
            "url": self.url,
        }
