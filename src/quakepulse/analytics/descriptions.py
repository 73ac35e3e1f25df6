"""
Event Descriptions
==================

Short human-readable labels for a single event: magnitude and depth
classes, freshness, human impact and distance to an observer.
"""

from typing import Optional

from quakepulse.geometry.distance import haversine_km
from quakepulse.models.event import EnrichedEvent


MAGNITUDE_CLASSES = (
    (2.0, "Micro"),
    (3.0, "Minor"),
    (4.0, "Light"),
    (5.0, "Moderate"),
    (6.0, "Strong"),
    (7.0, "Major"),
    (8.0, "Great"),
)

DEPTH_CLASSES = (
    (35.0, "Shallow"),
    (70.0, "Intermediate"),
    (300.0, "Deep"),
)

ALERT_LABELS = {
    "green": "Low impact expected",
    "yellow": "Limited impact expected",
    "orange": "Significant impact likely",
    "red": "Severe impact expected",
}


def magnitude_description(magnitude: float) -> str:
    for upper, label in MAGNITUDE_CLASSES:
        if magnitude < upper:
            return label
    return "Historic"


def depth_description(depth: float) -> str:
    for upper, label in DEPTH_CLASSES:
        if depth < upper:
            return label
    return "Very Deep"


def freshness_label(event: EnrichedEvent, now_ms: float) -> Optional[str]:
    """'JUST NOW', '25m ago' or '2h ago' for events under three hours old."""
    age_minutes = (now_ms - event.occurred_at) / 60_000
    if age_minutes < 10:
        return "JUST NOW"
    if age_minutes < 60:
        return f"{int(age_minutes)}m ago"
    if age_minutes < 180:
        return f"{int(age_minutes // 60)}h ago"
    return None


def human_impact(event: EnrichedEvent) -> str:
    """
    Summarize felt reports, tsunami flag, alert level and shaking.

    Returns an empty string when the feed carried no impact fields.
    """
    parts = []

    if event.felt:
        felt = f"{event.felt / 1000:.1f}k" if event.felt >= 1000 else str(event.felt)
        parts.append(f"{felt} {'person' if event.felt == 1 else 'people'} felt this")

    if event.tsunami:
        parts.append("Tsunami warning")

    if event.alert:
        parts.append(ALERT_LABELS.get(event.alert, f"Alert: {event.alert}"))

    if event.cdi and event.cdi > 0:
        if event.cdi >= 8:
            parts.append("Severe shaking")
        elif event.cdi >= 6:
            parts.append("Strong shaking")
        elif event.cdi >= 4:
            parts.append("Light shaking")
        else:
            parts.append("Barely felt")

    return " · ".join(parts)


def distance_to_observer(event: EnrichedEvent, lat: float, lng: float) -> str:
    km = haversine_km(event.latitude, event.longitude, lat, lng)
    if km < 50:
        return f"{round(km)} km from you, that's close"
    if km < 200:
        return f"{round(km)} km from you"
    if km < 1000:
        return f"{round(km)} km away"
    return f"{km / 1000:.1f}k km away"
