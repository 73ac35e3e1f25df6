"""
Event Normalizer
================

Converts a validated feed feature into an EnrichedEvent.

Rules:
    - magnitude: falsy, non-numeric or non-finite -> 0
    - depth: absolute value of the third coordinate
    - latitude/longitude clamped into their valid ranges
    - color/size hints from the depth and magnitude ladders
    - felt, cdi, alert stay None when absent; significance defaults to 0
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from quakepulse.models.event import ALERT_LEVELS, EnrichedEvent
from quakepulse.numeric import as_real, clamp, finite_or
from quakepulse.visuals.colors import depth_color, magnitude_size


logger = logging.getLogger(__name__)


# Upper bound for felt report counts
MAX_COUNT = 10**12


def _optional_count(value: Any) -> Optional[int]:
    real = as_real(value)
    if real is None:
        return None
    return int(clamp(real, 0.0, float(MAX_COUNT)))


def _optional_alert(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    level = value.strip().lower()
    return level if level in ALERT_LEVELS else None


def normalize_feature(feature: Dict[str, Any]) -> EnrichedEvent:
    """
    Build the canonical event from one validated feature.

    Args:
        feature: Feature that passed ``is_valid_feature``

    Returns:
        EnrichedEvent with every numeric field finite
    """
    props = feature["properties"]
    lng, lat, raw_depth = (finite_or(c) for c in feature["geometry"]["coordinates"][:3])

    # `mag or 0` semantics: None, 0 and NaN all collapse to 0
    magnitude = finite_or(props.get("mag") or 0)
    depth = abs(raw_depth)
    occurred_at = int(finite_or(props.get("time")))

    event_id = feature.get("id")
    if not isinstance(event_id, str) or not event_id:
        event_id = f"{lng:.4f},{lat:.4f},{occurred_at}"

    place = props.get("place")
    url = props.get("url")

    return EnrichedEvent(
        latitude=clamp(lat, -90.0, 90.0),
        longitude=clamp(lng, -180.0, 180.0),
        magnitude=magnitude,
        depth=depth,
        place=place if isinstance(place, str) else "",
        occurred_at=occurred_at,
        id=event_id,
        color=depth_color(depth),
        size=magnitude_size(magnitude),
        felt=_optional_count(props.get("felt")),
        cdi=as_real(props.get("cdi")),
        alert=_optional_alert(props.get("alert")),
        tsunami=props.get("tsunami") == 1,
        significance=max(0.0, finite_or(props.get("sig"))),
        url=url if isinstance(url, str) else "",
    )


def normalize_features(features: Iterable[Dict[str, Any]]) -> List[EnrichedEvent]:
    """Normalize every validated feature in order."""
    events = [normalize_feature(feature) for feature in features]
    logger.debug(f"Normalized {len(events)} event(s)")
    return events
