"""
Feed Validator
==============

Sanitizes a decoded feed payload into a well-formed FeatureCollection.

Policy:
    - Wrong top-level shape (not a mapping, no FeatureCollection type,
      no features list) rejects the whole batch with FeedValidationError.
    - Individual malformed features are dropped; the batch survives.

A feature survives when it is a mapping with a ``properties`` mapping,
a ``geometry`` mapping, and at least three finite coordinates
``[longitude, latitude, depth]``. Features are filtered, never mutated.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from quakepulse.numeric import as_real


logger = logging.getLogger(__name__)


class FeedValidationError(ValueError):
    """Raised when a feed payload has the wrong top-level shape."""


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Counts from one validation pass."""

    accepted: int
    dropped: int

    @property
    def total(self) -> int:
        return self.accepted + self.dropped


def is_valid_feature(feature: Any) -> bool:
    """Return True if a single feature is structurally usable."""
    if not isinstance(feature, dict):
        return False
    if not isinstance(feature.get("properties"), dict):
        return False
    geometry = feature.get("geometry")
    if not isinstance(geometry, dict):
        return False
    coordinates = geometry.get("coordinates")
    if not isinstance(coordinates, (list, tuple)) or len(coordinates) < 3:
        return False
    return all(as_real(c) is not None for c in coordinates[:3])


def validate_feed_with_report(payload: Any) -> Tuple[Dict[str, Any], ValidationReport]:
    """
    Validate a feed payload and report how many features were dropped.

    Args:
        payload: Decoded JSON of unknown shape

    Returns:
        Tuple of (sanitized collection, report)

    Raises:
        FeedValidationError: If the top-level shape is wrong
    """
    if not isinstance(payload, dict):
        raise FeedValidationError("Invalid feed payload: not an object")
    features = payload.get("features")
    if payload.get("type") != "FeatureCollection" or not isinstance(features, list):
        raise FeedValidationError(
            "Invalid feed payload: missing FeatureCollection type or features array"
        )

    kept = [feature for feature in features if is_valid_feature(feature)]
    report = ValidationReport(accepted=len(kept), dropped=len(features) - len(kept))

    if report.dropped:
        logger.warning(
            f"Dropped {report.dropped} malformed feature(s) of {report.total}"
        )
    else:
        logger.debug(f"Validated {report.accepted} feature(s)")

    collection: Dict[str, Any] = {"type": "FeatureCollection", "features": kept}
    if isinstance(payload.get("metadata"), dict):
        collection["metadata"] = payload["metadata"]
    return collection, report


def validate_feed(payload: Any) -> Dict[str, Any]:
    """Validate a feed payload, returning only the sanitized collection."""
    collection, _ = validate_feed_with_report(payload)
    return collection
