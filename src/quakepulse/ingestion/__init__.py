"""
Ingestion Module
================

Validation and normalization of raw feed payloads.

Raw payload -> validate_feed -> normalize_features -> List[EnrichedEvent]
"""

from quakepulse.ingestion.validator import (
    FeedValidationError,
    ValidationReport,
    is_valid_feature,
    validate_feed,
    validate_feed_with_report,
)
from quakepulse.ingestion.normalizer import normalize_feature, normalize_features

__all__ = [
    "FeedValidationError",
    "ValidationReport",
    "is_valid_feature",
    "validate_feed",
    "validate_feed_with_report",
    "normalize_feature",
    "normalize_features",
]
