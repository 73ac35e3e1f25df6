"""
Validator Tests
===============

Whole-batch rejection for structural errors, per-feature dropping
for malformed records.
"""

import math

import pytest

from quakepulse.ingestion.validator import (
    FeedValidationError,
    is_valid_feature,
    validate_feed,
    validate_feed_with_report,
)


class TestStructuralErrors:
    """Top-level shape errors reject the batch."""

    def test_rejects_none(self):
        with pytest.raises(FeedValidationError, match="not an object"):
            validate_feed(None)

    @pytest.mark.parametrize("payload", ["hello", 42, True, [1, 2]])
    def test_rejects_primitives_and_lists(self, payload):
        with pytest.raises(FeedValidationError):
            validate_feed(payload)

    def test_rejects_missing_type(self):
        with pytest.raises(FeedValidationError, match="missing FeatureCollection"):
            validate_feed({"features": []})

    def test_rejects_missing_features(self):
        with pytest.raises(FeedValidationError, match="missing FeatureCollection"):
            validate_feed({"type": "FeatureCollection"})

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_feed({"type": "Feature", "features": []})


class TestFeatureFiltering:
    """Malformed features are dropped, valid ones kept."""

    def test_accepts_empty_collection(self):
        result = validate_feed({"type": "FeatureCollection", "features": []})
        assert result["type"] == "FeatureCollection"
        assert result["features"] == []

    def test_drops_missing_properties(self, make_feature):
        result = validate_feed({
            "type": "FeatureCollection",
            "features": [
                {"geometry": {"type": "Point", "coordinates": [0, 0, 10]}},
                make_feature(),
            ],
        })
        assert len(result["features"]) == 1

    def test_drops_missing_geometry(self, make_feature):
        result = validate_feed({
            "type": "FeatureCollection",
            "features": [{"properties": {"mag": 5}}, make_feature()],
        })
        assert len(result["features"]) == 1

    def test_drops_short_coordinates(self, make_feature):
        result = validate_feed({
            "type": "FeatureCollection",
            "features": [
                {"properties": {"mag": 5}, "geometry": {"type": "Point", "coordinates": [0, 0]}},
                make_feature(),
            ],
        })
        assert len(result["features"]) == 1

    def test_drops_non_finite_coordinates(self, make_feature):
        bad = [
            [math.nan, 0, 10],
            [0, math.inf, 10],
            [0, 0, -math.inf],
            ["0", 0, 10],
            [0, None, 10],
        ]
        features = [
            {"properties": {"mag": 5}, "geometry": {"type": "Point", "coordinates": c}}
            for c in bad
        ]
        result = validate_feed({"type": "FeatureCollection", "features": features + [make_feature()]})
        assert len(result["features"]) == 1

    def test_drops_non_object_features(self, make_feature):
        result = validate_feed({
            "type": "FeatureCollection",
            "features": [None, 42, "string", [], make_feature()],
        })
        assert len(result["features"]) == 1

    def test_mixed_batch_preserves_valid_features_in_order(self, make_feature):
        valid = [make_feature(feature_id=i) for i in ("a", "b", "c")]
        invalid = [None, {"properties": {}}, {"geometry": {"coordinates": [math.nan]}}]

        result, report = validate_feed_with_report({
            "type": "FeatureCollection",
            "features": invalid + valid,
        })

        assert [f["id"] for f in result["features"]] == ["a", "b", "c"]
        assert report.accepted == 3
        assert report.dropped == 3
        assert report.total == 6

    def test_does_not_mutate_input(self, make_feature):
        features = [None, make_feature()]
        payload = {"type": "FeatureCollection", "features": features}

        result = validate_feed(payload)

        assert payload["features"] is features
        assert len(features) == 2
        assert result["features"][0] is features[1]

    def test_extra_coordinates_allowed(self):
        feature = {"properties": {}, "geometry": {"coordinates": [1, 2, 3, 4]}}
        assert is_valid_feature(feature)

    def test_metadata_carried_over(self, feed):
        assert validate_feed(feed)["metadata"] == {"title": "test feed"}
