"""
Normalizer Tests
================

Raw feature -> EnrichedEvent coercion rules.
"""

import math

import pytest

from quakepulse.ingestion.normalizer import MAX_COUNT, normalize_feature, normalize_features


class TestMagnitudeCoercion:
    """Falsy and non-finite magnitudes become 0."""

    @pytest.mark.parametrize("mag", [None, 0, math.nan, math.inf, -math.inf, "5.0"])
    def test_bad_magnitude_is_zero(self, make_feature, mag):
        event = normalize_feature(make_feature(mag=mag))
        assert event.magnitude == 0
        assert event.size == 0.1

    def test_missing_magnitude_is_zero(self, make_feature):
        feature = make_feature()
        del feature["properties"]["mag"]
        assert normalize_feature(feature).magnitude == 0

    def test_negative_magnitude_kept(self, make_feature):
        event = normalize_feature(make_feature(mag=-1.2))
        assert event.magnitude == -1.2
        assert event.size == 0.1

    def test_large_magnitude_size_capped(self, make_feature):
        event = normalize_feature(make_feature(mag=15))
        assert event.magnitude == 15
        assert event.size == 2.0


class TestLocation:
    """Coordinates, depth and derived hints."""

    def test_coordinates_mapped(self, make_feature):
        event = normalize_feature(make_feature(lng=139.5, lat=35.25, depth=42.0))
        assert event.longitude == 139.5
        assert event.latitude == 35.25
        assert event.depth == 42.0
        assert event.color == "#ff8800"

    def test_depth_sign_discarded(self, make_feature):
        event = normalize_feature(make_feature(depth=-2.5))
        assert event.depth == 2.5
        assert event.color == "#ff4444"

    def test_out_of_range_coordinates_clamped(self, make_feature):
        event = normalize_feature(make_feature(lat=91.0, lng=-181.0))
        assert event.latitude == 90.0
        assert event.longitude == -180.0


class TestImpactFields:
    """Optional human-impact fields pass through or stay None."""

    def test_absent_fields_are_none(self, make_feature):
        feature = make_feature()
        del feature["properties"]["sig"]
        event = normalize_feature(feature)

        assert event.felt is None
        assert event.cdi is None
        assert event.alert is None
        assert event.tsunami is False
        assert event.significance == 0

    def test_huge_felt_capped(self, make_feature):
        event = normalize_feature(make_feature(felt=1e308))
        assert event.felt == MAX_COUNT
        assert float(event.felt) == 1e12

    def test_negative_felt_is_zero(self, make_feature):
        assert normalize_feature(make_feature(felt=-5)).felt == 0

    def test_present_fields_pass_through(self, make_feature):
        event = normalize_feature(
            make_feature(felt=1532, cdi=6.4, alert="orange", tsunami=1, sig=812)
        )
        assert event.felt == 1532
        assert event.cdi == 6.4
        assert event.alert == "orange"
        assert event.tsunami is True
        assert event.significance == 812

    def test_alert_normalized(self, make_feature):
        assert normalize_feature(make_feature(alert="RED")).alert == "red"
        assert normalize_feature(make_feature(alert="purple")).alert is None

    def test_non_finite_impact_values(self, make_feature):
        event = normalize_feature(make_feature(felt=math.nan, cdi=math.inf, sig=math.nan))
        assert event.felt is None
        assert event.cdi is None
        assert event.significance == 0


class TestIdentity:
    """Ids, place text and timestamps."""

    def test_feature_id_used(self, make_feature):
        assert normalize_feature(make_feature(feature_id="us7000abcd")).id == "us7000abcd"

    def test_missing_id_is_derived_and_stable(self, make_feature):
        feature = make_feature(lng=1.0, lat=2.0, time=1234)
        del feature["id"]
        first = normalize_feature(feature)
        second = normalize_feature(feature)
        assert first.id == second.id == "1.0000,2.0000,1234"

    def test_empty_or_missing_place(self, make_feature):
        assert normalize_feature(make_feature(place="")).place == ""
        assert normalize_feature(make_feature(place=None)).place == ""

    def test_missing_time_defaults_to_zero(self, make_feature):
        assert normalize_feature(make_feature(time=None)).occurred_at == 0

    def test_normalize_features_keeps_order(self, make_feature):
        features = [make_feature(feature_id=f"id-{i}") for i in range(5)]
        assert [e.id for e in normalize_features(features)] == [f"id-{i}" for i in range(5)]

    def test_event_is_immutable(self, make_feature):
        event = normalize_feature(make_feature())
        with pytest.raises(AttributeError):
            event.magnitude = 9.0
