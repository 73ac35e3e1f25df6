"""
Test Configuration
==================

Pytest fixtures and test configuration for QuakePulse.
"""

import itertools

import pytest


NOW_MS = 1_760_000_000_000
HOUR_MS = 3_600_000

_ids = itertools.count()


@pytest.fixture
def now_ms():
    """Fixed evaluation time in epoch ms."""
    return NOW_MS


@pytest.fixture
def make_feature():
    """Factory for raw feed features."""

    def _make(
        mag=5.0,
        place="10km NE of Somewhere, CA",
        time=NOW_MS - HOUR_MS,
        lng=-117.5,
        lat=34.0,
        depth=10.0,
        feature_id=None,
        **properties,
    ):
        props = {
            "mag": mag,
            "place": place,
            "time": time,
            "tsunami": 0,
            "sig": 100,
            "url": "",
        }
        props.update(properties)
        return {
            "type": "Feature",
            "id": feature_id or f"feature-{next(_ids)}",
            "properties": props,
            "geometry": {"type": "Point", "coordinates": [lng, lat, depth]},
        }

    return _make


@pytest.fixture
def make_event():
    """Factory for EnrichedEvent instances."""
    from quakepulse.models.event import EnrichedEvent

    def _make(
        magnitude=4.0,
        lat=34.0,
        lng=-117.5,
        depth=10.0,
        place="10km NE of Test City",
        occurred_at=NOW_MS - HOUR_MS,
        **fields,
    ):
        fields.setdefault("id", f"event-{next(_ids)}")
        return EnrichedEvent(
            latitude=lat,
            longitude=lng,
            magnitude=magnitude,
            depth=depth,
            place=place,
            occurred_at=occurred_at,
            **fields,
        )

    return _make


@pytest.fixture
def feed(make_feature):
    """A small valid FeatureCollection."""
    return {
        "type": "FeatureCollection",
        "metadata": {"title": "test feed"},
        "features": [
            make_feature(mag=5.0, lat=35.0, lng=139.0, time=NOW_MS - 2 * HOUR_MS, place="20km S of Tokyo, Japan"),
            make_feature(mag=4.0, lat=35.01, lng=139.01, time=NOW_MS - HOUR_MS, place="18km S of Tokyo, Japan"),
            make_feature(mag=2.1, lat=61.0, lng=-150.0, time=NOW_MS - 3 * HOUR_MS, place="Central Alaska", felt=12),
        ],
    }
