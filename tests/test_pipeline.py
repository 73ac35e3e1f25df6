"""
Pipeline Integration Tests
==========================

Runs whole feed snapshots through analyze_feed.
"""

import math
import random

import pytest

from quakepulse.config import CorrelationConfig, Settings
from quakepulse.ingestion import FeedValidationError
from quakepulse.models.summary import Mood
from quakepulse.pipeline import analyze_feed


HOUR_MS = 3_600_000


class TestAnalyzeFeed:

    def test_all_layers_present(self, feed, now_ms):
        analysis = analyze_feed(feed, now_ms=now_ms, rng=random.Random(7))

        assert analysis.generated_at == now_ms
        assert analysis.accepted == 3
        assert analysis.dropped == 0
        assert len(analysis.events) == 3
        assert len(analysis.heatmap) == 3
        # The two Tokyo events are ~1.4 km and one hour apart
        assert len(analysis.arcs) == 1
        assert [r.magnitude for r in analysis.ripples] == [5.0, 4.0]
        assert [s.magnitude for s in analysis.tour] == [5.0, 4.0, 2.1]
        assert analysis.statistics.most_active_region == "Tokyo"
        assert analysis.statistics.total_felt == 12
        assert analysis.mood.mood == Mood.RESTLESS
        assert analysis.largest_energy is not None
        assert analysis.largest_energy.magnitude == 5.0

    def test_dropped_features_counted(self, feed, now_ms):
        feed["features"] += [None, {"properties": {}}, {"properties": {}, "geometry": {"coordinates": [1, 2]}}]
        analysis = analyze_feed(feed, now_ms=now_ms)

        assert analysis.accepted == 3
        assert analysis.dropped == 3

    def test_input_not_mutated(self, feed, now_ms):
        before = repr(feed)
        analyze_feed(feed, now_ms=now_ms)
        assert repr(feed) == before

    def test_empty_feed(self, now_ms):
        analysis = analyze_feed({"type": "FeatureCollection", "features": []}, now_ms=now_ms)

        assert analysis.events == []
        assert analysis.arcs == []
        assert analysis.heatmap == []
        assert analysis.statistics.largest_place == "None"
        assert analysis.mood.mood == Mood.SERENE
        assert analysis.mood.intensity == 0.0
        assert analysis.largest_energy is None

    def test_repeatable(self, feed, now_ms):
        first = analyze_feed(feed, now_ms=now_ms, rng=random.Random(1))
        second = analyze_feed(feed, now_ms=now_ms, rng=random.Random(1))
        assert first.model_dump() == second.model_dump()

    def test_settings_flow_through(self, feed, now_ms):
        settings = Settings(correlation=CorrelationConfig(max_edges=0))
        assert analyze_feed(feed, settings, now_ms=now_ms).arcs == []

    def test_large_batch_counts(self, make_feature, now_ms):
        features = [
            make_feature(mag=(i % 90) / 10, lat=(i % 170) - 85, lng=(i * 7 % 360) - 180, time=now_ms - i * 60_000)
            for i in range(500)
        ]
        analysis = analyze_feed({"type": "FeatureCollection", "features": features}, now_ms=now_ms)

        assert len(analysis.events) == 500
        assert len(analysis.heatmap) == 500
        assert len(analysis.arcs) <= 120
        assert len(analysis.ripples) <= 30
        assert len(analysis.tour) == 8
        assert all(0.1 <= p.weight <= 1.0 for p in analysis.heatmap)

    @pytest.mark.parametrize("payload", [None, [], "feed", {"type": "Feature"}, {"type": "FeatureCollection"}])
    def test_structural_errors(self, payload):
        with pytest.raises(FeedValidationError):
            analyze_feed(payload)


class TestExtremeFeedValues:

    @pytest.mark.parametrize(
        "properties",
        [{"depth": 1e308}, {"felt": 1e308}, {"sig": 1e308}, {"depth": 1.7e308, "felt": 1e308, "sig": 1.7e308}],
    )
    def test_output_stays_finite(self, make_feature, now_ms, properties):
        properties = dict(properties)
        depth = properties.pop("depth", 10.0)
        features = [make_feature(depth=depth, time=now_ms - HOUR_MS, **properties) for _ in range(3)]
        analysis = analyze_feed({"type": "FeatureCollection", "features": features}, now_ms=now_ms)

        stats = analysis.statistics
        assert math.isfinite(stats.average_depth)
        assert math.isfinite(stats.significance_score)
        assert 0.0 <= analysis.mood.intensity <= 1.0
        assert "Infinity" not in analysis.model_dump_json()
