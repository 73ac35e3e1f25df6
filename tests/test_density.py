"""
Density Mapping Tests
=====================
"""

import math

import numpy as np
import pytest

from quakepulse.layers.density import generate_density_points, log_energy_weights


class TestLogEnergy:

    def test_matches_direct_formula(self):
        mags = [-2.0, 0.0, 3.5, 7.0]
        expected = [math.log10(10 ** (1.5 * m) + 1) for m in mags]
        assert log_energy_weights(mags) == pytest.approx(expected)

    def test_huge_magnitude_stays_finite(self):
        weights = log_energy_weights([1e300, -1e300, math.nan])
        assert np.all(np.isfinite(weights))


class TestDensityPoints:

    def test_empty(self):
        assert generate_density_points([]) == []

    def test_one_point_per_event(self, make_event):
        quakes = [make_event(magnitude=m, lat=i, lng=i) for i, m in enumerate([0.5, 2.0, 6.1, 3.3])]
        points = generate_density_points(quakes)

        assert len(points) == len(quakes)
        assert [(p.latitude, p.longitude) for p in points] == [(q.latitude, q.longitude) for q in quakes]

    def test_single_event_weight_is_floor(self, make_event):
        points = generate_density_points([make_event(magnitude=5.0)])
        assert points[0].weight == pytest.approx(0.1)

    def test_uniform_magnitudes_equal_weights(self, make_event):
        quakes = [make_event(magnitude=4.0, lat=i * 5, lng=i * 10) for i in range(10)]
        weights = [p.weight for p in generate_density_points(quakes)]

        assert len(weights) == 10
        assert weights == pytest.approx([0.1] * 10)

    def test_all_zero_magnitudes(self, make_event):
        points = generate_density_points([make_event(magnitude=0.0) for _ in range(5)])
        assert all(p.weight == pytest.approx(0.1) for p in points)

    def test_extreme_range_bounds(self, make_event):
        mags = [-2.0 + 0.5 * i for i in range(25)]
        weights = [p.weight for p in generate_density_points([make_event(magnitude=m) for m in mags])]

        assert min(weights) == pytest.approx(0.1)
        assert max(weights) == pytest.approx(1.0)
        assert all(0.1 - 1e-9 <= w <= 1.0 + 1e-9 for w in weights)
        assert weights == sorted(weights)

    def test_higher_magnitude_heavier(self, make_event):
        points = generate_density_points([make_event(magnitude=2.0), make_event(magnitude=7.0)])
        assert points[1].weight > points[0].weight

    def test_repeatable(self, make_event):
        quakes = [make_event(magnitude=m) for m in (1.0, 4.4, 9.9)]
        assert generate_density_points(quakes) == generate_density_points(quakes)
