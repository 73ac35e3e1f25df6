"""
Layers Module
=============

Derived visualization layers computed from an enriched event batch.

Each layer is a pure function of the batch and its own config section;
none reads another layer's output, so they may run in any order.
"""

from quakepulse.layers.correlation import generate_correlation_edges
from quakepulse.layers.density import generate_density_points
from quakepulse.layers.ripples import generate_ripples
from quakepulse.layers.tour import build_tour, cinematic_stops, tour_stops

__all__ = [
    "generate_correlation_edges",
    "generate_density_points",
    "generate_ripples",
    "build_tour",
    "cinematic_stops",
    "tour_stops",
]
