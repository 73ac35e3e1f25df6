"""
Geometry Module
===============

Spherical distance used by correlation and observer-distance labels.
"""

from quakepulse.geometry.distance import EARTH_RADIUS_KM, haversine_km

__all__ = [
    "EARTH_RADIUS_KM",
    "haversine_km",
]
