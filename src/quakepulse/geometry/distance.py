"""
Great-Circle Distance
=====================

Haversine distance on a sphere of fixed radius.

Raw coordinate deltas are never used for proximity: two points 0.2 degrees
apart in raw longitude across the antimeridian are ~22 km apart, while the
poles (90, 0) and (-90, 0) are ~20,000 km apart.
"""

import math


EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Great-circle distance between two points in km.

    Args:
        lat1, lng1: First point in degrees
        lat2, lng2: Second point in degrees

    Returns:
        Distance in km, in [0, pi * EARTH_RADIUS_KM]
    """
    to_rad = math.pi / 180.0
    d_lat = (lat2 - lat1) * to_rad
    d_lng = (lng2 - lng1) * to_rad
    a = (
        math.sin(d_lat * 0.5) ** 2
        + math.cos(lat1 * to_rad) * math.cos(lat2 * to_rad) * math.sin(d_lng * 0.5) ** 2
    )
    # Rounding can push a a hair outside [0, 1]
    a = min(1.0, max(0.0, a))
    return EARTH_RADIUS_KM * 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
