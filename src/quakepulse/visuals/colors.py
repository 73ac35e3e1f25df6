"""
Color and Size Hints
====================

Ordered-threshold ladders mapping depth and magnitude to display hints.

All functions are total over the real line: NaN is treated as 0 and
infinities fall into the outermost band.
"""

from typing import Sequence, Tuple

from quakepulse.numeric import clamp


MAGNITUDE_SIZE_RANGE = (0.1, 2.0)
MAGNITUDE_SIZE_SCALE = 0.3

# (upper bound in km, color); shallow (red) -> deep (blue)
DEPTH_BANDS: Sequence[Tuple[float, str]] = (
    (35.0, "#ff4444"),
    (70.0, "#ff8800"),
    (150.0, "#ffdd00"),
    (300.0, "#88ff00"),
    (500.0, "#0088ff"),
)
DEEPEST_COLOR = "#0044ff"

# (upper bound, color); low (green) -> high (red)
MAGNITUDE_BANDS: Sequence[Tuple[float, str]] = (
    (2.0, "#00ff00"),
    (3.0, "#88ff00"),
    (4.0, "#ffff00"),
    (5.0, "#ff8800"),
    (6.0, "#ff4400"),
    (7.0, "#ff0000"),
)
STRONGEST_COLOR = "#cc0000"


def _ladder(value: float, bands: Sequence[Tuple[float, str]], top: str) -> str:
    if value != value:
        value = 0.0
    for upper, color in bands:
        if value < upper:
            return color
    return top


def depth_color(depth: float) -> str:
    """Map depth (km) to a six-band color."""
    return _ladder(depth, DEPTH_BANDS, DEEPEST_COLOR)


def magnitude_size(magnitude: float) -> float:
    """Map magnitude to a display size clamped to MAGNITUDE_SIZE_RANGE."""
    if magnitude != magnitude:
        magnitude = 0.0
    low, high = MAGNITUDE_SIZE_RANGE
    return clamp(magnitude * MAGNITUDE_SIZE_SCALE, low, high)


def magnitude_color(magnitude: float) -> str:
    """Map magnitude to a seven-band color used by heatmap point styling."""
    return _ladder(magnitude, MAGNITUDE_BANDS, STRONGEST_COLOR)
