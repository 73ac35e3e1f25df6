"""
Visuals Module
==============

Pure lookup tables for render hints attached to events.
"""

from quakepulse.visuals.colors import depth_color, magnitude_color, magnitude_size

__all__ = ["depth_color", "magnitude_color", "magnitude_size"]
