"""
QuakePulse
==========

Derived-metrics engine for seismic event feeds.

This package validates a feed snapshot, normalizes it into immutable
enriched events, and derives the analytical layers a globe visualization
needs: correlation arcs, a log-energy heatmap, ripple rings, a ranked
tour, summary statistics and a recency-weighted mood.

Components:
    - ingestion: Feed validation and event normalization
    - layers: Correlation, density, ripples, tour
    - analytics: Statistics, mood, energy, descriptions
    - pipeline: One-call analysis of a snapshot
    - main: FastAPI application

Example:
    from quakepulse.pipeline import analyze_feed

    analysis = analyze_feed(payload)
    print(analysis.mood.mood, len(analysis.arcs))
"""

__version__ = "0.1.0"
__author__ = "QuakePulse Project"

__all__ = [
    "__version__",
]
