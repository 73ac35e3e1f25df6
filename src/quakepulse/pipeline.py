"""
Feed Analysis Pipeline
======================

Runs one feed snapshot through the whole engine:

    raw payload -> validate_feed -> normalize_features -> events
        events -> correlation edges
        events -> density points
        events -> ripples
        events -> tour
        events -> statistics
        events -> mood

A structurally invalid payload raises FeedValidationError before any
normalization; past that point every step always produces a result.
"""

import logging
import random
import time
from typing import Any, Optional

from quakepulse.analytics import calculate_mood, calculate_statistics, energy_comparison
from quakepulse.config import Settings
from quakepulse.ingestion import normalize_features, validate_feed_with_report
from quakepulse.layers import (
    build_tour,
    generate_correlation_edges,
    generate_density_points,
    generate_ripples,
)
from quakepulse.models.output import FeedAnalysis


logger = logging.getLogger(__name__)


def analyze_feed(
    payload: Any,
    settings: Optional[Settings] = None,
    now_ms: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> FeedAnalysis:
    """
    Validate, normalize and derive every layer for one snapshot.

    Args:
        payload: Decoded feed JSON
        settings: Engine settings (defaults when None)
        now_ms: Evaluation time in epoch ms (defaults to now)
        rng: Source for cosmetic arc animation timing

    Returns:
        FeedAnalysis bundling all layers

    Raises:
        FeedValidationError: If the payload's top-level shape is wrong
    """
    settings = settings or Settings()
    if now_ms is None:
        now_ms = int(time.time() * 1000)

    collection, report = validate_feed_with_report(payload)
    events = normalize_features(collection["features"])

    stats = calculate_statistics(events)
    largest_energy = energy_comparison(stats.largest_magnitude) if events else None

    analysis = FeedAnalysis(
        generated_at=now_ms,
        accepted=report.accepted,
        dropped=report.dropped,
        events=[e.to_dict() for e in events],
        arcs=generate_correlation_edges(events, settings.correlation, rng=rng),
        heatmap=generate_density_points(events),
        ripples=generate_ripples(events, settings.ripples, now_ms=now_ms),
        tour=build_tour(events, settings.tour.default_count, now_ms=now_ms),
        statistics=stats,
        mood=calculate_mood(events, settings.mood, now_ms=now_ms),
        largest_energy=largest_energy,
    )

    logger.info(
        f"Analyzed feed: {report.accepted} events ({report.dropped} dropped), "
        f"{len(analysis.arcs)} arcs, {len(analysis.ripples)} ripples, "
        f"mood={analysis.mood.mood.value}"
    )
    return analysis
