"""
QuakePulse Main Application
===========================

FastAPI entry point exposing the metrics engine over HTTP.

The engine itself is synchronous and stateless: each request carries one
feed snapshot and receives every derived layer back.

Endpoints:
    GET  /          - Service information
    GET  /health    - Liveness probe
    POST /analyze   - Feed payload in, FeedAnalysis out
"""

import logging
import os
import time
from typing import Any, Dict

from fastapi import Body, FastAPI
from fastapi.responses import JSONResponse

from quakepulse.config import settings, setup_logging
from quakepulse.ingestion import FeedValidationError
from quakepulse.pipeline import analyze_feed


logger = logging.getLogger(__name__)

setup_logging(settings)

_startup_time: float = time.time()
_feeds_analyzed: int = 0
_feeds_rejected: int = 0


# =============================================================================
# FastAPI Application
# =============================================================================

app = FastAPI(
    title="QuakePulse",
    description="Derived seismic metrics: arcs, heatmap, ripples, tour, statistics, mood",
    version=settings.engine.version,
)


# =============================================================================
# HTTP Endpoints
# =============================================================================

@app.get("/")
async def root() -> JSONResponse:
    """Service information endpoint."""
    return JSONResponse({
        "service": "QuakePulse",
        "version": settings.engine.version,
        "name": settings.engine.name,
        "status": "running",
        "correlation": settings.correlation.model_dump(),
        "ripples": settings.ripples.model_dump(),
        "tour": settings.tour.model_dump(),
    })


@app.get("/health")
async def health() -> JSONResponse:
    """
    Liveness probe - is the process alive?

    Always returns 200 if the service is running.
    """
    return JSONResponse({
        "status": "healthy",
        "uptime_seconds": round(time.time() - _startup_time, 1),
        "feeds_analyzed": _feeds_analyzed,
        "feeds_rejected": _feeds_rejected,
    })


@app.post("/analyze")
def analyze(payload: Any = Body(...)) -> JSONResponse:
    """
    Analyze one feed snapshot.

    Returns 422 when the payload is not a FeatureCollection; malformed
    individual features are dropped and counted instead.
    """
    global _feeds_analyzed, _feeds_rejected

    try:
        analysis = analyze_feed(payload, settings)
    except FeedValidationError as e:
        _feeds_rejected += 1
        logger.warning(f"Rejected feed payload: {e}")
        return JSONResponse({"error": str(e)}, status_code=422)

    _feeds_analyzed += 1
    body: Dict[str, Any] = analysis.model_dump(mode="json")
    return JSONResponse(body)


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get("PORT", settings.server.port))

    uvicorn.run(
        "quakepulse.main:app",
        host=settings.server.host,
        port=port,
        reload=False,
    )
