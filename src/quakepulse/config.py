"""
QuakePulse Configuration
========================

This module handles configuration loading for the seismic metrics engine.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    QUAKEPULSE_ARC_MAX_DISTANCE_KM -> correlation.max_distance_km
    QUAKEPULSE_ARC_MAX_TIME_GAP_H  -> correlation.max_time_gap_hours
    QUAKEPULSE_MAX_ARCS            -> correlation.max_edges
    QUAKEPULSE_ARC_MIN_MAG         -> correlation.min_magnitude
    QUAKEPULSE_RING_MIN_MAG        -> ripples.min_magnitude
    QUAKEPULSE_MAX_RINGS           -> ripples.max_count
    QUAKEPULSE_TOUR_STOPS          -> tour.default_count
    QUAKEPULSE_LOG_LEVEL           -> logging.level
    PORT                           -> server.port

Engine components never read the global ``settings`` directly; callers pass
the relevant section in explicitly.

Example:
    from quakepulse.config import settings

    print(settings.correlation.max_distance_km)
    print(settings.mood.volatile_min_score)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class EngineInfo(BaseModel):
    """Service identification."""

    name: str = Field(default="quakepulse", description="Service name")
    version: str = Field(default="v0.1.0", description="Engine version")


class CorrelationConfig(BaseModel):
    """Spatial-temporal correlation (arc) limits."""

    max_distance_km: float = Field(
        default=300.0,
        gt=0,
        description="Maximum great-circle separation for a link",
    )
    max_time_gap_hours: float = Field(
        default=48.0,
        ge=0,
        description="Maximum time between two linked events",
    )
    max_edges: int = Field(
        default=120,
        ge=0,
        description="Hard cap on edges generated per batch",
    )
    min_magnitude: float = Field(
        default=2.0,
        description="Minimum magnitude for an event to take part in a link",
    )


class RippleConfig(BaseModel):
    """Ripple ring selection."""

    min_magnitude: float = Field(default=3.0, description="Minimum ring magnitude")
    max_count: int = Field(default=30, ge=0, description="Maximum rings per batch")


class TourConfig(BaseModel):
    """Guided tour and cinematic autoplay sizing."""

    default_count: int = Field(default=8, ge=0, description="Guided tour stop count")
    cinematic_count: int = Field(default=12, ge=0, description="Cinematic stop count")


class MoodThresholds(BaseModel):
    """
    Band thresholds for the mood scorer.

    Magnitude thresholds apply to the largest event under 48 hours old;
    score thresholds apply to the recency-weighted energy score.
    """

    fierce_min_mag: float = Field(default=7.5, description="Recent magnitude for 'fierce'")
    volatile_min_mag: float = Field(default=6.0, description="Recent magnitude for 'volatile'")
    volatile_min_score: float = Field(default=50_000, ge=0, description="Score for 'volatile'")
    restless_min_mag: float = Field(default=5.0, description="Recent magnitude for 'restless'")
    restless_min_score: float = Field(default=10_000, ge=0, description="Score for 'restless'")
    stirring_min_score: float = Field(default=3_000, ge=0, description="Score for 'stirring'")
    stirring_min_count: int = Field(default=100, ge=0, description="Event count for 'stirring'")
    quiet_min_count: int = Field(default=10, ge=0, description="Event count for 'quiet'")


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8001, ge=1, le=65535, description="Bind port")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for QuakePulse.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    engine: EngineInfo = Field(default_factory=EngineInfo)
    correlation: CorrelationConfig = Field(default_factory=CorrelationConfig)
    ripples: RippleConfig = Field(default_factory=RippleConfig)
    tour: TourConfig = Field(default_factory=TourConfig)
    mood: MoodThresholds = Field(default_factory=MoodThresholds)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Correlation
    if env_dist := os.environ.get("QUAKEPULSE_ARC_MAX_DISTANCE_KM"):
        config_data.setdefault("correlation", {})["max_distance_km"] = float(env_dist)
    if env_gap := os.environ.get("QUAKEPULSE_ARC_MAX_TIME_GAP_H"):
        config_data.setdefault("correlation", {})["max_time_gap_hours"] = float(env_gap)
    if env_arcs := os.environ.get("QUAKEPULSE_MAX_ARCS"):
        config_data.setdefault("correlation", {})["max_edges"] = int(env_arcs)
    if env_arc_mag := os.environ.get("QUAKEPULSE_ARC_MIN_MAG"):
        config_data.setdefault("correlation", {})["min_magnitude"] = float(env_arc_mag)

    # Ripples
    if env_ring_mag := os.environ.get("QUAKEPULSE_RING_MIN_MAG"):
        config_data.setdefault("ripples", {})["min_magnitude"] = float(env_ring_mag)
    if env_rings := os.environ.get("QUAKEPULSE_MAX_RINGS"):
        config_data.setdefault("ripples", {})["max_count"] = int(env_rings)

    # Tour
    if env_stops := os.environ.get("QUAKEPULSE_TOUR_STOPS"):
        config_data.setdefault("tour", {})["default_count"] = int(env_stops)

    # Server settings (container platforms use PORT)
    if env_port := os.environ.get("PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)
    elif env_port := os.environ.get("QUAKEPULSE_PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)

    if env_log := os.environ.get("QUAKEPULSE_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Loaded on import; the HTTP entry point calls setup_logging()
settings = load_config()
