"""Configuration and constants for ghostmap.

This module defines the fixed physical constants used by the geometry
algorithms and the small amount of runtime configuration the library has.

Includes configuration for:
- GeoJSON serialization (GeoJSONConfig with GEOJSON_ prefix)
- CLI logging (LoggingConfig with GHOSTMAP_LOG_ prefix)

Configuration can be overridden via:
1. Environment variables (e.g., GEOJSON_COORDINATE_PRECISION=8, GHOSTMAP_LOG_LEVEL=DEBUG)
2. .env file in the current directory
3. Default values in code
"""

import logging
from dataclasses import dataclass

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class PhysicalConstants:
    """Physical and mathematical constants used by the geometry algorithms.

    These are NOT configurable - changing them would change the results of
    distance, projection and intersection calculations.

    All attributes are immutable (frozen=True prevents modification).
    """

    # WGS84 coordinate limits (degrees)
    MAX_LATITUDE: float = 90.0
    MAX_LONGITUDE: float = 180.0

    # Mean Earth radius for great-circle distance
    EARTH_RADIUS_KM: float = 6371.0

    # Sphere radius used by EPSG:3857 (WGS84 semi-major axis)
    WEB_MERCATOR_RADIUS_M: float = 6378137.0

    # Segment intersection denominators below this are treated as parallel
    PARALLEL_TOLERANCE: float = 1e-10


# Module-level singleton for physical constants
CONSTANTS = PhysicalConstants()


class GeoJSONConfig(BaseSettings):
    """Configuration for GeoJSON serialization.

    Can be overridden via environment variables with GEOJSON_ prefix:
    - GEOJSON_COORDINATE_PRECISION

    Attributes:
        coordinate_precision: Decimal digits written for each coordinate
    """

    model_config = SettingsConfigDict(
        env_prefix="GEOJSON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    coordinate_precision: int = Field(
        default=6, ge=0, le=17, description="Decimal digits per serialized coordinate"
    )


DEFAULT_GEOJSON_CONFIG = GeoJSONConfig()


class LoggingConfig(BaseSettings):
    """Logging configuration for the command line entry point.

    Can be overridden via environment variables with GHOSTMAP_LOG_ prefix:
    - GHOSTMAP_LOG_LEVEL (default: INFO)
    - GHOSTMAP_LOG_FORMAT

    The library itself never configures handlers; only the CLI applies this.
    """

    model_config = SettingsConfigDict(
        env_prefix="GHOSTMAP_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    level: str = Field(default="INFO", description="Root log level name")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="logging.Formatter format string",
    )

    @field_validator("level")
    @classmethod
    def must_be_known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"Unknown log level: {v}"
            raise ValueError(msg)
        return level
