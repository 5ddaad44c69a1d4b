"""Unit tests for configuration."""

from dataclasses import FrozenInstanceError

import pytest
from pydantic import ValidationError


def test_physical_constants():
    """Test fixed constants used by the algorithms."""
    from ghostmap.config import CONSTANTS

    assert CONSTANTS.EARTH_RADIUS_KM == 6371.0
    assert CONSTANTS.WEB_MERCATOR_RADIUS_M == 6378137.0
    assert CONSTANTS.PARALLEL_TOLERANCE == 1e-10
    assert CONSTANTS.MAX_LATITUDE == 90.0
    assert CONSTANTS.MAX_LONGITUDE == 180.0


def test_physical_constants_are_immutable():
    """Test constants cannot be modified at runtime."""
    from ghostmap.config import CONSTANTS

    with pytest.raises(FrozenInstanceError):
        CONSTANTS.EARTH_RADIUS_KM = 6378.0


def test_default_geojson_config_values():
    """Test default GeoJSON configuration values."""
    from ghostmap.config import DEFAULT_GEOJSON_CONFIG

    assert DEFAULT_GEOJSON_CONFIG.coordinate_precision == 6


def test_geojson_config_from_environment(monkeypatch):
    """Test GEOJSON_ prefixed variables override defaults."""
    from ghostmap.config import GeoJSONConfig

    monkeypatch.setenv("GEOJSON_COORDINATE_PRECISION", "8")

    assert GeoJSONConfig().coordinate_precision == 8


def test_geojson_config_rejects_negative_precision():
    """Test precision must be non-negative."""
    from ghostmap.config import GeoJSONConfig

    with pytest.raises(ValidationError):
        GeoJSONConfig(coordinate_precision=-1)


def test_logging_config_normalises_level(monkeypatch):
    """Test log level names are case-insensitive."""
    from ghostmap.config import LoggingConfig

    monkeypatch.setenv("GHOSTMAP_LOG_LEVEL", "debug")

    assert LoggingConfig().level == "DEBUG"


def test_logging_config_rejects_unknown_level():
    """Test unknown log levels are rejected."""
    from ghostmap.config import LoggingConfig

    with pytest.raises(ValidationError, match="Unknown log level"):
        LoggingConfig(level="chatty")
