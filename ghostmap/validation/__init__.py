"""Validation for coordinates and the ghostmap error taxonomy.

Errors raised by the library:
1. InvalidLatitude / InvalidLongitude - Point construction out of range
2. InvalidGeoJSON - structural mismatch while parsing GeoJSON

All of them derive from GhostmapError. They are not ValueError subclasses,
so pydantic validators let them through unchanged.
"""

from ghostmap.validation.coordinates import (
    check_latitude,
    check_longitude,
    is_valid_latitude,
    is_valid_longitude,
)
from ghostmap.validation.errors import (
    GhostmapError,
    InvalidCoordinate,
    InvalidGeoJSON,
    InvalidLatitude,
    InvalidLongitude,
)

__all__ = [
    "GhostmapError",
    "InvalidCoordinate",
    "InvalidLatitude",
    "InvalidLongitude",
    "InvalidGeoJSON",
    "check_latitude",
    "check_longitude",
    "is_valid_latitude",
    "is_valid_longitude",
]
