"""Domain models for geographic geometry, rasters and GeoJSON wire data."""

from ghostmap.models.geometry import (
    BoundingBox,
    Geometry,
    GeometryKind,
    Line,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    WebMercatorPoint,
)
from ghostmap.models.raster import Raster

__all__ = [
    "Point",
    "Line",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "BoundingBox",
    "WebMercatorPoint",
    "GeometryKind",
    "Geometry",
    "Raster",
]
