"""ghostmap: small geospatial primitives library.

Validated WGS84 points, planar measurements and predicates, Web Mercator
projection, a dense raster grid and GeoJSON interchange.
"""

from ghostmap.geojson import (
    line_string_to_geojson,
    parse_geometry,
    parse_line_string,
    parse_point,
    parse_polygon,
    point_to_geojson,
    polygon_to_geojson,
)
from ghostmap.models import (
    BoundingBox,
    Geometry,
    GeometryKind,
    Line,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Raster,
    WebMercatorPoint,
)
from ghostmap.spatial import (
    distance,
    line_segment_intersection,
    multi_polygon_bounding_box,
    polygon_area,
    polygon_contains_point,
    project_to_web_mercator,
)
from ghostmap.validation import (
    GhostmapError,
    InvalidCoordinate,
    InvalidGeoJSON,
    InvalidLatitude,
    InvalidLongitude,
)

__version__ = "0.1.0"

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
    "distance",
    "polygon_area",
    "polygon_contains_point",
    "line_segment_intersection",
    "multi_polygon_bounding_box",
    "project_to_web_mercator",
    "parse_point",
    "parse_line_string",
    "parse_polygon",
    "parse_geometry",
    "point_to_geojson",
    "line_string_to_geojson",
    "polygon_to_geojson",
    "GhostmapError",
    "InvalidCoordinate",
    "InvalidLatitude",
    "InvalidLongitude",
    "InvalidGeoJSON",
]
