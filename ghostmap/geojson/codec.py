"""GeoJSON parsing and serialization for Point, LineString and Polygon.

Parsers accept either GeoJSON text (str or bytes) or an already decoded JSON
value such as the dict returned by json.loads. Structural problems raise
InvalidGeoJSON. Coordinates are converted through Point.create, so a
well-formed but out-of-range position raises InvalidLatitude or
InvalidLongitude instead.

Sequence parsers return a new list on every call; the caller owns it.

GeoJSON orders positions [lng, lat], the reverse of Point's field order.
"""

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ghostmap.config import DEFAULT_GEOJSON_CONFIG
from ghostmap.models.geojson import (
    GEOMETRY_ADAPTER,
    GeoJSONLineString,
    GeoJSONPoint,
    GeoJSONPolygon,
    Position,
)
from ghostmap.models.geometry import Geometry, Line, Point, Polygon
from ghostmap.validation import InvalidGeoJSON

logger = logging.getLogger(__name__)

GeoJSONSource = str | bytes | bytearray | dict[str, Any]


def _validate(adapter: TypeAdapter[Any], source: GeoJSONSource, expected: str) -> Any:
    """Validate source against a wire schema, mapping failures to InvalidGeoJSON."""
    try:
        if isinstance(source, str | bytes | bytearray):
            return adapter.validate_json(source)
        return adapter.validate_python(source)
    except ValidationError as e:
        logger.debug(f"Rejected {expected} GeoJSON: {e}")
        msg = f"Invalid GeoJSON {expected}: {e.error_count()} structural error(s)"
        raise InvalidGeoJSON(msg) from e


_POINT_ADAPTER = TypeAdapter(GeoJSONPoint)
_LINE_STRING_ADAPTER = TypeAdapter(GeoJSONLineString)
_POLYGON_ADAPTER = TypeAdapter(GeoJSONPolygon)


def _to_point(position: Position) -> Point:
    lng, lat = position
    return Point.create(lat, lng)


def _to_points(positions: Iterable[Position]) -> list[Point]:
    return [_to_point(position) for position in positions]


def parse_point(source: GeoJSONSource) -> Point:
    """Parse a GeoJSON Point geometry.

    Args:
        source: GeoJSON text or decoded JSON value

    Returns:
        Validated point

    Raises:
        InvalidGeoJSON: If the input is not a Point object with one [lng, lat] pair
        InvalidLatitude: If the latitude is out of range
        InvalidLongitude: If the longitude is out of range
    """
    wire = _validate(_POINT_ADAPTER, source, "Point")
    return _to_point(wire.coordinates)


def parse_line_string(source: GeoJSONSource) -> list[Point]:
    """Parse a GeoJSON LineString geometry into a new list of points.

    Raises:
        InvalidGeoJSON: If any element of "coordinates" is not a [lng, lat] pair
        InvalidLatitude: If a latitude is out of range
        InvalidLongitude: If a longitude is out of range
    """
    wire = _validate(_LINE_STRING_ADAPTER, source, "LineString")
    return _to_points(wire.coordinates)


def parse_polygon(source: GeoJSONSource) -> list[Point]:
    """Parse the exterior ring of a GeoJSON Polygon into a new list of points.

    Only coordinates[0] is read. Interior rings (holes) are ignored without
    being validated.

    Raises:
        InvalidGeoJSON: If there are no rings or the first ring is malformed
        InvalidLatitude: If a latitude is out of range
        InvalidLongitude: If a longitude is out of range
    """
    wire = _validate(_POLYGON_ADAPTER, source, "Polygon")
    return _to_points(wire.exterior)


def parse_geometry(source: GeoJSONSource) -> Geometry:
    """Parse any supported GeoJSON geometry, dispatching on its "type" member.

    Returns:
        Geometry.point, Geometry.line or Geometry.polygon

    Raises:
        InvalidGeoJSON: If the type is missing, unsupported or the structure
            does not match it
    """
    wire = _validate(GEOMETRY_ADAPTER, source, "geometry")
    if isinstance(wire, GeoJSONPoint):
        return Geometry.point(_to_point(wire.coordinates))
    if isinstance(wire, GeoJSONLineString):
        return Geometry.line(_to_points(wire.coordinates))
    return Geometry.polygon(_to_points(wire.exterior))


def _format_position(point: Point, precision: int) -> str:
    return f"[{point.lng:.{precision}f},{point.lat:.{precision}f}]"


def _format_positions(points: Iterable[Point], precision: int) -> str:
    return "[" + ",".join(_format_position(point, precision) for point in points) + "]"


def _resolve_precision(precision: int | None) -> int:
    if precision is None:
        return DEFAULT_GEOJSON_CONFIG.coordinate_precision
    if precision < 0:
        msg = f"precision must be non-negative, got {precision}"
        raise ValueError(msg)
    return precision


def point_to_geojson(point: Point, precision: int | None = None) -> str:
    """Serialize a point as a compact GeoJSON Point.

    Output is exactly {"type":"Point","coordinates":[lng,lat]} with each
    coordinate written in fixed-point notation.

    Args:
        point: Point to serialize
        precision: Decimal digits per coordinate (default from GeoJSONConfig, 6)

    Returns:
        New GeoJSON string owned by the caller

    Example:
        point_to_geojson(Point.create(40.7128, -74.0060))
        # '{"type":"Point","coordinates":[-74.006000,40.712800]}'
    """
    digits = _resolve_precision(precision)
    return f'{{"type":"Point","coordinates":{_format_position(point, digits)}}}'


def line_string_to_geojson(line: Line, precision: int | None = None) -> str:
    """Serialize a polyline as a compact GeoJSON LineString."""
    digits = _resolve_precision(precision)
    return f'{{"type":"LineString","coordinates":{_format_positions(line, digits)}}}'


def polygon_to_geojson(polygon: Polygon, precision: int | None = None) -> str:
    """Serialize a ring as a GeoJSON Polygon with a single exterior ring.

    Points are written as given; the ring is not closed or re-wound.
    """
    digits = _resolve_precision(precision)
    return f'{{"type":"Polygon","coordinates":[{_format_positions(polygon, digits)}]}}'
