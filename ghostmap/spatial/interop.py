"""Conversion between ghostmap geometry and shapely geometry.

Shapely works in planar x/y, so every conversion maps x = lng and y = lat.
No CRS is attached; the shapely objects are in WGS84 degrees.
"""

import shapely
from shapely import geometry as sg

from ghostmap.models.geometry import Geometry, GeometryKind, Point, Polygon


def _coords(points) -> list[tuple[float, float]]:
    return [(p.lng, p.lat) for p in points]


def _shell(polygon: Polygon) -> sg.Polygon:
    # shapely closes the ring itself; an empty ring becomes POLYGON EMPTY
    return sg.Polygon(_coords(polygon)) if len(polygon) else sg.Polygon()


def to_shapely(geometry: Geometry) -> shapely.Geometry:
    """Convert a Geometry variant into the matching shapely geometry.

    Args:
        geometry: Tagged geometry to convert

    Returns:
        shapely Point, LineString, Polygon, MultiPoint, MultiLineString or
        MultiPolygon

    Raises:
        ValueError: If the geometry kind is not recognised, or shapely rejects
            a ring with fewer than 3 distinct points
    """
    value = geometry.value
    match geometry.kind:
        case GeometryKind.POINT:
            return sg.Point(value.lng, value.lat)
        case GeometryKind.LINE:
            return sg.LineString(_coords(value))
        case GeometryKind.POLYGON:
            return _shell(value)
        case GeometryKind.MULTI_POINT:
            return sg.MultiPoint(_coords(value))
        case GeometryKind.MULTI_LINE:
            return sg.MultiLineString([_coords(line) for line in value])
        case GeometryKind.MULTI_POLYGON:
            return sg.MultiPolygon([_shell(polygon) for polygon in value if len(polygon)])

    msg = f"Unsupported geometry kind: {geometry.kind!r}"
    raise ValueError(msg)


def point_from_shapely(point: sg.Point) -> Point:
    """Convert a shapely point (x = lng, y = lat) into a validated Point.

    Raises:
        InvalidLatitude: If y is outside [-90, 90]
        InvalidLongitude: If x is outside [-180, 180]
    """
    return Point.create(point.y, point.x)
