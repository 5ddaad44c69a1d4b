"""Spatial measurements.

This module provides measurements over points and rings:
- Great-circle (Haversine) distance between points
- Planar shoelace area of a ring in square degrees
- Bounding boxes of multi-polygons
"""

import math

from ghostmap.config import CONSTANTS
from ghostmap.models.geometry import BoundingBox, MultiPolygon, Point, Polygon


def distance(a: Point, b: Point) -> float:
    """Great-circle distance between two points using the Haversine formula.

    Assumes a spherical Earth of radius 6371.0 km.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in kilometres. Symmetric, and 0.0 when a == b.

    Example:
        warsaw = Point.create(52.2296756, 21.0122287)
        rome = Point.create(41.8919300, 12.5113300)
        distance(warsaw, rome)  # ~1315.5
    """
    dlat = math.radians(b.lat - a.lat)
    dlng = math.radians(b.lng - a.lng)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat)) * math.sin(dlng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return CONSTANTS.EARTH_RADIUS_KM * c


def polygon_area(polygon: Polygon) -> float:
    """Area of a simple ring using the shoelace formula.

    Coordinates are treated as planar, so the result is in square degrees with
    no correction for latitude. The ring does not need to be closed.

    Args:
        polygon: Ring of points

    Returns:
        Absolute area in square degrees, 0.0 for fewer than 3 points
    """
    if len(polygon) < 3:
        return 0.0

    area = 0.0
    prev = polygon[-1]
    for cur in polygon:
        area += (prev.lng - cur.lng) * (prev.lat + cur.lat)
        prev = cur

    return abs(area) / 2.0


def multi_polygon_bounding_box(multi_polygon: MultiPolygon) -> BoundingBox:
    """Bounding box enclosing every ring of a multi-polygon.

    Starts from the first polygon's box and unions in each remaining one.
    An empty later ring contributes its all-zero box.

    Args:
        multi_polygon: Sequence of rings

    Returns:
        Enclosing box, or the all-zero box if the multi-polygon or its
        first ring is empty
    """
    if len(multi_polygon) == 0 or len(multi_polygon[0]) == 0:
        return BoundingBox.empty()

    bbox = BoundingBox.from_polygon(multi_polygon[0])
    for polygon in multi_polygon[1:]:
        bbox = bbox.union(BoundingBox.from_polygon(polygon))

    return bbox
