"""Spatial predicates: point-in-polygon and segment intersection.

Points exactly on an edge or vertex get whatever the floating-point tests
below produce; no special boundary handling is applied.
"""

from ghostmap.config import CONSTANTS
from ghostmap.models.geometry import Point, Polygon
from ghostmap.validation import GhostmapError


def polygon_contains_point(polygon: Polygon, point: Point) -> bool:
    """Test whether a point lies inside a ring using ray casting.

    Counts crossings of a ray cast from the point towards increasing latitude:
    an edge counts when its longitude span straddles the point and the edge
    latitude at the point's longitude is above the point.

    Args:
        polygon: Ring of points (closure not required)
        point: Point to test

    Returns:
        True if the crossing count is odd, False for fewer than 3 points
    """
    if len(polygon) < 3:
        return False

    inside = False
    pj = polygon[-1]
    for pi in polygon:
        if (pi.lng > point.lng) != (pj.lng > point.lng):
            edge_lat = (pj.lat - pi.lat) * (point.lng - pi.lng) / (pj.lng - pi.lng) + pi.lat
            if point.lat < edge_lat:
                inside = not inside
        pj = pi

    return inside


def line_segment_intersection(p1: Point, p2: Point, p3: Point, p4: Point) -> Point | None:
    """Intersection of segment p1-p2 with segment p3-p4.

    Solves the parametric system with x = lng and y = lat. Both parameters
    must fall in [0, 1], so touching endpoints count as an intersection.

    Args:
        p1: Start of the first segment
        p2: End of the first segment
        p3: Start of the second segment
        p4: End of the second segment

    Returns:
        The intersection point, or None if the segments are parallel,
        coincident, do not meet, or meet at an out-of-range coordinate
    """
    denom = (p1.lng - p2.lng) * (p3.lat - p4.lat) - (p1.lat - p2.lat) * (p3.lng - p4.lng)
    if abs(denom) < CONSTANTS.PARALLEL_TOLERANCE:
        return None

    t = ((p1.lng - p3.lng) * (p3.lat - p4.lat) - (p1.lat - p3.lat) * (p3.lng - p4.lng)) / denom
    u = -((p1.lng - p2.lng) * (p1.lat - p3.lat) - (p1.lat - p2.lat) * (p1.lng - p3.lng)) / denom

    if not (0 <= t <= 1 and 0 <= u <= 1):
        return None

    lng = p1.lng + t * (p2.lng - p1.lng)
    lat = p1.lat + t * (p2.lat - p1.lat)
    try:
        return Point.create(lat, lng)
    except GhostmapError:
        return None
