"""Spatial predicates, measurements and projection.

This package provides the numerical core of ghostmap:
- Measurements (Haversine distance, shoelace area, multi-polygon bounding box)
- Predicates (ray-casting point-in-polygon, segment intersection)
- Projection (WGS84 to Web Mercator)
- Interop (conversion to shapely geometries)

Commonly used exports:
- distance: Great-circle distance in kilometres
- polygon_area: Planar ring area in square degrees
- polygon_contains_point: Crossing-number containment test
- line_segment_intersection: Intersection point of two segments, or None
- multi_polygon_bounding_box: Box enclosing every ring
- project_to_web_mercator: EPSG:3857 metres
- to_shapely: Convert a Geometry variant to shapely
"""

from ghostmap.spatial.interop import point_from_shapely, to_shapely
from ghostmap.spatial.measurements import distance, multi_polygon_bounding_box, polygon_area
from ghostmap.spatial.predicates import line_segment_intersection, polygon_contains_point
from ghostmap.spatial.projection import project_to_web_mercator

__all__ = [
    "distance",
    "polygon_area",
    "multi_polygon_bounding_box",
    "polygon_contains_point",
    "line_segment_intersection",
    "project_to_web_mercator",
    "to_shapely",
    "point_from_shapely",
]
