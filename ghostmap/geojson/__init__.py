"""GeoJSON interchange for Point, LineString and Polygon geometries."""

from ghostmap.geojson.codec import (
    line_string_to_geojson,
    parse_geometry,
    parse_line_string,
    parse_point,
    parse_polygon,
    point_to_geojson,
    polygon_to_geojson,
)

__all__ = [
    "parse_point",
    "parse_line_string",
    "parse_polygon",
    "parse_geometry",
    "point_to_geojson",
    "line_string_to_geojson",
    "polygon_to_geojson",
]
