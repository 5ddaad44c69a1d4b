"""Geometry domain models.

Points are validated, immutable value objects. Lines and polygons are plain
sequences of points; the algorithms in ghostmap.spatial accept any sequence.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ghostmap.validation.coordinates import check_latitude, check_longitude


class Point(BaseModel):
    """A WGS84 geographic position.

    A Point always satisfies -90 <= lat <= 90 and -180 <= lng <= 180. Every
    construction path validates latitude first, then longitude.

    Attributes:
        lat: Latitude in decimal degrees
        lng: Longitude in decimal degrees
    """

    model_config = ConfigDict(frozen=True)

    lat: float = Field(description="Latitude (degrees)")
    lng: float = Field(description="Longitude (degrees)")

    @model_validator(mode="after")
    def check_ranges(self) -> Self:
        check_latitude(self.lat)
        check_longitude(self.lng)
        return self

    @classmethod
    def create(cls, lat: float, lng: float) -> "Point":
        """Create a validated point.

        Raises:
            InvalidLatitude: If lat is outside [-90, 90]
            InvalidLongitude: If lng is outside [-180, 180]
        """
        return cls(lat=lat, lng=lng)

    def distance_to(self, other: "Point") -> float:
        """Great-circle distance to another point in kilometres."""
        from ghostmap.spatial.measurements import distance

        return distance(self, other)


Line = Sequence[Point]
"""Ordered polyline. No closure requirement."""

Polygon = Sequence[Point]
"""Single ring. Counter-clockwise exterior winding is a convention, not checked."""

MultiPoint = Sequence[Point]
MultiLineString = Sequence[Line]
MultiPolygon = Sequence[Polygon]


class BoundingBox(BaseModel):
    """Axis-aligned rectangle in lat/lng space.

    No ordering is enforced between min and max at construction. Boxes derived
    from geometry always have min <= max; empty input gives the all-zero box.
    """

    model_config = ConfigDict(frozen=True)

    min_lat: float = 0.0
    max_lat: float = 0.0
    min_lng: float = 0.0
    max_lng: float = 0.0

    @classmethod
    def empty(cls) -> "BoundingBox":
        return cls(min_lat=0.0, max_lat=0.0, min_lng=0.0, max_lng=0.0)

    @classmethod
    def from_polygon(cls, polygon: Polygon) -> "BoundingBox":
        """Fold min/max latitude and longitude over every point of a ring.

        Args:
            polygon: Sequence of points (any ring or polyline)

        Returns:
            Enclosing box, or the all-zero box if polygon is empty
        """
        if len(polygon) == 0:
            return cls.empty()

        min_lat = max_lat = polygon[0].lat
        min_lng = max_lng = polygon[0].lng

        for point in polygon:
            min_lat = min(min_lat, point.lat)
            max_lat = max(max_lat, point.lat)
            min_lng = min(min_lng, point.lng)
            max_lng = max(max_lng, point.lng)

        return cls(min_lat=min_lat, max_lat=max_lat, min_lng=min_lng, max_lng=max_lng)

    def contains(self, point: Point) -> bool:
        """Inclusive range test on both axes."""
        return (
            self.min_lat <= point.lat <= self.max_lat
            and self.min_lng <= point.lng <= self.max_lng
        )

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Smallest box covering both boxes (independent min/max per axis)."""
        return BoundingBox(
            min_lat=min(self.min_lat, other.min_lat),
            max_lat=max(self.max_lat, other.max_lat),
            min_lng=min(self.min_lng, other.min_lng),
            max_lng=max(self.max_lng, other.max_lng),
        )


class WebMercatorPoint(BaseModel):
    """Planar EPSG:3857 position in metres. Unbounded near the poles."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class GeometryKind(StrEnum):
    """Variants carried by Geometry."""

    POINT = "point"
    LINE = "line"
    POLYGON = "polygon"
    MULTI_POINT = "multi_point"
    MULTI_LINE = "multi_line"
    MULTI_POLYGON = "multi_polygon"


@dataclass(frozen=True)
class Geometry:
    """Tagged union over the six geometry variants.

    A convenience wrapper for callers that handle mixed geometry; none of the
    spatial algorithms require it. Use the named constructors rather than
    building one directly so kind and value always agree.
    """

    kind: GeometryKind
    value: Point | Line | Polygon | MultiPoint | MultiLineString | MultiPolygon

    @classmethod
    def point(cls, value: Point) -> "Geometry":
        return cls(GeometryKind.POINT, value)

    @classmethod
    def line(cls, value: Line) -> "Geometry":
        return cls(GeometryKind.LINE, value)

    @classmethod
    def polygon(cls, value: Polygon) -> "Geometry":
        return cls(GeometryKind.POLYGON, value)

    @classmethod
    def multi_point(cls, value: MultiPoint) -> "Geometry":
        return cls(GeometryKind.MULTI_POINT, value)

    @classmethod
    def multi_line(cls, value: MultiLineString) -> "Geometry":
        return cls(GeometryKind.MULTI_LINE, value)

    @classmethod
    def multi_polygon(cls, value: MultiPolygon) -> "Geometry":
        return cls(GeometryKind.MULTI_POLYGON, value)
