"""Unit tests for geometry domain models."""

import math

import pytest
from pydantic import ValidationError

from ghostmap.models import BoundingBox, Geometry, GeometryKind, Point, WebMercatorPoint
from ghostmap.validation import GhostmapError, InvalidLatitude, InvalidLongitude


class TestPoint:
    """Tests for Point construction and validation."""

    def test_create_round_trips_fields(self):
        point = Point.create(40.7128, -74.0060)

        assert point.lat == 40.7128
        assert point.lng == -74.0060

    @pytest.mark.parametrize(
        ("lat", "lng"),
        [(-90.0, -180.0), (90.0, 180.0), (0.0, 0.0), (-33.8688, 151.2093)],
    )
    def test_create_accepts_range_limits(self, lat, lng):
        point = Point.create(lat, lng)

        assert (point.lat, point.lng) == (lat, lng)

    def test_invalid_latitude(self):
        with pytest.raises(InvalidLatitude):
            Point.create(91.0, 0.0)

    def test_invalid_longitude(self):
        with pytest.raises(InvalidLongitude):
            Point.create(0.0, 181.0)

    def test_latitude_checked_before_longitude(self):
        with pytest.raises(InvalidLatitude):
            Point.create(-91.0, 500.0)

    def test_nan_is_out_of_range(self):
        with pytest.raises(InvalidLatitude):
            Point.create(math.nan, 0.0)
        with pytest.raises(InvalidLongitude):
            Point.create(0.0, math.nan)

    def test_keyword_construction_is_validated(self):
        """Validation errors are not wrapped in pydantic's ValidationError."""
        with pytest.raises(InvalidLongitude):
            Point(lat=0.0, lng=-180.5)
        with pytest.raises(InvalidLatitude):
            Point.model_validate({"lat": 90.001, "lng": 0.0})

    def test_error_carries_value(self):
        with pytest.raises(InvalidLatitude, match="lat 91.0 is outside") as exc_info:
            Point.create(91.0, 0.0)

        assert exc_info.value.value == 91.0
        assert exc_info.value.field == "lat"
        assert isinstance(exc_info.value, GhostmapError)

    def test_point_is_immutable(self, new_york):
        with pytest.raises(ValidationError):
            new_york.lat = 0.0

    def test_points_compare_and_hash_by_value(self):
        a = Point.create(1.5, 2.5)
        b = Point.create(1.5, 2.5)

        assert a == b
        assert len({a, b}) == 1

    def test_distance_to(self, warsaw, rome):
        assert warsaw.distance_to(rome) == pytest.approx(1315.51, abs=1.0)


class TestBoundingBox:
    """Tests for BoundingBox derivation and containment."""

    def test_from_polygon(self):
        polygon = [Point.create(10.0, 10.0), Point.create(20.0, 20.0), Point.create(10.0, 20.0)]

        bbox = BoundingBox.from_polygon(polygon)

        assert bbox.min_lat == 10.0
        assert bbox.max_lat == 20.0
        assert bbox.min_lng == 10.0
        assert bbox.max_lng == 20.0

    def test_from_empty_polygon_is_all_zero(self):
        assert BoundingBox.from_polygon([]) == BoundingBox(
            min_lat=0.0, max_lat=0.0, min_lng=0.0, max_lng=0.0
        )

    def test_default_box_is_empty(self):
        assert BoundingBox() == BoundingBox.empty()

    def test_from_polygon_with_negative_coordinates(self):
        polygon = [Point.create(-5.0, 100.0), Point.create(-45.0, 170.0), Point.create(-20.0, 120.0)]

        bbox = BoundingBox.from_polygon(polygon)

        assert (bbox.min_lat, bbox.max_lat) == (-45.0, -5.0)
        assert (bbox.min_lng, bbox.max_lng) == (100.0, 170.0)

    def test_contains_is_inclusive(self, square_polygon):
        bbox = BoundingBox.from_polygon(square_polygon)

        assert bbox.contains(Point.create(5.0, 5.0))
        assert bbox.contains(Point.create(0.0, 0.0))
        assert bbox.contains(Point.create(10.0, 10.0))
        assert bbox.contains(Point.create(0.0, 10.0))
        assert not bbox.contains(Point.create(10.000001, 5.0))
        assert not bbox.contains(Point.create(5.0, -0.000001))

    def test_union(self):
        a = BoundingBox(min_lat=0.0, max_lat=2.0, min_lng=0.0, max_lng=2.0)
        b = BoundingBox(min_lat=-1.0, max_lat=1.0, min_lng=3.0, max_lng=5.0)

        assert a.union(b) == BoundingBox(min_lat=-1.0, max_lat=2.0, min_lng=0.0, max_lng=5.0)


def test_web_mercator_point_allows_infinite_values():
    point = WebMercatorPoint(x=0.0, y=-math.inf)

    assert point.y == -math.inf


class TestGeometry:
    """Tests for the tagged Geometry wrapper."""

    def test_named_constructors_set_kind(self, new_york, square_polygon):
        cases = [
            (Geometry.point(new_york), GeometryKind.POINT),
            (Geometry.line(square_polygon[:2]), GeometryKind.LINE),
            (Geometry.polygon(square_polygon), GeometryKind.POLYGON),
            (Geometry.multi_point(square_polygon), GeometryKind.MULTI_POINT),
            (Geometry.multi_line([square_polygon[:2], square_polygon[2:]]), GeometryKind.MULTI_LINE),
            (Geometry.multi_polygon([square_polygon]), GeometryKind.MULTI_POLYGON),
        ]

        for geometry, kind in cases:
            assert geometry.kind == kind

    def test_value_is_kept(self, new_york):
        assert Geometry.point(new_york).value is new_york

    def test_kind_values(self):
        assert GeometryKind.MULTI_POLYGON == "multi_polygon"
        assert {kind.value for kind in GeometryKind} == {
            "point",
            "line",
            "polygon",
            "multi_point",
            "multi_line",
            "multi_polygon",
        }
