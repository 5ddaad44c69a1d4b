"""Shared fixtures for ghostmap unit tests."""

import pytest

from ghostmap.models import Point


@pytest.fixture
def warsaw() -> Point:
    return Point.create(52.2296756, 21.0122287)


@pytest.fixture
def rome() -> Point:
    return Point.create(41.8919300, 12.5113300)


@pytest.fixture
def new_york() -> Point:
    return Point.create(40.7128, -74.0060)


@pytest.fixture
def square_polygon() -> list[Point]:
    """10 x 10 degree square with a corner at the origin (lat, lng)."""
    return [
        Point.create(0.0, 0.0),
        Point.create(10.0, 0.0),
        Point.create(10.0, 10.0),
        Point.create(0.0, 10.0),
    ]
