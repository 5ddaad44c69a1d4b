"""Error definitions for geometry construction and GeoJSON parsing."""


class GhostmapError(Exception):
    """Base class for all ghostmap errors."""


class InvalidCoordinate(GhostmapError):
    """A coordinate component is outside its valid range.

    Attributes:
        field: Name of the offending component ("lat" or "lng")
        value: The rejected value
    """

    field: str = "coordinate"
    limit: float = 0.0

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"{self.field} {value!r} is outside [-{self.limit:g}, {self.limit:g}]")


class InvalidLatitude(InvalidCoordinate):
    """Latitude outside [-90, 90]."""

    field = "lat"
    limit = 90.0


class InvalidLongitude(InvalidCoordinate):
    """Longitude outside [-180, 180]."""

    field = "lng"
    limit = 180.0


class InvalidGeoJSON(GhostmapError):
    """GeoJSON input does not match the expected geometry structure."""
