"""GeoJSON wire schemas for the supported geometry subset.

These models check structure only: member names, the exact "type" string,
array nesting and [lng, lat] pair arity. Coordinate ranges are checked later,
when positions are turned into Point objects.
"""

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    TypeAdapter,
    ValidationError,
    field_validator,
)

# [lng, lat]; JSON integers are numbers too, booleans and strings are not
Position = tuple[StrictFloat, StrictFloat]

_RING_ADAPTER = TypeAdapter(list[Position])


class _GeoJSONObject(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class GeoJSONPoint(_GeoJSONObject):
    type: Literal["Point"]
    coordinates: Position


class GeoJSONLineString(_GeoJSONObject):
    type: Literal["LineString"]
    coordinates: list[Position]


class GeoJSONPolygon(_GeoJSONObject):
    """Polygon geometry. Only the exterior (first) ring is validated and used."""

    type: Literal["Polygon"]
    coordinates: list[Any] = Field(min_length=1)

    @field_validator("coordinates")
    @classmethod
    def exterior_ring_must_be_positions(cls, rings: list[Any]) -> list[Any]:
        try:
            exterior = _RING_ADAPTER.validate_python(rings[0])
        except ValidationError as e:
            msg = f"Exterior ring is not a list of [lng, lat] positions ({e.error_count()} errors)"
            raise ValueError(msg) from e
        return [exterior, *rings[1:]]

    @property
    def exterior(self) -> list[Position]:
        return self.coordinates[0]


GeoJSONGeometry = Annotated[
    GeoJSONPoint | GeoJSONLineString | GeoJSONPolygon,
    Field(discriminator="type"),
]

GEOMETRY_ADAPTER: TypeAdapter[GeoJSONPoint | GeoJSONLineString | GeoJSONPolygon] = TypeAdapter(
    GeoJSONGeometry
)
