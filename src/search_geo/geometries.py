from __future__ import annotations

from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict

from search_geo.constants import (
    GEOMETRY_TYPES,
    TYPE_CIRCLE,
    TYPE_ENVELOPE,
    TYPE_LINE_STRING,
    TYPE_MULTI_LINE_STRING,
    TYPE_MULTI_POINT,
    TYPE_MULTI_POLYGON,
    TYPE_POINT,
    TYPE_POLYGON,
)
from search_geo.models import GeometryTypeMismatchError, UnknownGeometryTypeError
from search_geo.raw import RawGeometry, parse_envelope
from search_geo.types import (
    EnvelopeCoords,
    LineStringCoords,
    MultiLineStringCoords,
    MultiPointCoords,
    MultiPolygonCoords,
    PolygonCoords,
    Position,
)


def check_geometry_type(expected: str, actual: str) -> None:
    if actual not in GEOMETRY_TYPES:
        raise UnknownGeometryTypeError(actual)
    if actual != expected:
        raise GeometryTypeMismatchError(expected, actual)


class _GeometryBase(BaseModel):
    """Shared decode and encode behaviour of the geometry variants.

    Subclasses declare ``type`` as their first field so it is emitted first.
    """

    model_config = ConfigDict(frozen=True)

    geometry_type: ClassVar[str]

    @classmethod
    def _payload(cls, raw: RawGeometry) -> dict[str, Any]:
        return {"type": raw.type, "coordinates": raw.coordinates}

    @classmethod
    def decode(cls, raw: RawGeometry, depth: int = 0) -> Any:  # noqa: ARG003
        """Reinterpret the coordinates of an envelope at the nesting depth of this variant.

        Raises:
            UnknownGeometryTypeError: tag is not one of the known geometry types
            GeometryTypeMismatchError: tag belongs to another variant
            ValidationError: coordinates do not have the expected shape
        """
        check_geometry_type(cls.geometry_type, raw.type)
        return cls.model_validate(cls._payload(raw), strict=True)

    @classmethod
    def from_json(cls, data: str | bytes | bytearray | dict[str, Any]) -> Any:
        return cls.decode(parse_envelope(data))

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()

    def to_json(self) -> str:
        return self.model_dump_json()


class Point(_GeometryBase):
    geometry_type: ClassVar[str] = TYPE_POINT

    type: Literal["point"] = TYPE_POINT
    coordinates: Position


class MultiPoint(_GeometryBase):
    geometry_type: ClassVar[str] = TYPE_MULTI_POINT

    type: Literal["multipoint"] = TYPE_MULTI_POINT
    coordinates: MultiPointCoords


class LineString(_GeometryBase):
    geometry_type: ClassVar[str] = TYPE_LINE_STRING

    type: Literal["linestring"] = TYPE_LINE_STRING
    coordinates: LineStringCoords


class MultiLineString(_GeometryBase):
    geometry_type: ClassVar[str] = TYPE_MULTI_LINE_STRING

    type: Literal["multilinestring"] = TYPE_MULTI_LINE_STRING
    coordinates: MultiLineStringCoords


class Polygon(_GeometryBase):
    """Polygon, the first ring is the exterior ring, the others are holes."""

    geometry_type: ClassVar[str] = TYPE_POLYGON

    type: Literal["polygon"] = TYPE_POLYGON
    coordinates: PolygonCoords


class MultiPolygon(_GeometryBase):
    geometry_type: ClassVar[str] = TYPE_MULTI_POLYGON

    type: Literal["multipolygon"] = TYPE_MULTI_POLYGON
    coordinates: MultiPolygonCoords


class Envelope(_GeometryBase):
    """Bounding rectangle given by its upper left and lower right corners."""

    geometry_type: ClassVar[str] = TYPE_ENVELOPE

    type: Literal["envelope"] = TYPE_ENVELOPE
    coordinates: EnvelopeCoords

    @property
    def upper_left(self: Envelope) -> list[float]:
        return self.coordinates[0]

    @property
    def lower_right(self: Envelope) -> list[float]:
        return self.coordinates[1]


class Circle(_GeometryBase):
    """Circle around a center point, radius keeps its unit suffix (e.g. ``25m``)."""

    geometry_type: ClassVar[str] = TYPE_CIRCLE

    type: Literal["circle"] = TYPE_CIRCLE
    radius: str = ""
    coordinates: Position

    @classmethod
    def _payload(cls, raw: RawGeometry) -> dict[str, Any]:
        return {
            "type": raw.type,
            "radius": raw.radius or "",
            "coordinates": raw.coordinates,
        }


def new_point(coordinates: Position) -> Point:
    return Point(coordinates=coordinates)


def new_multi_point(coordinates: MultiPointCoords) -> MultiPoint:
    return MultiPoint(coordinates=coordinates)


def new_line_string(coordinates: LineStringCoords) -> LineString:
    return LineString(coordinates=coordinates)


def new_multi_line_string(coordinates: MultiLineStringCoords) -> MultiLineString:
    return MultiLineString(coordinates=coordinates)


def new_polygon(coordinates: PolygonCoords) -> Polygon:
    return Polygon(coordinates=coordinates)


def new_multi_polygon(coordinates: MultiPolygonCoords) -> MultiPolygon:
    return MultiPolygon(coordinates=coordinates)


def new_envelope(coordinates: EnvelopeCoords) -> Envelope:
    return Envelope(coordinates=coordinates)


def new_circle(radius: str, coordinates: Position) -> Circle:
    return Circle(radius=radius, coordinates=coordinates)
