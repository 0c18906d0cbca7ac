"""Shape, a geometry whose variant is only known once it is decoded.

A Shape holds a type tag and a single geometry slot. It starts unset (empty
tag, no geometry) and is set once, either by a builder option or by decoding.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, model_serializer, model_validator

from search_geo.collection import Geometry, GeometryCollection, decode_geometry
from search_geo.constants import (
    TYPE_CIRCLE,
    TYPE_ENVELOPE,
    TYPE_GEOMETRY_COLLECTION,
    TYPE_LINE_STRING,
    TYPE_MULTI_LINE_STRING,
    TYPE_MULTI_POINT,
    TYPE_MULTI_POLYGON,
    TYPE_POINT,
    TYPE_POLYGON,
)
from search_geo.geometries import (
    Circle,
    Envelope,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from search_geo.models import EncodeError
from search_geo.raw import RawGeometry, parse_envelope

logger = logging.getLogger(__name__)

Option = Callable[["Shape"], None]


class Shape(BaseModel):
    type: str = ""
    geometry: Geometry | None = None

    @model_validator(mode="before")
    @classmethod
    def decode_wire_object(cls, data: Any) -> Any:  # noqa: ANN401, ANN102
        # a geometry object as it appears in a document, e.g. {"type": "point", "coordinates": [..]}
        if isinstance(data, dict) and data and "geometry" not in data:
            raw = parse_envelope(data)
            return {"type": raw.type, "geometry": decode_geometry(raw)}
        return data

    @model_serializer
    def encode_wire_object(self: Shape) -> dict[str, Any]:
        return self._active().to_dict()

    def set_geometry(self: Shape, geometry: Geometry) -> None:
        """Make ``geometry`` the active variant, tag and slot change together."""
        if self.geometry is not None:
            logger.warning(f"shape already set to {self.type}, replacing it with {geometry.type}")
        self.type = geometry.type
        self.geometry = geometry

    def _is(self: Shape, geometry_type: str, geometry_cls: type) -> bool:
        return self.type == geometry_type and isinstance(self.geometry, geometry_cls)

    def is_point(self: Shape) -> bool:
        return self._is(TYPE_POINT, Point)

    def is_multi_point(self: Shape) -> bool:
        return self._is(TYPE_MULTI_POINT, MultiPoint)

    def is_line_string(self: Shape) -> bool:
        return self._is(TYPE_LINE_STRING, LineString)

    def is_multi_line_string(self: Shape) -> bool:
        return self._is(TYPE_MULTI_LINE_STRING, MultiLineString)

    def is_polygon(self: Shape) -> bool:
        return self._is(TYPE_POLYGON, Polygon)

    def is_multi_polygon(self: Shape) -> bool:
        return self._is(TYPE_MULTI_POLYGON, MultiPolygon)

    def is_geometry_collection(self: Shape) -> bool:
        return self._is(TYPE_GEOMETRY_COLLECTION, GeometryCollection)

    def is_envelope(self: Shape) -> bool:
        return self._is(TYPE_ENVELOPE, Envelope)

    def is_circle(self: Shape) -> bool:
        return self._is(TYPE_CIRCLE, Circle)

    @property
    def point(self: Shape) -> Point | None:
        return self.geometry if self.is_point() else None  # type: ignore

    @property
    def multi_point(self: Shape) -> MultiPoint | None:
        return self.geometry if self.is_multi_point() else None  # type: ignore

    @property
    def line_string(self: Shape) -> LineString | None:
        return self.geometry if self.is_line_string() else None  # type: ignore

    @property
    def multi_line_string(self: Shape) -> MultiLineString | None:
        return self.geometry if self.is_multi_line_string() else None  # type: ignore

    @property
    def polygon(self: Shape) -> Polygon | None:
        return self.geometry if self.is_polygon() else None  # type: ignore

    @property
    def multi_polygon(self: Shape) -> MultiPolygon | None:
        return self.geometry if self.is_multi_polygon() else None  # type: ignore

    @property
    def geometry_collection(self: Shape) -> GeometryCollection | None:
        return self.geometry if self.is_geometry_collection() else None  # type: ignore

    @property
    def envelope(self: Shape) -> Envelope | None:
        return self.geometry if self.is_envelope() else None  # type: ignore

    @property
    def circle(self: Shape) -> Circle | None:
        return self.geometry if self.is_circle() else None  # type: ignore

    def _active(self: Shape) -> Geometry:
        predicates = (
            self.is_point,
            self.is_multi_point,
            self.is_line_string,
            self.is_multi_line_string,
            self.is_polygon,
            self.is_multi_polygon,
            self.is_geometry_collection,
            self.is_envelope,
            self.is_circle,
        )
        if any(predicate() for predicate in predicates):
            return self.geometry  # type: ignore
        raise EncodeError(self.type)

    def to_dict(self: Shape) -> dict[str, Any]:
        """Encode the active variant.

        Raises:
            EncodeError: shape is unset or its tag does not match its geometry
        """
        return self._active().to_dict()

    def to_json(self: Shape) -> str:
        return self._active().to_json()

    @classmethod
    def decode(cls, raw: RawGeometry) -> Shape:  # noqa: ANN102
        shape = cls()
        shape.set_geometry(decode_geometry(raw))
        return shape

    @classmethod
    def from_json(cls, data: str | bytes | bytearray | dict[str, Any]) -> Shape:  # noqa: ANN102
        return cls.decode(parse_envelope(data))


def new_shape(*options: Option) -> Shape:
    """Create a shape and apply the builder options in order, the last one wins."""
    shape = Shape()
    for option in options:
        option(shape)
    return shape
