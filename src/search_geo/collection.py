from __future__ import annotations

import logging
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import Field

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
    _GeometryBase,
    check_geometry_type,
)
from search_geo.models import CollectionDepthExceededError, UnknownGeometryTypeError
from search_geo.raw import RawGeometry, parse_envelope
from search_geo.settings import geo_settings

logger = logging.getLogger(__name__)

Geometry = Annotated[
    Union[  # noqa: UP007
        Point,
        MultiPoint,
        LineString,
        MultiLineString,
        Polygon,
        MultiPolygon,
        "GeometryCollection",
        Envelope,
        Circle,
    ],
    Field(discriminator="type"),
]


class GeometryCollection(_GeometryBase):
    """Ordered, heterogeneous list of geometries, collections may be nested."""

    geometry_type: ClassVar[str] = TYPE_GEOMETRY_COLLECTION

    type: Literal["geometrycollection"] = TYPE_GEOMETRY_COLLECTION
    geometries: list[Geometry] = []

    @classmethod
    def decode(cls, raw: RawGeometry, depth: int = 0) -> GeometryCollection:
        check_geometry_type(cls.geometry_type, raw.type)
        max_depth = geo_settings.max_collection_depth
        if max_depth and depth >= max_depth:
            raise CollectionDepthExceededError(max_depth)
        # first failing member aborts the whole collection
        geometries = [decode_geometry(member, depth + 1) for member in raw.geometries or []]
        return cls(geometries=geometries)


GeometryCollection.model_rebuild()

GEOMETRY_CLASSES: dict[str, type[_GeometryBase]] = {
    TYPE_POINT: Point,
    TYPE_MULTI_POINT: MultiPoint,
    TYPE_LINE_STRING: LineString,
    TYPE_MULTI_LINE_STRING: MultiLineString,
    TYPE_POLYGON: Polygon,
    TYPE_MULTI_POLYGON: MultiPolygon,
    TYPE_GEOMETRY_COLLECTION: GeometryCollection,
    TYPE_ENVELOPE: Envelope,
    TYPE_CIRCLE: Circle,
}


def decode_geometry(raw: RawGeometry, depth: int = 0) -> Geometry:
    """Materialize the variant named by the tag of an envelope."""
    geometry_cls = GEOMETRY_CLASSES.get(raw.type)
    if geometry_cls is None:
        raise UnknownGeometryTypeError(raw.type)
    logger.debug(f"decoding {raw.type} at depth {depth}")
    return geometry_cls.decode(raw, depth)


def geometry_from_json(data: str | bytes | bytearray | dict[str, Any]) -> Geometry:
    return decode_geometry(parse_envelope(data))


def new_geometry_collection(geometries: list[Geometry]) -> GeometryCollection:
    return GeometryCollection(geometries=geometries)
