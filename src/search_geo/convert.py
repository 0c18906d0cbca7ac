"""Conversion between the search engine geometries and the GeoJSON (RFC 7946) / shapely world."""

from typing import Any

from geojson_pydantic import GeometryCollection as GjGeometryCollection
from geojson_pydantic import LineString as GjLineString
from geojson_pydantic import MultiLineString as GjMultiLineString
from geojson_pydantic import MultiPoint as GjMultiPoint
from geojson_pydantic import MultiPolygon as GjMultiPolygon
from geojson_pydantic import Point as GjPoint
from geojson_pydantic import Polygon as GjPolygon
from geojson_pydantic.geometries import Geometry as GjGeometry
from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry

from search_geo.collection import (
    Geometry,
    GeometryCollection,
    decode_geometry,
    new_geometry_collection,
)
from search_geo.constants import (
    TYPE_CIRCLE,
    TYPE_GEOMETRY_COLLECTION,
    TYPE_LINE_STRING,
    TYPE_MULTI_LINE_STRING,
    TYPE_MULTI_POINT,
    TYPE_MULTI_POLYGON,
    TYPE_POINT,
    TYPE_POLYGON,
)
from search_geo.geometries import Envelope
from search_geo.models import UnsupportedGeometryError
from search_geo.raw import RawGeometry

GEOJSON_CLASSES: dict[str, Any] = {
    TYPE_POINT: GjPoint,
    TYPE_MULTI_POINT: GjMultiPoint,
    TYPE_LINE_STRING: GjLineString,
    TYPE_MULTI_LINE_STRING: GjMultiLineString,
    TYPE_POLYGON: GjPolygon,
    TYPE_MULTI_POLYGON: GjMultiPolygon,
}


def _as_lists(coordinates: Any) -> Any:  # noqa: ANN401
    if isinstance(coordinates, list | tuple):
        return [_as_lists(x) for x in coordinates]
    return coordinates


def envelope_to_ring(envelope: Envelope) -> list[list[float]]:
    """Closed, counterclockwise ring around the bounding rectangle of an envelope."""
    x1, y1 = envelope.upper_left[:2]
    x2, y2 = envelope.lower_right[:2]
    return [[x1, y2], [x2, y2], [x2, y1], [x1, y1], [x1, y2]]


def to_geojson(geometry: Geometry) -> GjGeometry | GjGeometryCollection:
    """Convert a geometry to its geojson_pydantic counterpart.

    Envelopes become rectangular polygons, circles have no GeoJSON
    representation and raise UnsupportedGeometryError.
    """
    if isinstance(geometry, GeometryCollection):
        return GjGeometryCollection(
            type="GeometryCollection",
            geometries=[to_geojson(x) for x in geometry.geometries],
        )
    if isinstance(geometry, Envelope):
        return GjPolygon(type="Polygon", coordinates=[envelope_to_ring(geometry)])
    if geometry.type == TYPE_CIRCLE:
        raise UnsupportedGeometryError(geometry.type, "GeoJSON")
    gj_class = GEOJSON_CLASSES[geometry.type]
    return gj_class(type=gj_class.__name__, coordinates=geometry.coordinates)


def from_mapping(geometry: dict[str, Any]) -> Geometry:
    """Read a GeoJSON geometry object, type names are matched case insensitive."""
    geometry_type = str(geometry.get("type", "")).lower()
    if geometry_type == TYPE_GEOMETRY_COLLECTION:
        return new_geometry_collection([from_mapping(x) for x in geometry.get("geometries") or []])
    return decode_geometry(
        RawGeometry(
            type=geometry_type,
            coordinates=_as_lists(geometry.get("coordinates")),
        )
    )


def from_geojson(geometry: GjGeometry | GjGeometryCollection) -> Geometry:
    return from_mapping(geometry.model_dump())


def to_shapely(geometry: Geometry) -> BaseGeometry:
    return shape(to_geojson(geometry))


def from_shapely(geometry: BaseGeometry) -> Geometry:
    return from_mapping(mapping(geometry))  # type: ignore
