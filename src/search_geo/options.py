from search_geo.collection import Geometry, new_geometry_collection
from search_geo.geometries import (
    new_circle,
    new_envelope,
    new_line_string,
    new_multi_line_string,
    new_multi_point,
    new_multi_polygon,
    new_point,
    new_polygon,
)
from search_geo.shape import Option, Shape
from search_geo.types import (
    EnvelopeCoords,
    LineStringCoords,
    MultiLineStringCoords,
    MultiPointCoords,
    MultiPolygonCoords,
    PolygonCoords,
    Position,
)


def with_point(coordinates: Position) -> Option:
    def _option(shape: Shape) -> None:
        shape.set_geometry(new_point(coordinates))

    return _option


def with_multi_point(coordinates: MultiPointCoords) -> Option:
    def _option(shape: Shape) -> None:
        shape.set_geometry(new_multi_point(coordinates))

    return _option


def with_line_string(coordinates: LineStringCoords) -> Option:
    def _option(shape: Shape) -> None:
        shape.set_geometry(new_line_string(coordinates))

    return _option


def with_multi_line_string(coordinates: MultiLineStringCoords) -> Option:
    def _option(shape: Shape) -> None:
        shape.set_geometry(new_multi_line_string(coordinates))

    return _option


def with_polygon(coordinates: PolygonCoords) -> Option:
    def _option(shape: Shape) -> None:
        shape.set_geometry(new_polygon(coordinates))

    return _option


def with_multi_polygon(coordinates: MultiPolygonCoords) -> Option:
    def _option(shape: Shape) -> None:
        shape.set_geometry(new_multi_polygon(coordinates))

    return _option


def with_geometry_collection(geometries: list[Geometry]) -> Option:
    def _option(shape: Shape) -> None:
        shape.set_geometry(new_geometry_collection(geometries))

    return _option


def with_envelope(coordinates: EnvelopeCoords) -> Option:
    def _option(shape: Shape) -> None:
        shape.set_geometry(new_envelope(coordinates))

    return _option


def with_circle(radius: str, coordinates: Position) -> Option:
    def _option(shape: Shape) -> None:
        shape.set_geometry(new_circle(radius, coordinates))

    return _option
