import pytest
from geojson_pydantic import GeometryCollection as GjGeometryCollection
from geojson_pydantic import LineString as GjLineString
from geojson_pydantic import Point as GjPoint
from geojson_pydantic import Polygon as GjPolygon
from shapely import GeometryCollection as ShpGeometryCollection
from shapely.geometry import LineString as ShpLineString
from shapely.geometry import MultiPolygon as ShpMultiPolygon
from shapely.geometry import Point as ShpPoint
from shapely.geometry import Polygon as ShpPolygon

from search_geo.collection import GeometryCollection, geometry_from_json, new_geometry_collection
from search_geo.convert import (
    envelope_to_ring,
    from_geojson,
    from_mapping,
    from_shapely,
    to_geojson,
    to_shapely,
)
from search_geo.geometries import new_circle, new_envelope, new_line_string, new_point
from search_geo.models import UnknownGeometryTypeError, UnsupportedGeometryError
from tests.util import read_data


@pytest.mark.parametrize(
    "filename",
    [
        "point.json",
        "multipoint.json",
        "linestring.json",
        "multilinestring.json",
        "polygon.json",
        "polygon-with-holes.json",
        "multipolygon.json",
        "geometrycollection.json",
    ],
)
def test_geojson_round_trip(filename):
    geometry = geometry_from_json(read_data(filename))

    geojson = to_geojson(geometry)

    assert geojson.type.lower() == geometry.type
    assert from_geojson(geojson) == geometry


def test_to_geojson_point():
    assert to_geojson(new_point([100.0, 0.0])) == GjPoint(type="Point", coordinates=(100.0, 0.0))


def test_to_geojson_geometry_collection():
    collection = new_geometry_collection([new_point([100.0, 0.0]), new_line_string([[101.0, 0.0], [102.0, 1.0]])])

    geojson = to_geojson(collection)

    assert isinstance(geojson, GjGeometryCollection)
    assert isinstance(geojson.geometries[0], GjPoint)
    assert isinstance(geojson.geometries[1], GjLineString)


def test_envelope_to_ring():
    envelope = new_envelope([[100.0, 1.0], [101.0, 0.0]])

    assert envelope_to_ring(envelope) == [
        [100.0, 0.0],
        [101.0, 0.0],
        [101.0, 1.0],
        [100.0, 1.0],
        [100.0, 0.0],
    ]


def test_envelope_to_geojson_polygon(envelope_json):
    geojson = to_geojson(geometry_from_json(envelope_json))

    assert isinstance(geojson, GjPolygon)
    assert from_geojson(geojson) == geometry_from_json(read_data("polygon.json"))


def test_circle_has_no_geojson(circle_json):
    with pytest.raises(UnsupportedGeometryError):
        to_geojson(geometry_from_json(circle_json))

    with pytest.raises(UnsupportedGeometryError):
        to_geojson(new_geometry_collection([new_circle("1km", [1.0, 2.0])]))


def test_from_mapping_is_case_insensitive():
    assert from_mapping({"type": "Point", "coordinates": (4.89, 52.37)}) == new_point([4.89, 52.37])


def test_from_mapping_unknown_type():
    with pytest.raises(UnknownGeometryTypeError):
        from_mapping({"type": "Hexagon", "coordinates": []})


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("point.json", ShpPoint),
        ("linestring.json", ShpLineString),
        ("polygon-with-holes.json", ShpPolygon),
        ("multipolygon.json", ShpMultiPolygon),
        ("envelope.json", ShpPolygon),
        ("geometrycollection.json", ShpGeometryCollection),
    ],
)
def test_to_shapely(filename, expected):
    assert isinstance(to_shapely(geometry_from_json(read_data(filename))), expected)


def test_envelope_to_shapely_bounds(envelope_json):
    assert to_shapely(geometry_from_json(envelope_json)).bounds == (100.0, 0.0, 101.0, 1.0)


def test_from_shapely():
    collection = from_shapely(ShpGeometryCollection([ShpPoint(100.0, 0.0), ShpLineString([(101.0, 0.0), (102.0, 1.0)])]))

    assert isinstance(collection, GeometryCollection)
    assert collection == geometry_from_json(read_data("geometrycollection.json"))
