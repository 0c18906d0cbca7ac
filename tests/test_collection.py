import json

import pytest
from pydantic import ValidationError

from search_geo.collection import (
    GeometryCollection,
    decode_geometry,
    geometry_from_json,
    new_geometry_collection,
)
from search_geo.geometries import (
    Circle,
    Envelope,
    LineString,
    Point,
    new_circle,
    new_envelope,
    new_line_string,
    new_point,
)
from search_geo.models import (
    CollectionDepthExceededError,
    DecodeError,
    JSONNestingLimitError,
    MalformedJSONError,
    UnknownGeometryTypeError,
)
from search_geo.raw import parse_envelope
from tests.util import assert_json_eq, not_raises


def nested_collection(depth: int) -> dict:
    doc: dict = {"type": "point", "coordinates": [1.0, 2.0]}
    for _ in range(depth):
        doc = {"type": "geometrycollection", "geometries": [doc]}
    return doc


def test_decode_geometry_collection(geometry_collection_json):
    collection = GeometryCollection.from_json(geometry_collection_json)

    assert collection.type == "geometrycollection"
    assert len(collection.geometries) == 2
    assert isinstance(collection.geometries[0], Point)
    assert collection.geometries[0].coordinates == [100.0, 0.0]
    assert isinstance(collection.geometries[1], LineString)
    assert len(collection.geometries[1].coordinates) == 2


def test_encode_geometry_collection(geometry_collection_json):
    collection = new_geometry_collection(
        [
            new_point([100.0, 0.0]),
            new_line_string([[101.0, 0.0], [102.0, 1.0]]),
        ]
    )

    assert_json_eq(geometry_collection_json, collection.to_json())


def test_decode_nested_geometry_collection(geometry_collection_nested_json):
    collection = GeometryCollection.from_json(geometry_collection_nested_json)

    expected = new_geometry_collection(
        [
            new_circle("100m", [4.89, 52.37]),
            new_geometry_collection(
                [
                    new_envelope([[100.0, 1.0], [101.0, 0.0]]),
                    new_geometry_collection([]),
                ]
            ),
        ]
    )
    assert collection == expected
    assert isinstance(collection.geometries[0], Circle)
    assert isinstance(collection.geometries[1].geometries[0], Envelope)


def test_encode_nested_geometry_collection(geometry_collection_nested_json):
    collection = GeometryCollection.from_json(geometry_collection_nested_json)

    assert_json_eq(geometry_collection_nested_json, collection.to_json())


@pytest.mark.parametrize(
    "data",
    [
        '{"type":"geometrycollection","geometries":[]}',
        '{"type":"geometrycollection"}',
    ],
)
def test_empty_geometry_collection(data):
    collection = GeometryCollection.from_json(data)

    assert collection.geometries == []
    assert collection.to_dict() == {"type": "geometrycollection", "geometries": []}


def test_member_order_is_preserved():
    members = [
        {"type": "linestring", "coordinates": [[1.0, 1.0], [2.0, 2.0]]},
        {"type": "point", "coordinates": [3.0, 3.0]},
        {"type": "envelope", "coordinates": [[0.0, 1.0], [1.0, 0.0]]},
        {"type": "point", "coordinates": [4.0, 4.0]},
    ]
    collection = GeometryCollection.from_json({"type": "geometrycollection", "geometries": members})

    assert [x.type for x in collection.geometries] == [
        "linestring",
        "point",
        "envelope",
        "point",
    ]
    assert collection.to_dict()["geometries"] == members


def test_unknown_member_type_names_the_member():
    data = {
        "type": "geometrycollection",
        "geometries": [
            {"type": "point", "coordinates": [1.0, 2.0]},
            {"type": "hexagon", "coordinates": []},
        ],
    }

    with pytest.raises(UnknownGeometryTypeError) as exc_info:
        GeometryCollection.from_json(data)

    assert exc_info.value.geometry_type == "hexagon"


def test_invalid_member_aborts_decode():
    data = {
        "type": "geometrycollection",
        "geometries": [
            {"type": "point", "coordinates": [1.0, 2.0]},
            {"type": "point", "coordinates": [[1.0, 2.0]]},
        ],
    }

    with pytest.raises(ValidationError):
        GeometryCollection.from_json(data)


def test_decode_geometry_dispatches_on_tag(circle_json):
    geometry = decode_geometry(parse_envelope(circle_json))

    assert geometry == new_circle("25m", [-109.874838, 44.43955])


def test_geometry_from_json(geometry_collection_json):
    assert isinstance(geometry_from_json(geometry_collection_json), GeometryCollection)


def test_geometry_from_json_unknown_type():
    with pytest.raises(UnknownGeometryTypeError):
        geometry_from_json('{"type":"hexagon","coordinates":[]}')


def test_depth_limit(max_collection_depth):
    max_collection_depth(3)

    with not_raises(DecodeError):
        GeometryCollection.from_json(nested_collection(3))

    with pytest.raises(CollectionDepthExceededError) as exc_info:
        GeometryCollection.from_json(nested_collection(4))
    assert exc_info.value.max_depth == 3


def test_depth_limit_disabled(max_collection_depth):
    max_collection_depth(0)

    collection = GeometryCollection.from_json(nested_collection(100))

    for _ in range(99):
        collection = collection.geometries[0]
    assert collection.geometries == [new_point([1.0, 2.0])]


def test_default_depth_limit():
    with pytest.raises(CollectionDepthExceededError):
        GeometryCollection.from_json(nested_collection(65))


def test_json_text_nested_past_parser_limit(max_collection_depth):
    max_collection_depth(0)

    with pytest.raises(JSONNestingLimitError) as exc_info:
        GeometryCollection.from_json(json.dumps(nested_collection(100)))

    assert isinstance(exc_info.value, CollectionDepthExceededError)
    assert not isinstance(exc_info.value, MalformedJSONError)
    assert exc_info.value.max_depth == 200


def test_json_text_nested_within_parser_limit(max_collection_depth):
    max_collection_depth(0)

    collection = GeometryCollection.from_json(json.dumps(nested_collection(90)))

    for _ in range(89):
        collection = collection.geometries[0]
    assert collection.geometries == [new_point([1.0, 2.0])]
