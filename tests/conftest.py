import pytest

from tests.util import read_data


@pytest.fixture()
def point_json():
    return read_data("point.json")


@pytest.fixture()
def geometry_collection_json():
    return read_data("geometrycollection.json")


@pytest.fixture()
def geometry_collection_nested_json():
    return read_data("geometrycollection-nested.json")


@pytest.fixture()
def envelope_json():
    return read_data("envelope.json")


@pytest.fixture()
def circle_json():
    return read_data("circle.json")


@pytest.fixture()
def max_collection_depth(monkeypatch):
    from search_geo.settings import geo_settings

    def _set(depth: int) -> None:
        monkeypatch.setattr(geo_settings, "max_collection_depth", depth)

    return _set
