"""Query builders that carry geometries and geo points in a search request body."""

from typing import Any

from search_geo.collection import Geometry
from search_geo.geo_point import GeoPoint
from search_geo.models import EncodeError, IncompleteQueryError
from search_geo.options import with_point, with_polygon
from search_geo.shape import Shape, new_shape
from search_geo.types import PolygonCoords


class GeoShapeQuery:
    """Matches documents whose geo_shape field relates to the given shape.

    For more details, see:
    https://www.elastic.co/guide/en/elasticsearch/reference/current/query-dsl-geo-shape-query.html
    """

    def __init__(self: "GeoShapeQuery", name: str) -> None:
        self.name = name
        self._shape: Shape | None = None
        self._relation: str | None = None
        self._query_name: str | None = None
        self._ignore_unmapped: bool | None = None

    def shape(self: "GeoShapeQuery", shape: Shape | Geometry) -> "GeoShapeQuery":
        if not isinstance(shape, Shape):
            geometry = shape
            shape = Shape()
            shape.set_geometry(geometry)
        self._shape = shape
        return self

    def set_point(self: "GeoShapeQuery", lat: float, lon: float) -> "GeoShapeQuery":
        self._shape = new_shape(with_point([lon, lat]))
        return self

    def set_polygon(self: "GeoShapeQuery", coordinates: PolygonCoords) -> "GeoShapeQuery":
        self._shape = new_shape(with_polygon(coordinates))
        return self

    def relation(self: "GeoShapeQuery", relation: str) -> "GeoShapeQuery":
        self._relation = relation
        return self

    def query_name(self: "GeoShapeQuery", query_name: str) -> "GeoShapeQuery":
        self._query_name = query_name
        return self

    def ignore_unmapped(self: "GeoShapeQuery", ignore_unmapped: bool) -> "GeoShapeQuery":
        self._ignore_unmapped = ignore_unmapped
        return self

    def source(self: "GeoShapeQuery") -> dict[str, Any]:
        # {
        #   "geo_shape": {
        #     "location": {"shape": {...}, "relation": "within"},
        #     "_name": "..."
        #   }
        # }
        if self._shape is None:
            raise EncodeError("")
        field: dict[str, Any] = {"shape": self._shape.to_dict()}
        if self._relation:
            field["relation"] = self._relation

        params: dict[str, Any] = {self.name: field}
        if self._ignore_unmapped is not None:
            params["ignore_unmapped"] = self._ignore_unmapped
        if self._query_name:
            params["_name"] = self._query_name
        return {"geo_shape": params}


class GeoBoundingBoxQuery:
    """Matches geo points that fall inside a bounding box.

    Corners are given as latitude and longitude and emitted as GeoJSON
    ``[lon, lat]`` pairs, a geohash string may be used instead. A WKT box
    takes precedence over the corners.
    """

    def __init__(self: "GeoBoundingBoxQuery", name: str) -> None:
        self.name = name
        self._top_left: list[float] | str | None = None
        self._top_right: list[float] | str | None = None
        self._bottom_left: list[float] | str | None = None
        self._bottom_right: list[float] | str | None = None
        self._wkt: str | None = None
        self._type: str | None = None
        self._validation_method: str | None = None
        self._ignore_unmapped: bool | None = None
        self._query_name: str | None = None

    def top_left(self: "GeoBoundingBoxQuery", top: float, left: float) -> "GeoBoundingBoxQuery":
        self._top_left = [left, top]
        return self

    def top_left_from_geo_point(self: "GeoBoundingBoxQuery", point: GeoPoint) -> "GeoBoundingBoxQuery":
        return self.top_left(point.lat, point.lon)

    def top_left_from_geo_hash(self: "GeoBoundingBoxQuery", geo_hash: str) -> "GeoBoundingBoxQuery":
        self._top_left = geo_hash
        return self

    def top_right(self: "GeoBoundingBoxQuery", top: float, right: float) -> "GeoBoundingBoxQuery":
        self._top_right = [right, top]
        return self

    def top_right_from_geo_point(self: "GeoBoundingBoxQuery", point: GeoPoint) -> "GeoBoundingBoxQuery":
        return self.top_right(point.lat, point.lon)

    def top_right_from_geo_hash(self: "GeoBoundingBoxQuery", geo_hash: str) -> "GeoBoundingBoxQuery":
        self._top_right = geo_hash
        return self

    def bottom_left(self: "GeoBoundingBoxQuery", bottom: float, left: float) -> "GeoBoundingBoxQuery":
        self._bottom_left = [left, bottom]
        return self

    def bottom_left_from_geo_point(self: "GeoBoundingBoxQuery", point: GeoPoint) -> "GeoBoundingBoxQuery":
        return self.bottom_left(point.lat, point.lon)

    def bottom_left_from_geo_hash(self: "GeoBoundingBoxQuery", geo_hash: str) -> "GeoBoundingBoxQuery":
        self._bottom_left = geo_hash
        return self

    def bottom_right(self: "GeoBoundingBoxQuery", bottom: float, right: float) -> "GeoBoundingBoxQuery":
        self._bottom_right = [right, bottom]
        return self

    def bottom_right_from_geo_point(self: "GeoBoundingBoxQuery", point: GeoPoint) -> "GeoBoundingBoxQuery":
        return self.bottom_right(point.lat, point.lon)

    def bottom_right_from_geo_hash(self: "GeoBoundingBoxQuery", geo_hash: str) -> "GeoBoundingBoxQuery":
        self._bottom_right = geo_hash
        return self

    def wkt(self: "GeoBoundingBoxQuery", wkt: str) -> "GeoBoundingBoxQuery":
        self._wkt = wkt
        return self

    def type(self: "GeoBoundingBoxQuery", type_: str) -> "GeoBoundingBoxQuery":
        self._type = type_
        return self

    def validation_method(self: "GeoBoundingBoxQuery", method: str) -> "GeoBoundingBoxQuery":
        self._validation_method = method
        return self

    def ignore_unmapped(self: "GeoBoundingBoxQuery", ignore_unmapped: bool) -> "GeoBoundingBoxQuery":
        self._ignore_unmapped = ignore_unmapped
        return self

    def query_name(self: "GeoBoundingBoxQuery", query_name: str) -> "GeoBoundingBoxQuery":
        self._query_name = query_name
        return self

    def source(self: "GeoBoundingBoxQuery") -> dict[str, Any]:
        box: dict[str, Any] = {}
        if self._wkt is not None:
            box["wkt"] = self._wkt
        else:
            corners = {
                "top_left": self._top_left,
                "top_right": self._top_right,
                "bottom_left": self._bottom_left,
                "bottom_right": self._bottom_right,
            }
            box.update({k: v for k, v in corners.items() if v is not None})

        params: dict[str, Any] = {self.name: box}
        if self._type:
            params["type"] = self._type
        if self._validation_method:
            params["validation_method"] = self._validation_method
        if self._ignore_unmapped is not None:
            params["ignore_unmapped"] = self._ignore_unmapped
        if self._query_name:
            params["_name"] = self._query_name
        return {"geo_bounding_box": params}


class GeoDistanceQuery:
    """Matches geo points within a distance of a central point."""

    def __init__(self: "GeoDistanceQuery", name: str) -> None:
        self.name = name
        self._location: dict[str, float] | str | None = None
        self._distance: str | None = None
        self._distance_type: str | None = None
        self._validation_method: str | None = None
        self._query_name: str | None = None

    def point(self: "GeoDistanceQuery", lat: float, lon: float) -> "GeoDistanceQuery":
        self._location = {"lat": lat, "lon": lon}
        return self

    def geo_point(self: "GeoDistanceQuery", point: GeoPoint) -> "GeoDistanceQuery":
        self._location = point.source()
        return self

    def geo_hash(self: "GeoDistanceQuery", geo_hash: str) -> "GeoDistanceQuery":
        self._location = geo_hash
        return self

    def distance(self: "GeoDistanceQuery", distance: str) -> "GeoDistanceQuery":
        self._distance = distance
        return self

    def distance_type(self: "GeoDistanceQuery", distance_type: str) -> "GeoDistanceQuery":
        self._distance_type = distance_type
        return self

    def validation_method(self: "GeoDistanceQuery", method: str) -> "GeoDistanceQuery":
        self._validation_method = method
        return self

    def query_name(self: "GeoDistanceQuery", query_name: str) -> "GeoDistanceQuery":
        self._query_name = query_name
        return self

    def source(self: "GeoDistanceQuery") -> dict[str, Any]:
        if self._location is None:
            raise IncompleteQueryError(f"geo: geo_distance query on {self.name} has no location")
        params: dict[str, Any] = {}
        if self._distance:
            params["distance"] = self._distance
        if self._distance_type:
            params["distance_type"] = self._distance_type
        if self._validation_method:
            params["validation_method"] = self._validation_method
        if self._query_name:
            params["_name"] = self._query_name
        params[self.name] = self._location
        return {"geo_distance": params}
