from typing import Any

from pydantic import BaseModel

from search_geo.geo_point import GeoPoint
from search_geo.geometries import Envelope, new_envelope


class GeoBoundsAggregation:
    """Metric aggregation computing the bounding box of all geo values of a field."""

    def __init__(self: "GeoBoundsAggregation") -> None:
        self._field: str | None = None
        self._script: str | None = None
        self._params: dict[str, Any] = {}
        self._wrap_longitude: bool | None = None
        self._meta: dict[str, Any] = {}

    def field(self: "GeoBoundsAggregation", field: str) -> "GeoBoundsAggregation":
        self._field = field
        return self

    def script(self: "GeoBoundsAggregation", script: str) -> "GeoBoundsAggregation":
        self._script = script
        return self

    def param(self: "GeoBoundsAggregation", name: str, value: Any) -> "GeoBoundsAggregation":  # noqa: ANN401
        self._params[name] = value
        return self

    def wrap_longitude(self: "GeoBoundsAggregation", wrap_longitude: bool) -> "GeoBoundsAggregation":
        self._wrap_longitude = wrap_longitude
        return self

    def meta(self: "GeoBoundsAggregation", meta: dict[str, Any]) -> "GeoBoundsAggregation":
        self._meta = meta
        return self

    def source(self: "GeoBoundsAggregation") -> dict[str, Any]:
        opts: dict[str, Any] = {}
        if self._field:
            opts["field"] = self._field
        if self._script:
            opts["script"] = self._script
        if self._params:
            opts["params"] = self._params
        if self._wrap_longitude is not None:
            opts["wrap_longitude"] = self._wrap_longitude

        source: dict[str, Any] = {"geo_bounds": opts}
        if self._meta:
            source["meta"] = self._meta
        return source


class GeoBounds(BaseModel):
    top_left: GeoPoint
    bottom_right: GeoPoint


class GeoBoundsResult(BaseModel):
    """geo_bounds aggregation result, bounds are absent when no document had a value."""

    bounds: GeoBounds | None = None
    meta: dict[str, Any] | None = None

    def to_envelope(self: "GeoBoundsResult") -> Envelope | None:
        if self.bounds is None:
            return None
        return new_envelope(
            [
                self.bounds.top_left.to_point().coordinates,
                self.bounds.bottom_right.to_point().coordinates,
            ]
        )
