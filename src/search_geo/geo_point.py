from pydantic import BaseModel

from search_geo.geometries import Point, new_point
from search_geo.models import InvalidGeoPointError


class GeoPoint(BaseModel):
    """Geographic position described by latitude and longitude."""

    lat: float
    lon: float

    @classmethod
    def from_lat_lon(cls, lat: float, lon: float) -> "GeoPoint":  # noqa: ANN102
        return cls(lat=lat, lon=lon)

    @classmethod
    def from_string(cls, lat_lon: str) -> "GeoPoint":  # noqa: ANN102
        """Parse a point formatted as "{latitude},{longitude}", e.g. "40.10210,-70.12091"."""
        parts = lat_lon.split(",", 1)
        # plain decimal numbers only, no surrounding whitespace or digit separators
        if len(parts) != 2 or any(x != x.strip() or "_" in x for x in parts):  # noqa: PLR2004
            raise InvalidGeoPointError(f"geo: {lat_lon} is not a valid geo point string")
        try:
            lat, lon = (float(x) for x in parts)
        except ValueError as e:
            raise InvalidGeoPointError(f"geo: {lat_lon} is not a valid geo point string") from e
        return cls(lat=lat, lon=lon)

    def source(self: "GeoPoint") -> dict[str, float]:
        return {"lat": self.lat, "lon": self.lon}

    def to_point(self: "GeoPoint") -> Point:
        # GeoJSON positions are longitude first
        return new_point([self.lon, self.lat])
