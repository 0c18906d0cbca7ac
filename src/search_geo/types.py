from typing import Annotated, TypeAlias

from pydantic import Field, StrictFloat, StrictInt

from search_geo.constants import (
    ENVELOPE_POSITIONS,
    MIN_LINE_STRING_LENGTH,
    MIN_POSITION_LENGTH,
)

# ints are valid JSON numbers for a coordinate, bools and strings are not
Coordinate: TypeAlias = StrictFloat | StrictInt  # noqa: UP040

Position = Annotated[list[Coordinate], Field(min_length=MIN_POSITION_LENGTH)]
MultiPointCoords = list[Position]
LineStringCoords = Annotated[list[Position], Field(min_length=MIN_LINE_STRING_LENGTH)]
EnvelopeCoords = Annotated[
    list[Position],
    Field(min_length=ENVELOPE_POSITIONS, max_length=ENVELOPE_POSITIONS),
]
LinearRing = list[Position]
PolygonCoords = list[LinearRing]
MultiLineStringCoords = list[LineStringCoords]
MultiPolygonCoords = list[PolygonCoords]
