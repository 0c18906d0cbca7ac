"""Generic first pass over a geometry document.

Every geometry on the wire shares the same envelope: a ``type`` tag plus a
``coordinates`` payload whose nesting depth depends on the tag. The envelope
is read once, without interpreting the coordinates, so the tag can pick the
model that validates them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from search_geo.constants import JSON_PARSER_MAX_NESTING
from search_geo.models import JSONNestingLimitError, MalformedJSONError

JSON_INVALID = "json_invalid"
RECURSION_LIMIT_EXCEEDED = "recursion limit exceeded"


class RawGeometry(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = ""
    coordinates: Any = None
    geometries: list[RawGeometry] | None = None
    radius: str | None = None


def parse_envelope(data: str | bytes | bytearray | dict[str, Any]) -> RawGeometry:
    """Read the envelope of a geometry document.

    Args:
        data (str | bytes | bytearray | dict): JSON text or an already decoded JSON object

    Raises:
        MalformedJSONError: data is not valid JSON
        JSONNestingLimitError: data is valid JSON nested deeper than the parser accepts
        ValidationError: data is valid JSON but not a geometry object

    Returns:
        RawGeometry: type tag, untouched coordinates, nested envelopes and radius
    """
    if isinstance(data, dict):
        return RawGeometry.model_validate(data)
    try:
        return RawGeometry.model_validate_json(data)
    except ValidationError as e:
        json_errors = [err for err in e.errors() if err["type"] == JSON_INVALID]
        if any(RECURSION_LIMIT_EXCEEDED in err["msg"] for err in json_errors):
            raise JSONNestingLimitError(JSON_PARSER_MAX_NESTING) from e
        if json_errors:
            raise MalformedJSONError(f"geo: invalid JSON: {e.errors()[0]['msg']}") from e
        raise
