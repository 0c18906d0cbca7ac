class GeoError(Exception):
    type_str = "search-geo/error"
    title = "Geometry Error"
    pass


class DecodeError(GeoError):
    type_str = "search-geo/decode-error"
    title = "Geometry Decode Error"
    pass


class MalformedJSONError(DecodeError):
    type_str = "search-geo/malformed-json"
    title = "Malformed JSON"
    pass


class UnknownGeometryTypeError(DecodeError):
    type_str = "search-geo/unknown-geometry-type"
    title = "Unknown Geometry Type"

    def __init__(
        self: "UnknownGeometryTypeError",
        geometry_type: str,
    ) -> None:
        super().__init__(f"geo: unknown type `{geometry_type}`")
        self.geometry_type = geometry_type


class GeometryTypeMismatchError(DecodeError):
    type_str = "search-geo/geometry-type-mismatch"
    title = "Geometry Type Mismatch"

    def __init__(
        self: "GeometryTypeMismatchError",
        expected: str,
        actual: str,
    ) -> None:
        super().__init__(f"geo: expected type `{expected}`, got `{actual}`")
        self.expected = expected
        self.actual = actual


class CollectionDepthExceededError(DecodeError):
    type_str = "search-geo/collection-depth-exceeded"
    title = "Geometry Collection Nested Too Deep"

    def __init__(
        self: "CollectionDepthExceededError",
        max_depth: int,
    ) -> None:
        super().__init__(
            f"geo: geometry collections nested deeper than {max_depth} levels"
        )
        self.max_depth = max_depth


class JSONNestingLimitError(CollectionDepthExceededError):
    type_str = "search-geo/json-nesting-limit"
    title = "JSON Nested Too Deep"

    def __init__(
        self: "JSONNestingLimitError",
        max_nesting: int,
    ) -> None:
        DecodeError.__init__(
            self, f"geo: document nested deeper than the {max_nesting} levels the JSON parser accepts"
        )
        self.max_depth = max_nesting


class EncodeError(GeoError):
    type_str = "search-geo/encode-error"
    title = "Geometry Encode Error"

    def __init__(
        self: "EncodeError",
        geometry_type: str,
    ) -> None:
        super().__init__(f"geo: unknown type `{geometry_type}`")
        self.geometry_type = geometry_type


class UnsupportedGeometryError(GeoError):
    type_str = "search-geo/unsupported-geometry"
    title = "Geometry Not Supported"

    def __init__(
        self: "UnsupportedGeometryError",
        geometry_type: str,
        target: str,
    ) -> None:
        super().__init__(f"geo: type `{geometry_type}` has no {target} representation")
        self.geometry_type = geometry_type


class InvalidGeoPointError(GeoError, ValueError):
    type_str = "search-geo/invalid-geo-point"
    title = "Invalid Geo Point"
    pass


class IncompleteQueryError(GeoError):
    type_str = "search-geo/incomplete-query"
    title = "Incomplete Query"
    pass
