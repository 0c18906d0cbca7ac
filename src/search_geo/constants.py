TYPE_POINT = "point"
TYPE_MULTI_POINT = "multipoint"
TYPE_LINE_STRING = "linestring"
TYPE_MULTI_LINE_STRING = "multilinestring"
TYPE_POLYGON = "polygon"
TYPE_MULTI_POLYGON = "multipolygon"
TYPE_GEOMETRY_COLLECTION = "geometrycollection"
TYPE_ENVELOPE = "envelope"
TYPE_CIRCLE = "circle"

# order in which Shape checks its active variant when encoding
GEOMETRY_TYPES = (
    TYPE_POINT,
    TYPE_MULTI_POINT,
    TYPE_LINE_STRING,
    TYPE_MULTI_LINE_STRING,
    TYPE_POLYGON,
    TYPE_MULTI_POLYGON,
    TYPE_GEOMETRY_COLLECTION,
    TYPE_ENVELOPE,
    TYPE_CIRCLE,
)

DEFAULT_MAX_COLLECTION_DEPTH = 64
MIN_POSITION_LENGTH = 2
MIN_LINE_STRING_LENGTH = 2
ENVELOPE_POSITIONS = 2  # upper left, lower right

RELATION_INTERSECTS = "intersects"
RELATION_DISJOINT = "disjoint"
RELATION_WITHIN = "within"
RELATION_CONTAINS = "contains"

# nesting limit of the JSON parser, each collection takes two levels (object and geometries array)
JSON_PARSER_MAX_NESTING = 200
