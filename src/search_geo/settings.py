import logging

from pydantic import Field
from pydantic_settings import BaseSettings

from search_geo.constants import DEFAULT_MAX_COLLECTION_DEPTH


class GeoSettings(BaseSettings):
    max_collection_depth: int = Field(
        alias="GEO_MAX_COLLECTION_DEPTH",
        default=DEFAULT_MAX_COLLECTION_DEPTH,
        ge=0,
        description=(
            "max nesting of geometry collections accepted on decode, 0 disables the check; "
            "JSON text stays bound to the 200 levels of the JSON parser (about 99 collections)"
        ),
    )
    log_level: str = Field(alias="LOG_LEVEL", default="WARNING")


geo_settings = GeoSettings()

logging.getLogger("search_geo").setLevel(geo_settings.log_level.upper())
