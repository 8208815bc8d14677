"""Application Services."""

from pogomap.application.map.services.distance import (
    EARTH_RADIUS_MILES,
    great_circle_miles,
)
from pogomap.application.map.services.query_options import QueryOptionsBuilder

__all__ = ["EARTH_RADIUS_MILES", "great_circle_miles", "QueryOptionsBuilder"]
