"""Setup Module."""

from pogomap.setup.config import Settings, get_settings
from pogomap.setup.database import async_session_factory, dispose_engine
from pogomap.setup.dependencies import (
    MapQueries,
    get_query_options_builder,
    open_map_queries,
)
from pogomap.setup.logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "async_session_factory",
    "dispose_engine",
    "MapQueries",
    "get_query_options_builder",
    "open_map_queries",
    "setup_logging",
]
