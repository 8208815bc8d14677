"""Domain filter → SQLAlchemy 조건식 변환."""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, and_, func
from sqlalchemy.orm import InstrumentedAttribute

from pogomap.application.map.services.distance import EARTH_RADIUS_MILES
from pogomap.domain.value_objects import (
    AnySpecies,
    Coordinates,
    ExcludeSpecies,
    IncludeSpecies,
    ModifiedSince,
    NewlyVisible,
    SpatialFilter,
    SpeciesFilter,
    Unbounded,
    Viewport,
    WithinViewport,
)

ColumnAttr = InstrumentedAttribute[Any]


def species_clause(column: ColumnAttr, species: SpeciesFilter) -> ColumnElement[bool] | None:
    """Species 조건식. 조건이 없으면 None."""
    if isinstance(species, IncludeSpecies):
        return column.in_(sorted(species.ids))
    if isinstance(species, ExcludeSpecies):
        return column.not_in(sorted(species.ids))
    if isinstance(species, AnySpecies):
        return None
    raise TypeError(f"Unsupported species filter: {species!r}")


def viewport_clause(
    latitude: ColumnAttr, longitude: ColumnAttr, viewport: Viewport
) -> ColumnElement[bool]:
    """``sw <= 좌표 <= ne`` 조건식."""
    return and_(
        latitude >= viewport.sw_lat,
        latitude <= viewport.ne_lat,
        longitude >= viewport.sw_lng,
        longitude <= viewport.ne_lng,
    )


def spatial_clause(
    latitude: ColumnAttr,
    longitude: ColumnAttr,
    modified_at: ColumnAttr,
    spatial: SpatialFilter,
) -> ColumnElement[bool] | None:
    """Spatial 조건식. 조건이 없으면 None."""
    if isinstance(spatial, Unbounded):
        return None
    if isinstance(spatial, WithinViewport):
        return viewport_clause(latitude, longitude, spatial.viewport)
    if isinstance(spatial, ModifiedSince):
        clause = modified_at > spatial.since
    elif isinstance(spatial, NewlyVisible):
        clause = ~viewport_clause(latitude, longitude, spatial.previous)
    else:
        raise TypeError(f"Unsupported spatial filter: {spatial!r}")

    if spatial.viewport is None:
        return clause
    return and_(viewport_clause(latitude, longitude, spatial.viewport), clause)


def distance_expr(latitude: ColumnAttr, longitude: ColumnAttr, origin: Coordinates):
    """``origin``으로부터의 great-circle 거리(mile) 컬럼."""
    cosine = func.cos(func.radians(origin.latitude)) * func.cos(
        func.radians(latitude)
    ) * func.cos(func.radians(longitude) - func.radians(origin.longitude)) + func.sin(
        func.radians(origin.latitude)
    ) * func.sin(
        func.radians(latitude)
    )
    clamped = func.least(1.0, func.greatest(-1.0, cosine))
    return (EARTH_RADIUS_MILES * func.acos(clamped)).label("distance")
