"""Pogomap Domain Layer."""

from pogomap.domain.entities import Gym, GymMember, Raid, Spawn
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

__all__ = [
    "Spawn",
    "Gym",
    "Raid",
    "GymMember",
    "Coordinates",
    "Viewport",
    "SpeciesFilter",
    "AnySpecies",
    "IncludeSpecies",
    "ExcludeSpecies",
    "SpatialFilter",
    "Unbounded",
    "WithinViewport",
    "ModifiedSince",
    "NewlyVisible",
]
