"""Domain Value Objects."""

from pogomap.domain.value_objects.coordinates import Coordinates
from pogomap.domain.value_objects.spatial_filter import (
    ModifiedSince,
    NewlyVisible,
    SpatialFilter,
    Unbounded,
    WithinViewport,
)
from pogomap.domain.value_objects.species_filter import (
    AnySpecies,
    ExcludeSpecies,
    IncludeSpecies,
    SpeciesFilter,
)
from pogomap.domain.value_objects.viewport import Viewport

__all__ = [
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
