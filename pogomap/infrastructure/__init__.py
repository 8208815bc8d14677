"""Pogomap Infrastructure Layer."""

from pogomap.infrastructure.persistence_postgres import (
    Base,
    GymMemberModel,
    GymModel,
    PokemonModel,
    RaidModel,
    SqlaGymReader,
    SqlaSpawnReader,
)

__all__ = [
    "SqlaSpawnReader",
    "SqlaGymReader",
    "Base",
    "PokemonModel",
    "GymModel",
    "RaidModel",
    "GymMemberModel",
]
