"""PostgreSQL Infrastructure."""

from pogomap.infrastructure.persistence_postgres.gym_reader_sqla import SqlaGymReader
from pogomap.infrastructure.persistence_postgres.models import (
    Base,
    GymMemberModel,
    GymModel,
    PokemonModel,
    RaidModel,
)
from pogomap.infrastructure.persistence_postgres.spawn_reader_sqla import SqlaSpawnReader

__all__ = [
    "SqlaSpawnReader",
    "SqlaGymReader",
    "Base",
    "PokemonModel",
    "GymModel",
    "RaidModel",
    "GymMemberModel",
]
