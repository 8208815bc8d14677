"""Pogomap Application Layer."""

from pogomap.application.map import (
    ActiveSpawnsRequest,
    GetActiveSpawnsByIdsQuery,
    GetActiveSpawnsQuery,
    GetGymQuery,
    GetGymsQuery,
    GymQuerySpec,
    GymReader,
    GymsRequest,
    QueryOptionsBuilder,
    SpawnQuerySpec,
    SpawnReader,
    SpawnsByIdsRequest,
)

__all__ = [
    "ActiveSpawnsRequest",
    "SpawnsByIdsRequest",
    "GymsRequest",
    "SpawnQuerySpec",
    "GymQuerySpec",
    "SpawnReader",
    "GymReader",
    "QueryOptionsBuilder",
    "GetActiveSpawnsQuery",
    "GetActiveSpawnsByIdsQuery",
    "GetGymsQuery",
    "GetGymQuery",
]
