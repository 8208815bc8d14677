"""Map Application Layer."""

from pogomap.application.map.dto import (
    ActiveSpawnsRequest,
    GymQuerySpec,
    GymsRequest,
    SpawnQuerySpec,
    SpawnsByIdsRequest,
)
from pogomap.application.map.ports import GymReader, SpawnReader
from pogomap.application.map.queries import (
    GetActiveSpawnsByIdsQuery,
    GetActiveSpawnsQuery,
    GetGymQuery,
    GetGymsQuery,
)
from pogomap.application.map.services import QueryOptionsBuilder

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
