"""Application Queries."""

from pogomap.application.map.queries.get_active_spawns import GetActiveSpawnsQuery
from pogomap.application.map.queries.get_active_spawns_by_ids import (
    GetActiveSpawnsByIdsQuery,
)
from pogomap.application.map.queries.get_gym import GetGymQuery
from pogomap.application.map.queries.get_gyms import GetGymsQuery

__all__ = [
    "GetActiveSpawnsQuery",
    "GetActiveSpawnsByIdsQuery",
    "GetGymsQuery",
    "GetGymQuery",
]
