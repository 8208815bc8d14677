"""Application DTOs."""

from pogomap.application.map.dto.query_spec import GymQuerySpec, SpawnQuerySpec
from pogomap.application.map.dto.requests import (
    ActiveSpawnsRequest,
    GymsRequest,
    SpawnsByIdsRequest,
)

__all__ = [
    "ActiveSpawnsRequest",
    "SpawnsByIdsRequest",
    "GymsRequest",
    "SpawnQuerySpec",
    "GymQuerySpec",
]
