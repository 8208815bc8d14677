"""Get Active Spawns By Ids Query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pogomap.application.map.dto import SpawnsByIdsRequest
from pogomap.domain.entities import Spawn

if TYPE_CHECKING:
    from pogomap.application.map.ports import SpawnReader
    from pogomap.application.map.services import QueryOptionsBuilder

logger = logging.getLogger(__name__)


class GetActiveSpawnsByIdsQuery:
    """species id 목록 기준 활성 spawn 조회 Query.

    whitelist가 비어 있으면 species 조건 없이 조회합니다.
    """

    def __init__(self, spawn_reader: "SpawnReader", builder: "QueryOptionsBuilder") -> None:
        self._reader = spawn_reader
        self._builder = builder

    async def execute(self, request: SpawnsByIdsRequest) -> list[Spawn]:
        spec = self._builder.active_spawns_by_ids(request)

        logger.info(
            "Active spawns by ids query started",
            extra={
                "spatial_filter": type(spec.spatial).__name__,
                "species_filter": type(spec.species).__name__,
                "limit": spec.limit,
            },
        )

        spawns = list(await self._reader.find(spec))

        logger.info(
            "Active spawns by ids query completed", extra={"results_count": len(spawns)}
        )
        return spawns
