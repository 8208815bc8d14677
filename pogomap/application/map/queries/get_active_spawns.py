"""Get Active Spawns Query.

지도에 보이는 활성 spawn을 조회하는 Query입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pogomap.application.map.dto import ActiveSpawnsRequest
from pogomap.domain.entities import Spawn

if TYPE_CHECKING:
    from pogomap.application.map.ports import SpawnReader
    from pogomap.application.map.services import QueryOptionsBuilder

logger = logging.getLogger(__name__)


class GetActiveSpawnsQuery:
    """활성 spawn 조회 Query.

    Workflow:
        1. 요청 검증 및 조회 명세 생성 (Service)
        2. spawn 조회 (Port)
    """

    def __init__(self, spawn_reader: "SpawnReader", builder: "QueryOptionsBuilder") -> None:
        self._reader = spawn_reader
        self._builder = builder

    async def execute(self, request: ActiveSpawnsRequest) -> list[Spawn]:
        """활성 spawn을 조회합니다.

        Raises:
            ValidationError: 좌표 / timestamp / species id가 잘못된 경우
        """
        spec = self._builder.active_spawns(request)

        logger.info(
            "Active spawns query started",
            extra={
                "spatial_filter": type(spec.spatial).__name__,
                "species_filter": type(spec.species).__name__,
                "limit": spec.limit,
            },
        )

        spawns = list(await self._reader.find(spec))

        logger.info("Active spawns query completed", extra={"results_count": len(spawns)})
        return spawns
