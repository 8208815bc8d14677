"""Get Gyms Query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pogomap.application.map.dto import GymsRequest
from pogomap.domain.entities import Gym

if TYPE_CHECKING:
    from pogomap.application.map.ports import GymReader
    from pogomap.application.map.services import QueryOptionsBuilder

logger = logging.getLogger(__name__)


class GetGymsQuery:
    """체육관 목록 조회 Query.

    viewport가 주어지면 중심에서 가까운 순서로, 아니면 정렬 없이 반환합니다.
    """

    def __init__(self, gym_reader: "GymReader", builder: "QueryOptionsBuilder") -> None:
        self._reader = gym_reader
        self._builder = builder

    async def execute(self, request: GymsRequest) -> list[Gym]:
        """체육관을 조회합니다.

        Args:
            request: 조회 요청 DTO

        Returns:
            raid를 포함한 Gym 목록

        Raises:
            ValidationError: 좌표 / timestamp가 잘못된 경우
        """
        spec = self._builder.gyms(request)

        logger.info(
            "Gyms query started",
            extra={
                "spatial_filter": type(spec.spatial).__name__,
                "ranked": spec.is_ranked,
                "limit": spec.limit,
            },
        )

        gyms = list(await self._reader.find(spec))

        logger.info("Gyms query completed", extra={"results_count": len(gyms)})
        return gyms
