"""Get Gym Query.

체육관 단건 조회 Query. raid와 배치된 포켓몬(members)을 함께 반환합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pogomap.application.common.exceptions import InvalidGymIdError
from pogomap.domain.entities import Gym

if TYPE_CHECKING:
    from pogomap.application.map.ports import GymReader

logger = logging.getLogger(__name__)


class GetGymQuery:
    """체육관 상세 조회 Query."""

    def __init__(self, gym_reader: "GymReader") -> None:
        self._reader = gym_reader

    async def execute(self, gym_id: str) -> Gym | None:
        """체육관 상세 정보를 조회합니다.

        Args:
            gym_id: 체육관 ID

        Returns:
            Gym 또는 None (미발견 시)
        """
        if not isinstance(gym_id, str) or not gym_id.strip():
            raise InvalidGymIdError(gym_id)

        gym = await self._reader.find_by_id(gym_id.strip())
        if gym is None:
            logger.info("Gym not found", extra={"gym_id": gym_id})
        return gym
