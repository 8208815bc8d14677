"""Gym Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from pogomap.application.map.dto import GymQuerySpec
from pogomap.domain.entities import Gym


class GymReader(ABC):
    """체육관 데이터 조회 포트.

    Infrastructure Layer에서 구현합니다.
    """

    @abstractmethod
    async def find(self, spec: GymQuerySpec) -> Sequence[Gym]:
        """명세에 맞는 체육관을 조회합니다.

        Args:
            spec: 조회 명세

        Returns:
            Gym 목록. 각 Gym은 raid(없으면 None)를 포함하고,
            ``spec.rank_from``이 있으면 distance 오름차순입니다.
        """
        ...

    @abstractmethod
    async def find_by_id(self, gym_id: str) -> Gym | None:
        """ID로 체육관을 조회합니다.

        Args:
            gym_id: 체육관 ID

        Returns:
            raid와 members를 포함한 Gym 또는 None (미발견 시)
        """
        ...
