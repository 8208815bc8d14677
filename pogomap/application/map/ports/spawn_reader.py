"""Spawn Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from pogomap.application.map.dto import SpawnQuerySpec
from pogomap.domain.entities import Spawn


class SpawnReader(ABC):
    """Spawn 데이터 조회 포트.

    Infrastructure Layer에서 구현합니다.
    """

    @abstractmethod
    async def find(self, spec: SpawnQuerySpec) -> Sequence[Spawn]:
        """명세에 맞는 spawn을 조회합니다.

        Args:
            spec: 조회 명세

        Returns:
            Spawn 목록 (최대 ``spec.limit``개)
        """
        ...
