"""Spawn Entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pogomap.domain.value_objects import Coordinates


@dataclass(frozen=True)
class Spawn:
    """야생 포켓몬 출현 기록.

    ``disappear_time`` 이후에는 논리적으로 만료된 레코드입니다.
    시각은 모두 naive UTC입니다.
    """

    encounter_id: str
    spawnpoint_id: str
    pokemon_id: int
    latitude: float
    longitude: float
    disappear_time: datetime
    individual_attack: int | None = None
    individual_defense: int | None = None
    individual_stamina: int | None = None
    move_1: int | None = None
    move_2: int | None = None
    weight: float | None = None
    height: float | None = None
    gender: int | None = None
    last_modified: datetime | None = None

    def coordinates(self) -> Coordinates:
        """좌표 Value Object를 반환합니다."""
        return Coordinates(latitude=self.latitude, longitude=self.longitude)

    def is_active(self, now: datetime) -> bool:
        """``now`` 시점에 아직 사라지지 않았는지 반환합니다."""
        return self.disappear_time > now
