"""Gym Entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from pogomap.domain.value_objects import Coordinates


@dataclass(frozen=True)
class Raid:
    """체육관에 열린 레이드. gym_id 당 최대 하나."""

    gym_id: str
    level: int
    spawn: datetime
    start: datetime
    end: datetime
    pokemon_id: int | None = None
    cp: int | None = None
    move_1: int | None = None
    move_2: int | None = None
    last_scanned: datetime | None = None


@dataclass(frozen=True)
class GymMember:
    """체육관에 배치된 포켓몬."""

    gym_id: str
    pokemon_uid: str
    deployment_time: datetime
    cp_decayed: int
    last_scanned: datetime | None = None


@dataclass(frozen=True)
class Gym:
    """점령 가능한 체육관.

    ``raid``는 left join 결과이므로 없을 수 있습니다.
    ``distance``는 viewport 중심으로부터의 거리(mile)이며 viewport가 주어진
    조회에서만 채워집니다. ``members``는 단건 조회에서만 채워집니다.
    """

    gym_id: str
    team_id: int
    guard_pokemon_id: int
    slots_available: int
    enabled: bool
    latitude: float
    longitude: float
    total_cp: int
    last_modified: datetime
    last_scanned: datetime | None = None
    raid: Raid | None = None
    distance: float | None = None
    members: tuple[GymMember, ...] = field(default_factory=tuple)

    def coordinates(self) -> Coordinates:
        """좌표 Value Object를 반환합니다."""
        return Coordinates(latitude=self.latitude, longitude=self.longitude)
