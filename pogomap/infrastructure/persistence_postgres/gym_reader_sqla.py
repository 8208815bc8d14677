"""SQLAlchemy Gym Reader Implementation."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from pogomap.application.map.dto import GymQuerySpec
from pogomap.application.map.ports import GymReader
from pogomap.domain.entities import Gym, GymMember, Raid
from pogomap.infrastructure.persistence_postgres.filters_sqla import (
    distance_expr,
    spatial_clause,
)
from pogomap.infrastructure.persistence_postgres.models import (
    GymMemberModel,
    GymModel,
    RaidModel,
)


class SqlaGymReader(GymReader):
    """SQLAlchemy 기반 체육관 Reader.

    GymReader Port를 구현합니다. raid는 항상 LEFT OUTER JOIN으로 함께 조회하고,
    기준점이 있으면 Haversine 거리 컬럼으로 정렬합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
        """
        self._session = session

    async def find(self, spec: GymQuerySpec) -> Sequence[Gym]:
        """명세에 맞는 체육관을 조회합니다."""
        result = await self._session.execute(self._build_query(spec))
        gyms: list[Gym] = []
        for row in result.all():
            gym, raid = row[0], row[1]
            distance = float(row[2]) if spec.is_ranked and row[2] is not None else None
            gyms.append(self._to_domain(gym, raid, distance=distance))
        return gyms

    async def find_by_id(self, gym_id: str) -> Gym | None:
        """ID로 체육관과 raid, members를 조회합니다."""
        query = (
            select(GymModel, RaidModel)
            .outerjoin(RaidModel, RaidModel.gym_id == GymModel.gym_id)
            .where(GymModel.gym_id == gym_id)
            .limit(1)
        )
        result = await self._session.execute(query)
        row = result.first()
        if row is None:
            return None

        members_query = (
            select(GymMemberModel)
            .where(GymMemberModel.gym_id == gym_id)
            .order_by(GymMemberModel.deployment_time.asc())
        )
        members_result = await self._session.execute(members_query)
        members = tuple(self._member_to_domain(m) for m in members_result.scalars().all())

        return self._to_domain(row[0], row[1], members=members)

    @staticmethod
    def _build_query(spec: GymQuerySpec) -> Select:
        if spec.rank_from is not None:
            distance = distance_expr(GymModel.latitude, GymModel.longitude, spec.rank_from)
            query = select(GymModel, RaidModel, distance)
        else:
            distance = None
            query = select(GymModel, RaidModel)

        query = query.outerjoin(RaidModel, RaidModel.gym_id == GymModel.gym_id)

        spatial = spatial_clause(
            GymModel.latitude,
            GymModel.longitude,
            GymModel.last_scanned,
            spec.spatial,
        )
        if spatial is not None:
            query = query.where(spatial)
        if distance is not None:
            query = query.order_by(distance.asc())

        return query.limit(spec.limit)

    @classmethod
    def _to_domain(
        cls,
        gym: GymModel,
        raid: RaidModel | None,
        distance: float | None = None,
        members: tuple[GymMember, ...] = (),
    ) -> Gym:
        """ORM 모델을 도메인 엔티티로 변환합니다."""
        return Gym(
            gym_id=gym.gym_id,
            team_id=gym.team_id,
            guard_pokemon_id=gym.guard_pokemon_id,
            slots_available=gym.slots_available,
            enabled=gym.enabled,
            latitude=gym.latitude,
            longitude=gym.longitude,
            total_cp=gym.total_cp,
            last_modified=gym.last_modified,
            last_scanned=gym.last_scanned,
            raid=cls._raid_to_domain(raid) if raid is not None else None,
            distance=distance,
            members=members,
        )

    @staticmethod
    def _raid_to_domain(raid: RaidModel) -> Raid:
        return Raid(
            gym_id=raid.gym_id,
            level=raid.level,
            spawn=raid.spawn,
            start=raid.start,
            end=raid.end,
            pokemon_id=raid.pokemon_id,
            cp=raid.cp,
            move_1=raid.move_1,
            move_2=raid.move_2,
            last_scanned=raid.last_scanned,
        )

    @staticmethod
    def _member_to_domain(member: GymMemberModel) -> GymMember:
        return GymMember(
            gym_id=member.gym_id,
            pokemon_uid=member.pokemon_uid,
            deployment_time=member.deployment_time,
            cp_decayed=member.cp_decayed,
            last_scanned=member.last_scanned,
        )
