"""SQLAlchemy Spawn Reader Implementation."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from pogomap.application.map.dto import SpawnQuerySpec
from pogomap.application.map.ports import SpawnReader
from pogomap.domain.entities import Spawn
from pogomap.infrastructure.persistence_postgres.filters_sqla import (
    spatial_clause,
    species_clause,
)
from pogomap.infrastructure.persistence_postgres.models import PokemonModel


class SqlaSpawnReader(SpawnReader):
    """SQLAlchemy 기반 spawn Reader.

    SpawnReader Port를 구현합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
        """
        self._session = session

    async def find(self, spec: SpawnQuerySpec) -> Sequence[Spawn]:
        """명세에 맞는 활성 spawn을 조회합니다."""
        result = await self._session.execute(self._build_query(spec))
        return [self._to_domain(row) for row in result.scalars().all()]

    @staticmethod
    def _build_query(spec: SpawnQuerySpec) -> Select:
        conditions = [PokemonModel.disappear_time > spec.active_after]

        species = species_clause(PokemonModel.pokemon_id, spec.species)
        if species is not None:
            conditions.append(species)

        spatial = spatial_clause(
            PokemonModel.latitude,
            PokemonModel.longitude,
            PokemonModel.last_modified,
            spec.spatial,
        )
        if spatial is not None:
            conditions.append(spatial)

        return select(PokemonModel).where(*conditions).limit(spec.limit)

    @staticmethod
    def _to_domain(row: PokemonModel) -> Spawn:
        """ORM 모델을 도메인 엔티티로 변환합니다."""
        return Spawn(
            encounter_id=row.encounter_id,
            spawnpoint_id=row.spawnpoint_id,
            pokemon_id=row.pokemon_id,
            latitude=row.latitude,
            longitude=row.longitude,
            disappear_time=row.disappear_time,
            individual_attack=row.individual_attack,
            individual_defense=row.individual_defense,
            individual_stamina=row.individual_stamina,
            move_1=row.move_1,
            move_2=row.move_2,
            weight=row.weight,
            height=row.height,
            gender=row.gender,
            last_modified=row.last_modified,
        )
