"""Dependency wiring.

HTTP 계층 없이 조회 객체를 조립합니다. 세션 수명은 ``open_map_queries``가 관리합니다.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from pogomap.application.map import (
    GetActiveSpawnsByIdsQuery,
    GetActiveSpawnsQuery,
    GetGymQuery,
    GetGymsQuery,
    GymReader,
    QueryOptionsBuilder,
    SpawnReader,
)
from pogomap.infrastructure.persistence_postgres import SqlaGymReader, SqlaSpawnReader
from pogomap.setup.config import get_settings
from pogomap.setup.database import async_session_factory

logger = logging.getLogger(__name__)


def get_query_options_builder() -> QueryOptionsBuilder:
    """설정의 row cap으로 QueryOptionsBuilder를 생성합니다."""
    settings = get_settings()
    return QueryOptionsBuilder(
        spawn_limit=settings.pokemon_limit_per_query,
        gym_limit=settings.gym_limit_per_query,
    )


def get_spawn_reader(session: AsyncSession) -> SpawnReader:
    """Spawn Reader를 생성합니다."""
    return SqlaSpawnReader(session)


def get_gym_reader(session: AsyncSession) -> GymReader:
    """Gym Reader를 생성합니다."""
    return SqlaGymReader(session)


def get_active_spawns_query(
    reader: SpawnReader, builder: QueryOptionsBuilder | None = None
) -> GetActiveSpawnsQuery:
    return GetActiveSpawnsQuery(reader, builder or get_query_options_builder())


def get_active_spawns_by_ids_query(
    reader: SpawnReader, builder: QueryOptionsBuilder | None = None
) -> GetActiveSpawnsByIdsQuery:
    return GetActiveSpawnsByIdsQuery(reader, builder or get_query_options_builder())


def get_gyms_query(
    reader: GymReader, builder: QueryOptionsBuilder | None = None
) -> GetGymsQuery:
    return GetGymsQuery(reader, builder or get_query_options_builder())


def get_gym_query(reader: GymReader) -> GetGymQuery:
    return GetGymQuery(reader)


@dataclass(frozen=True)
class MapQueries:
    """한 세션을 공유하는 조회 묶음."""

    active_spawns: GetActiveSpawnsQuery
    active_spawns_by_ids: GetActiveSpawnsByIdsQuery
    gyms: GetGymsQuery
    gym: GetGymQuery


@asynccontextmanager
async def open_map_queries() -> AsyncIterator[MapQueries]:
    """DB 세션을 열고 조회 객체 묶음을 제공합니다.

    Example:
        async with open_map_queries() as queries:
            spawns = await queries.active_spawns.execute(request)
    """
    builder = get_query_options_builder()
    async with async_session_factory() as session:
        spawn_reader = get_spawn_reader(session)
        gym_reader = get_gym_reader(session)
        logger.debug(
            "Map queries opened",
            extra={
                "pokemon_limit": get_settings().pokemon_limit_per_query,
                "gym_limit": get_settings().gym_limit_per_query,
            },
        )
        yield MapQueries(
            active_spawns=get_active_spawns_query(spawn_reader, builder),
            active_spawns_by_ids=get_active_spawns_by_ids_query(spawn_reader, builder),
            gyms=get_gyms_query(gym_reader, builder),
            gym=get_gym_query(gym_reader),
        )
