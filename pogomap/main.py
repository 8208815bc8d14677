"""Pogomap - application entry point.

HTTP 계층 등 호출 측 프로세스의 시작/종료 시점에 ``lifespan``으로 감쌉니다.

Example:
    async with lifespan():
        async with open_map_queries() as queries:
            gyms = await queries.gyms.execute(GymsRequest(...))
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from pogomap.setup.config import get_settings
from pogomap.setup.database import dispose_engine
from pogomap.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan() -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info(
        f"Starting {settings.service_name}",
        extra={
            "environment": settings.environment,
            "pokemon_limit": settings.pokemon_limit_per_query,
            "gym_limit": settings.gym_limit_per_query,
        },
    )

    try:
        yield
    finally:
        logger.info(f"Shutting down {settings.service_name}")
        await dispose_engine()
