"""Logging configuration."""

from __future__ import annotations

import logging
import sys

from pogomap.setup.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SQL_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool")


def setup_logging(level: str | None = None) -> None:
    """애플리케이션 로깅을 설정합니다.

    Args:
        level: 로그 레벨. 없으면 ``POGOMAP_LOG_LEVEL`` 설정을 따릅니다.
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # SQL 로그는 database_echo일 때만
    sql_level = logging.INFO if settings.database_echo else logging.WARNING
    for name in SQL_LOGGERS:
        logging.getLogger(name).setLevel(sql_level)
