"""SQLAlchemy ORM Models.

테이블은 외부 수집 프로세스가 채우며 이 서비스는 읽기만 합니다.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    Double,
    Float,
    ForeignKey,
    Index,
    Integer,
    SmallInteger,
    String,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """SQLAlchemy Base."""

    pass


class PokemonModel(Base):
    """야생 포켓몬 spawn 테이블."""

    __tablename__ = "pokemon"
    __table_args__ = (
        Index("pokemon_spawnpoint_id", "spawnpoint_id"),
        Index("pokemon_pokemon_id", "pokemon_id"),
        Index("pokemon_disappear_time", "disappear_time"),
        Index("pokemon_last_modified", "last_modified"),
        Index("pokemon_latitude_longitude", "latitude", "longitude"),
    )

    encounter_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    spawnpoint_id: Mapped[str] = mapped_column(String(255), nullable=False)
    pokemon_id: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    latitude: Mapped[float] = mapped_column(Double, nullable=False)
    longitude: Mapped[float] = mapped_column(Double, nullable=False)
    disappear_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    individual_attack: Mapped[int | None] = mapped_column(SmallInteger, default=None)
    individual_defense: Mapped[int | None] = mapped_column(SmallInteger, default=None)
    individual_stamina: Mapped[int | None] = mapped_column(SmallInteger, default=None)
    move_1: Mapped[int | None] = mapped_column(SmallInteger, default=None)
    move_2: Mapped[int | None] = mapped_column(SmallInteger, default=None)
    weight: Mapped[float | None] = mapped_column(Float, default=None)
    height: Mapped[float | None] = mapped_column(Float, default=None)
    gender: Mapped[int | None] = mapped_column(SmallInteger, default=None)
    last_modified: Mapped[datetime | None] = mapped_column(DateTime, default=None)


class GymModel(Base):
    """체육관 테이블."""

    __tablename__ = "gym"

    gym_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    team_id: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    guard_pokemon_id: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    slots_available: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False)
    latitude: Mapped[float] = mapped_column(Double, nullable=False)
    longitude: Mapped[float] = mapped_column(Double, nullable=False)
    total_cp: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    last_modified: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    last_scanned: Mapped[datetime | None] = mapped_column(DateTime, default=None)


class RaidModel(Base):
    """레이드 테이블. gym_id 당 한 행."""

    __tablename__ = "raid"

    gym_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("gym.gym_id"), primary_key=True
    )
    level: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    spawn: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    start: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    end: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    pokemon_id: Mapped[int | None] = mapped_column(SmallInteger, default=None)
    cp: Mapped[int | None] = mapped_column(Integer, default=None)
    move_1: Mapped[int | None] = mapped_column(SmallInteger, default=None)
    move_2: Mapped[int | None] = mapped_column(SmallInteger, default=None)
    last_scanned: Mapped[datetime | None] = mapped_column(DateTime, default=None, index=True)


class GymMemberModel(Base):
    """체육관 배치 포켓몬 테이블."""

    __tablename__ = "gymmember"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    gym_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("gym.gym_id"), nullable=False, index=True
    )
    pokemon_uid: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    deployment_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    cp_decayed: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    last_scanned: Mapped[datetime | None] = mapped_column(DateTime, default=None, index=True)
