"""Test fixtures for pogomap tests."""

from __future__ import annotations

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from pogomap.application.map.services import QueryOptionsBuilder
from pogomap.domain.entities import Gym, GymMember, Raid, Spawn

NOW = datetime(2017, 7, 20, 12, 0, 0)


@pytest.fixture
def now() -> datetime:
    """고정된 "지금" (naive UTC)."""
    return NOW


@pytest.fixture
def builder() -> QueryOptionsBuilder:
    """고정 시계를 쓰는 QueryOptionsBuilder."""
    return QueryOptionsBuilder(spawn_limit=1000, gym_limit=50000, clock=lambda: NOW)


@pytest.fixture
def mock_spawn_reader() -> AsyncMock:
    """SpawnReader mock."""
    reader = AsyncMock()
    reader.find = AsyncMock(return_value=[])
    return reader


@pytest.fixture
def mock_gym_reader() -> AsyncMock:
    """GymReader mock."""
    reader = AsyncMock()
    reader.find = AsyncMock(return_value=[])
    reader.find_by_id = AsyncMock(return_value=None)
    return reader


@pytest.fixture
def sample_spawn() -> Spawn:
    """테스트용 Spawn."""
    return Spawn(
        encounter_id="MTIzNDU2Nzg5",
        spawnpoint_id="89c25a1b",
        pokemon_id=25,
        latitude=5.0,
        longitude=5.0,
        disappear_time=datetime(2017, 7, 20, 12, 15, 0),
        individual_attack=15,
        individual_defense=14,
        individual_stamina=13,
        move_1=216,
        move_2=79,
        weight=6.1,
        height=0.4,
        gender=1,
        last_modified=datetime(2017, 7, 20, 11, 55, 0),
    )


@pytest.fixture
def sample_raid() -> Raid:
    """테스트용 Raid."""
    return Raid(
        gym_id="gym-1",
        level=5,
        spawn=datetime(2017, 7, 20, 11, 0, 0),
        start=datetime(2017, 7, 20, 12, 0, 0),
        end=datetime(2017, 7, 20, 13, 0, 0),
        pokemon_id=150,
        cp=45000,
        move_1=234,
        move_2=108,
        last_scanned=datetime(2017, 7, 20, 11, 59, 0),
    )


@pytest.fixture
def sample_member() -> GymMember:
    """테스트용 GymMember."""
    return GymMember(
        gym_id="gym-1",
        pokemon_uid="1122334455",
        deployment_time=datetime(2017, 7, 20, 9, 0, 0),
        cp_decayed=2500,
        last_scanned=datetime(2017, 7, 20, 11, 59, 0),
    )


@pytest.fixture
def sample_gym(sample_raid: Raid) -> Gym:
    """테스트용 Gym."""
    return Gym(
        gym_id="gym-1",
        team_id=2,
        guard_pokemon_id=149,
        slots_available=3,
        enabled=True,
        latitude=5.0,
        longitude=5.0,
        total_cp=9000,
        last_modified=datetime(2017, 7, 20, 10, 0, 0),
        last_scanned=datetime(2017, 7, 20, 11, 59, 0),
        raid=sample_raid,
    )
