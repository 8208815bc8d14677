"""Application Services 단위 테스트."""

from __future__ import annotations

import math
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Any

import pytest

from pogomap.application.common.exceptions import (
    InvalidCoordinateError,
    InvalidSpeciesIdError,
    InvalidTimestampError,
    ValidationError,
)
from pogomap.application.map.dto import (
    ActiveSpawnsRequest,
    GymsRequest,
    SpawnsByIdsRequest,
)
from pogomap.application.map.services import (
    EARTH_RADIUS_MILES,
    QueryOptionsBuilder,
    great_circle_miles,
)
from pogomap.domain.entities import Gym, Spawn
from pogomap.domain.value_objects import (
    AnySpecies,
    Coordinates,
    ExcludeSpecies,
    IncludeSpecies,
    ModifiedSince,
    NewlyVisible,
    Unbounded,
    Viewport,
    WithinViewport,
)

VIEWPORT: dict[str, Any] = {"sw_lat": 0, "sw_lng": 0, "ne_lat": 10, "ne_lng": 10}
PREVIOUS: dict[str, Any] = {"o_sw_lat": 0, "o_sw_lng": 0, "o_ne_lat": 5, "o_ne_lng": 5}
# 2017-07-20T12:00:00Z
TIMESTAMP_MS = 1500552000000


class TestActiveSpawns:
    """QueryOptionsBuilder.active_spawns 테스트."""

    def test_no_parameters(self, builder: QueryOptionsBuilder, now: datetime) -> None:
        """파라미터가 없으면 활성 조건만."""
        spec = builder.active_spawns(ActiveSpawnsRequest())

        assert spec.active_after == now
        assert spec.species == AnySpecies()
        assert spec.spatial == Unbounded()
        assert spec.limit == 1000

    def test_viewport(self, builder: QueryOptionsBuilder) -> None:
        spec = builder.active_spawns(ActiveSpawnsRequest(**VIEWPORT))

        assert spec.spatial == WithinViewport(viewport=Viewport.from_bounds(0, 0, 10, 10))

    def test_string_bounds(self, builder: QueryOptionsBuilder) -> None:
        """query string 값도 숫자로 해석."""
        spec = builder.active_spawns(
            ActiveSpawnsRequest(sw_lat="0", sw_lng=" 0 ", ne_lat="10.0", ne_lng="10")
        )

        assert spec.spatial == WithinViewport(viewport=Viewport.from_bounds(0, 0, 10, 10))

    def test_partial_viewport_keeps_timestamp(self, builder: QueryOptionsBuilder) -> None:
        """viewport가 불완전하면 위치 조건만 빠지고 timestamp는 적용."""
        spec = builder.active_spawns(
            ActiveSpawnsRequest(sw_lat=0, sw_lng=0, ne_lat=10, timestamp=TIMESTAMP_MS)
        )

        assert spec.spatial == ModifiedSince(viewport=None, since=datetime(2017, 7, 20, 12, 0, 0))

    def test_timestamp_without_viewport(
        self, builder: QueryOptionsBuilder, sample_spawn: Spawn
    ) -> None:
        """viewport 없이도 timestamp 이전에 변경된 spawn은 제외."""
        spec = builder.active_spawns(ActiveSpawnsRequest(timestamp=TIMESTAMP_MS))
        stale = replace(sample_spawn, last_modified=datetime(2017, 7, 20, 11, 0, 0))
        fresh = replace(
            sample_spawn,
            latitude=-45.0,
            longitude=120.0,
            last_modified=datetime(2017, 7, 20, 12, 0, 1),
        )

        assert not spec.matches(stale)
        assert spec.matches(fresh)

    def test_previous_viewport_without_viewport(
        self, builder: QueryOptionsBuilder, sample_spawn: Spawn
    ) -> None:
        """viewport 없이도 이전 viewport 안의 spawn은 제외."""
        spec = builder.active_spawns(
            ActiveSpawnsRequest(o_sw_lat=0, o_sw_lng=0, o_ne_lat=10, o_ne_lng=10)
        )

        assert spec.spatial == NewlyVisible(
            viewport=None, previous=Viewport.from_bounds(0, 0, 10, 10)
        )
        assert not spec.matches(sample_spawn)
        assert spec.matches(replace(sample_spawn, latitude=20.0))

    def test_timestamp(self, builder: QueryOptionsBuilder) -> None:
        spec = builder.active_spawns(
            ActiveSpawnsRequest(timestamp=TIMESTAMP_MS, **VIEWPORT)
        )

        assert isinstance(spec.spatial, ModifiedSince)
        assert spec.spatial.since == datetime(2017, 7, 20, 12, 0, 0)
        assert spec.spatial.since.tzinfo is None

    def test_timestamp_wins_over_previous_viewport(self, builder: QueryOptionsBuilder) -> None:
        spec = builder.active_spawns(
            ActiveSpawnsRequest(timestamp=TIMESTAMP_MS, **VIEWPORT, **PREVIOUS)
        )

        assert isinstance(spec.spatial, ModifiedSince)

    def test_previous_viewport(self, builder: QueryOptionsBuilder) -> None:
        spec = builder.active_spawns(ActiveSpawnsRequest(**VIEWPORT, **PREVIOUS))

        assert spec.spatial == NewlyVisible(
            viewport=Viewport.from_bounds(0, 0, 10, 10),
            previous=Viewport.from_bounds(0, 0, 5, 5),
        )

    def test_partial_previous_viewport_ignored(self, builder: QueryOptionsBuilder) -> None:
        spec = builder.active_spawns(
            ActiveSpawnsRequest(o_sw_lat=0, o_sw_lng=0, **VIEWPORT)
        )

        assert isinstance(spec.spatial, WithinViewport)

    @pytest.mark.parametrize("timestamp", [0, "0", "", None])
    def test_zero_timestamp_is_absent(self, builder: QueryOptionsBuilder, timestamp: Any) -> None:
        spec = builder.active_spawns(ActiveSpawnsRequest(timestamp=timestamp, **VIEWPORT))

        assert isinstance(spec.spatial, WithinViewport)

    def test_blacklist(self, builder: QueryOptionsBuilder) -> None:
        spec = builder.active_spawns(ActiveSpawnsRequest(blacklist=[16, "19", 16]))

        assert spec.species == ExcludeSpecies(ids=frozenset({16, 19}))

    def test_empty_blacklist(self, builder: QueryOptionsBuilder) -> None:
        """빈 blacklist는 필터 없음."""
        spec = builder.active_spawns(ActiveSpawnsRequest(blacklist=[]))

        assert spec.species == AnySpecies()

    def test_custom_limit(self, now: datetime) -> None:
        builder = QueryOptionsBuilder(spawn_limit=10, clock=lambda: now)

        assert builder.active_spawns(ActiveSpawnsRequest()).limit == 10

    def test_default_clock_is_naive_utc(self) -> None:
        spec = QueryOptionsBuilder().active_spawns(ActiveSpawnsRequest())

        assert spec.active_after.tzinfo is None


class TestActiveSpawnsByIds:
    """QueryOptionsBuilder.active_spawns_by_ids 테스트."""

    def test_whitelist(self, builder: QueryOptionsBuilder) -> None:
        spec = builder.active_spawns_by_ids(SpawnsByIdsRequest(whitelist=[1, 4, 7]))

        assert spec.species == IncludeSpecies(ids=frozenset({1, 4, 7}))
        assert spec.spatial == Unbounded()

    def test_whitelist_wins_over_blacklist(self, builder: QueryOptionsBuilder) -> None:
        spec = builder.active_spawns_by_ids(
            SpawnsByIdsRequest(whitelist=[1], blacklist=[1, 2])
        )

        assert spec.species == IncludeSpecies(ids=frozenset({1}))

    def test_blacklist_when_whitelist_empty(self, builder: QueryOptionsBuilder) -> None:
        spec = builder.active_spawns_by_ids(SpawnsByIdsRequest(whitelist=[], blacklist=[2]))

        assert spec.species == ExcludeSpecies(ids=frozenset({2}))

    def test_both_empty(self, builder: QueryOptionsBuilder) -> None:
        """빈 whitelist는 "아무것도 없음"이 아니라 "필터 없음"."""
        spec = builder.active_spawns_by_ids(SpawnsByIdsRequest())

        assert spec.species == AnySpecies()

    def test_viewport(self, builder: QueryOptionsBuilder) -> None:
        spec = builder.active_spawns_by_ids(SpawnsByIdsRequest(whitelist=[25], **VIEWPORT))

        assert isinstance(spec.spatial, WithinViewport)


class TestGyms:
    """QueryOptionsBuilder.gyms 테스트."""

    def test_no_viewport(self, builder: QueryOptionsBuilder) -> None:
        """viewport가 없으면 정렬/위치 조건 없음."""
        spec = builder.gyms(GymsRequest())

        assert spec.spatial == Unbounded()
        assert spec.rank_from is None
        assert not spec.is_ranked
        assert spec.limit == 50000

    def test_no_viewport_ignores_timestamp_and_previous(
        self, builder: QueryOptionsBuilder
    ) -> None:
        """체육관은 viewport가 없으면 timestamp / 이전 viewport를 보지 않음."""
        spec = builder.gyms(GymsRequest(timestamp=TIMESTAMP_MS, **PREVIOUS))

        assert spec.spatial == Unbounded()
        assert not spec.is_ranked

    def test_ranked_from_center(self, builder: QueryOptionsBuilder) -> None:
        spec = builder.gyms(GymsRequest(**VIEWPORT))

        assert spec.rank_from == Coordinates(latitude=5.0, longitude=5.0)
        assert spec.is_ranked
        assert isinstance(spec.spatial, WithinViewport)

    def test_timestamp(self, builder: QueryOptionsBuilder) -> None:
        spec = builder.gyms(GymsRequest(timestamp=TIMESTAMP_MS, **VIEWPORT))

        assert isinstance(spec.spatial, ModifiedSince)
        assert spec.is_ranked

    def test_previous_viewport(self, builder: QueryOptionsBuilder) -> None:
        spec = builder.gyms(GymsRequest(**VIEWPORT, **PREVIOUS))

        assert isinstance(spec.spatial, NewlyVisible)


class TestValidation:
    """요청 검증 테스트."""

    @pytest.mark.parametrize("value", ["abc", float("nan"), float("inf"), True, [1]])
    def test_invalid_coordinate(self, builder: QueryOptionsBuilder, value: Any) -> None:
        with pytest.raises(InvalidCoordinateError) as exc_info:
            builder.active_spawns(ActiveSpawnsRequest(sw_lat=value))
        assert "sw_lat" in exc_info.value.message

    def test_latitude_out_of_range(self, builder: QueryOptionsBuilder) -> None:
        with pytest.raises(InvalidCoordinateError, match="out of range"):
            builder.gyms(GymsRequest(sw_lat=-91, sw_lng=0, ne_lat=10, ne_lng=10))

    def test_longitude_out_of_range(self, builder: QueryOptionsBuilder) -> None:
        with pytest.raises(InvalidCoordinateError):
            builder.gyms(GymsRequest(sw_lat=0, sw_lng=0, ne_lat=10, ne_lng=181))

    def test_previous_viewport_validated_with_timestamp(
        self, builder: QueryOptionsBuilder
    ) -> None:
        """timestamp가 있어도 이전 viewport 좌표는 검증."""
        with pytest.raises(InvalidCoordinateError) as exc_info:
            builder.active_spawns(
                ActiveSpawnsRequest(timestamp=TIMESTAMP_MS, o_ne_lng="east", **VIEWPORT)
            )
        assert "o_ne_lng" in exc_info.value.message

    @pytest.mark.parametrize("value", ["yesterday", -1, float("nan"), True, 1e30])
    def test_invalid_timestamp(self, builder: QueryOptionsBuilder, value: Any) -> None:
        with pytest.raises(InvalidTimestampError):
            builder.gyms(GymsRequest(timestamp=value, **VIEWPORT))

    @pytest.mark.parametrize("value", ["pikachu", "1.5", True, None])
    def test_invalid_species_id(self, builder: QueryOptionsBuilder, value: Any) -> None:
        with pytest.raises(InvalidSpeciesIdError):
            builder.active_spawns_by_ids(SpawnsByIdsRequest(whitelist=[1, value]))

    @pytest.mark.parametrize("value", [-1, 32768, "40000"])
    def test_species_id_out_of_range(self, builder: QueryOptionsBuilder, value: Any) -> None:
        """pokemon_id 컬럼(SMALLINT) 범위를 벗어나면 조회 전에 거부."""
        with pytest.raises(InvalidSpeciesIdError):
            builder.active_spawns(ActiveSpawnsRequest(blacklist=[value]))

    @pytest.mark.parametrize("value", ["25", b"25"])
    def test_species_ids_as_bare_string(self, builder: QueryOptionsBuilder, value: Any) -> None:
        """문자열을 글자 단위 id 목록으로 해석하지 않음."""
        with pytest.raises(InvalidSpeciesIdError):
            builder.active_spawns(ActiveSpawnsRequest(blacklist=value))

    def test_errors_share_base(self) -> None:
        assert issubclass(InvalidCoordinateError, ValidationError)
        assert issubclass(InvalidTimestampError, ValidationError)
        assert issubclass(InvalidSpeciesIdError, ValidationError)


class TestSpecMatches:
    """조회 명세의 메모리 평가 테스트."""

    def test_spawn_spec_matches(
        self, builder: QueryOptionsBuilder, sample_spawn: Spawn
    ) -> None:
        spec = builder.active_spawns(ActiveSpawnsRequest(**VIEWPORT))
        assert spec.matches(sample_spawn)

    def test_expired_spawn(self, builder: QueryOptionsBuilder, now: datetime) -> None:
        spec = builder.active_spawns(ActiveSpawnsRequest())
        expired = Spawn(
            encounter_id="old",
            spawnpoint_id="sp",
            pokemon_id=1,
            latitude=5.0,
            longitude=5.0,
            disappear_time=now - timedelta(minutes=1),
        )
        assert not spec.matches(expired)

    def test_blacklisted_spawn(self, builder: QueryOptionsBuilder, sample_spawn: Spawn) -> None:
        spec = builder.active_spawns(ActiveSpawnsRequest(blacklist=[sample_spawn.pokemon_id]))
        assert not spec.matches(sample_spawn)

    def test_spawn_modified_before_timestamp(
        self, builder: QueryOptionsBuilder, sample_spawn: Spawn
    ) -> None:
        """last_modified(11:55)가 timestamp(12:00) 이전이면 제외."""
        spec = builder.active_spawns(ActiveSpawnsRequest(timestamp=TIMESTAMP_MS, **VIEWPORT))
        assert not spec.matches(sample_spawn)

    def test_gym_uses_last_scanned(self, builder: QueryOptionsBuilder, sample_gym: Gym) -> None:
        """체육관 incremental sync는 last_scanned 기준."""
        # last_scanned 11:59, timestamp 11:58
        spec = builder.gyms(GymsRequest(timestamp=TIMESTAMP_MS - 120_000, **VIEWPORT))
        assert spec.matches(sample_gym)

    def test_gym_outside_new_area(self, builder: QueryOptionsBuilder, sample_gym: Gym) -> None:
        spec = builder.gyms(GymsRequest(**VIEWPORT, **PREVIOUS))
        assert not spec.matches(sample_gym)


class TestGreatCircle:
    """great_circle_miles 테스트."""

    def test_same_point(self) -> None:
        assert great_circle_miles(5.0, 5.0, 5.0, 5.0) == pytest.approx(0.0, abs=1e-3)

    def test_farther_is_larger(self) -> None:
        near = great_circle_miles(5.0, 5.0, 6.0, 6.0)
        far = great_circle_miles(5.0, 5.0, 10.0, 10.0)
        assert 0 < near < far

    def test_antipodal(self) -> None:
        assert great_circle_miles(0.0, 0.0, 0.0, 180.0) == pytest.approx(
            math.pi * EARTH_RADIUS_MILES
        )

    def test_one_degree_latitude(self) -> None:
        """위도 1도는 약 69 mile."""
        assert great_circle_miles(0.0, 0.0, 1.0, 0.0) == pytest.approx(69.1, abs=0.1)

    def test_viewport_center_ranking(self) -> None:
        """viewport (0,0)-(10,10) 중심 기준: (5,5) 체육관이 (10,10)보다 앞."""
        center = Viewport.from_bounds(0, 0, 10, 10).center()
        at_center = great_circle_miles(center.latitude, center.longitude, 5.0, 5.0)
        at_corner = great_circle_miles(center.latitude, center.longitude, 10.0, 10.0)

        assert at_center == pytest.approx(0.0, abs=1e-3)
        assert at_corner > at_center
