"""Query Options Builder Service.

지도 조회 파라미터를 ``SpawnQuerySpec`` / ``GymQuerySpec``으로 변환합니다.
Port 의존성이 없는 순수 로직이며, 모든 검증은 여기서 store 조회 전에 끝납니다.

Spatial filter 선택 순서:
    1. timestamp가 있으면 ``ModifiedSince`` (이전 viewport는 무시)
    2. 이전 viewport가 완전하면 ``NewlyVisible``
    3. viewport가 완전하면 ``WithinViewport``
    4. 그 외 ``Unbounded``

1, 2는 viewport가 없어도 적용되며 그때는 viewport 조건만 빠집니다.
체육관은 viewport가 없으면 timestamp와 이전 viewport를 보지 않고 ``Unbounded``입니다.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Any, Callable, Iterable

from pogomap.application.common.exceptions import (
    InvalidCoordinateError,
    InvalidSpeciesIdError,
    InvalidTimestampError,
)
from pogomap.application.map.dto import (
    ActiveSpawnsRequest,
    GymQuerySpec,
    GymsRequest,
    SpawnQuerySpec,
    SpawnsByIdsRequest,
)
from pogomap.domain.value_objects import (
    AnySpecies,
    ExcludeSpecies,
    IncludeSpecies,
    ModifiedSince,
    NewlyVisible,
    SpatialFilter,
    SpeciesFilter,
    Unbounded,
    Viewport,
    WithinViewport,
)
from pogomap.domain.value_objects.coordinates import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)

logger = logging.getLogger(__name__)

DEFAULT_SPAWN_LIMIT = 1000
DEFAULT_GYM_LIMIT = 50000

# pokemon.pokemon_id SMALLINT
MIN_SPECIES_ID = 0
MAX_SPECIES_ID = 32767


def utc_now() -> datetime:
    """현재 시각 (naive UTC)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class QueryOptionsBuilder:
    """지도 조회 명세 빌더.

    Args:
        spawn_limit: spawn 조회 최대 결과 수
        gym_limit: 체육관 조회 최대 결과 수
        clock: "지금"을 반환하는 함수 (naive UTC)
    """

    def __init__(
        self,
        spawn_limit: int = DEFAULT_SPAWN_LIMIT,
        gym_limit: int = DEFAULT_GYM_LIMIT,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._spawn_limit = spawn_limit
        self._gym_limit = gym_limit
        self._clock = clock

    def active_spawns(self, request: ActiveSpawnsRequest) -> SpawnQuerySpec:
        """blacklist / viewport / timestamp / 이전 viewport 기준 활성 spawn 명세."""
        species = self._species_filter(
            whitelist=frozenset(),
            blacklist=self._parse_species_ids(request.blacklist),
        )
        viewport = self._parse_viewport(
            ("sw_lat", "sw_lng", "ne_lat", "ne_lng"),
            (request.sw_lat, request.sw_lng, request.ne_lat, request.ne_lng),
        )
        previous = self._parse_viewport(
            ("o_sw_lat", "o_sw_lng", "o_ne_lat", "o_ne_lng"),
            (request.o_sw_lat, request.o_sw_lng, request.o_ne_lat, request.o_ne_lng),
        )
        since = self._parse_timestamp(request.timestamp)

        return SpawnQuerySpec(
            active_after=self._clock(),
            species=species,
            spatial=self._spatial_filter(viewport, since, previous),
            limit=self._spawn_limit,
        )

    def active_spawns_by_ids(self, request: SpawnsByIdsRequest) -> SpawnQuerySpec:
        """whitelist / blacklist / viewport 기준 활성 spawn 명세."""
        species = self._species_filter(
            whitelist=self._parse_species_ids(request.whitelist),
            blacklist=self._parse_species_ids(request.blacklist),
        )
        viewport = self._parse_viewport(
            ("sw_lat", "sw_lng", "ne_lat", "ne_lng"),
            (request.sw_lat, request.sw_lng, request.ne_lat, request.ne_lng),
        )

        return SpawnQuerySpec(
            active_after=self._clock(),
            species=species,
            spatial=self._spatial_filter(viewport, None, None),
            limit=self._spawn_limit,
        )

    def gyms(self, request: GymsRequest) -> GymQuerySpec:
        """viewport / timestamp / 이전 viewport 기준 체육관 명세.

        viewport가 있으면 중심으로부터의 거리순으로 정렬합니다.
        """
        viewport = self._parse_viewport(
            ("sw_lat", "sw_lng", "ne_lat", "ne_lng"),
            (request.sw_lat, request.sw_lng, request.ne_lat, request.ne_lng),
        )
        previous = self._parse_viewport(
            ("o_sw_lat", "o_sw_lng", "o_ne_lat", "o_ne_lng"),
            (request.o_sw_lat, request.o_sw_lng, request.o_ne_lat, request.o_ne_lng),
        )
        since = self._parse_timestamp(request.timestamp)

        if viewport is None:
            return GymQuerySpec(spatial=Unbounded(), limit=self._gym_limit)

        return GymQuerySpec(
            spatial=self._spatial_filter(viewport, since, previous),
            limit=self._gym_limit,
            rank_from=viewport.center(),
        )

    @staticmethod
    def _spatial_filter(
        viewport: Viewport | None,
        since: datetime | None,
        previous: Viewport | None,
    ) -> SpatialFilter:
        if since is not None:
            spatial: SpatialFilter = ModifiedSince(viewport=viewport, since=since)
        elif previous is not None:
            spatial = NewlyVisible(viewport=viewport, previous=previous)
        elif viewport is not None:
            spatial = WithinViewport(viewport=viewport)
        else:
            spatial = Unbounded()
        logger.debug("Spatial filter selected", extra={"spatial_filter": type(spatial).__name__})
        return spatial

    @staticmethod
    def _species_filter(whitelist: frozenset[int], blacklist: frozenset[int]) -> SpeciesFilter:
        # 빈 목록은 "필터 없음"이며 IN () / NOT IN ()을 만들지 않음
        if whitelist:
            return IncludeSpecies(ids=whitelist)
        if blacklist:
            return ExcludeSpecies(ids=blacklist)
        return AnySpecies()

    @classmethod
    def _parse_viewport(
        cls, names: tuple[str, str, str, str], values: tuple[Any, Any, Any, Any]
    ) -> Viewport | None:
        sw_lat = cls._parse_coordinate(names[0], values[0], MIN_LATITUDE, MAX_LATITUDE)
        sw_lng = cls._parse_coordinate(names[1], values[1], MIN_LONGITUDE, MAX_LONGITUDE)
        ne_lat = cls._parse_coordinate(names[2], values[2], MIN_LATITUDE, MAX_LATITUDE)
        ne_lng = cls._parse_coordinate(names[3], values[3], MIN_LONGITUDE, MAX_LONGITUDE)
        if sw_lat is None or sw_lng is None or ne_lat is None or ne_lng is None:
            return None
        return Viewport.from_bounds(sw_lat, sw_lng, ne_lat, ne_lng)

    @staticmethod
    def _parse_coordinate(name: str, value: Any, low: float, high: float) -> float | None:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        if isinstance(value, bool):
            raise InvalidCoordinateError(name, value)
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise InvalidCoordinateError(name, value) from None
        if not math.isfinite(number):
            raise InvalidCoordinateError(name, value)
        if not low <= number <= high:
            raise InvalidCoordinateError(name, value, reason=f"out of range [{low:g}, {high:g}]")
        return number

    @staticmethod
    def _parse_timestamp(value: Any) -> datetime | None:
        """POSIX milliseconds를 naive UTC datetime으로 변환합니다. 0은 값 없음."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        if isinstance(value, bool):
            raise InvalidTimestampError(value)
        try:
            millis = float(value)
        except (TypeError, ValueError):
            raise InvalidTimestampError(value) from None
        if not math.isfinite(millis) or millis < 0:
            raise InvalidTimestampError(value)
        if millis == 0:
            return None
        try:
            moment = datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise InvalidTimestampError(value) from None
        return moment.replace(tzinfo=None)

    @staticmethod
    def _parse_species_ids(values: Iterable[Any] | None) -> frozenset[int]:
        if values is None:
            return frozenset()
        # "25"를 순회하면 {2, 5}가 되므로 문자열 자체는 목록으로 받지 않음
        if isinstance(values, (str, bytes)):
            raise InvalidSpeciesIdError(values, reason="Expected a list of ids.")
        ids: set[int] = set()
        for value in values:
            if isinstance(value, bool):
                raise InvalidSpeciesIdError(value)
            if isinstance(value, int):
                species_id = value
            else:
                try:
                    species_id = int(str(value).strip())
                except ValueError:
                    raise InvalidSpeciesIdError(value) from None
            if not MIN_SPECIES_ID <= species_id <= MAX_SPECIES_ID:
                raise InvalidSpeciesIdError(
                    value, reason=f"Expected {MIN_SPECIES_ID}..{MAX_SPECIES_ID}."
                )
            ids.add(species_id)
        return frozenset(ids)
