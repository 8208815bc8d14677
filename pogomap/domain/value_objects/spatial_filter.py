"""Spatial Filter Value Objects.

한 번의 지도 조회에서 적용되는 위치/시간 조건입니다. 네 가지 경우는 서로 배타적입니다.

* ``Unbounded``: 위치/시간 조건 없음.
* ``WithinViewport``: viewport 안.
* ``ModifiedSince``: ``since`` 이후 변경된 레코드만 (incremental sync).
  viewport가 있으면 그 안으로 제한합니다.
* ``NewlyVisible``: 이전 viewport 밖 (지도 이동 시 새로 보이는 영역).
  viewport가 있으면 그 안으로 제한합니다.

``viewport``가 ``None``인 ``ModifiedSince`` / ``NewlyVisible``은 spawn 조회에서만
만들어집니다. 체육관 조회는 viewport가 없으면 항상 ``Unbounded``입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pogomap.domain.value_objects.viewport import Viewport


def _in_viewport(viewport: Viewport | None, latitude: float, longitude: float) -> bool:
    return viewport is None or viewport.contains(latitude, longitude)


@dataclass(frozen=True)
class Unbounded:
    def matches(
        self, latitude: float, longitude: float, modified_at: datetime | None
    ) -> bool:
        return True


@dataclass(frozen=True)
class WithinViewport:
    viewport: Viewport

    def matches(
        self, latitude: float, longitude: float, modified_at: datetime | None
    ) -> bool:
        return self.viewport.contains(latitude, longitude)


@dataclass(frozen=True)
class ModifiedSince:
    viewport: Viewport | None
    since: datetime

    def matches(
        self, latitude: float, longitude: float, modified_at: datetime | None
    ) -> bool:
        # NULL modification time never compares greater.
        if modified_at is None or modified_at <= self.since:
            return False
        return _in_viewport(self.viewport, latitude, longitude)


@dataclass(frozen=True)
class NewlyVisible:
    viewport: Viewport | None
    previous: Viewport

    def matches(
        self, latitude: float, longitude: float, modified_at: datetime | None
    ) -> bool:
        if self.previous.contains(latitude, longitude):
            return False
        return _in_viewport(self.viewport, latitude, longitude)


SpatialFilter = Unbounded | WithinViewport | ModifiedSince | NewlyVisible
