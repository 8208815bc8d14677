"""Viewport Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from pogomap.domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class Viewport:
    """클라이언트 지도에 보이는 위도/경도 bounding box.

    남서(sw) / 북동(ne) 모서리로 정의되며 경계는 닫힌 구간입니다.
    sw가 ne보다 큰 box는 거부하지 않고, 아무 좌표도 포함하지 않는 box로 취급합니다.
    """

    south_west: Coordinates
    north_east: Coordinates

    @classmethod
    def from_bounds(
        cls, sw_lat: float, sw_lng: float, ne_lat: float, ne_lng: float
    ) -> Viewport:
        return cls(
            south_west=Coordinates(latitude=sw_lat, longitude=sw_lng),
            north_east=Coordinates(latitude=ne_lat, longitude=ne_lng),
        )

    @property
    def sw_lat(self) -> float:
        return self.south_west.latitude

    @property
    def sw_lng(self) -> float:
        return self.south_west.longitude

    @property
    def ne_lat(self) -> float:
        return self.north_east.latitude

    @property
    def ne_lng(self) -> float:
        return self.north_east.longitude

    def contains(self, latitude: float, longitude: float) -> bool:
        """좌표가 box 안에 있는지 (경계 포함) 반환합니다."""
        return (
            self.sw_lat <= latitude <= self.ne_lat
            and self.sw_lng <= longitude <= self.ne_lng
        )

    def center(self) -> Coordinates:
        """Viewport의 기하학적 중심을 반환합니다."""
        height = self.ne_lat - self.sw_lat
        width = self.ne_lng - self.sw_lng
        return Coordinates(
            latitude=self.ne_lat - height / 2,
            longitude=self.ne_lng - width / 2,
        )
