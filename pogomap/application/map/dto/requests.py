"""Map Request DTOs.

HTTP query string에서 그대로 넘어온 값을 담습니다. 좌표와 timestamp는 숫자 또는
숫자 문자열일 수 있으며, ``None`` / ``""``는 값 없음으로 취급합니다.
검증은 ``QueryOptionsBuilder``가 수행합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union

RawNumber = Union[float, int, str, None]


@dataclass
class ActiveSpawnsRequest:
    """활성 spawn 조회 요청."""

    blacklist: Iterable[int | str] = field(default_factory=list)
    sw_lat: RawNumber = None
    sw_lng: RawNumber = None
    ne_lat: RawNumber = None
    ne_lng: RawNumber = None
    timestamp: RawNumber = None
    o_sw_lat: RawNumber = None
    o_sw_lng: RawNumber = None
    o_ne_lat: RawNumber = None
    o_ne_lng: RawNumber = None


@dataclass
class SpawnsByIdsRequest:
    """species id 기준 활성 spawn 조회 요청."""

    whitelist: Iterable[int | str] = field(default_factory=list)
    blacklist: Iterable[int | str] = field(default_factory=list)
    sw_lat: RawNumber = None
    sw_lng: RawNumber = None
    ne_lat: RawNumber = None
    ne_lng: RawNumber = None


@dataclass
class GymsRequest:
    """체육관 조회 요청."""

    sw_lat: RawNumber = None
    sw_lng: RawNumber = None
    ne_lat: RawNumber = None
    ne_lng: RawNumber = None
    timestamp: RawNumber = None
    o_sw_lat: RawNumber = None
    o_sw_lng: RawNumber = None
    o_ne_lat: RawNumber = None
    o_ne_lng: RawNumber = None
