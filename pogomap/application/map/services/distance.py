"""Great-circle distance.

Spherical law of cosines, 지구 반지름 3959 mile.
SQL 쪽 거리 컬럼(``SqlaGymReader``)과 같은 공식을 사용합니다.
"""

from __future__ import annotations

import math

EARTH_RADIUS_MILES = 3959.0


def great_circle_miles(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """두 좌표 사이의 거리를 mile 단위로 반환합니다."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    cosine = math.cos(phi1) * math.cos(phi2) * math.cos(
        math.radians(lng2) - math.radians(lng1)
    ) + math.sin(phi1) * math.sin(phi2)
    # float 오차로 [-1, 1]을 벗어나면 acos가 실패함
    clamped = min(1.0, max(-1.0, cosine))
    return EARTH_RADIUS_MILES * math.acos(clamped)
