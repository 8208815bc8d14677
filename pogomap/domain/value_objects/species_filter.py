"""Species Filter Value Objects.

Spawn 조회 시 species id 조건입니다. IN / NOT IN 필터는 항상 비어있지 않은
집합만 가지며, 빈 집합은 ``AnySpecies`` (필터 없음)로 표현합니다.
"""

from __future__ import annotations

from dataclasses import dataclass

from pogomap.domain.exceptions import EmptySpeciesSetError


@dataclass(frozen=True)
class AnySpecies:
    """Species 조건 없음."""

    def matches(self, species_id: int) -> bool:
        return True


@dataclass(frozen=True)
class IncludeSpecies:
    """species id가 ``ids`` 안에 있어야 함."""

    ids: frozenset[int]

    def __post_init__(self) -> None:
        if not self.ids:
            raise EmptySpeciesSetError("IncludeSpecies")

    def matches(self, species_id: int) -> bool:
        return species_id in self.ids


@dataclass(frozen=True)
class ExcludeSpecies:
    """species id가 ``ids`` 안에 없어야 함."""

    ids: frozenset[int]

    def __post_init__(self) -> None:
        if not self.ids:
            raise EmptySpeciesSetError("ExcludeSpecies")

    def matches(self, species_id: int) -> bool:
        return species_id not in self.ids


SpeciesFilter = AnySpecies | IncludeSpecies | ExcludeSpecies
