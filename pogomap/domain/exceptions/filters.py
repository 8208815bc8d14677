"""Filter 도메인 예외."""

from pogomap.domain.exceptions.base import DomainError


class EmptySpeciesSetError(DomainError):
    """빈 species 집합으로 IN / NOT IN 필터를 만들 수 없음."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"{kind} requires at least one species id")
