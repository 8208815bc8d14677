"""도메인 예외."""

from pogomap.domain.exceptions.base import DomainError
from pogomap.domain.exceptions.filters import EmptySpeciesSetError

__all__ = [
    "DomainError",
    "EmptySpeciesSetError",
]
