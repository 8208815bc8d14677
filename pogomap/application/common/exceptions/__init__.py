"""Application Exceptions."""

from pogomap.application.common.exceptions.base import ApplicationError
from pogomap.application.common.exceptions.validation import (
    InvalidCoordinateError,
    InvalidGymIdError,
    InvalidSpeciesIdError,
    InvalidTimestampError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "ValidationError",
    "InvalidCoordinateError",
    "InvalidTimestampError",
    "InvalidSpeciesIdError",
    "InvalidGymIdError",
]
