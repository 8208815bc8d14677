"""검증 관련 예외.

모두 store 조회 전에 발생합니다.
"""

from __future__ import annotations

from typing import Any

from pogomap.application.common.exceptions.base import ApplicationError


class ValidationError(ApplicationError):
    """요청 파라미터 검증 실패."""


class InvalidCoordinateError(ValidationError):
    """숫자가 아니거나 범위를 벗어난 좌표."""

    def __init__(self, name: str, value: Any, reason: str = "must be a finite number") -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name} '{value}': {reason}")


class InvalidTimestampError(ValidationError):
    """숫자가 아니거나 음수인 timestamp."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Invalid timestamp '{value}'. Expected non-negative POSIX milliseconds."
        )


class InvalidSpeciesIdError(ValidationError):
    """정수가 아니거나 범위를 벗어난 species id."""

    def __init__(self, value: Any, reason: str = "Expected an integer.") -> None:
        self.value = value
        super().__init__(f"Invalid pokemon id '{value}'. {reason}")


class InvalidGymIdError(ValidationError):
    """비어있는 gym id."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid gym id '{value}'")
