from __future__ import annotations

from enum import Enum


class ValidationErrorKind(str, Enum):
    """입력 검증 실패 종류. Err.code 로 그대로 사용합니다."""

    EMPTY = "EMPTY"
    TOO_LONG = "TOO_LONG"
    UNRECOGNIZED_FORMAT = "UNRECOGNIZED_FORMAT"

    def __str__(self) -> str:
        return self.value
