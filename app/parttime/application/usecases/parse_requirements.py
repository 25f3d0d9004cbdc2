from __future__ import annotations

import logging

from common.application.result import Err, Ok, Result
from parttime.domain.requirements import (
    REQUIREMENTS_MAX_LENGTH,
    GenderRequirement,
    parse_gender_requirement,
    validate_requirements,
)

logger = logging.getLogger(__name__)


class ParseRequirementsUseCase:
    """요구사항 검증 후 성별 조건 파싱. requirements 는 생략 가능."""

    def __init__(self, *, max_length: int = REQUIREMENTS_MAX_LENGTH):
        self._max_length = max_length

    def execute(self, *, requirements: str | None) -> Result[GenderRequirement]:
        validation = validate_requirements(requirements, max_length=self._max_length)
        if isinstance(validation, Err):
            logger.debug("requirements rejected: %s", validation.code)
            return validation
        return Ok(parse_gender_requirement(requirements))
