from __future__ import annotations

import logging

from common.application.result import Err, Ok, Result
from parttime.domain.contact import (
    CONTACT_MAX_LENGTH,
    ContactInfo,
    parse_contact,
    validate_contact,
)

logger = logging.getLogger(__name__)


class ParseContactUseCase:
    """
    연락처 검증 후 파싱.

    - 검증 실패: Err(code=ValidationErrorKind, message=사용자 노출용 메시지)
    - 성공: Ok(ContactInfo)
    """

    def __init__(self, *, max_length: int = CONTACT_MAX_LENGTH):
        self._max_length = max_length

    def execute(self, *, contact: str | None) -> Result[ContactInfo]:
        validation = validate_contact(contact, max_length=self._max_length)
        if isinstance(validation, Err):
            logger.debug("contact rejected: %s", validation.code)
            return validation
        return Ok(parse_contact(contact))
