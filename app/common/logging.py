from __future__ import annotations

import logging

from common.masking import mask_secrets
from common.request_id import get_request_id


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # formatter에서 %(request_id)s 를 안전하게 쓰도록 보장
        record.request_id = get_request_id()  # type: ignore[attr-defined]
        return True


class MaskingFilter(logging.Filter):
    """
    로그 메시지에 포함된 토큰/연락처를 마스킹합니다.

    포맷 인자가 있는 경우 먼저 렌더링한 뒤 마스킹하고 args를 비웁니다.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = mask_secrets(record.getMessage())
        record.args = None
        return True
