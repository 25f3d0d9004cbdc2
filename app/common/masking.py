from __future__ import annotations

import re

_SECRET_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"Bearer\s+[A-Za-z0-9\-\._~\+/]+=*", re.IGNORECASE),
    re.compile(
        r"\b(access|refresh|access_token|refresh_token|password)\b\s*[:=]\s*[^\s,]+",
        re.IGNORECASE,
    ),
]

# 11자리 휴대폰 번호는 가운데 4자리만 가린다 (138****5678)
_PHONE_PATTERN = re.compile(r"(?<!\d)(1\d{2})\d{4}(\d{4})(?!\d)")

_MAX_LENGTH = 500


def mask_phone(text: str) -> str:
    if not text:
        return text
    return _PHONE_PATTERN.sub(r"\1****\2", text)


def mask_secrets(text: str) -> str:
    """
    로그에 토큰/비밀번호/연락처가 그대로 남지 않도록 마스킹합니다.
    """
    if not text:
        return text
    masked = text
    for pat in _SECRET_PATTERNS:
        masked = pat.sub("[REDACTED]", masked)
    masked = mask_phone(masked)
    if len(masked) > _MAX_LENGTH:
        masked = masked[:_MAX_LENGTH] + "...[TRUNCATED]"
    return masked
