"""
연락처(contact) 검증/파싱

사용자가 입력한 연락처 문자열에서 연락 수단(phone/qq/wechat/other)을 판별합니다.

판별 순서는 고정입니다: phone → qq → wechat → other.
11자리 휴대폰 번호는 QQ 번호 범위(5~12자리)와 겹치므로 phone 을 먼저 검사합니다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from common.application.result import Err, Ok, Result
from parttime.domain.errors import ValidationErrorKind

ContactMethod = Literal["phone", "qq", "wechat", "other"]

CONTACT_MAX_LENGTH = 100

_WHITESPACE = re.compile(r"\s+")

# (method, pattern) - 순서가 곧 우선순위
CONTACT_PATTERNS: tuple[tuple[ContactMethod, re.Pattern[str]], ...] = (
    ("phone", re.compile(r"1[0-9]{10}")),
    ("qq", re.compile(r"[0-9]{5,12}")),
    ("wechat", re.compile(r"(?=[A-Za-z0-9_]*[A-Za-z])[A-Za-z0-9_]{6,20}")),
)

UNRECOGNIZED_CONTACT_MESSAGE = (
    "请提供有效的联系方式（11位手机号、5-12位QQ号，"
    "或6-20位字母数字下划线组成且包含字母的微信号）"
)


@dataclass(frozen=True, slots=True)
class ContactInfo:
    method: ContactMethod
    raw: str
    normalized: str

    def to_dict(self) -> dict:
        return {"method": self.method, "raw": self.raw, "normalized": self.normalized}


def normalize_contact(raw: str) -> str:
    """앞뒤/중간 공백만 제거합니다. 숫자/문자 변환은 하지 않습니다."""
    if not raw:
        return ""
    return _WHITESPACE.sub("", raw)


def detect_contact_method(normalized: str) -> ContactMethod:
    for method, pattern in CONTACT_PATTERNS:
        if pattern.fullmatch(normalized):
            return method
    return "other"


def parse_contact(raw: str) -> ContactInfo:
    """
    연락처를 파싱합니다. 실패하지 않으며, 어떤 패턴에도 맞지 않으면 method="other".

    validate_contact 를 먼저 통과했다고 가정하지만 단독 호출도 안전합니다.
    """
    raw = raw if raw is not None else ""
    normalized = normalize_contact(raw)
    return ContactInfo(
        method=detect_contact_method(normalized),
        raw=raw,
        normalized=normalized,
    )


def validate_contact(
    raw: str | None, *, max_length: int = CONTACT_MAX_LENGTH
) -> Result[None]:
    if raw is None or not str(raw).strip():
        return Err(
            code=ValidationErrorKind.EMPTY,
            message="联系方式不能为空",
            details={"field": "contact"},
        )

    if len(raw) > max_length:
        return Err(
            code=ValidationErrorKind.TOO_LONG,
            message=f"联系方式长度不能超过{max_length}字符",
            details={"field": "contact", "max_length": max_length, "length": len(raw)},
        )

    if detect_contact_method(normalize_contact(raw)) == "other":
        return Err(
            code=ValidationErrorKind.UNRECOGNIZED_FORMAT,
            message=UNRECOGNIZED_CONTACT_MESSAGE,
            details={"field": "contact", "accepted": ["phone", "qq", "wechat"]},
        )

    return Ok(None)
