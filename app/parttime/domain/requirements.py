"""
요구사항(requirements) 검증/성별 조건 파싱

키워드 테이블:
- 성별 무관 문구: 男女不限 / 性别不限 / 不限性别 / 无性别要求
- male: 男, male (영문은 앞뒤가 영숫자/밑줄이 아닐 때만, 대소문자 무시)
- female: 女, female

키워드 제거 규칙: 키워드와 그 바로 뒤에 이어지는 구분자(공백/구두점) 묶음을 함께 제거하고,
남은 문자열의 앞뒤 구분자를 잘라냅니다.
예) "男生优先,能吃苦" → gender="male", extra="生优先,能吃苦"
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from common.application.result import Err, Ok, Result
from parttime.domain.errors import ValidationErrorKind

Gender = Literal["male", "female", "any"]

REQUIREMENTS_MAX_LENGTH = 200

_SEPARATORS = r"[\s,，.。;；、:：!！/|]"

NO_LIMIT_PHRASES = ("男女不限", "性别不限", "不限性别", "无性别要求")

GENDER_KEYWORDS: dict[str, tuple[str, ...]] = {
    "male": ("男", r"(?<![a-z0-9_])male(?![a-z0-9_])"),
    "female": ("女", r"(?<![a-z0-9_])female(?![a-z0-9_])"),
}


def _keyword_pattern(keywords: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile("(?:" + "|".join(keywords) + ")", re.IGNORECASE)


def _strip_pattern(keywords: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile(
        "(?:" + "|".join(keywords) + ")" + _SEPARATORS + "*", re.IGNORECASE
    )


_NO_LIMIT_DETECT = _keyword_pattern(tuple(re.escape(p) for p in NO_LIMIT_PHRASES))
_NO_LIMIT_STRIP = _strip_pattern(tuple(re.escape(p) for p in NO_LIMIT_PHRASES))
_GENDER_DETECT = {g: _keyword_pattern(kw) for g, kw in GENDER_KEYWORDS.items()}
_GENDER_STRIP = {g: _strip_pattern(kw) for g, kw in GENDER_KEYWORDS.items()}
_EDGE_SEPARATORS = re.compile(rf"^{_SEPARATORS}+|{_SEPARATORS}+$")


@dataclass(frozen=True, slots=True)
class GenderRequirement:
    gender: Gender
    extra: str | None

    def to_dict(self) -> dict:
        return {"gender": self.gender, "extra": self.extra}


def _clean_remainder(text: str) -> str | None:
    remainder = _EDGE_SEPARATORS.sub("", text).strip()
    return remainder or None


def parse_gender_requirement(raw: str | None) -> GenderRequirement:
    if not raw:
        return GenderRequirement(gender="any", extra=None)

    if _NO_LIMIT_DETECT.search(raw):
        return GenderRequirement(
            gender="any", extra=_clean_remainder(_NO_LIMIT_STRIP.sub("", raw))
        )

    found = [g for g, pattern in _GENDER_DETECT.items() if pattern.search(raw)]
    if len(found) != 1:
        # 키워드가 없거나 남/여가 동시에 등장하면 성별 무관으로 보고 원문을 유지
        return GenderRequirement(gender="any", extra=_clean_remainder(raw))

    gender: Gender = found[0]  # type: ignore[assignment]
    return GenderRequirement(
        gender=gender, extra=_clean_remainder(_GENDER_STRIP[gender].sub("", raw))
    )


def validate_requirements(
    raw: str | None, *, max_length: int = REQUIREMENTS_MAX_LENGTH
) -> Result[None]:
    if not raw:
        return Ok(None)

    if len(raw) > max_length:
        return Err(
            code=ValidationErrorKind.TOO_LONG,
            message=f"要求字段长度不能超过{max_length}字符",
            details={
                "field": "requirements",
                "max_length": max_length,
                "length": len(raw),
            },
        )

    return Ok(None)
