"""
Tests for requirements validation / gender parsing
"""

import pytest
from common.application.result import Err, Ok
from parttime.domain import (
    GenderRequirement,
    ValidationErrorKind,
    parse_gender_requirement,
    validate_requirements,
)


class TestValidateRequirements:
    @pytest.mark.parametrize("raw", [None, "", "   ", "a" * 200, "男生优先！@#"])
    def test_accepts(self, raw):
        """한도 이내 텍스트는 통과"""
        assert validate_requirements(raw) == Ok(None)

    def test_over_max_length_is_too_long(self):
        """200자 초과는 TOO_LONG"""
        result = validate_requirements("a" * 201)

        assert isinstance(result, Err)
        assert result.code == ValidationErrorKind.TOO_LONG
        assert result.message == "要求字段长度不能超过200字符"

    def test_max_length_is_configurable(self):
        """max_length 인자로 한도 변경"""
        result = validate_requirements("abc", max_length=2)

        assert result.code == ValidationErrorKind.TOO_LONG


class TestParseGenderRequirement:
    def test_none(self):
        """None 은 통과"""
        assert parse_gender_requirement(None) == GenderRequirement("any", None)

    def test_empty(self):
        """빈 문자열은 통과"""
        assert parse_gender_requirement("") == GenderRequirement("any", None)

    def test_male_keyword_stripped(self):
        """男 키워드 제거 후 male"""
        result = parse_gender_requirement("男生优先,能吃苦")

        assert result == GenderRequirement(gender="male", extra="生优先,能吃苦")

    def test_female_keyword_stripped(self):
        """女 키워드 제거 후 female"""
        result = parse_gender_requirement("女，形象好")

        assert result == GenderRequirement(gender="female", extra="形象好")

    def test_keyword_only_gives_null_extra(self):
        """키워드만 있으면 extra 는 None"""
        assert parse_gender_requirement("男") == GenderRequirement("male", None)
        assert parse_gender_requirement(" 女。") == GenderRequirement("female", None)

    def test_trailing_keyword_trims_separator(self):
        """끝의 키워드 제거 후 구분자 정리"""
        result = parse_gender_requirement("能吃苦，男")

        assert result == GenderRequirement("male", "能吃苦")

    def test_middle_keyword_keeps_one_separator(self):
        """중간 키워드 제거 시 구분자 하나만 남김"""
        result = parse_gender_requirement("能吃苦，男，有经验")

        assert result == GenderRequirement("male", "能吃苦，有经验")

    def test_english_case_insensitive(self):
        """영문 키워드는 대소문자 무시"""
        assert parse_gender_requirement("MALE, strong") == GenderRequirement(
            "male", "strong"
        )
        assert parse_gender_requirement("Female only") == GenderRequirement(
            "female", "only"
        )

    def test_female_does_not_match_male(self):
        """female 은 male 로 인식하지 않음"""
        assert parse_gender_requirement("female").gender == "female"

    def test_english_keyword_inside_identifier_is_ignored(self):
        """male_only, male2 처럼 밑줄/숫자에 붙은 단어는 키워드가 아님"""
        assert parse_gender_requirement("male_only") == GenderRequirement("any", "male_only")
        assert parse_gender_requirement("female2").gender == "any"
        assert parse_gender_requirement("Male only").gender == "male"

    def test_no_keyword_is_any(self):
        """키워드가 없으면 any"""
        result = parse_gender_requirement("  能吃苦耐劳  ")

        assert result == GenderRequirement("any", "能吃苦耐劳")

    def test_both_genders_is_any_and_keeps_text(self):
        """남녀 모두 있으면 any, 텍스트 유지"""
        result = parse_gender_requirement("男生女生都可以")

        assert result == GenderRequirement("any", "男生女生都可以")

    @pytest.mark.parametrize("phrase", ["男女不限", "性别不限", "不限性别", "无性别要求"])
    def test_no_limit_phrases(self, phrase):
        """男女不限 등은 any"""
        result = parse_gender_requirement(f"{phrase}，会英语")

        assert result == GenderRequirement("any", "会英语")

    def test_to_dict(self):
        """응답용 dict 변환"""
        assert parse_gender_requirement(None).to_dict() == {
            "gender": "any",
            "extra": None,
        }
