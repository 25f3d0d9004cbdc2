from common.application.result import Err
from parttime.application.container import (
    contact_max_length,
    requirements_max_length,
)
from parttime.domain.contact import validate_contact as check_contact
from parttime.domain.requirements import validate_requirements as check_requirements
from parttime.models import Parttime
from rest_framework import serializers


def _bounded_text(label: str, max_length: int, **kwargs) -> serializers.CharField:
    message = f"{label}长度必须在1-{max_length}字符之间"
    return serializers.CharField(
        max_length=max_length,
        error_messages={
            "required": f"{label}不能为空",
            "blank": message,
            "max_length": message,
        },
        **kwargs,
    )


class ParttimeSerializer(serializers.ModelSerializer):
    name = _bounded_text("兼职名称", 100)
    type = _bounded_text("兼职类型", 50)
    salary = _bounded_text("薪资信息", 100)
    worktime = _bounded_text("工作时间", 200)
    location = _bounded_text("工作地点", 200)
    description = _bounded_text("工作描述", 2000)
    # 길이/형식 검증은 validate_contact 가 담당 (원문 그대로 보존)
    contact = serializers.CharField(
        allow_blank=True,
        trim_whitespace=False,
        error_messages={"required": "联系方式不能为空"},
    )
    requirements = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    tags = serializers.ListField(
        child=serializers.CharField(max_length=30), required=False, max_length=10
    )

    class Meta:
        model = Parttime
        fields = [
            "id",
            "name",
            "type",
            "salary",
            "worktime",
            "location",
            "description",
            "contact",
            "contact_method",
            "requirements",
            "gender",
            "tags",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "contact_method",
            "gender",
            "created_at",
            "updated_at",
        ]

    def validate_contact(self, value):
        result = check_contact(value, max_length=contact_max_length())
        if isinstance(result, Err):
            raise serializers.ValidationError(result.message, code=str(result.code))
        return value

    def validate_requirements(self, value):
        result = check_requirements(value, max_length=requirements_max_length())
        if isinstance(result, Err):
            raise serializers.ValidationError(result.message, code=str(result.code))
        # 빈 문자열은 "요구사항 없음"으로 저장
        return value or None


class ParseContactSerializer(serializers.Serializer):
    contact = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )


class ParseRequirementsSerializer(serializers.Serializer):
    requirements = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )


class ContactInfoSerializer(serializers.Serializer):
    method = serializers.ChoiceField(choices=Parttime.ContactMethod.choices)
    raw = serializers.CharField()
    normalized = serializers.CharField()


class GenderRequirementSerializer(serializers.Serializer):
    gender = serializers.ChoiceField(choices=Parttime.Gender.choices)
    extra = serializers.CharField(allow_null=True)
