from __future__ import annotations

from django.conf import settings
from parttime.application.usecases.parse_contact import ParseContactUseCase
from parttime.application.usecases.parse_requirements import ParseRequirementsUseCase
from parttime.domain.contact import CONTACT_MAX_LENGTH
from parttime.domain.requirements import REQUIREMENTS_MAX_LENGTH


def contact_max_length() -> int:
    return int(getattr(settings, "PARTTIME_CONTACT_MAX_LENGTH", CONTACT_MAX_LENGTH))


def requirements_max_length() -> int:
    return int(
        getattr(settings, "PARTTIME_REQUIREMENTS_MAX_LENGTH", REQUIREMENTS_MAX_LENGTH)
    )


def build_parse_contact_usecase() -> ParseContactUseCase:
    return ParseContactUseCase(max_length=contact_max_length())


def build_parse_requirements_usecase() -> ParseRequirementsUseCase:
    return ParseRequirementsUseCase(max_length=requirements_max_length())
