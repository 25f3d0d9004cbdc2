from parttime.domain.contact import (
    ContactInfo,
    parse_contact,
    validate_contact,
)
from parttime.domain.errors import ValidationErrorKind
from parttime.domain.requirements import (
    GenderRequirement,
    parse_gender_requirement,
    validate_requirements,
)

__all__ = [
    "ContactInfo",
    "GenderRequirement",
    "ValidationErrorKind",
    "parse_contact",
    "parse_gender_requirement",
    "validate_contact",
    "validate_requirements",
]
