"""
Parttime Service

아르바이트 공고 CRUD / 검색 / 통계
"""

import logging
from typing import Dict, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import Count, Q, QuerySet
from parttime.domain.contact import parse_contact
from parttime.domain.requirements import parse_gender_requirement
from parttime.models import Parttime

logger = logging.getLogger(__name__)


def _apply_derived_fields(data: Dict) -> Dict:
    derived = dict(data)
    if "contact" in derived:
        derived["contact_method"] = parse_contact(derived["contact"]).method
    if "requirements" in derived:
        derived["gender"] = parse_gender_requirement(derived["requirements"]).gender
    return derived


class ParttimeService:
    """
    아르바이트 공고 서비스

    contact / requirements 가 저장될 때마다 파생 필드(contact_method, gender)를 갱신합니다.
    """

    @staticmethod
    def get_parttime(parttime_id) -> Optional[Parttime]:
        try:
            return Parttime.objects.get(id=parttime_id)
        except (Parttime.DoesNotExist, DjangoValidationError):
            logger.warning(f"Parttime {parttime_id} not found")
            return None

    @staticmethod
    def list_parttimes(
        type: Optional[str] = None,
        location: Optional[str] = None,
        gender: Optional[str] = None,
    ) -> QuerySet:
        filters = {}

        if type:
            filters["type"] = type
        if location:
            filters["location__icontains"] = location
        if gender:
            filters["gender"] = gender

        return Parttime.objects.filter(**filters).order_by("-created_at")

    @staticmethod
    def search_parttimes(keyword: str) -> QuerySet:
        return Parttime.objects.filter(
            Q(name__icontains=keyword)
            | Q(description__icontains=keyword)
            | Q(location__icontains=keyword)
            | Q(type__icontains=keyword)
        ).order_by("-created_at")

    @staticmethod
    def create_parttime(data: Dict) -> Parttime:
        with transaction.atomic():
            parttime = Parttime.objects.create(**_apply_derived_fields(data))
            logger.info(f"Created Parttime {parttime.id}")
            return parttime

    @staticmethod
    def update_parttime(parttime_id, data: Dict) -> Optional[Parttime]:
        parttime = ParttimeService.get_parttime(parttime_id)
        if not parttime:
            return None

        with transaction.atomic():
            for key, value in _apply_derived_fields(data).items():
                setattr(parttime, key, value)
            parttime.save()
            logger.info(f"Updated Parttime {parttime_id}")
            return parttime

    @staticmethod
    def delete_parttime(parttime_id) -> bool:
        parttime = ParttimeService.get_parttime(parttime_id)
        if not parttime:
            return False

        with transaction.atomic():
            parttime.delete()
            logger.info(f"Deleted Parttime {parttime_id}")
            return True

    @staticmethod
    def get_stats() -> Dict:
        """관리자 콘솔용 집계"""

        def _counts(field: str) -> Dict[str, int]:
            rows = (
                Parttime.objects.values(field)
                .annotate(count=Count("id"))
                .order_by(field)
            )
            return {row[field]: row["count"] for row in rows}

        return {
            "total": Parttime.objects.count(),
            "by_type": _counts("type"),
            "by_contact_method": _counts("contact_method"),
            "by_gender": _counts("gender"),
        }
