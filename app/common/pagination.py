import math
from typing import Dict

from django.db.models import QuerySet

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def _to_int(value, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def paginate(queryset: QuerySet, page=None, limit=None) -> Dict:
    """
    page 는 1 이상, limit 은 1~100 으로 보정합니다.

    Returns:
        {"items": [...], "pagination": {page, limit, total, pages}}
    """
    page = max(1, _to_int(page, 1))
    limit = max(1, min(MAX_PAGE_SIZE, _to_int(limit, DEFAULT_PAGE_SIZE)))
    offset = (page - 1) * limit

    total = queryset.count()
    return {
        "items": list(queryset[offset : offset + limit]),
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "pages": math.ceil(total / limit),
        },
    }
