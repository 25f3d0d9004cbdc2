# app/conftest.py
"""
공용 pytest fixtures
"""
import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db, django_user_model):
    return django_user_model.objects.create_user(
        username="student", email="student@example.com", password="testpass123"
    )


@pytest.fixture
def admin_user(db, django_user_model):
    return django_user_model.objects.create_user(
        username="manager",
        email="manager@example.com",
        password="testpass123",
        role=django_user_model.Role.ADMIN,
    )


@pytest.fixture
def make_parttime(db):
    """
    기본값이 채워진 Parttime 을 생성합니다. 필요한 필드만 덮어쓰세요.
    """
    from parttime.models import Parttime

    def _make(**overrides):
        data = {
            "name": "图书馆助理",
            "type": "校内",
            "salary": "20元/小时",
            "worktime": "周末",
            "location": "图书馆三楼",
            "description": "整理书架，协助借还书",
            "contact": "13812345678",
            "contact_method": "phone",
            "requirements": None,
            "gender": "any",
        }
        data.update(overrides)
        return Parttime.objects.create(**data)

    return _make
