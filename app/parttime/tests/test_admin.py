"""
Tests for the Django admin of Parttime
"""

import pytest
from django.contrib import admin
from parttime.admin import ParttimeAdmin
from parttime.models import Parttime


@pytest.mark.django_db
class TestParttimeAdmin:
    def setup_method(self):
        self.model_admin = ParttimeAdmin(Parttime, admin.site)

    def test_save_model_recomputes_derived_fields(self, make_parttime):
        """admin 에서 contact/requirements 를 수정하면 파생 필드를 다시 계산"""
        # Given
        parttime = make_parttime()
        parttime.contact = "wx_user01"
        parttime.requirements = "女生优先"

        # When
        self.model_admin.save_model(None, parttime, None, True)

        # Then
        parttime.refresh_from_db()
        assert parttime.contact_method == "wechat"
        assert parttime.gender == "female"

    def test_save_model_on_create(self):
        """신규 저장 시 잘못 넣은 파생 값도 덮어씀"""
        parttime = Parttime(
            name="家教",
            type="校外",
            salary="100元/小时",
            worktime="周末",
            location="校门口",
            description="初中数学",
            contact="12345",
            contact_method="phone",
            requirements=None,
            gender="male",
        )

        self.model_admin.save_model(None, parttime, None, False)

        saved = Parttime.objects.get(pk=parttime.pk)
        assert saved.contact_method == "qq"
        assert saved.gender == "any"
