"""
Tests for Parttime Views

아르바이트 공고 API 엔드포인트 테스트
"""

import uuid

import pytest
from parttime.models import Parttime
from rest_framework import status
from rest_framework.test import APIClient

LIST_URL = "/api/v1/parttime/"


def _payload(**overrides):
    data = {
        "name": "食堂帮工",
        "type": "校内",
        "salary": "18元/小时",
        "worktime": "工作日中午",
        "location": "一食堂",
        "description": "打饭、收拾餐盘",
        "contact": "13812345678",
        "requirements": "男生优先,能吃苦",
        "tags": ["包餐"],
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestParttimeViewSet:
    """ParttimeViewSet API 테스트"""

    def setup_method(self):
        self.client = APIClient()

    def test_create_parttime(self):
        """겸직 등록"""
        # When
        response = self.client.post(LIST_URL, _payload(), format="json")

        # Then
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["contact_method"] == "phone"
        assert response.data["gender"] == "male"
        assert response.data["tags"] == ["包餐"]
        assert Parttime.objects.count() == 1

    def test_create_ignores_derived_fields_in_body(self):
        """요청 본문의 파생 필드는 무시"""
        response = self.client.post(
            LIST_URL,
            _payload(contact_method="qq", gender="female"),
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["contact_method"] == "phone"
        assert response.data["gender"] == "male"

    def test_create_rejects_invalid_contact(self):
        """잘못된 contact 는 400"""
        response = self.client.post(LIST_URL, _payload(contact="!!!"), format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "contact" in response.data
        assert Parttime.objects.count() == 0

    def test_create_rejects_blank_contact(self):
        """빈 contact 는 400"""
        response = self.client.post(LIST_URL, _payload(contact="  "), format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["contact"][0] == "联系方式不能为空"

    def test_create_rejects_long_requirements(self):
        """200자 초과 requirements 는 400"""
        response = self.client.post(
            LIST_URL, _payload(requirements="a" * 201), format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "requirements" in response.data
        assert Parttime.objects.count() == 0

    def test_create_rejects_long_name(self):
        """100자 초과 name 은 400"""
        response = self.client.post(LIST_URL, _payload(name="a" * 101), format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["name"][0] == "兼职名称长度必须在1-100字符之间"

    def test_create_blank_requirements_stored_as_null(self):
        """빈 requirements 는 NULL 로 저장"""
        response = self.client.post(LIST_URL, _payload(requirements=""), format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["requirements"] is None
        assert response.data["gender"] == "any"

    def test_list_parttimes(self, make_parttime):
        """목록 조회"""
        # Given
        make_parttime(name="A")
        make_parttime(name="B", type="校外")

        # When
        response = self.client.get(LIST_URL)

        # Then
        assert response.status_code == status.HTTP_200_OK
        assert len(response.data["parttimes"]) == 2
        assert response.data["pagination"]["total"] == 2

    def test_list_filter_by_gender(self, make_parttime):
        """gender 필터"""
        make_parttime(gender="female")
        make_parttime(gender="any")

        response = self.client.get(LIST_URL, {"gender": "female"})

        assert response.data["pagination"]["total"] == 1

    def test_retrieve(self, make_parttime):
        """상세 조회"""
        parttime = make_parttime(name="图书整理")

        response = self.client.get(f"{LIST_URL}{parttime.id}/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["name"] == "图书整理"

    def test_retrieve_not_found(self):
        """없는 ID 는 404"""
        response = self.client.get(f"{LIST_URL}{uuid.uuid4()}/")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["error"] == "兼职信息不存在"

    def test_search(self, make_parttime):
        """키워드 검색"""
        make_parttime(name="奶茶店店员")
        make_parttime(name="快递分拣")

        response = self.client.get(f"{LIST_URL}search/", {"keyword": "奶茶"})

        assert response.status_code == status.HTTP_200_OK
        assert response.data["keyword"] == "奶茶"
        assert len(response.data["parttimes"]) == 1

    def test_search_requires_keyword(self):
        """keyword 누락은 400"""
        response = self.client.get(f"{LIST_URL}search/")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_list_by_type(self, make_parttime):
        """유형별 목록"""
        make_parttime(type="家教")
        make_parttime(type="校内")

        response = self.client.get(f"{LIST_URL}type/家教/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["type"] == "家教"
        assert response.data["pagination"]["total"] == 1

    def test_update_requires_authentication(self, make_parttime):
        """수정은 로그인 필요"""
        parttime = make_parttime()

        response = self.client.patch(
            f"{LIST_URL}{parttime.id}/", {"salary": "25元/小时"}, format="json"
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_partial_update(self, make_parttime, user):
        """부분 수정"""
        # Given
        parttime = make_parttime()
        self.client.force_authenticate(user=user)

        # When
        response = self.client.patch(
            f"{LIST_URL}{parttime.id}/",
            {"contact": "wx_canteen", "requirements": "女"},
            format="json",
        )

        # Then
        assert response.status_code == status.HTTP_200_OK
        parttime.refresh_from_db()
        assert parttime.contact == "wx_canteen"
        assert parttime.contact_method == "wechat"
        assert parttime.gender == "female"

    def test_partial_update_rejects_invalid_contact(self, make_parttime, user):
        """잘못된 contact 로 PATCH 하면 400, 기존 값 유지"""
        parttime = make_parttime()
        self.client.force_authenticate(user=user)

        response = self.client.patch(
            f"{LIST_URL}{parttime.id}/", {"contact": "!!!"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        parttime.refresh_from_db()
        assert parttime.contact == "13812345678"

    def test_partial_update_rejects_long_requirements(self, make_parttime, user):
        """requirements 가 200자를 넘으면 PATCH 도 400, 기존 값 유지"""
        # Given
        parttime = make_parttime(requirements="女生优先", gender="female")
        self.client.force_authenticate(user=user)

        # When
        response = self.client.patch(
            f"{LIST_URL}{parttime.id}/", {"requirements": "a" * 201}, format="json"
        )

        # Then
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "requirements" in response.data
        parttime.refresh_from_db()
        assert parttime.requirements == "女生优先"
        assert parttime.gender == "female"

    def test_full_update(self, make_parttime, user):
        """전체 수정"""
        parttime = make_parttime()
        self.client.force_authenticate(user=user)

        response = self.client.put(
            f"{LIST_URL}{parttime.id}/", _payload(name="新名称"), format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["name"] == "新名称"

    def test_update_not_found(self, user):
        """없는 ID 수정은 404"""
        self.client.force_authenticate(user=user)

        response = self.client.patch(
            f"{LIST_URL}{uuid.uuid4()}/", {"salary": "1"}, format="json"
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete(self, make_parttime, user):
        """삭제"""
        parttime = make_parttime()
        self.client.force_authenticate(user=user)

        response = self.client.delete(f"{LIST_URL}{parttime.id}/")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Parttime.objects.filter(id=parttime.id).exists()


@pytest.mark.django_db
class TestAdminParttimeViewSet:
    url = "/api/v1/admin/parttime/"

    def setup_method(self):
        self.client = APIClient()

    def test_requires_admin(self, user):
        """일반 사용자는 403"""
        self.client.force_authenticate(user=user)

        response = self.client.get(self.url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_anonymous_rejected(self):
        """비로그인 요청은 401"""
        response = self.client.get(self.url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_admin_can_list_and_create(self, admin_user):
        """관리자는 조회/등록 가능"""
        self.client.force_authenticate(user=admin_user)

        created = self.client.post(self.url, _payload(), format="json")
        listed = self.client.get(self.url)

        assert created.status_code == status.HTTP_201_CREATED
        assert listed.status_code == status.HTTP_200_OK
        assert listed.data["pagination"]["total"] == 1

    def test_stats(self, admin_user, make_parttime):
        """통계 조회"""
        make_parttime(type="校内")
        make_parttime(type="校外", contact="wx_user01", contact_method="wechat")
        self.client.force_authenticate(user=admin_user)

        response = self.client.get(f"{self.url}stats/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["total"] == 2
        assert response.data["by_contact_method"] == {"phone": 1, "wechat": 1}
