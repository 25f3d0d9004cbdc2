"""
Parttime Views

아르바이트 공고 API 엔드포인트 (Thin Controller)
"""

import logging

from common.application.result import Err
from common.masking import mask_secrets
from common.pagination import paginate
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from parttime.application.container import (
    build_parse_contact_usecase,
    build_parse_requirements_usecase,
)
from parttime.domain.errors import ValidationErrorKind
from parttime.models import Parttime
from parttime.permissions import IsAuthenticatedForChanges
from parttime.serializers import (
    ContactInfoSerializer,
    GenderRequirementSerializer,
    ParseContactSerializer,
    ParseRequirementsSerializer,
    ParttimeSerializer,
)
from parttime.services import ParttimeService
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import GenericViewSet
from user.permissions import IsPortalAdmin

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "兼职信息不存在"

_PAGINATION_PARAMETERS = [
    OpenApiParameter(
        name="page", description="페이지 (기본 1)", required=False, type=OpenApiTypes.INT
    ),
    OpenApiParameter(
        name="limit",
        description="페이지 크기 (기본 10, 최대 100)",
        required=False,
        type=OpenApiTypes.INT,
    ),
]


def _error_response(err: Err, http_status=status.HTTP_400_BAD_REQUEST) -> Response:
    return Response(
        {"error": err.message, "error_code": str(err.code)}, status=http_status
    )


def _invalid_type(message: str, serializer) -> Err:
    # 문자열이 아닌 입력(true, 배열 등)도 동일한 에러 형태로 응답
    return Err(
        code=ValidationErrorKind.UNRECOGNIZED_FORMAT,
        message=message,
        details=serializer.errors,
    )


def _server_error(message: str, exc: Exception) -> Response:
    logger.error(f"{message}: {mask_secrets(str(exc))}", exc_info=True)
    return Response({"error": message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class ParttimeViewSet(GenericViewSet):
    """
    아르바이트 공고 ViewSet (Thin Controller)

    비즈니스 로직은 ParttimeService에 위임하고,
    HTTP 요청/응답 처리만 담당합니다.
    """

    queryset = Parttime.objects.all()
    serializer_class = ParttimeSerializer
    permission_classes = [IsAuthenticatedForChanges]

    def _paginated_response(self, queryset, **extra):
        page = paginate(
            queryset,
            self.request.query_params.get("page"),
            self.request.query_params.get("limit"),
        )
        serializer = self.get_serializer(page["items"], many=True)
        return Response(
            {"parttimes": serializer.data, **extra, "pagination": page["pagination"]}
        )

    @extend_schema(
        parameters=[
            OpenApiParameter(name="type", required=False, type=OpenApiTypes.STR),
            OpenApiParameter(name="location", required=False, type=OpenApiTypes.STR),
            OpenApiParameter(
                name="gender",
                required=False,
                type=OpenApiTypes.STR,
                enum=Parttime.Gender.values,
            ),
            *_PAGINATION_PARAMETERS,
        ],
        responses={200: OpenApiTypes.OBJECT},
    )
    def list(self, request, *args, **kwargs):
        """
        공고 목록 조회

        GET /api/v1/parttime/
        """
        try:
            queryset = ParttimeService.list_parttimes(
                type=request.query_params.get("type"),
                location=request.query_params.get("location"),
                gender=request.query_params.get("gender"),
            )
            return self._paginated_response(queryset)
        except Exception as e:
            return _server_error("获取兼职列表失败", e)

    def retrieve(self, request, pk=None, *args, **kwargs):
        """
        공고 상세 조회

        GET /api/v1/parttime/<id>/
        """
        parttime = ParttimeService.get_parttime(pk)
        if not parttime:
            return Response(
                {"error": NOT_FOUND_MESSAGE}, status=status.HTTP_404_NOT_FOUND
            )
        return Response(self.get_serializer(parttime).data)

    def create(self, request, *args, **kwargs):
        """
        공고 등록. contact / requirements 가 유효하지 않으면 전체를 거부합니다.

        POST /api/v1/parttime/
        """
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            parttime = ParttimeService.create_parttime(serializer.validated_data)
        except Exception as e:
            return _server_error("发布兼职失败", e)

        return Response(
            self.get_serializer(parttime).data, status=status.HTTP_201_CREATED
        )

    def _update(self, request, pk, partial: bool):
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            parttime = ParttimeService.update_parttime(pk, serializer.validated_data)
        except Exception as e:
            return _server_error("更新兼职信息失败", e)

        if not parttime:
            return Response(
                {"error": NOT_FOUND_MESSAGE}, status=status.HTTP_404_NOT_FOUND
            )
        return Response(self.get_serializer(parttime).data)

    def update(self, request, pk=None, *args, **kwargs):
        """
        공고 수정 (전체)

        PUT /api/v1/parttime/<id>/
        """
        return self._update(request, pk, partial=False)

    def partial_update(self, request, pk=None, *args, **kwargs):
        """
        공고 수정 (부분)

        PATCH /api/v1/parttime/<id>/
        """
        return self._update(request, pk, partial=True)

    def destroy(self, request, pk=None, *args, **kwargs):
        """
        공고 삭제

        DELETE /api/v1/parttime/<id>/
        """
        if not ParttimeService.delete_parttime(pk):
            return Response(
                {"error": NOT_FOUND_MESSAGE}, status=status.HTTP_404_NOT_FOUND
            )
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="keyword",
                description="이름/설명/지역/유형 검색어",
                required=True,
                type=OpenApiTypes.STR,
            ),
            *_PAGINATION_PARAMETERS,
        ],
        responses={200: OpenApiTypes.OBJECT},
    )
    @action(detail=False, methods=["get"])
    def search(self, request):
        """
        키워드 검색

        GET /api/v1/parttime/search/?keyword=
        """
        keyword = (request.query_params.get("keyword") or "").strip()
        if not keyword:
            return Response(
                {"error": "搜索关键词不能为空"}, status=status.HTTP_400_BAD_REQUEST
            )

        try:
            queryset = ParttimeService.search_parttimes(keyword)
            return self._paginated_response(queryset, keyword=keyword)
        except Exception as e:
            return _server_error("搜索兼职失败", e)

    @extend_schema(parameters=_PAGINATION_PARAMETERS, responses={200: OpenApiTypes.OBJECT})
    @action(detail=False, methods=["get"], url_path=r"type/(?P<type_name>[^/]+)")
    def by_type(self, request, type_name=None):
        """
        유형별 목록

        GET /api/v1/parttime/type/<type>/
        """
        try:
            queryset = ParttimeService.list_parttimes(type=type_name)
            return self._paginated_response(queryset, type=type_name)
        except Exception as e:
            return _server_error("获取兼职列表失败", e)


class AdminParttimeViewSet(ParttimeViewSet):
    """관리자 콘솔용 공고 관리 (role=ADMIN 또는 staff)"""

    permission_classes = [IsPortalAdmin]

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    @action(detail=False, methods=["get"])
    def stats(self, request):
        """
        GET /api/v1/admin/parttime/stats/
        """
        return Response(ParttimeService.get_stats())


class ParseContactView(APIView):
    """연락처 문자열을 검증하고 연락 수단을 판별합니다."""

    permission_classes = [AllowAny]

    @extend_schema(
        request=ParseContactSerializer,
        responses={200: ContactInfoSerializer, 400: OpenApiTypes.OBJECT},
        summary="Parse Contact",
    )
    def post(self, request):
        serializer = ParseContactSerializer(data=request.data)
        if not serializer.is_valid():
            return _error_response(_invalid_type("联系方式必须是文本格式", serializer))

        result = build_parse_contact_usecase().execute(
            contact=serializer.validated_data.get("contact")
        )
        if isinstance(result, Err):
            return _error_response(result)
        return Response(result.value.to_dict())


class ParseRequirementsView(APIView):
    """요구사항 문자열에서 성별 조건과 나머지 설명을 분리합니다."""

    permission_classes = [AllowAny]

    @extend_schema(
        request=ParseRequirementsSerializer,
        responses={200: GenderRequirementSerializer, 400: OpenApiTypes.OBJECT},
        summary="Parse Requirements",
    )
    def post(self, request):
        serializer = ParseRequirementsSerializer(data=request.data)
        if not serializer.is_valid():
            return _error_response(_invalid_type("要求字段必须是文本格式", serializer))

        result = build_parse_requirements_usecase().execute(
            requirements=serializer.validated_data.get("requirements")
        )
        if isinstance(result, Err):
            return _error_response(result)
        return Response(result.value.to_dict())
