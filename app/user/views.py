from common.application.result import Err
from common.jwt_cookies import delete_jwt_cookies, set_jwt_cookies
from common.pagination import paginate
from django.conf import settings
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.views import TokenObtainPairView
from user.permissions import IsPortalAdmin
from user.serializers import (
    PortalTokenObtainPairSerializer,
    UserRegistrationSerializer,
    UserSerializer,
)
from user.services import UserService


def _error_response(err: Err) -> Response:
    http_status = (
        status.HTTP_404_NOT_FOUND
        if err.code == "NOT_FOUND"
        else status.HTTP_400_BAD_REQUEST
    )
    return Response({"error": err.message, "error_code": err.code}, status=http_status)


class UserRegistrationView(generics.CreateAPIView):
    serializer_class = UserRegistrationSerializer
    permission_classes = []

    @extend_schema(responses={201: UserSerializer, 403: OpenApiTypes.OBJECT})
    def post(self, request, *args, **kwargs):
        if not getattr(settings, "USER_REGISTRATION_ENABLED", False):
            return Response(
                {"error": "注册功能暂时关闭", "error_code": "FEATURE_DISABLED"},
                status=status.HTTP_403_FORBIDDEN,
            )
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class PortalTokenObtainPairView(TokenObtainPairView):
    """토큰을 응답 본문과 HttpOnly Cookie 양쪽으로 내려줍니다."""

    serializer_class = PortalTokenObtainPairSerializer

    def post(self, request, *args, **kwargs):
        response = super().post(request, *args, **kwargs)
        if response.status_code == status.HTTP_200_OK:
            set_jwt_cookies(response, response.data["access"], response.data["refresh"])
        return response


class LogoutView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(request=None, responses={204: None})
    def post(self, request):
        return delete_jwt_cookies(Response(status=status.HTTP_204_NO_CONTENT))


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: UserSerializer})
    def get(self, request):
        return Response(UserSerializer(request.user).data)


class UserListView(APIView):
    """
    사용자 목록 (관리자 전용)

    GET /api/v1/users/?role=ADMIN&page=1&limit=10
    """

    permission_classes = [IsPortalAdmin]

    @extend_schema(
        parameters=[
            OpenApiParameter(name="role", required=False, type=OpenApiTypes.STR),
            OpenApiParameter(name="page", required=False, type=OpenApiTypes.INT),
            OpenApiParameter(name="limit", required=False, type=OpenApiTypes.INT),
        ],
        responses={200: OpenApiTypes.OBJECT},
    )
    def get(self, request):
        page = paginate(
            UserService.list_users(role=request.query_params.get("role")),
            request.query_params.get("page"),
            request.query_params.get("limit"),
        )
        return Response(
            {
                "users": UserSerializer(page["items"], many=True).data,
                "pagination": page["pagination"],
            }
        )


class UserDetailView(APIView):
    permission_classes = [IsPortalAdmin]

    @extend_schema(responses={200: UserSerializer, 404: OpenApiTypes.OBJECT})
    def get(self, request, pk):
        user = UserService.get_user(pk)
        if not user:
            return Response(
                {"error": "用户不存在", "error_code": "NOT_FOUND"},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(UserSerializer(user).data)


class PromoteUserView(APIView):
    """POST /api/v1/users/<id>/promote/"""

    permission_classes = [IsPortalAdmin]

    @extend_schema(request=None, responses={200: UserSerializer, 400: OpenApiTypes.OBJECT})
    def post(self, request, pk):
        result = UserService.promote_to_admin(pk)
        if isinstance(result, Err):
            return _error_response(result)
        return Response(UserSerializer(result.value).data)


class DemoteUserView(APIView):
    """POST /api/v1/users/<id>/demote/"""

    permission_classes = [IsPortalAdmin]

    @extend_schema(request=None, responses={200: UserSerializer, 400: OpenApiTypes.OBJECT})
    def post(self, request, pk):
        result = UserService.demote_admin(request.user.pk, pk)
        if isinstance(result, Err):
            return _error_response(result)
        return Response(UserSerializer(result.value).data)


class AdminCheckView(APIView):
    """관리자 권한 확인. 권한이 없으면 401/403."""

    permission_classes = [IsPortalAdmin]

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    def get(self, request):
        return Response({"is_admin": True, "user": UserSerializer(request.user).data})


class InitAdminView(APIView):
    """
    최초 관리자 지정

    관리자가 아직 없을 때에만, 로그인한 본인을 관리자로 지정합니다.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(request=None, responses={200: UserSerializer, 400: OpenApiTypes.OBJECT})
    def post(self, request):
        result = UserService.init_first_admin(request.user.pk)
        if isinstance(result, Err):
            return _error_response(result)
        return Response(UserSerializer(result.value).data)
