"""
JWT Cookie Authentication

Authorization 헤더(Bearer) 또는 HttpOnly Cookie에서 JWT를 읽어 인증합니다.
서명 키와 만료 시간은 settings.SIMPLE_JWT 로 주입됩니다.
"""

from django.conf import settings
from rest_framework_simplejwt.authentication import JWTAuthentication


class JWTCookieAuthentication(JWTAuthentication):
    """
    1) Authorization 헤더
    2) Cookie (JWT_AUTH_COOKIE, 기본값 access_token)
    순으로 토큰을 찾아 인증.
    """

    def authenticate(self, request):
        header = super().authenticate(request)
        if header is not None:
            return header

        raw = request.COOKIES.get(self.cookie_name)
        if not raw:
            return None

        validated = self.get_validated_token(raw)
        return self.get_user(validated), validated

    @property
    def cookie_name(self) -> str:
        return getattr(settings, "JWT_AUTH_COOKIE", "access_token")
