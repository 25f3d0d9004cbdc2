"""
JWT Cookie Utilities

로그인 응답에 JWT를 HttpOnly Cookie로 심거나, 로그아웃 시 삭제합니다.
웹 포털(브라우저)은 쿠키로, 미니앱/외부 클라이언트는 Authorization 헤더로 인증합니다.
"""

from django.conf import settings
from rest_framework.response import Response


def _cookie_names() -> tuple[str, str]:
    return (
        getattr(settings, "JWT_AUTH_COOKIE", "access_token"),
        getattr(settings, "JWT_AUTH_REFRESH_COOKIE", "refresh_token"),
    )


def _cookie_options() -> dict:
    return {
        "path": getattr(settings, "JWT_AUTH_COOKIE_PATH", "/"),
        "domain": getattr(settings, "JWT_AUTH_COOKIE_DOMAIN", None),
        "samesite": getattr(settings, "JWT_AUTH_COOKIE_SAMESITE", "Lax"),
    }


def set_jwt_cookies(
    response: Response, access_token: str, refresh_token: str
) -> Response:
    access_name, refresh_name = _cookie_names()
    lifetimes = {
        access_name: settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"],
        refresh_name: settings.SIMPLE_JWT["REFRESH_TOKEN_LIFETIME"],
    }
    values = {access_name: access_token, refresh_name: refresh_token}

    for name, value in values.items():
        response.set_cookie(
            key=name,
            value=value,
            httponly=True,
            secure=getattr(settings, "JWT_AUTH_COOKIE_SECURE", not settings.DEBUG),
            max_age=int(lifetimes[name].total_seconds()),
            **_cookie_options(),
        )
    return response


def delete_jwt_cookies(response: Response) -> Response:
    for name in _cookie_names():
        response.delete_cookie(key=name, **_cookie_options())
    return response
