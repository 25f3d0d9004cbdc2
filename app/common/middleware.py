from __future__ import annotations

import re
import uuid
from typing import Callable

from common.request_id import set_request_id
from django.http import HttpRequest, HttpResponse

_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9\-_.]{1,64}$")


class RequestIdMiddleware:
    """
    - 요청마다 request_id를 생성/전파하고
    - response에 X-Request-ID 헤더를 포함합니다.

    클라이언트가 보낸 값이 형식에 맞지 않으면 새로 발급합니다.
    """

    header_name = "HTTP_X_REQUEST_ID"
    response_header = "X-Request-ID"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = self._resolve(request.META.get(self.header_name))

        request.request_id = request_id  # type: ignore[attr-defined]
        set_request_id(request_id)

        response = self.get_response(request)
        response[self.response_header] = request_id
        return response

    @staticmethod
    def _resolve(incoming: str | None) -> str:
        if incoming:
            candidate = str(incoming).strip()
            if _VALID_REQUEST_ID.match(candidate):
                return candidate
        return str(uuid.uuid4())
