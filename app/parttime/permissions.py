from rest_framework.permissions import SAFE_METHODS, BasePermission


class IsAuthenticatedForChanges(BasePermission):
    """
    조회/등록은 누구나, 수정/삭제는 로그인 사용자만 허용합니다.

    공고 등록은 캠퍼스 사용자 누구나 할 수 있어야 하므로 POST 는 열어둡니다.
    """

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS or request.method == "POST":
            return True
        return bool(request.user and request.user.is_authenticated)
