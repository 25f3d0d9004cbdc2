from rest_framework.permissions import BasePermission


class IsPortalAdmin(BasePermission):
    """role=ADMIN 또는 staff 사용자만 허용 (관리자 콘솔)"""

    message = "需要管理员权限"

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and getattr(user, "is_portal_admin", False)
        )
