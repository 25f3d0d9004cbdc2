from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from user.views import (
    AdminCheckView,
    DemoteUserView,
    InitAdminView,
    LogoutView,
    MeView,
    PortalTokenObtainPairView,
    PromoteUserView,
    UserDetailView,
    UserListView,
    UserRegistrationView,
)

urlpatterns = [
    path("", UserListView.as_view(), name="user-list"),
    path("register/", UserRegistrationView.as_view(), name="register"),
    path("me/", MeView.as_view(), name="me"),
    path("logout/", LogoutView.as_view(), name="logout"),
    path("token/", PortalTokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("admin/check/", AdminCheckView.as_view(), name="admin-check"),
    path("admin/init/", InitAdminView.as_view(), name="admin-init"),
    path("<int:pk>/", UserDetailView.as_view(), name="user-detail"),
    path("<int:pk>/promote/", PromoteUserView.as_view(), name="user-promote"),
    path("<int:pk>/demote/", DemoteUserView.as_view(), name="user-demote"),
]
