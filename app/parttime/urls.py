from django.urls import include, path
from parttime.views import (
    AdminParttimeViewSet,
    ParseContactView,
    ParseRequirementsView,
    ParttimeViewSet,
)
from rest_framework.routers import DefaultRouter

router = DefaultRouter()
router.register(r"parttime", ParttimeViewSet, basename="parttime")
router.register(r"admin/parttime", AdminParttimeViewSet, basename="admin-parttime")

urlpatterns = [
    # router 의 상세 경로(<pk>/)보다 먼저 매칭되어야 함
    path("parttime/parse-contact/", ParseContactView.as_view(), name="parse-contact"),
    path(
        "parttime/parse-requirements/",
        ParseRequirementsView.as_view(),
        name="parse-requirements",
    ),
    path("", include(router.urls)),
]
