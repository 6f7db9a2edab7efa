"""
URL configuration for the admin console CRUD endpoints.

Registered names follow the router convention, e.g. ``api:admin-zones-list``
and ``api:admin-zones-detail``.
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from api.views.admin_views import (
    GameObjectAdminViewSet,
    ScenarioAdminViewSet,
    ZoneAdminViewSet,
)

router = SimpleRouter(trailing_slash=False)
router.register(r"zones", ZoneAdminViewSet, basename="admin-zones")
router.register(r"objects", GameObjectAdminViewSet, basename="admin-objects")
router.register(r"scenarios", ScenarioAdminViewSet, basename="admin-scenarios")

urlpatterns = [
    path("", include(router.urls)),
]
