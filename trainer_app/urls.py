"""
URL configuration for the trainer project.

The learner-facing game and the admin console both talk to the JSON API
mounted under ``/api/``; the Django admin site stays available at ``/admin/``.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("api.urls", namespace="api")),
]
