"""
API URL configuration.

Learner endpoints (scenario fetch, validation) sit at the top level, the
admin console under ``admin/`` and session handling under ``auth/``. Paths
carry no trailing slash to match the browser client.
"""

from django.urls import include, path

app_name = "api"

urlpatterns = [
    path("", include("api.urls.training_urls")),
    path("auth/", include("api.urls.auth_urls")),
    path("admin/", include("api.urls.admin_urls")),
]
