"""
Exception handling for the trainer API.

Maps DRF exceptions onto the API's error conventions:
- Anonymous user + PermissionDenied (not CSRF) -> 401 Unauthorized
- CSRF failures -> 403 Forbidden
- Authenticated user + PermissionDenied -> 403 Forbidden
- ``{"detail": ...}`` bodies are renamed to ``{"message": ...}``
"""

import logging

from django.contrib.auth.models import AnonymousUser
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, PermissionDenied
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is None:
        return response

    request = context.get("request")
    if request is not None:
        user = getattr(request, "user", None)

        if isinstance(exc, PermissionDenied):
            is_csrf_failure = "csrf" in str(exc).lower()
            if isinstance(user, AnonymousUser) and not is_csrf_failure:
                response.status_code = status.HTTP_401_UNAUTHORIZED
        elif isinstance(exc, NotAuthenticated):
            response.status_code = status.HTTP_401_UNAUTHORIZED

    if isinstance(response.data, dict) and set(response.data) == {"detail"}:
        response.data = {"message": str(response.data["detail"])}

    if response.status_code >= 500:
        logger.error(f"API error {response.status_code}: {exc}")

    return response
