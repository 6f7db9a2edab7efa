"""
Standardized error responses for the trainer API.

Every error body carries a human-readable ``message``; field validation
errors keep DRF's ``{field: [errors]}`` shape so admin forms can map them.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from django.db.models import Model, QuerySet
from rest_framework import status
from rest_framework.response import Response

from api.messages import ErrorMessages


class APIError:
    """Standard API error response builder."""

    RESOURCE_NOT_FOUND = ErrorMessages.RESOURCE_NOT_FOUND
    PERMISSION_DENIED = ErrorMessages.PERMISSION_DENIED
    VALIDATION_ERROR = ErrorMessages.VALIDATION_ERROR
    BAD_REQUEST = ErrorMessages.BAD_REQUEST
    UNAUTHORIZED = ErrorMessages.UNAUTHORIZED

    @staticmethod
    def not_found(message: Optional[str] = None) -> Response:
        """
        Return a standard 404 Not Found response.

        Args:
            message: Custom error message. If None, uses standard message.
        """
        return Response(
            {"message": message or APIError.RESOURCE_NOT_FOUND},
            status=status.HTTP_404_NOT_FOUND,
        )

    @staticmethod
    def create_permission_denied_response(message: Optional[str] = None) -> Response:
        """Return a standard 403 Permission Denied response."""
        return Response(
            {"message": message or APIError.PERMISSION_DENIED},
            status=status.HTTP_403_FORBIDDEN,
        )

    @staticmethod
    def create_bad_request_response(message: Optional[str] = None) -> Response:
        """Return a standard 400 Bad Request response."""
        return Response(
            {"message": message or APIError.BAD_REQUEST},
            status=status.HTTP_400_BAD_REQUEST,
        )

    @staticmethod
    def create_validation_error_response(
        errors: Union[Dict[str, List[str]], str],
    ) -> Response:
        """
        Return a standardized validation error response.

        Args:
            errors: Validation errors in various formats:
                   - Dict mapping field names to error lists
                   - String for general validation error

        Returns:
            Response with 400 status.
        """
        if isinstance(errors, dict):
            return Response(errors, status=status.HTTP_400_BAD_REQUEST)
        if isinstance(errors, str):
            return Response({"message": errors}, status=status.HTTP_400_BAD_REQUEST)
        return Response(
            {"message": APIError.VALIDATION_ERROR},
            status=status.HTTP_400_BAD_REQUEST,
        )

    @staticmethod
    def create_unauthorized_response(message: Optional[str] = None) -> Response:
        """Return a standard 401 Unauthorized response."""
        return Response(
            {"message": message or APIError.UNAUTHORIZED},
            status=status.HTTP_401_UNAUTHORIZED,
        )


class SecurityResponseHelper:
    """Helpers for lookups that must answer 404 rather than raise."""

    @staticmethod
    def safe_get_or_404(
        queryset: QuerySet[Model],
        message: Optional[str] = None,
        **filter_kwargs: Any,
    ) -> Tuple[Optional[Model], Optional[Response]]:
        """
        Get an object or build the 404 response for it.

        Returns:
            Tuple of (object, None) if found, or (None, Response) if not.

        Example:
            >>> scenario, error_response = SecurityResponseHelper.safe_get_or_404(
            ...     Scenario.objects.with_content(),
            ...     ErrorMessages.SCENARIO_NOT_FOUND,
            ...     id=scenario_id,
            ... )
            >>> if error_response:
            ...     return error_response
        """
        try:
            obj = queryset.get(**filter_kwargs)
        except (queryset.model.DoesNotExist, ValueError, TypeError):
            return None, APIError.not_found(message)
        return obj, None
