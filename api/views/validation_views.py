"""
Placement scoring endpoint.

The handler body is the validator: parse the submitted placements, score
them against the stored answer key and return ``{score, results}``.
"""

import logging

from django.conf import settings
from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from api.errors import APIError
from api.serializers import ValidationRequestSerializer
from training.validation import validate_placements

logger = logging.getLogger(__name__)


class CanSubmitPlacements(permissions.BasePermission):
    """
    Public unless ``TRAINING_VALIDATE_REQUIRES_LOGIN`` is enabled.

    Read at request time so deployments can flip it without code changes.
    """

    def has_permission(self, request, view):
        if not getattr(settings, "TRAINING_VALIDATE_REQUIRES_LOGIN", False):
            return True
        return bool(request.user and request.user.is_authenticated)


@api_view(["POST"])
@permission_classes([CanSubmitPlacements])
def validate_view(request):
    """Score a set of placements."""
    serializer = ValidationRequestSerializer(data=request.data)
    if not serializer.is_valid():
        logger.info(f"Rejected validation request: {serializer.errors}")
        return APIError.create_validation_error_response(serializer.errors)

    report = validate_placements(serializer.get_placements())
    return Response(report.to_dict(), status=status.HTTP_200_OK)
