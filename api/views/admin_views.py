"""
Admin console CRUD endpoints for zones, objects and scenarios.

Staff only. Anonymous callers get 401 and signed-in non-staff users 403
(see ``api.authentication.custom_exception_handler``). Writes record the
acting admin in the audit columns.
"""

import logging

from django.db.models import ProtectedError
from rest_framework import filters, permissions, status, viewsets
from rest_framework.response import Response

from api.errors import APIError
from api.messages import ErrorMessages
from api.serializers import GameObjectSerializer, ScenarioSerializer, ZoneSerializer
from game_objects.models import GameObject
from scenarios.models import Scenario
from zones.models import Zone

logger = logging.getLogger(__name__)


class AuditedAdminViewSet(viewsets.ModelViewSet):
    """ModelViewSet restricted to staff that stamps created_by/modified_by."""

    permission_classes = [permissions.IsAdminUser]
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    ordering = ["id"]
    pagination_class = None

    def perform_create(self, serializer):
        user = self.request.user
        instance = serializer.save(created_by=user, modified_by=user)
        logger.info(
            f"User {user.id} created {instance._meta.model_name} {instance.pk}"
        )

    def perform_update(self, serializer):
        user = self.request.user
        instance = serializer.save(modified_by=user)
        logger.info(
            f"User {user.id} updated {instance._meta.model_name} {instance.pk}"
        )

    def perform_destroy(self, instance):
        logger.info(
            f"User {self.request.user.id} deleted "
            f"{instance._meta.model_name} {instance.pk}"
        )
        instance.delete()


class ZoneAdminViewSet(AuditedAdminViewSet):
    """Manage drop zones."""

    queryset = Zone.objects.all()
    serializer_class = ZoneSerializer
    search_fields = ["name", "description"]
    ordering_fields = ["id", "name", "x", "y"]

    def destroy(self, request, *args, **kwargs):
        """Refuse to delete a zone that is still some object's correct answer."""
        zone = self.get_object()
        if zone.is_answer_for_objects():
            return APIError.create_bad_request_response(ErrorMessages.ZONE_IN_USE)

        try:
            self.perform_destroy(zone)
        except ProtectedError:
            return APIError.create_bad_request_response(ErrorMessages.ZONE_IN_USE)
        return Response(status=status.HTTP_204_NO_CONTENT)


class GameObjectAdminViewSet(AuditedAdminViewSet):
    """Manage game objects and their answers."""

    serializer_class = GameObjectSerializer
    search_fields = ["name"]
    ordering_fields = ["id", "name", "points"]

    def get_queryset(self):
        queryset = GameObject.objects.select_related("correct_zone")
        object_type = self.request.query_params.get("type")
        if object_type:
            queryset = queryset.of_type(object_type)
        return queryset


class ScenarioAdminViewSet(AuditedAdminViewSet):
    """Manage training scenarios."""

    serializer_class = ScenarioSerializer
    search_fields = ["name", "customer_name", "description"]
    ordering_fields = ["id", "name", "customer_name"]

    def get_queryset(self):
        queryset = Scenario.objects.with_content()
        customer_name = self.request.query_params.get("customer")
        if customer_name:
            queryset = queryset.for_customer(customer_name)
        return queryset
