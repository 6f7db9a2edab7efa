"""
Learner-facing scenario endpoints.

``GET /api/scenario/{id}`` seeds one training session with the scenario's
zones and objects; ``GET /api/scenarios/{customer}`` lists what a customer
has been set up with. Both are public.
"""

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from api.errors import SecurityResponseHelper
from api.messages import ErrorMessages
from api.serializers import ScenarioContentSerializer, ScenarioSerializer
from scenarios.models import Scenario


@api_view(["GET"])
@permission_classes([AllowAny])
def scenario_detail_view(request, scenario_id):
    """Return ``{scenario, zones, objects}`` for one scenario."""
    scenario, error_response = SecurityResponseHelper.safe_get_or_404(
        Scenario.objects.with_content(),
        ErrorMessages.SCENARIO_NOT_FOUND,
        id=scenario_id,
    )
    if error_response:
        return error_response

    return Response(
        ScenarioContentSerializer(scenario).data, status=status.HTTP_200_OK
    )


@api_view(["GET"])
@permission_classes([AllowAny])
def customer_scenarios_view(request, customer_name):
    """List the scenarios configured for a customer (possibly empty)."""
    scenarios = Scenario.objects.for_customer(customer_name).with_content()
    return Response(
        ScenarioSerializer(scenarios, many=True).data, status=status.HTTP_200_OK
    )
