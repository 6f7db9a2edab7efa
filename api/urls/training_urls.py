"""
URL configuration for the learner-facing endpoints.
"""

from django.urls import path

from api.views.scenario_views import customer_scenarios_view, scenario_detail_view
from api.views.validation_views import validate_view

# Note: No app_name here since these are accessed as api:<name>

urlpatterns = [
    path("scenario/<int:scenario_id>", scenario_detail_view, name="scenario-detail"),
    path(
        "scenarios/<str:customer_name>",
        customer_scenarios_view,
        name="customer-scenarios",
    ),
    path("validate", validate_view, name="validate"),
]
