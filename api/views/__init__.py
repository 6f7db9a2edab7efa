from .admin_views import GameObjectAdminViewSet, ScenarioAdminViewSet, ZoneAdminViewSet
from .auth_views import csrf_token_view, login_view, logout_view, user_info_view
from .scenario_views import customer_scenarios_view, scenario_detail_view
from .validation_views import validate_view

__all__ = [
    "GameObjectAdminViewSet",
    "ScenarioAdminViewSet",
    "ZoneAdminViewSet",
    "csrf_token_view",
    "login_view",
    "logout_view",
    "user_info_view",
    "customer_scenarios_view",
    "scenario_detail_view",
    "validate_view",
]
