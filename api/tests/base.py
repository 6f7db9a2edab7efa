"""
Shared fixtures for the API tests.
"""

from django.contrib.auth import get_user_model

from game_objects.models import GameObject
from scenarios.models import Scenario
from zones.models import Zone

User = get_user_model()


class TrainingDataMixin:
    """Builds a small three-tier scenario plus an admin and a learner account."""

    @classmethod
    def setUpTestData(cls):
        cls.admin = User.objects.create_user(
            username="admin", password="AdminPass123!", is_staff=True
        )
        cls.learner = User.objects.create_user(
            username="learner", password="LearnerPass123!"
        )

        cls.web = Zone.objects.create(
            name="Web tier", x=0, y=0, width=200, height=150
        )
        cls.data = Zone.objects.create(
            name="Data tier", x=250, y=0, width=200, height=150, description="DBs"
        )
        cls.server = GameObject.objects.create(
            name="Web server",
            object_type=GameObject.SERVER,
            correct_zone=cls.web,
            success_message="S",
            error_message="E",
            points=5,
        )
        cls.database = GameObject.objects.create(
            name="Orders DB",
            object_type=GameObject.DATABASE,
            correct_zone=cls.data,
            success_message="Databases live in the data tier.",
            error_message="Move the database to the data tier.",
            points=7,
        )
        cls.scenario = Scenario.objects.create(
            name="Three tier app", customer_name="Acme", description="Basics"
        )
        cls.scenario.zones.set([cls.web, cls.data])
        cls.scenario.game_objects.set([cls.server, cls.database])
