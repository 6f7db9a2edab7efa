"""
Tests for the Scenario model.
"""

from django.test import TestCase

from game_objects.models import GameObject
from scenarios.models import Scenario
from zones.models import Zone


class ScenarioModelTest(TestCase):
    """Test scenario membership and helpers."""

    def setUp(self):
        self.web = Zone.objects.create(name="Web", x=0, y=0, width=100, height=100)
        self.data = Zone.objects.create(name="Data", x=0, y=200, width=100, height=100)
        self.server = GameObject.objects.create(
            name="Web Server",
            object_type=GameObject.SERVER,
            correct_zone=self.web,
            error_message="E",
            success_message="S",
            points=5,
        )
        self.database = GameObject.objects.create(
            name="Customer DB",
            object_type=GameObject.DATABASE,
            correct_zone=self.data,
            error_message="E",
            success_message="S",
            points=7,
        )
        self.scenario = Scenario.objects.create(
            name="Three Tier Basics",
            customer_name="Acme",
            description="Place each component in its tier.",
        )
        self.scenario.zones.set([self.data, self.web])
        self.scenario.game_objects.set([self.database, self.server])

    def test_str_is_name(self):
        self.assertEqual(str(self.scenario), "Three Tier Basics")

    def test_ids_are_sorted(self):
        self.assertEqual(self.scenario.zone_ids, sorted([self.web.id, self.data.id]))
        self.assertEqual(
            self.scenario.object_ids, sorted([self.server.id, self.database.id])
        )

    def test_max_score(self):
        self.assertEqual(self.scenario.max_score(), 12)

    def test_for_customer(self):
        Scenario.objects.create(name="Other", customer_name="Globex")

        self.assertEqual(list(Scenario.objects.for_customer("Acme")), [self.scenario])
        self.assertFalse(Scenario.objects.for_customer("Initech").exists())

    def test_with_content_prefetches(self):
        scenario = Scenario.objects.with_content().get(pk=self.scenario.pk)

        with self.assertNumQueries(0):
            self.assertEqual(len(scenario.zones.all()), 2)
            self.assertEqual(len(scenario.game_objects.all()), 2)

    def test_zone_can_belong_to_many_scenarios(self):
        second = Scenario.objects.create(name="Web only", customer_name="Acme")
        second.zones.add(self.web)

        self.assertEqual(set(self.web.scenarios.all()), {self.scenario, second})

    def test_deleting_scenario_keeps_store_rows(self):
        self.scenario.delete()

        self.assertEqual(Zone.objects.count(), 2)
        self.assertEqual(GameObject.objects.count(), 2)
