"""
Tests for POST /api/validate.
"""

from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from api.messages import ErrorMessages
from api.tests.base import TrainingDataMixin
from game_objects.models import GameObject


class ValidateAPITest(TrainingDataMixin, TestCase):
    """Scoring through the HTTP endpoint."""

    def setUp(self):
        self.client = APIClient()
        self.url = reverse("api:validate")

    def post(self, placements):
        return self.client.post(self.url, {"placements": placements}, format="json")

    def test_url(self):
        self.assertEqual(self.url, "/api/validate")

    def test_correct_placement(self):
        response = self.post([{"objectId": self.server.id, "zoneId": self.web.id}])

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.json(),
            {
                "score": 5,
                "results": [
                    {"objectId": self.server.id, "correct": True, "message": "S"}
                ],
            },
        )

    def test_incorrect_placement(self):
        response = self.post([{"objectId": self.server.id, "zoneId": self.data.id}])

        self.assertEqual(
            response.json(),
            {
                "score": 0,
                "results": [
                    {"objectId": self.server.id, "correct": False, "message": "E"}
                ],
            },
        )

    def test_unknown_object_skipped(self):
        response = self.post(
            [
                {"objectId": self.server.id, "zoneId": self.web.id},
                {"objectId": 999, "zoneId": self.data.id},
            ]
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["score"], 5)
        self.assertEqual(len(response.json()["results"]), 1)

    def test_shared_zone_with_unknown_object(self):
        response = self.post(
            [
                {"objectId": self.server.id, "zoneId": self.web.id},
                {"objectId": 999, "zoneId": self.web.id},
            ]
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.json(),
            {
                "score": 5,
                "results": [
                    {"objectId": self.server.id, "correct": True, "message": "S"}
                ],
            },
        )

    def test_shared_zone_scores_each_object(self):
        response = self.post(
            [
                {"objectId": self.server.id, "zoneId": self.web.id},
                {"objectId": self.database.id, "zoneId": self.web.id},
            ]
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertEqual(body["score"], 5)
        self.assertEqual([r["correct"] for r in body["results"]], [True, False])

    def test_empty_submission(self):
        response = self.post([])

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"score": 0, "results": []})

    def test_all_correct_scores_every_point(self):
        response = self.post(
            [
                {"objectId": self.database.id, "zoneId": self.data.id},
                {"objectId": self.server.id, "zoneId": self.web.id},
            ]
        )

        body = response.json()
        self.assertEqual(body["score"], self.scenario.max_score())
        self.assertEqual(
            [r["objectId"] for r in body["results"]],
            [self.database.id, self.server.id],
        )

    def test_store_not_modified(self):
        self.post([{"objectId": self.server.id, "zoneId": self.data.id}])

        self.server.refresh_from_db()
        self.assertEqual(self.server.correct_zone_id, self.web.id)
        self.assertEqual(GameObject.objects.count(), 2)

    def test_learner_session_also_accepted(self):
        self.client.force_authenticate(user=self.learner)

        response = self.post([{"objectId": self.server.id, "zoneId": self.web.id}])

        self.assertEqual(response.status_code, status.HTTP_200_OK)


class ValidateRequestErrorsTest(TrainingDataMixin, TestCase):
    """Malformed submissions are rejected before scoring."""

    def setUp(self):
        self.client = APIClient()
        self.url = reverse("api:validate")

    def test_missing_placements(self):
        response = self.client.post(self.url, {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("placements", response.data)

    def test_non_integer_ids(self):
        response = self.client.post(
            self.url,
            {"placements": [{"objectId": "server", "zoneId": self.web.id}]},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("placements", response.data)

    def test_missing_zone_id(self):
        response = self.client.post(
            self.url, {"placements": [{"objectId": self.server.id}]}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_duplicate_object(self):
        response = self.client.post(
            self.url,
            {
                "placements": [
                    {"objectId": self.server.id, "zoneId": self.web.id},
                    {"objectId": self.server.id, "zoneId": self.data.id},
                ]
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.data["placements"], [ErrorMessages.DUPLICATE_OBJECT_PLACEMENT]
        )

    def test_id_out_of_range(self):
        response = self.client.post(
            self.url,
            {
                "placements": [
                    {"objectId": self.server.id, "zoneId": self.web.id},
                    {"objectId": 10**20, "zoneId": self.data.id},
                ]
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("placements", response.data)

    def test_largest_id_is_unknown_not_invalid(self):
        response = self.client.post(
            self.url,
            {"placements": [{"objectId": 2**63 - 1, "zoneId": self.data.id}]},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"score": 0, "results": []})

    def test_get_not_allowed(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)


@override_settings(TRAINING_VALIDATE_REQUIRES_LOGIN=True)
class ValidateRequiresLoginTest(TrainingDataMixin, TestCase):
    """Deployments can put the endpoint behind a login."""

    def setUp(self):
        self.client = APIClient()
        self.url = reverse("api:validate")
        self.body = {
            "placements": [{"objectId": self.server.id, "zoneId": self.web.id}]
        }

    def test_anonymous_rejected(self):
        response = self.client.post(self.url, self.body, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertIn("message", response.data)

    def test_authenticated_accepted(self):
        self.client.force_authenticate(user=self.learner)

        response = self.client.post(self.url, self.body, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["score"], 5)
