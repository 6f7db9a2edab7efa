"""
Tests for the requests-based TrainingClient.

The HTTP layer is mocked at requests.Session.request.
"""

from unittest.mock import Mock

import requests
from django.test import SimpleTestCase

from training.client import (
    ScenarioNotFoundError,
    TrainingClient,
    TrainingServiceError,
    ValidationFeedback,
)
from training.placement import Placement
from training.session import TrainingSession


DUPLICATE_MESSAGE = "Each object can be placed in only one zone."


def make_response(status_code=200, json_data=None, json_error=False):
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    if json_error:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = json_data
    return response


class TrainingClientTestBase(SimpleTestCase):
    def setUp(self):
        self.http = Mock(spec=requests.Session)
        self.client = TrainingClient(
            "http://trainer.local/", session=self.http, timeout=5
        )


class FetchScenarioTest(TrainingClientTestBase):
    def test_fetch_scenario(self):
        body = {"scenario": {"id": 3}, "zones": [], "objects": []}
        self.http.request.return_value = make_response(json_data=body)

        data = self.client.fetch_scenario(3)

        self.assertEqual(data, body)
        self.http.request.assert_called_once_with(
            "GET", "http://trainer.local/api/scenario/3", timeout=5
        )

    def test_missing_scenario_raises_not_found(self):
        self.http.request.return_value = make_response(
            404, {"message": "Scenario not found"}
        )

        with self.assertRaises(ScenarioNotFoundError) as ctx:
            self.client.fetch_scenario(999)

        self.assertEqual(str(ctx.exception), "Scenario not found")
        self.assertEqual(ctx.exception.status_code, 404)

    def test_not_found_is_service_error(self):
        self.assertTrue(issubclass(ScenarioNotFoundError, TrainingServiceError))

    def test_load_session(self):
        body = {
            "scenario": {"id": 3},
            "zones": [{"id": 10, "x": 0, "y": 0, "width": 50, "height": 50}],
            "objects": [{"id": 1, "name": "Web server"}],
        }
        self.http.request.return_value = make_response(json_data=body)

        session = self.client.load_session(3)

        self.assertIsInstance(session, TrainingSession)
        self.assertEqual(session.scenario_id, 3)
        self.assertTrue(session.interaction.is_draggable(1))


class ListScenariosTest(TrainingClientTestBase):
    def test_customer_name_is_quoted(self):
        self.http.request.return_value = make_response(json_data=[])

        self.client.list_scenarios("Acme Corp/EU")

        self.http.request.assert_called_once_with(
            "GET", "http://trainer.local/api/scenarios/Acme%20Corp%2FEU", timeout=5
        )


class ValidateTest(TrainingClientTestBase):
    def test_posts_placements(self):
        self.http.request.return_value = make_response(
            json_data={
                "score": 5,
                "results": [{"objectId": 1, "correct": True, "message": "S"}],
            }
        )

        feedback = self.client.validate([Placement(1, 10)])

        self.http.request.assert_called_once_with(
            "POST",
            "http://trainer.local/api/validate",
            timeout=5,
            json={"placements": [{"objectId": 1, "zoneId": 10}]},
        )
        self.assertEqual(feedback.score, 5)
        self.assertTrue(feedback.all_correct)
        self.assertEqual(feedback.message_for(1), "S")

    def test_server_error(self):
        self.http.request.return_value = make_response(500, json_error=True)

        with self.assertRaises(TrainingServiceError) as ctx:
            self.client.validate([])

        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(str(ctx.exception), "Training service error")

    def test_bad_request_message_surfaced(self):
        self.http.request.return_value = make_response(
            400, {"message": DUPLICATE_MESSAGE}
        )

        with self.assertRaises(TrainingServiceError) as ctx:
            self.client.validate([Placement(1, 10), Placement(1, 20)])

        self.assertNotIsInstance(ctx.exception, ScenarioNotFoundError)
        self.assertEqual(str(ctx.exception), DUPLICATE_MESSAGE)

    def test_connection_error(self):
        self.http.request.side_effect = requests.ConnectionError("refused")

        with self.assertRaises(TrainingServiceError) as ctx:
            self.client.validate([Placement(1, 10)])

        self.assertIsNone(ctx.exception.status_code)

    def test_invalid_json(self):
        self.http.request.return_value = make_response(200, json_error=True)

        with self.assertRaises(TrainingServiceError):
            self.client.validate([])


class ValidationFeedbackTest(SimpleTestCase):
    def test_headline_perfect(self):
        feedback = ValidationFeedback.from_dict(
            {"score": 5, "results": [{"objectId": 1, "correct": True}]}
        )

        self.assertEqual(feedback.headline, "Perfect!")

    def test_headline_retry(self):
        feedback = ValidationFeedback.from_dict(
            {
                "score": 5,
                "results": [
                    {"objectId": 1, "correct": True},
                    {"objectId": 2, "correct": False, "message": "E"},
                ],
            }
        )

        self.assertFalse(feedback.all_correct)
        self.assertEqual(feedback.headline, "Not quite right")
        self.assertEqual(feedback.message_for(2), "E")
        self.assertIsNone(feedback.message_for(3))

    def test_from_empty_dict(self):
        feedback = ValidationFeedback.from_dict({})

        self.assertEqual(feedback.score, 0)
        self.assertEqual(feedback.results, [])
