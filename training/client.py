"""
HTTP client for the training API.

Wraps the two learner-facing endpoints a session needs, scenario fetch and
placement validation, using ``requests``. The client never retries: a failed
call raises and the caller decides what the learner sees.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional
from urllib.parse import quote

import requests

from training.placement import Placement

if TYPE_CHECKING:
    from training.session import TrainingSession

logger = logging.getLogger(__name__)


class TrainingServiceError(Exception):
    """The training API could not be reached or answered with an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ScenarioNotFoundError(TrainingServiceError):
    """The requested scenario id does not exist."""


class ValidationFeedback:
    """Parsed response of ``POST /api/validate``."""

    PERFECT_HEADLINE = "Perfect!"
    RETRY_HEADLINE = "Not quite right"

    def __init__(self, score: int, results: List[Dict[str, Any]]):
        self.score = score
        self.results = results

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidationFeedback":
        return cls(
            score=int(data.get("score", 0)), results=list(data.get("results", []))
        )

    @property
    def all_correct(self) -> bool:
        return all(result.get("correct") for result in self.results)

    @property
    def headline(self) -> str:
        return self.PERFECT_HEADLINE if self.all_correct else self.RETRY_HEADLINE

    def message_for(self, object_id: int) -> Optional[str]:
        """Feedback message for one object, if it was scored."""
        for result in self.results:
            if result.get("objectId") == object_id:
                return result.get("message")
        return None


class TrainingClient:
    """
    Client for a running trainer server.

    Args:
        base_url: Server root, e.g. ``"http://localhost:8000"``
        session: Optional ``requests.Session`` to reuse (cookies, adapters)
        timeout: Optional per-request timeout in seconds, passed to requests
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch_scenario(self, scenario_id: int) -> Dict[str, Any]:
        """Return ``{"scenario", "zones", "objects"}`` for a scenario."""
        return self._request("GET", f"/api/scenario/{int(scenario_id)}")

    def list_scenarios(self, customer_name: str) -> List[Dict[str, Any]]:
        """Return the scenarios configured for a customer."""
        return self._request(
            "GET", f"/api/scenarios/{quote(customer_name, safe='')}"
        )

    def validate(self, placements: Iterable[Placement]) -> ValidationFeedback:
        """Submit placements for scoring."""
        payload = {"placements": [placement.to_dict() for placement in placements]}
        data = self._request("POST", "/api/validate", json=payload)
        return ValidationFeedback.from_dict(data)

    def load_session(self, scenario_id: int) -> "TrainingSession":
        """Fetch a scenario and start a fresh session for it."""
        from training.session import TrainingSession

        return TrainingSession.from_payload(self.fetch_scenario(scenario_id))

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise TrainingServiceError(f"Could not reach training service: {e}") from e

        if response.status_code == 404 and path.startswith("/api/scenario/"):
            raise ScenarioNotFoundError(
                self._error_message(response, "Scenario not found"), status_code=404
            )
        if not response.ok:
            logger.warning(f"{method} {url} returned {response.status_code}")
            raise TrainingServiceError(
                self._error_message(response, "Training service error"),
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise TrainingServiceError(
                "Training service returned invalid JSON",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _error_message(response: requests.Response, default: str) -> str:
        try:
            body = response.json()
        except ValueError:
            return default
        if isinstance(body, dict):
            return str(body.get("message") or body.get("detail") or default)
        return default
