"""
One learner's session on one scenario.

A ``TrainingSession`` is built explicitly when a scenario loads and owns its
placement tracker and drag interaction; loading another scenario means
building a new session and dropping the old one. Nothing here is persisted.

Usage:
    client = TrainingClient("http://localhost:8000")
    session = client.load_session(3)

    session.interaction.start_drag(7)
    session.interaction.drop_at(140, 220)
    feedback = session.validate(client)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional

from training.interaction import DragInteraction, ZoneArea
from training.placement import Placement, PlacementTracker

if TYPE_CHECKING:
    from training.client import TrainingClient, ValidationFeedback

logger = logging.getLogger(__name__)


class TrainingSession:
    """
    Scenario content plus the live placement state for one viewing.

    Args:
        scenario: Scenario summary as served by the API
        zones: Zone dicts (``id``, ``name``, ``x``, ``y``, ``width``, ``height``)
        objects: Game object dicts (``id``, ``name``, ``objectType``, ...)
    """

    def __init__(
        self,
        scenario: Mapping[str, Any],
        zones: Iterable[Mapping[str, Any]],
        objects: Iterable[Mapping[str, Any]],
    ):
        self.scenario = dict(scenario)
        self.zones: List[Dict[str, Any]] = [dict(zone) for zone in zones]
        self.objects: List[Dict[str, Any]] = [dict(obj) for obj in objects]
        self.tracker = PlacementTracker()
        self.interaction = DragInteraction(
            self.tracker,
            zones=[self._zone_area(zone) for zone in self.zones],
            object_ids=[obj["id"] for obj in self.objects],
        )
        self.last_feedback: Optional["ValidationFeedback"] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "TrainingSession":
        """Build a session from a ``GET /api/scenario/{id}`` response body."""
        return cls(
            scenario=payload.get("scenario", {}),
            zones=payload.get("zones", []),
            objects=payload.get("objects", []),
        )

    @property
    def scenario_id(self) -> Optional[int]:
        return self.scenario.get("id")

    def available_objects(self) -> List[Dict[str, Any]]:
        """Objects still in the panel, i.e. not placed in any zone."""
        return [
            obj for obj in self.objects if not self.tracker.is_object_placed(obj["id"])
        ]

    def placed_objects(self) -> List[Dict[str, Any]]:
        """Objects currently sitting in a zone."""
        return [obj for obj in self.objects if self.tracker.is_object_placed(obj["id"])]

    def placements(self) -> List[Dict[str, int]]:
        """Current placements in wire form."""
        return [placement.to_dict() for placement in self.tracker.current_placements()]

    def validate(self, client: "TrainingClient") -> "ValidationFeedback":
        """
        Submit the current placements for scoring.

        Placement state is left untouched whether the call succeeds or not, so
        a learner can retry after a failure.

        Raises:
            TrainingServiceError: If the service is unreachable or errors
        """
        submitted: List[Placement] = list(self.tracker.current_placements())
        feedback = client.validate(submitted)
        self.last_feedback = feedback
        logger.info(
            f"Scenario {self.scenario_id}: submitted {len(submitted)} placements, "
            f"score {feedback.score}"
        )
        return feedback

    @staticmethod
    def _zone_area(zone: Mapping[str, Any]) -> ZoneArea:
        return ZoneArea(
            id=zone["id"],
            x=zone["x"],
            y=zone["y"],
            width=zone["width"],
            height=zone["height"],
        )
