"""
Drag gesture state machine sitting between pointer input and the tracker.

Per dragged object:

    IDLE --start_drag--> DRAGGING --drop_on_zone / drop_at--> DROPPED_ON_ZONE
                                  \                        \-> DROPPED_OFF_ZONE
                                   \--cancel--> CANCELLED

Every outcome returns the interaction to IDLE. Only a drop that the tracker
accepts changes any placement; an occupied or missing target resolves as a
drop off-zone. Cursor and highlight styling belong to the presentation layer;
this object only exposes ``dragging_object_id`` for it.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterable, List, NamedTuple, Optional

from training.placement import PlacementTracker

logger = logging.getLogger(__name__)


class DragState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class DropOutcome(str, Enum):
    DROPPED_ON_ZONE = "dropped_on_zone"
    DROPPED_OFF_ZONE = "dropped_off_zone"
    CANCELLED = "cancelled"


class InvalidTransition(ValueError):
    """Raised when a drop or cancel arrives while no drag is in progress."""


class ZoneArea(NamedTuple):
    """Hit region of a zone on the canvas."""

    id: int
    x: float
    y: float
    width: float
    height: float

    def contains_point(self, x: float, y: float) -> bool:
        return (
            self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height
        )


class DragInteraction:
    """
    Explicit interaction state for one scenario session.

    Args:
        tracker: The session's placement tracker (mutated on accepted drops)
        zones: Zones in play; anything with ``id`` and ``contains_point``
        object_ids: Ids of the objects in play
    """

    def __init__(
        self,
        tracker: PlacementTracker,
        zones: Iterable[Any],
        object_ids: Iterable[int],
    ):
        self.tracker = tracker
        self._zones: List[Any] = list(zones)
        self._zone_ids = {zone.id for zone in self._zones}
        self._object_ids = set(object_ids)
        self._state = DragState.IDLE
        self._dragging_object_id: Optional[int] = None

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def dragging_object_id(self) -> Optional[int]:
        """Object currently held by the pointer, used for zone highlighting."""
        return self._dragging_object_id

    def is_draggable(self, object_id: int) -> bool:
        """In play and not yet placed. Placed objects must be removed first."""
        return object_id in self._object_ids and not self.tracker.is_object_placed(
            object_id
        )

    def start_drag(self, object_id: int) -> bool:
        """
        Pick up ``object_id``.

        Returns:
            False, with no state change, if another drag is in progress or
            the object is not draggable.
        """
        if self._state is DragState.DRAGGING:
            return False
        if not self.is_draggable(object_id):
            return False

        self._state = DragState.DRAGGING
        self._dragging_object_id = object_id
        return True

    def drop_on_zone(self, zone_id: int) -> DropOutcome:
        """Release the dragged object over ``zone_id``."""
        object_id = self._require_dragging()

        if zone_id in self._zone_ids and self.tracker.place(object_id, zone_id):
            outcome = DropOutcome.DROPPED_ON_ZONE
        else:
            logger.debug(f"Drop of object {object_id} on zone {zone_id} not accepted")
            outcome = DropOutcome.DROPPED_OFF_ZONE

        self._reset()
        return outcome

    def drop_at(self, x: float, y: float) -> DropOutcome:
        """Release the dragged object at canvas point ``(x, y)``."""
        self._require_dragging()

        zone = self.zone_at(x, y)
        if zone is None:
            self._reset()
            return DropOutcome.DROPPED_OFF_ZONE
        return self.drop_on_zone(zone.id)

    def cancel(self) -> DropOutcome:
        """Abort the gesture; the object returns to its origin."""
        self._require_dragging()
        self._reset()
        return DropOutcome.CANCELLED

    def remove(self, object_id: int) -> bool:
        """
        Explicit removal gesture (double activation) on a placed object.

        Frees the object's zone and makes the object draggable again.
        """
        if self._dragging_object_id == object_id:
            return False
        return self.tracker.remove(object_id)

    def zone_at(self, x: float, y: float) -> Optional[Any]:
        """First zone, in scenario order, whose rectangle contains the point."""
        for zone in self._zones:
            if zone.contains_point(x, y):
                return zone
        return None

    def _require_dragging(self) -> int:
        if self._state is not DragState.DRAGGING or self._dragging_object_id is None:
            raise InvalidTransition("No drag in progress.")
        return self._dragging_object_id

    def _reset(self) -> None:
        self._state = DragState.IDLE
        self._dragging_object_id = None
