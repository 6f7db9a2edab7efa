"""
In-memory object-to-zone placement tracking for one scenario session.

A tracker keeps two dictionaries in step, so both directions of the mapping
answer in O(1):

    object id -> zone id
    zone id   -> object id

Invariants:
- an object is in at most one zone
- a zone holds at most one object; placing onto a zone held by another
  object is rejected, the occupant is never evicted
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, NamedTuple, Optional


class Placement(NamedTuple):
    """An assertion that ``object_id`` has been put into ``zone_id``."""

    object_id: int
    zone_id: int

    def to_dict(self) -> Dict[str, int]:
        """Return the wire form ``{"objectId": ..., "zoneId": ...}``."""
        return {"objectId": self.object_id, "zoneId": self.zone_id}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Placement":
        """Build a placement from its wire form."""
        return cls(object_id=int(data["objectId"]), zone_id=int(data["zoneId"]))


class PlacementsView:
    """
    Live, restartable view over a tracker's placements.

    Each iteration walks the tracker's current state, so the view can be
    iterated any number of times and always reflects the latest mapping.
    """

    def __init__(self, zone_by_object: Dict[int, int]):
        self._zone_by_object = zone_by_object

    def __iter__(self) -> Iterator[Placement]:
        for object_id, zone_id in self._zone_by_object.items():
            yield Placement(object_id, zone_id)

    def __len__(self) -> int:
        return len(self._zone_by_object)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        object_id, zone_id = item
        return self._zone_by_object.get(object_id) == zone_id

    def __repr__(self) -> str:
        return f"PlacementsView({list(self)!r})"


class PlacementTracker:
    """Current object-to-zone mapping for one active scenario session."""

    def __init__(self):
        self._zone_by_object: Dict[int, int] = {}
        self._object_by_zone: Dict[int, int] = {}

    def place(self, object_id: int, zone_id: int) -> bool:
        """
        Put ``object_id`` into ``zone_id``.

        An object already placed elsewhere moves and frees its old zone.
        Placing the same pair again changes nothing.

        Returns:
            True if the object now sits in the zone, False if the zone is
            held by a different object (state unchanged).
        """
        occupant = self._object_by_zone.get(zone_id)
        if occupant is not None and occupant != object_id:
            return False

        previous_zone = self._zone_by_object.get(object_id)
        if previous_zone is not None and previous_zone != zone_id:
            del self._object_by_zone[previous_zone]

        self._zone_by_object[object_id] = zone_id
        self._object_by_zone[zone_id] = object_id
        return True

    def remove(self, object_id: int) -> bool:
        """Take ``object_id`` out of its zone. Returns False if it was not placed."""
        zone_id = self._zone_by_object.pop(object_id, None)
        if zone_id is None:
            return False
        del self._object_by_zone[zone_id]
        return True

    def current_placements(self) -> PlacementsView:
        """All placements currently held, in no particular order."""
        return PlacementsView(self._zone_by_object)

    def is_object_placed(self, object_id: int) -> bool:
        return object_id in self._zone_by_object

    def is_zone_occupied(self, zone_id: int) -> bool:
        return zone_id in self._object_by_zone

    def zone_of(self, object_id: int) -> Optional[int]:
        """Zone holding ``object_id``, or None."""
        return self._zone_by_object.get(object_id)

    def occupant_of(self, zone_id: int) -> Optional[int]:
        """Object sitting in ``zone_id``, or None."""
        return self._object_by_zone.get(zone_id)

    def clear(self) -> None:
        self._zone_by_object.clear()
        self._object_by_zone.clear()

    def __len__(self) -> int:
        return len(self._zone_by_object)

    def __repr__(self) -> str:
        return f"PlacementTracker({self._zone_by_object!r})"
