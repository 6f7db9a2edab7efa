from __future__ import annotations

from typing import Iterable

from django.core.exceptions import ValidationError
from django.db import models

from core.models import AuditableMixin, NamedModelMixin, TimestampedMixin
from zones.models import Zone


class GameObjectQuerySet(models.QuerySet):
    """QuerySet helpers for the answer key."""

    def answer_key(self, object_ids: Iterable[int]) -> dict:
        """
        Map object id to GameObject for the given ids in a single query.

        Ids that do not resolve are simply absent from the result.
        """
        return self.in_bulk(list(set(object_ids)))

    def of_type(self, object_type: str) -> "GameObjectQuerySet":
        """Filter to objects with the given type tag."""
        return self.filter(object_type=object_type)


class GameObject(TimestampedMixin, NamedModelMixin, AuditableMixin):
    """
    A draggable item and its entry in the answer key.

    Provides:
    - Name and type tag (server, database, directory, network device)
    - The one zone where the object belongs (correct_zone)
    - Pre-authored feedback for a right or wrong placement
    - Point value awarded for a correct placement

    Read-only to the training core.
    """

    SERVER = "Server"
    DATABASE = "Database"
    ACTIVE_DIRECTORY = "Active Directory"
    NETWORK_DEVICE = "Network Device"

    OBJECT_TYPE_CHOICES = [
        (SERVER, "Server"),
        (DATABASE, "Database"),
        (ACTIVE_DIRECTORY, "Active Directory"),
        (NETWORK_DEVICE, "Network Device"),
    ]

    object_type: models.CharField = models.CharField(
        max_length=50,
        choices=OBJECT_TYPE_CHOICES,
        help_text="Kind of infrastructure this object represents",
    )
    correct_zone: models.ForeignKey = models.ForeignKey(
        Zone,
        on_delete=models.PROTECT,
        related_name="answer_for_objects",
        help_text="The zone this object must be placed in to score",
    )
    error_message: models.TextField = models.TextField(
        help_text="Feedback shown when the object is placed in the wrong zone",
    )
    success_message: models.TextField = models.TextField(
        help_text="Feedback shown when the object is placed correctly",
    )
    points: models.PositiveIntegerField = models.PositiveIntegerField(
        default=0,
        help_text="Points awarded for a correct placement",
    )

    objects = GameObjectQuerySet.as_manager()

    class Meta:
        db_table = "game_objects_gameobject"
        ordering = ["id"]
        verbose_name = "Game object"
        verbose_name_plural = "Game objects"
        indexes = [
            models.Index(fields=["object_type"], name="gameobject_type_idx"),
        ]

    def clean(self) -> None:
        """Reject feedback messages that are only whitespace."""
        super().clean()

        errors = {}
        if self.error_message is not None and not self.error_message.strip():
            errors["error_message"] = "Error message cannot be blank."
        if self.success_message is not None and not self.success_message.strip():
            errors["success_message"] = "Success message cannot be blank."
        if errors:
            raise ValidationError(errors)

    def is_correct_zone(self, zone_id: int) -> bool:
        """Return True if ``zone_id`` is this object's answer."""
        return self.correct_zone_id == zone_id

    def feedback_for(self, correct: bool) -> str:
        """Return the pre-authored message for a right or wrong placement."""
        return self.success_message if correct else self.error_message
