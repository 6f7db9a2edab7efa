from __future__ import annotations

from django.db import models

from core.models import (
    AuditableMixin,
    DescribedModelMixin,
    NamedModelMixin,
    TimestampedMixin,
)
from game_objects.models import GameObject
from zones.models import Zone


class ScenarioQuerySet(models.QuerySet):
    """QuerySet helpers for scenarios."""

    def for_customer(self, customer_name: str) -> "ScenarioQuerySet":
        """Scenarios configured for the named customer."""
        return self.filter(customer_name=customer_name)

    def with_content(self) -> "ScenarioQuerySet":
        """Prefetch zones and objects so serializing a scenario stays cheap."""
        return self.prefetch_related("zones", "game_objects")


class Scenario(
    TimestampedMixin,
    NamedModelMixin,
    DescribedModelMixin,
    AuditableMixin,
):
    """
    A named bundle of zones and objects presented in one training session.

    Provides:
    - Customer the scenario was configured for
    - The zones and game objects in play (order irrelevant)
    - Optional description and admin audit fields
    """

    customer_name: models.CharField = models.CharField(
        max_length=100,
        db_index=True,
        help_text="Customer this training scenario was built for",
    )
    zones: models.ManyToManyField = models.ManyToManyField(
        Zone,
        related_name="scenarios",
        help_text="Zones in play for this scenario",
    )
    game_objects: models.ManyToManyField = models.ManyToManyField(
        GameObject,
        related_name="scenarios",
        help_text="Objects in play for this scenario",
    )

    objects = ScenarioQuerySet.as_manager()

    class Meta:
        db_table = "scenarios_scenario"
        ordering = ["id"]
        verbose_name = "Scenario"
        verbose_name_plural = "Scenarios"

    @property
    def zone_ids(self) -> list:
        """Sorted ids of the zones in play."""
        return sorted(zone.id for zone in self.zones.all())

    @property
    def object_ids(self) -> list:
        """Sorted ids of the game objects in play."""
        return sorted(obj.id for obj in self.game_objects.all())

    def max_score(self) -> int:
        """Total points available if every object is placed correctly."""
        return sum(obj.points for obj in self.game_objects.all())
