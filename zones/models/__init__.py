from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models

from core.models import (
    AuditableMixin,
    DescribedModelMixin,
    NamedModelMixin,
    TimestampedMixin,
)

# Smallest rectangle a learner can reliably drop onto, in canvas pixels.
MIN_ZONE_SIZE = 50


class Zone(
    TimestampedMixin,
    NamedModelMixin,
    DescribedModelMixin,
    AuditableMixin,
):
    """
    A named rectangular target region on the training canvas.

    Provides:
    - Rectangle geometry (x, y, width, height) in canvas pixels
    - Optional description (via DescribedModelMixin)
    - Admin audit tracking (created_by, modified_by via AuditableMixin)

    Zones are edited only through the admin console; the training core reads
    them and never writes.
    """

    x: models.PositiveIntegerField = models.PositiveIntegerField(
        help_text="Left edge of the zone in canvas pixels",
    )
    y: models.PositiveIntegerField = models.PositiveIntegerField(
        help_text="Top edge of the zone in canvas pixels",
    )
    width: models.PositiveIntegerField = models.PositiveIntegerField(
        validators=[MinValueValidator(MIN_ZONE_SIZE)],
        help_text=f"Width in canvas pixels (at least {MIN_ZONE_SIZE})",
    )
    height: models.PositiveIntegerField = models.PositiveIntegerField(
        validators=[MinValueValidator(MIN_ZONE_SIZE)],
        help_text=f"Height in canvas pixels (at least {MIN_ZONE_SIZE})",
    )

    class Meta:
        db_table = "zones_zone"
        ordering = ["id"]
        verbose_name = "Zone"
        verbose_name_plural = "Zones"

    def contains_point(self, x: float, y: float) -> bool:
        """Return True if the point lies inside the rectangle (edges inclusive)."""
        return (
            self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height
        )

    def is_answer_for_objects(self) -> bool:
        """Return True if any game object names this zone as its correct answer."""
        return self.answer_for_objects.exists()
