"""
Shared abstract model mixins.

Every store model (zones, game objects, scenarios) is assembled from these
building blocks so timestamps, naming and admin audit fields stay uniform:

- TimestampedMixin: created_at / updated_at
- NamedModelMixin: required name with __str__
- DescribedModelMixin: optional free-text description
- AuditableMixin: which admin created and last changed the row

Usage:
    class Zone(TimestampedMixin, NamedModelMixin, DescribedModelMixin):
        x = models.PositiveIntegerField()
"""

from django.conf import settings
from django.db import models


class TimestampedMixin(models.Model):
    """
    Adds creation and modification timestamps.

    Both columns are indexed; admin listings sort on them.
    """

    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        help_text="Timestamp when the object was created",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        db_index=True,
        help_text="Timestamp when the object was last modified",
    )

    class Meta:
        abstract = True


class NamedModelMixin(models.Model):
    """Adds a required ``name`` (max 100 characters) used as the string form."""

    name = models.CharField(max_length=100, help_text="Display name")

    def __str__(self):
        return self.name

    class Meta:
        abstract = True


class DescribedModelMixin(models.Model):
    """Adds an optional ``description``; empty string when not given."""

    description = models.TextField(
        blank=True, default="", help_text="Optional detailed description"
    )

    class Meta:
        abstract = True


class AuditableMixin(models.Model):
    """
    Tracks the admin who created and last modified a row.

    Provides:
    - created_by: set once, on the first save that passes ``user``
    - modified_by: refreshed on every save that passes ``user``

    Usage:
        zone.save(user=request.user)
    """

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        related_name="%(app_label)s_%(class)s_created",
        null=True,
        blank=True,
        help_text="Admin who created this object",
    )
    modified_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        related_name="%(app_label)s_%(class)s_modified",
        null=True,
        blank=True,
        help_text="Admin who last modified this object",
    )

    def save(self, *args, **kwargs):
        """
        Save, recording ``user`` in the audit columns when one is given.

        Args:
            user: User instance performing the change (optional keyword)
            *args, **kwargs: Standard save arguments
        """
        user = kwargs.pop("user", None)

        if user is not None and getattr(user, "pk", None):
            self.modified_by = user
            if self.pk is None and self.created_by_id is None:
                self.created_by = user

        super().save(*args, **kwargs)

    class Meta:
        abstract = True
