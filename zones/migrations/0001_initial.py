import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Zone",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when the object was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        db_index=True,
                        help_text="Timestamp when the object was last modified",
                    ),
                ),
                (
                    "name",
                    models.CharField(help_text="Display name", max_length=100),
                ),
                (
                    "description",
                    models.TextField(
                        blank=True,
                        default="",
                        help_text="Optional detailed description",
                    ),
                ),
                (
                    "x",
                    models.PositiveIntegerField(
                        help_text="Left edge of the zone in canvas pixels"
                    ),
                ),
                (
                    "y",
                    models.PositiveIntegerField(
                        help_text="Top edge of the zone in canvas pixels"
                    ),
                ),
                (
                    "width",
                    models.PositiveIntegerField(
                        help_text="Width in canvas pixels (at least 50)",
                        validators=[django.core.validators.MinValueValidator(50)],
                    ),
                ),
                (
                    "height",
                    models.PositiveIntegerField(
                        help_text="Height in canvas pixels (at least 50)",
                        validators=[django.core.validators.MinValueValidator(50)],
                    ),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        help_text="Admin who created this object",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="zones_zone_created",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "modified_by",
                    models.ForeignKey(
                        blank=True,
                        help_text="Admin who last modified this object",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="zones_zone_modified",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Zone",
                "verbose_name_plural": "Zones",
                "db_table": "zones_zone",
                "ordering": ["id"],
            },
        ),
    ]
