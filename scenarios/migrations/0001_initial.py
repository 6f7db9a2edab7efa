import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("game_objects", "0001_initial"),
        ("zones", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Scenario",
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
                    "customer_name",
                    models.CharField(
                        db_index=True,
                        help_text="Customer this training scenario was built for",
                        max_length=100,
                    ),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        help_text="Admin who created this object",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="scenarios_scenario_created",
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
                        related_name="scenarios_scenario_modified",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "game_objects",
                    models.ManyToManyField(
                        help_text="Objects in play for this scenario",
                        related_name="scenarios",
                        to="game_objects.gameobject",
                    ),
                ),
                (
                    "zones",
                    models.ManyToManyField(
                        help_text="Zones in play for this scenario",
                        related_name="scenarios",
                        to="zones.zone",
                    ),
                ),
            ],
            options={
                "verbose_name": "Scenario",
                "verbose_name_plural": "Scenarios",
                "db_table": "scenarios_scenario",
                "ordering": ["id"],
            },
        ),
    ]
