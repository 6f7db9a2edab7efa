import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("zones", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="GameObject",
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
                    "object_type",
                    models.CharField(
                        choices=[
                            ("Server", "Server"),
                            ("Database", "Database"),
                            ("Active Directory", "Active Directory"),
                            ("Network Device", "Network Device"),
                        ],
                        help_text="Kind of infrastructure this object represents",
                        max_length=50,
                    ),
                ),
                (
                    "error_message",
                    models.TextField(
                        help_text=(
                            "Feedback shown when the object is placed in the "
                            "wrong zone"
                        )
                    ),
                ),
                (
                    "success_message",
                    models.TextField(
                        help_text="Feedback shown when the object is placed correctly"
                    ),
                ),
                (
                    "points",
                    models.PositiveIntegerField(
                        default=0, help_text="Points awarded for a correct placement"
                    ),
                ),
                (
                    "correct_zone",
                    models.ForeignKey(
                        help_text="The zone this object must be placed in to score",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="answer_for_objects",
                        to="zones.zone",
                    ),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        help_text="Admin who created this object",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="game_objects_gameobject_created",
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
                        related_name="game_objects_gameobject_modified",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Game object",
                "verbose_name_plural": "Game objects",
                "db_table": "game_objects_gameobject",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["object_type"], name="gameobject_type_idx")
                ],
            },
        ),
    ]
