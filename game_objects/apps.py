from django.apps import AppConfig


class GameObjectsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "game_objects"
    verbose_name = "Game objects"
