"""ASGI config for the trainer project."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "trainer_app.settings")

application = get_asgi_application()
