"""WSGI config for the trainer project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "trainer_app.settings")

application = get_wsgi_application()
