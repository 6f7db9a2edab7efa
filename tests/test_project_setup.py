import importlib
import os

import pytest


@pytest.fixture
def production_settings(monkeypatch):
    """The deployment settings module, imported with a clean environment."""
    for name in ("DJANGO_DEBUG", "TRAINING_VALIDATE_REQUIRES_LOGIN"):
        monkeypatch.delenv(name, raising=False)
    module = importlib.import_module("trainer_app.settings")
    return importlib.reload(module)


class TestDjangoProjectSetup:
    """Test that Django project is properly configured."""

    def test_django_project_exists(self):
        """Test that Django project directory exists."""
        names = ("settings.py", "test_settings.py", "urls.py", "wsgi.py", "asgi.py")
        for name in names:
            assert os.path.exists(
                os.path.join("trainer_app", name)
            ), f"{name} should exist in trainer_app"

    def test_manage_py_exists(self):
        """Test that manage.py exists at project root."""
        assert os.path.exists("manage.py"), "manage.py should exist at project root"

    def test_postgresql_configured(self, production_settings):
        """Test that PostgreSQL is configured as the database backend."""
        assert (
            production_settings.DATABASES["default"]["ENGINE"]
            == "django.db.backends.postgresql"
        ), "PostgreSQL should be configured as database backend"

    def test_redis_sessions_configured(self, production_settings):
        """Test that Redis is configured for session storage."""
        assert (
            production_settings.SESSION_ENGINE
            == "django.contrib.sessions.backends.cache"
        ), "Sessions should use cache backend"
        assert production_settings.SESSION_CACHE_ALIAS == "default"
        assert (
            production_settings.CACHES["default"]["BACKEND"]
            == "django.core.cache.backends.redis.RedisCache"
        ), "Redis should be configured as cache backend"

    def test_logging_configured(self, production_settings):
        """Test that logging covers the project's loggers."""
        logging_config = production_settings.LOGGING
        assert logging_config["version"] == 1
        assert "console" in logging_config["handlers"]
        for logger_name in ("api", "training", "core"):
            assert logger_name in logging_config["loggers"]

    def test_exception_handler_configured(self, production_settings):
        """Test that API errors go through the custom handler."""
        assert (
            production_settings.REST_FRAMEWORK["EXCEPTION_HANDLER"]
            == "api.authentication.custom_exception_handler"
        )

    def test_validate_public_by_default(self, production_settings):
        """Test that scoring does not require a login unless configured."""
        assert production_settings.TRAINING_VALIDATE_REQUIRES_LOGIN is False
        assert production_settings.DEBUG is False

    def test_validate_login_flag_from_environment(self, monkeypatch):
        """Test that operators can require a login through the environment."""
        monkeypatch.setenv("TRAINING_VALIDATE_REQUIRES_LOGIN", "true")
        module = importlib.reload(importlib.import_module("trainer_app.settings"))
        try:
            assert module.TRAINING_VALIDATE_REQUIRES_LOGIN is True
        finally:
            monkeypatch.delenv("TRAINING_VALIDATE_REQUIRES_LOGIN")
            importlib.reload(module)

    def test_gitignore_exists(self):
        """Test that .gitignore file exists with Django patterns."""
        assert os.path.exists(".gitignore"), ".gitignore file should exist"

        with open(".gitignore", "r") as f:
            content = f.read()
            assert (
                "*.pyc" in content or "__pycache__" in content
            ), ".gitignore should include Python bytecode patterns"
            assert "db.sqlite3" in content, ".gitignore should include SQLite database"
            assert ".env" in content, ".gitignore should include environment files"

    def test_pyproject_declares_stack(self):
        """Test that pyproject.toml declares the runtime dependencies."""
        with open("pyproject.toml", "r") as f:
            content = f.read().lower()
            for package in ("django", "djangorestframework", "psycopg2", "redis"):
                assert package in content, f"pyproject.toml should include {package}"
