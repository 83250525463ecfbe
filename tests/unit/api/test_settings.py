"""Tests for api/settings module."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from api.settings import Settings


class TestSettingsDefaults:
    """Tests for default values."""

    def test_local_development_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.pocketbase_url == "http://127.0.0.1:8090"
        assert settings.registrations_collection == "registrations"
        assert settings.skip_store_connect is False
        assert settings.fest_name == "IT Fest"


class TestSettingsFromEnvironment:
    """Tests for environment parsing."""

    def test_store_target_from_environment(self):
        env = {
            "POCKETBASE_URL": "http://store:8090",
            "REGISTRATIONS_COLLECTION": "fest_registrations",
            "SKIP_STORE_CONNECT": "true",
        }
        with patch.dict("os.environ", env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.pocketbase_url == "http://store:8090"
        assert settings.registrations_collection == "fest_registrations"
        assert settings.skip_store_connect is True

    def test_allowed_origins_are_split(self):
        with patch.dict("os.environ", {"ALLOWED_ORIGINS": "http://a.test, http://b.test,,"}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.allowed_origins == ["http://a.test", "http://b.test"]

    def test_blank_collection_rejected(self):
        with patch.dict("os.environ", {"REGISTRATIONS_COLLECTION": "   "}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_email_without_password_warns(self, caplog):
        with patch.dict("os.environ", {"POCKETBASE_ADMIN_EMAIL": "admin@fest.local"}, clear=True):
            with caplog.at_level("WARNING", logger="api.settings"):
                Settings(_env_file=None)

        assert "POCKETBASE_ADMIN_PASSWORD" in caplog.text


class TestDependencies:
    """Tests for the shared connector built from settings."""

    def test_connector_is_process_wide_and_lazy(self):
        from api.dependencies import get_connector

        env = {"POCKETBASE_URL": "http://store:8090", "REGISTRATIONS_COLLECTION": "regs"}
        with patch.dict("os.environ", env, clear=True):
            first = get_connector()
            second = get_connector()

        assert first is second
        assert first.url == "http://store:8090"
        assert first.collection == "regs"
        assert first.is_connected is False
