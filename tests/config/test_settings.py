"""Tests for Pydantic settings configuration.

This module tests the environment-backed configuration to ensure:
- Settings load correctly from FINGRID_OPENDATA_* environment variables
- Default values are applied correctly
- Invalid values raise a clear ValidationError
- get_settings() reflects the environment at call time
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from finnishgrid.config.settings import FingridSettings, get_settings


class TestFingridSettings:
    """Tests for FingridSettings configuration."""

    def test_default_values(self, clean_env):
        """Settings should have sensible defaults and no key."""
        settings = FingridSettings()

        assert settings.api_key is None
        assert settings.api_url == "https://api.fingrid.fi/v1"
        assert settings.timeout == 30

    def test_load_from_env_vars(self, monkeypatch, clean_env):
        """Settings should load from prefixed environment variables."""
        monkeypatch.setenv("FINGRID_OPENDATA_API_KEY", "abc123")
        monkeypatch.setenv("FINGRID_OPENDATA_API_URL", "http://localhost:8080/v1/")
        monkeypatch.setenv("FINGRID_OPENDATA_TIMEOUT", "45")

        settings = FingridSettings()

        assert settings.api_key == "abc123"
        assert settings.api_url == "http://localhost:8080/v1"
        assert settings.timeout == 45

    def test_blank_key_is_unset(self, monkeypatch, clean_env):
        """An empty variable must not count as a credential."""
        monkeypatch.setenv("FINGRID_OPENDATA_API_KEY", "   ")

        assert FingridSettings().api_key is None

    def test_invalid_url(self, monkeypatch, clean_env):
        """URL without scheme should raise ValidationError."""
        monkeypatch.setenv("FINGRID_OPENDATA_API_URL", "api.fingrid.fi/v1")

        with pytest.raises(ValidationError, match="http:// or https://"):
            FingridSettings()

    def test_invalid_timeout(self, monkeypatch, clean_env):
        """Timeout must be at least one second."""
        monkeypatch.setenv("FINGRID_OPENDATA_TIMEOUT", "0")

        with pytest.raises(ValidationError):
            FingridSettings()

    def test_key_not_in_repr(self, monkeypatch, clean_env):
        """The API key must not leak through repr()."""
        monkeypatch.setenv("FINGRID_OPENDATA_API_KEY", "super-secret")

        assert "super-secret" not in repr(FingridSettings())


class TestGetSettings:
    """Tests for get_settings()."""

    def test_reflects_environment_changes(self, monkeypatch, clean_env):
        """Each call must read the current environment."""
        assert get_settings().api_key is None

        monkeypatch.setenv("FINGRID_OPENDATA_API_KEY", "late-key")

        assert get_settings().api_key == "late-key"

    def test_returns_new_instance(self, clean_env):
        assert get_settings() is not get_settings()
