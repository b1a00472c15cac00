"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from builder_content.core.config import Settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("BUILDER_API_KEY", raising=False)
    monkeypatch.delenv("BUILDER_LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.api_url == "https://cdn.builder.io/api/v3/content"
    assert settings.log_level == "WARNING"
    assert not settings.is_configured


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("BUILDER_API_KEY", "env-key")
    monkeypatch.setenv("BUILDER_LOG_LEVEL", "info")
    monkeypatch.setenv("BUILDER_TEXT_FIELDS", '["subtitle"]')
    settings = Settings(_env_file=None)
    assert settings.is_configured
    assert settings.log_level == "INFO"
    assert settings.text_fields == ["subtitle"]


def test_settings_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        Settings(log_level="loud", _env_file=None)
