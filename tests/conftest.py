"""Shared test fixtures."""

import json

import pytest

import builder_content.core.config as config
from builder_content.core.config import Settings

LOCALIZED = "@builder.io/core:LocalizedValue"


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.payload


class FakeSession:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings(monkeypatch):
    """Provide test settings and install them as the cached instance."""
    s = Settings(api_key="test-api-key", locale="en-US", text_fields=[])
    monkeypatch.setattr(config, "_settings", s)
    return s


@pytest.fixture
def unconfigured_settings(monkeypatch):
    s = Settings(api_key="", text_fields=[])
    monkeypatch.setattr(config, "_settings", s)
    return s


@pytest.fixture
def sample_results():
    """Raw `results` entries as returned by the Builder.io content API."""
    return [
        {
            "id": "abc",
            "name": "home-entry",
            "data": {
                "title": "Home",
                "url": "/",
                "blocks": [
                    {"component": {"name": "Text", "options": {"text": "<p>Welcome to <b>our</b> site</p>"}}},
                    {
                        "component": {
                            "name": "Heading",
                            "options": {
                                "title": {
                                    "@type": LOCALIZED,
                                    "Default": "Hello",
                                    "en-US": "Hello there",
                                    "fr-FR": "Bonjour",
                                }
                            },
                        }
                    },
                    {"children": [{"component": {"options": {"description": "**Fast** installation"}}}]},
                ],
            },
        },
        {
            "id": "def",
            "name": "about-entry",
            "data": {
                "path": "/about",
                "blocks": [{"component": {"options": {"text": "About us", "subtitle": "Since 1999"}}}],
            },
        },
        {"id": "ghi", "data": {"title": "Empty", "blocks": []}},
        {"id": "jkl", "data": {"title": "No blocks"}},
    ]


@pytest.fixture
def results_file(tmp_path, sample_results):
    """A saved API response on disk."""
    path = tmp_path / "content.json"
    path.write_text(json.dumps({"results": sample_results}), encoding="utf-8")
    return path
