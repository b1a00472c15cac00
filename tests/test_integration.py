"""Tests for the bound client and metadata generation."""

import pytest

from builder_content import (
    BuilderClient,
    ConfigError,
    PageContent,
    create_builder_client,
    generate_metadata_from_content,
)
from conftest import FakeResponse, FakeSession


def test_create_builder_client_requires_api_key():
    with pytest.raises(ConfigError):
        create_builder_client(api_key="")


def test_client_fetch_uses_bound_options(sample_results):
    session = FakeSession(FakeResponse({"results": sample_results}))
    client = create_builder_client(
        api_key="key-123", locale="fr-FR", text_fields=["subtitle"], session=session, timeout=7
    )

    pages = client.fetch_text_content(model="section", query={"data.slug": "home"})

    call = session.calls[0]
    assert call["url"].endswith("/section")
    assert call["timeout"] == 7
    assert "Bonjour" in pages[0].content
    assert pages[1].content == ["About us", "Since 1999"]


def test_client_fetch_overrides_locale(sample_results):
    session = FakeSession(FakeResponse({"results": sample_results}))
    client = BuilderClient(api_key="key-123", locale="fr-FR", session=session)

    pages = client.fetch_text_content(locale="en-US")
    assert "Hello there" in pages[0].content


def test_client_default_locale_is_default(sample_results):
    client = BuilderClient(api_key="key-123")
    pages = client.extract_content(sample_results)
    assert pages[0].content[1] == "Hello"


def test_client_extract_content_uses_bound_locale(sample_results):
    client = BuilderClient(api_key="key-123", locale="en-US")
    pages = client.extract_content(sample_results, content_transformer=lambda p, raw: p[1:])
    assert [p.title for p in pages] == ["about-entry"]


def test_client_from_settings(settings):
    client = BuilderClient.from_settings()
    assert client.api_key == "test-api-key"
    assert client.locale == "en-US"
    assert client.default_locale == "Default"


def test_generate_metadata_from_content():
    pages = [
        PageContent(title="Welcome", url="/", content=["Best widgets in town", "More"]),
        PageContent(title="Other", url="/other", content=["Ignored"]),
    ]
    metadata = generate_metadata_from_content(pages, title_prefix="Acme: ", title_suffix=" | Shop")

    assert metadata.title == "Acme: Welcome | Shop"
    assert metadata.description == "Best widgets in town"
    assert metadata.as_dict() == {
        "title": "Acme: Welcome | Shop",
        "description": "Best widgets in town",
        "openGraph": {"title": "Acme: Welcome | Shop", "description": "Best widgets in town"},
    }


def test_generate_metadata_defaults():
    metadata = generate_metadata_from_content([])
    assert metadata.title == "Home"
    assert metadata.description == ""

    metadata = generate_metadata_from_content([], default_title="Site", default_description="About")
    assert metadata.open_graph == {"title": "Site", "description": "About"}


def test_generate_metadata_page_without_text():
    pages = [PageContent(title="Bare", url="/", content=[])]
    metadata = generate_metadata_from_content(pages, default_description="Fallback")
    assert metadata.title == "Bare"
    assert metadata.description == "Fallback"
