"""Reusable Builder.io client and page metadata helpers."""

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

from builder_content.core.config import Settings, get_settings
from builder_content.core.exceptions import ConfigError
from builder_content.fetcher.builder_client import fetch_builder_content
from builder_content.fetcher.content_extractor import (
    FALLBACK_LOCALE,
    PageContent,
    extract_builder_content,
)


class BuilderClient:
    """Builder.io client with locale, fields and transport bound once."""

    def __init__(
        self,
        api_key: str,
        locale: str = FALLBACK_LOCALE,
        default_locale: str = FALLBACK_LOCALE,
        api_url: Optional[str] = None,
        text_fields: Iterable[str] = (),
        session: Any = None,
        timeout: Optional[float] = None,
    ):
        if not api_key:
            raise ConfigError("Builder.io API key is required")

        self.api_key = api_key
        self.locale = locale
        self.default_locale = default_locale
        self.api_url = api_url
        self.text_fields = list(text_fields)
        self.session = session
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs: Any) -> "BuilderClient":
        settings = settings or get_settings()
        return cls(
            api_key=settings.api_key,
            locale=settings.locale,
            default_locale=settings.default_locale,
            api_url=settings.api_url,
            text_fields=settings.text_fields,
            timeout=settings.timeout,
            **kwargs,
        )

    def fetch_text_content(self, **options: Any) -> list[PageContent]:
        """Fetch and extract page text.

        Accepts the per-request options of ``fetch_builder_content``
        (``model``, ``query``, ``limit``, ``content_transformer``) and
        overrides of the bound ones.
        """
        params = {
            "locale": self.locale,
            "default_locale": self.default_locale,
            "api_url": self.api_url,
            "text_fields": self.text_fields,
            "session": self.session,
            "timeout": self.timeout,
        }
        params.update(options)
        return fetch_builder_content(self.api_key, **params)

    def extract_content(self, results: list[dict], **options: Any) -> list[PageContent]:
        params = {
            "locale": self.locale,
            "default_locale": self.default_locale,
            "text_fields": self.text_fields,
        }
        params.update(options)
        return extract_builder_content(results, **params)


def create_builder_client(**options: Any) -> BuilderClient:
    """Create a ``BuilderClient``; raises ConfigError without an API key."""
    return BuilderClient(**options)


@dataclass
class PageMetadata:
    title: str
    description: str

    @property
    def open_graph(self) -> dict[str, str]:
        return {"title": self.title, "description": self.description}

    def as_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "openGraph": self.open_graph,
        }


def generate_metadata_from_content(
    content: Sequence[PageContent],
    default_title: str = "Home",
    title_prefix: str = "",
    title_suffix: str = "",
    default_description: str = "",
) -> PageMetadata:
    """Derive page metadata from the first extracted page.

    The title comes from the first page and the description from its first
    text, falling back to the given defaults.
    """
    first_page = content[0] if content else None
    page_title = first_page.title if first_page else default_title

    description = default_description
    if first_page and first_page.content:
        description = first_page.content[0] or default_description

    return PageMetadata(
        title=f"{title_prefix}{page_title}{title_suffix}",
        description=description,
    )
