"""Server-side helpers for fetching, cleaning and searching Builder.io content."""

from builder_content.core.exceptions import BuilderContentError, ConfigError, FetchError
from builder_content.fetcher.builder_client import (
    TextContentResult,
    fetch_builder_content,
    fetch_builder_text_content,
)
from builder_content.fetcher.content_extractor import (
    PageContent,
    extract_builder_content,
    pages_to_content,
)
from builder_content.fetcher.text_cleaner import clean_text, decode_html_entities
from builder_content.integration import (
    BuilderClient,
    PageMetadata,
    create_builder_client,
    generate_metadata_from_content,
)
from builder_content.search.content_search import (
    SearchOptions,
    SearchResult,
    search_builder_content,
)

__all__ = [
    "BuilderClient",
    "BuilderContentError",
    "ConfigError",
    "FetchError",
    "PageContent",
    "PageMetadata",
    "SearchOptions",
    "SearchResult",
    "TextContentResult",
    "clean_text",
    "create_builder_client",
    "decode_html_entities",
    "extract_builder_content",
    "fetch_builder_content",
    "fetch_builder_text_content",
    "generate_metadata_from_content",
    "pages_to_content",
    "search_builder_content",
]
