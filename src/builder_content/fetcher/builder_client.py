"""Builder.io content API fetching via REST."""

import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

import requests

from builder_content.core.config import DEFAULT_API_URL
from builder_content.core.exceptions import BuilderContentError, ConfigError, FetchError
from builder_content.fetcher.content_extractor import (
    FALLBACK_LOCALE,
    ContentTransformer,
    PageContent,
    extract_builder_content,
    pages_to_content,
)

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 100
DEFAULT_TIMEOUT = 30.0


@dataclass
class TextContentResult:
    content: dict[str, list[str]] = field(default_factory=dict)
    error: Optional[str] = None


def build_request_params(
    api_key: str,
    limit: int = DEFAULT_LIMIT,
    query: Optional[dict[str, Any]] = None,
    cachebust: Optional[int] = None,
) -> dict[str, str]:
    """Build the query string for a content request.

    Each ``query`` value is sent JSON-encoded, keyed by its field path
    (e.g. ``{"data.slug": "home"}``).
    """
    if cachebust is None:
        cachebust = int(time.time() * 1000)

    params = {
        "apiKey": api_key,
        "limit": str(limit),
        "cachebust": str(cachebust),
    }
    for key, value in (query or {}).items():
        params[key] = json.dumps(value)
    return params


def _get_results(
    api_key: str,
    api_url: str,
    model: str,
    limit: int,
    query: Optional[dict[str, Any]],
    session: Any,
    timeout: float,
) -> list[dict]:
    url = f"{api_url.rstrip('/')}/{model}"
    params = build_request_params(api_key, limit=limit, query=query)
    http = session if session is not None else requests

    logger.debug("GET %s (model=%s, limit=%s)", url, model, limit)
    resp = http.get(url, params=params, timeout=timeout)

    if not resp.ok:
        raise FetchError(f"API request failed with status {resp.status_code}")

    data = resp.json()
    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list):
        logger.debug("Response from %s carried no results list", url)
        return []
    return results


def fetch_builder_content(
    api_key: str,
    *,
    locale: str = "us-en",
    default_locale: str = FALLBACK_LOCALE,
    api_url: Optional[str] = None,
    limit: int = DEFAULT_LIMIT,
    text_fields: Iterable[str] = (),
    model: str = "page",
    query: Optional[dict[str, Any]] = None,
    content_transformer: Optional[ContentTransformer] = None,
    session: Any = None,
    timeout: Optional[float] = None,
) -> list[PageContent]:
    """Fetch content entries for ``model`` and extract their text per page.

    ``session`` may be a ``requests.Session`` or any object with a
    compatible ``get``; it defaults to the ``requests`` module itself.

    Raises:
        ConfigError: if ``api_key`` is empty.
        FetchError: if the request fails, the body is not valid JSON, or
            extraction (including ``content_transformer``) fails.
    """
    if not api_key:
        raise ConfigError("Builder.io API key is required")

    try:
        results = _get_results(
            api_key,
            api_url or DEFAULT_API_URL,
            model,
            limit,
            query,
            session,
            timeout or DEFAULT_TIMEOUT,
        )
        logger.info("Fetched %d %s entries from Builder.io", len(results), model)

        return extract_builder_content(
            results,
            locale=locale,
            text_fields=text_fields,
            default_locale=default_locale,
            content_transformer=content_transformer,
        )
    except BuilderContentError as e:
        logger.error("Error fetching Builder.io content: %s", e)
        raise
    except Exception as e:
        logger.error("Error fetching Builder.io content: %s", e)
        raise FetchError(f"Failed to fetch content: {e}") from e


def fetch_builder_text_content(
    api_key: str, locale: str = "us-en", **kwargs: Any
) -> TextContentResult:
    """Fetch content as a ``{page title: [texts]}`` mapping without raising.

    Failures are reported through ``TextContentResult.error``.
    """
    try:
        pages = fetch_builder_content(api_key, locale=locale, **kwargs)
        content = pages_to_content(pages)
    except BuilderContentError as e:
        return TextContentResult(error=str(e))
    except (TypeError, AttributeError) as e:
        # a content_transformer returned something other than PageContent
        logger.error("Error mapping Builder.io content by title: %s", e)
        return TextContentResult(error=f"Failed to fetch content: {e}")

    if not pages:
        logger.warning("No results found.")

    return TextContentResult(content=content)
