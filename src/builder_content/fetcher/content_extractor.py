"""Walk Builder.io content entries and pull out their readable text."""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional

from builder_content.fetcher.text_cleaner import clean_text

DEFAULT_TEXT_FIELDS = ("text", "title", "textContent", "description")
LOCALIZED_VALUE_TYPE = "@builder.io/core:LocalizedValue"
FALLBACK_LOCALE = "Default"


@dataclass
class PageContent:
    title: str
    url: str
    content: list[str] = field(default_factory=list)


ContentTransformer = Callable[[list[PageContent], list[dict]], list[PageContent]]


def _localized_text(node: dict, locale: str, default_locale: str) -> Any:
    return node.get(locale) or node.get(default_locale) or node.get(FALLBACK_LOCALE)


def extract_text_fields(
    node: Any,
    locale: str,
    text_fields: Iterable[str] = DEFAULT_TEXT_FIELDS,
    default_locale: str = FALLBACK_LOCALE,
) -> list[str]:
    """Collect cleaned text from a nested block tree, depth first.

    A dict tagged as a localized value contributes the text for ``locale``,
    falling back to ``default_locale`` and then to ``"Default"``. Any string
    stored under one of ``text_fields`` is collected as well.
    """
    fields = set(text_fields)
    texts: list[str] = []

    def add(value: Any) -> None:
        if isinstance(value, str):
            cleaned = clean_text(value)
            if cleaned:
                texts.append(cleaned)

    def walk(obj: Any) -> None:
        if isinstance(obj, dict):
            items = obj.items()
        elif isinstance(obj, list):
            items = enumerate(obj)
        else:
            return

        for key, value in items:
            if key == "@type" and value == LOCALIZED_VALUE_TYPE:
                add(_localized_text(obj, locale, default_locale))

            if key in fields:
                add(value)

            if isinstance(value, (dict, list)):
                walk(value)

    walk(node)
    return texts


def merge_text_fields(extra_fields: Iterable[str] = ()) -> list[str]:
    """Built-in field names followed by extras, without duplicates."""
    return list(dict.fromkeys([*DEFAULT_TEXT_FIELDS, *extra_fields]))


def _is_localized(value: Any) -> bool:
    return isinstance(value, dict) and value.get("@type") == LOCALIZED_VALUE_TYPE


def _page_title(result: dict, data: dict, locale: str, default_locale: str) -> str:
    title = data.get("title")
    if _is_localized(title):
        title = _localized_text(title, locale, default_locale)
        title = clean_text(title) if isinstance(title, str) else None

    if isinstance(title, str) and title:
        return title
    name = result.get("name")
    if isinstance(name, str) and name:
        return name
    return f"Page-{result.get('id')}"


def _page_url(data: dict) -> str:
    for key in ("url", "path"):
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    return "#"


def extract_builder_content(
    results: list[dict],
    locale: str = "us-en",
    text_fields: Iterable[str] = (),
    default_locale: str = FALLBACK_LOCALE,
    content_transformer: Optional[ContentTransformer] = None,
) -> list[PageContent]:
    """Turn raw Builder.io API results into per-page text content.

    Entries without any text are left out. ``content_transformer`` receives
    the extracted pages and the raw results and returns the final list.
    """
    fields = merge_text_fields(text_fields)
    pages: list[PageContent] = []

    for result in results:
        if not isinstance(result, dict):
            continue
        data = result.get("data")
        if not isinstance(data, dict):
            continue
        blocks = data.get("blocks")
        texts = (
            extract_text_fields(blocks, locale, fields, default_locale)
            if blocks
            else []
        )

        if texts:
            pages.append(
                PageContent(
                    title=_page_title(result, data, locale, default_locale),
                    url=_page_url(data),
                    content=texts,
                )
            )

    if callable(content_transformer):
        pages = content_transformer(pages, results)

    return pages


def pages_to_content(pages: Iterable[PageContent]) -> dict[str, list[str]]:
    """Map page titles to their texts; pages sharing a title are merged."""
    content: dict[str, list[str]] = {}
    for page in pages:
        content.setdefault(page.title, []).extend(page.content)
    return content
