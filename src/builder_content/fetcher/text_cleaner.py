"""Cleanup of HTML and inline markdown left in Builder.io text fields."""

import re
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import PreformattedString

NAMED_ENTITIES = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
    "nbsp": " ",
    "copy": "©",
    "reg": "®",
    "trade": "™",
}

ENTITY_RE = re.compile(r"&(?:#([0-9]+)|#x([0-9a-fA-F]+)|([a-zA-Z0-9]+));")
WHITESPACE_RE = re.compile(r"\s+")

# Stands in for "&" while parsing so the parser leaves entities encoded
AMP_PLACEHOLDER = "\ue000"

# Applied in order: bold before italic so "**x**" is not eaten as "*x*"
MARKDOWN_PATTERNS = [
    re.compile(r"\*\*(.*?)\*\*"),  # bold
    re.compile(r"\*(.+?)\*"),  # italic
    re.compile(r"__(.+?)__"),  # bold
    re.compile(r"_(.+?)_"),  # italic
    re.compile(r"~~(.+?)~~"),  # strikethrough
    re.compile(r"`(.+?)`"),  # inline code
]


def _decode_entity(match: re.Match) -> str:
    dec, hex_, name = match.groups()
    try:
        if dec:
            return chr(int(dec, 10))
        if hex_:
            return chr(int(hex_, 16))
    except (ValueError, OverflowError):
        return match.group(0)
    return NAMED_ENTITIES.get(name, match.group(0))


def decode_html_entities(text: str) -> str:
    """Decode decimal, hex and common named HTML entities.

    Unrecognized entities are left as they are.
    """
    return ENTITY_RE.sub(_decode_entity, text)


def strip_html_tags(text: str) -> str:
    """Remove HTML tags, keeping every text node including script and style.

    Comments and declarations go with the tags. Entities are left encoded;
    see ``decode_html_entities``.
    """
    if "<" not in text:
        return text
    soup = BeautifulSoup(text.replace("&", AMP_PLACEHOLDER), "html.parser")
    strings = soup.find_all(string=True)
    kept = "".join(s for s in strings if not isinstance(s, PreformattedString))
    return kept.replace(AMP_PLACEHOLDER, "&")


def strip_markdown(text: str) -> str:
    """Remove bold, italic, strikethrough and inline code markers."""
    for pattern in MARKDOWN_PATTERNS:
        text = pattern.sub(r"\1", text)
    return text


def normalize_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(" ", text).strip()


def clean_text(value: Any) -> str:
    """Turn a raw CMS text value into plain text.

    >>> clean_text("**One** Day&nbsp;_Installation_")
    'One Day Installation'
    """
    if not value:
        return ""

    text = strip_html_tags(str(value))
    text = decode_html_entities(text)
    text = strip_markdown(text)
    return normalize_whitespace(text)
