"""Linear keyword search with excerpts over extracted page text."""

import re
from dataclasses import dataclass, replace
from typing import Iterator, Mapping, Optional, Sequence

# Texts at or below this many characters get the full score; longer texts
# are scaled down proportionally.
SCORE_REFERENCE_LENGTH = 50
EXCERPT_FALLBACK_CHARS = 50

SUBSTRING_WEIGHT = 1
WHOLE_WORD_WEIGHT = 2


@dataclass
class SearchOptions:
    case_sensitive: bool = False
    whole_word: bool = False
    min_score: float = 0.1
    context_words: int = 5


@dataclass
class SearchResult:
    page_title: str
    text: str
    match_score: float  # higher is better
    excerpt: str
    match_position: int


def calculate_final_score(base_score: float, text_length: int) -> float:
    """Scale a match-count score so shorter texts rank higher."""
    return base_score * (SCORE_REFERENCE_LENGTH / max(text_length, SCORE_REFERENCE_LENGTH))


def generate_excerpt(
    text: str, match_index: int, match_length: int, context_words: int
) -> str:
    """Return the match with up to ``context_words`` words on either side.

    Truncated ends are marked with ``...``.
    """
    words = text.split()
    match_end = match_index + match_length
    matched_word = -1
    position = 0

    for i, word in enumerate(words):
        start = text.find(word, position)
        end = start + len(word)
        if start < match_end and end > match_index:
            matched_word = i
            break
        position = end

    if matched_word == -1:
        return text[
            max(0, match_index - EXCERPT_FALLBACK_CHARS) : min(
                len(text), match_end + EXCERPT_FALLBACK_CHARS
            )
        ]

    start_index = max(0, matched_word - context_words)
    end_index = min(len(words), matched_word + context_words + 1)

    excerpt = " ".join(words[start_index:end_index])
    if start_index > 0:
        excerpt = "... " + excerpt
    if end_index < len(words):
        excerpt += " ..."
    return excerpt


def _compile(term: str, options: SearchOptions) -> re.Pattern:
    pattern = re.escape(term)
    if options.whole_word:
        pattern = rf"\b{pattern}\b"
    flags = 0 if options.case_sensitive else re.IGNORECASE
    return re.compile(pattern, flags)


def _iter_matches(pattern: re.Pattern, text: str, overlapping: bool) -> Iterator[re.Match]:
    if not overlapping:
        yield from pattern.finditer(text)
        return

    match = pattern.search(text)
    while match is not None:
        yield match
        match = pattern.search(text, match.start() + 1)


def search_builder_content(
    content: Mapping[str, Sequence[str]],
    search_term: str,
    options: Optional[SearchOptions] = None,
    **overrides,
) -> list[SearchResult]:
    """Search page texts for ``search_term``.

    Every occurrence produces its own result. Within one text the n-th
    occurrence scores n times the match weight (whole-word matches weigh
    double), scaled down for long texts. Results under ``min_score`` are
    dropped and the rest are returned best first.

    Args:
        content: Mapping of page title to its extracted texts.
        search_term: Literal text to look for.
        options: Search behaviour; keyword ``overrides`` replace its fields.

    Returns:
        List of SearchResult sorted by descending score.
    """
    if not search_term or not search_term.strip():
        return []

    options = replace(options or SearchOptions(), **overrides)
    pattern = _compile(search_term, options)
    weight = WHOLE_WORD_WEIGHT if options.whole_word else SUBSTRING_WEIGHT

    results: list[SearchResult] = []
    for page_title, texts in content.items():
        for text in texts:
            base_score = 0
            for match in _iter_matches(pattern, text, overlapping=not options.whole_word):
                base_score += weight
                results.append(
                    SearchResult(
                        page_title=page_title,
                        text=text,
                        match_score=calculate_final_score(base_score, len(text)),
                        excerpt=generate_excerpt(
                            text, match.start(), match.end() - match.start(), options.context_words
                        ),
                        match_position=match.start(),
                    )
                )

    results = [r for r in results if r.match_score >= options.min_score]
    results.sort(key=lambda r: r.match_score, reverse=True)
    return results
