"""Search command - keyword search over extracted Builder.io text."""

from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from builder_content.cli.commands.fetch import load_pages
from builder_content.fetcher.content_extractor import pages_to_content
from builder_content.search.content_search import SearchOptions, search_builder_content


def app(
    term: str = typer.Argument(help="Text to search for"),
    whole_word: bool = typer.Option(False, "--whole-word", "-w", help="Match whole words only"),
    case_sensitive: bool = typer.Option(False, "--case-sensitive", "-c", help="Match case exactly"),
    min_score: float = typer.Option(0.1, "--min-score", help="Drop results scoring below this"),
    context_words: int = typer.Option(5, "--context", help="Words of context around each match"),
    max_results: int = typer.Option(20, "--max-results", "-n", help="Maximum results to show"),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Builder.io model name"),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Content locale"),
    query: Optional[list[str]] = typer.Option(None, "--query", "-q", help="Filter as key=value"),
    from_file: Optional[Path] = typer.Option(None, "--from-file", exists=True, dir_okay=False, help="Search a saved API response instead of fetching"),
):
    """Search Builder.io page text by substring or whole word."""
    pages = load_pages(model=model, locale=locale, query=query, from_file=from_file)

    options = SearchOptions(
        case_sensitive=case_sensitive,
        whole_word=whole_word,
        min_score=min_score,
        context_words=context_words,
    )
    results = search_builder_content(pages_to_content(pages), term, options)

    if not results:
        rprint(f"[yellow]No results for:[/yellow] {escape(term)}")
        return

    table = Table(title=f"Results for: {escape(term)}", show_lines=True)
    table.add_column("#", style="dim", width=3)
    table.add_column("Page", style="bold", max_width=30)
    table.add_column("Score", width=6)
    table.add_column("Excerpt", max_width=70)

    for i, r in enumerate(results[:max_results], 1):
        table.add_row(str(i), escape(r.page_title), f"{r.match_score:.3f}", escape(r.excerpt))

    rprint(table)
    rprint(f"\n[dim]{len(results)} result(s)[/dim]")
