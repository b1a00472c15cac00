"""Fetch command - download Builder.io content and print the extracted text."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from builder_content.core.config import get_settings
from builder_content.core.exceptions import BuilderContentError
from builder_content.fetcher.content_extractor import PageContent, extract_builder_content
from builder_content.integration import BuilderClient

OUTPUT_FORMATS = ("table", "json", "yaml")


def parse_query(pairs: Optional[list[str]]) -> dict:
    """Parse ``key=value`` pairs; values are read as JSON when they parse."""
    query = {}
    for pair in pairs or []:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got: {pair}", param_hint="--query")
        try:
            query[key] = json.loads(raw)
        except json.JSONDecodeError:
            query[key] = raw
    return query


def _load_results_file(path: Path) -> list[dict]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("results", [])
    return data if isinstance(data, list) else []


def load_pages(
    model: Optional[str] = None,
    locale: Optional[str] = None,
    limit: Optional[int] = None,
    query: Optional[list[str]] = None,
    fields: Optional[list[str]] = None,
    from_file: Optional[Path] = None,
) -> list[PageContent]:
    """Fetch pages from the API, or extract them from a saved API response.

    Exits with status 1 on configuration, fetch or file errors.
    """
    settings = get_settings()
    text_fields = [*settings.text_fields, *(fields or [])]
    locale = locale or settings.locale

    if from_file is not None:
        try:
            results = _load_results_file(from_file)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            rprint(f"[red]Error:[/red] not a JSON API response: {escape(str(from_file))} ({escape(str(e))})")
            raise typer.Exit(1)
        return extract_builder_content(
            results,
            locale=locale,
            text_fields=text_fields,
            default_locale=settings.default_locale,
        )

    if not settings.is_configured:
        rprint("[red]Error:[/red] No API key configured. Set [cyan]BUILDER_API_KEY[/cyan].")
        raise typer.Exit(1)

    try:
        client = BuilderClient.from_settings(settings)
        return client.fetch_text_content(
            locale=locale,
            text_fields=text_fields,
            model=model or settings.model,
            limit=limit or settings.limit,
            query=parse_query(query),
        )
    except BuilderContentError as e:
        rprint(f"[red]Fetch failed:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def app(
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Builder.io model name"),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Content locale"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Number of entries to fetch"),
    query: Optional[list[str]] = typer.Option(None, "--query", "-q", help="Filter as key=value, e.g. data.slug=home"),
    fields: Optional[list[str]] = typer.Option(None, "--field", "-f", help="Extra text field name to extract"),
    from_file: Optional[Path] = typer.Option(None, "--from-file", exists=True, dir_okay=False, help="Read a saved API response instead of fetching"),
    output: str = typer.Option("table", "--format", "-o", help="Output format: table, json or yaml"),
):
    """Fetch content from Builder.io and show the extracted text per page."""
    if output not in OUTPUT_FORMATS:
        raise typer.BadParameter(f"Choose one of: {', '.join(OUTPUT_FORMATS)}", param_hint="--format")

    pages = load_pages(model, locale, limit, query, fields, from_file)

    if output == "json":
        typer.echo(json.dumps([asdict(p) for p in pages], indent=2, ensure_ascii=False))
        return
    if output == "yaml":
        typer.echo(yaml.safe_dump([asdict(p) for p in pages], sort_keys=False, allow_unicode=True))
        return

    if not pages:
        rprint("[yellow]No content found.[/yellow]")
        return

    table = Table(title="Builder.io content", show_lines=True)
    table.add_column("Page", style="bold", max_width=40)
    table.add_column("URL", max_width=40)
    table.add_column("Texts", justify="right", width=6)
    table.add_column("First text", max_width=60)

    for page in pages:
        table.add_row(escape(page.title), escape(page.url), str(len(page.content)), escape(page.content[0]))

    rprint(table)
    rprint(f"\n[dim]{len(pages)} page(s)[/dim]")
