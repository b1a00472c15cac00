"""Metadata command - derive page title and description from content."""

import json
from pathlib import Path
from typing import Optional

import typer

from builder_content.cli.commands.fetch import load_pages
from builder_content.integration import generate_metadata_from_content


def app(
    default_title: str = typer.Option("Home", "--default-title", help="Title when no content is found"),
    title_prefix: str = typer.Option("", "--prefix", help="Text put before the title"),
    title_suffix: str = typer.Option("", "--suffix", help="Text put after the title"),
    default_description: str = typer.Option("", "--default-description", help="Description when no content is found"),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Builder.io model name"),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Content locale"),
    query: Optional[list[str]] = typer.Option(None, "--query", "-q", help="Filter as key=value"),
    from_file: Optional[Path] = typer.Option(None, "--from-file", exists=True, dir_okay=False, help="Read a saved API response instead of fetching"),
):
    """Print page metadata (title, description, Open Graph) as JSON."""
    pages = load_pages(model=model, locale=locale, query=query, from_file=from_file)
    metadata = generate_metadata_from_content(
        pages,
        default_title=default_title,
        title_prefix=title_prefix,
        title_suffix=title_suffix,
        default_description=default_description,
    )
    typer.echo(json.dumps(metadata.as_dict(), indent=2, ensure_ascii=False))
