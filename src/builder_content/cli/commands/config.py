"""Configuration commands."""

import typer
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from builder_content.core.config import get_settings

app = typer.Typer()


@app.command()
def show():
    """Show current configuration."""
    settings = get_settings()

    table = Table(title="Builder Content Configuration")
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    table.add_row("API Key", settings.api_key[:6] + "..." if settings.api_key else "[red]Not set[/red]")
    table.add_row("API URL", escape(settings.api_url))
    table.add_row("Model", escape(settings.model))
    table.add_row("Locale", escape(settings.locale))
    table.add_row("Default Locale", escape(settings.default_locale))
    table.add_row("Limit", str(settings.limit))
    table.add_row("Extra Text Fields", escape(", ".join(settings.text_fields)) or "[dim]none[/dim]")
    table.add_row("Timeout", f"{settings.timeout:g}s")
    table.add_row("Configured", "[green]Yes[/green]" if settings.is_configured else "[red]No[/red]")

    rprint(table)
