"""Main Typer application and command registration."""

import logging

import typer
from pydantic import ValidationError
from rich import print as rprint
from rich.logging import RichHandler
from rich.markup import escape

from builder_content.cli.commands.config import app as config_app
from builder_content.cli.commands.fetch import app as fetch_app
from builder_content.cli.commands.metadata import app as metadata_app
from builder_content.cli.commands.search import app as search_app
from builder_content.core.config import get_settings

app = typer.Typer(
    name="builder-content",
    help="Fetch, clean and search text content from Builder.io.",
    no_args_is_help=True,
)

app.add_typer(config_app, name="config", help="Manage configuration.")
app.command(name="fetch")(fetch_app)
app.command(name="search")(search_app)
app.command(name="metadata")(metadata_app)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    try:
        settings = get_settings()
    except ValidationError as e:
        rprint(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    logging.basicConfig(
        level="DEBUG" if verbose else settings.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


if __name__ == "__main__":
    app()
