"""Linguistic example export CLI."""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from lingex.config import settings
from lingex.errors import ExampleExportError
from lingex.exporter import ExampleExporter
from lingex.models import Convention, EmptyItemPolicy, load_tree
from lingex.pipeline import ExampleDispatcher, Gb4eRenderer, LinguexRenderer, extract

app = typer.Typer(
    name="lingex",
    help="Render linguistic example lists for gb4e and linguex",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, help="Logging level"),
) -> None:
    """Configure logging for all commands."""
    configure_logging(log_level)


@app.command()
def render(
    tree_path: Path = typer.Argument(..., help="JSON file with the document tree"),
    strict: bool = typer.Option(settings.strict, help="Fail on malformed example items"),
    empty_item_policy: EmptyItemPolicy = typer.Option(
        settings.empty_item_policy, help="Unjudged empty items among judged siblings"
    ),
) -> None:
    """Render a document tree to LaTeX on stdout."""
    if not tree_path.exists():
        err_console.print(f"[red]Error: File not found: {tree_path}[/red]")
        raise typer.Exit(1)

    try:
        nodes = load_tree(json.loads(tree_path.read_text(encoding="utf-8")))
    except (json.JSONDecodeError, ValidationError) as e:
        err_console.print(f"[red]Error: Invalid document tree: {e}[/red]")
        raise typer.Exit(1)

    dispatcher = ExampleDispatcher(
        renderers={
            Convention.GB4E: Gb4eRenderer(empty_item_policy=empty_item_policy),
            Convention.LINGUEX: LinguexRenderer(),
        }
    )
    exporter = ExampleExporter(dispatcher=dispatcher, strict=strict)

    try:
        result = exporter.export(nodes)
    except ExampleExportError as e:
        err_console.print(f"[red]Export failed:[/red] {e}")
        raise typer.Exit(1)

    # Plain write: rich markup would mangle LaTeX brackets
    typer.echo(result.text, nl=False)
    for issue in result.issues:
        err_console.print(f"[yellow]{issue.kind.value}:[/yellow] {issue.message}")


@app.command("extract")
def extract_command(
    text: str = typer.Argument(..., help="Rendered example text"),
) -> None:
    """Show the label and judgment found in a line of example text."""
    annotations = extract(text)

    table = Table(title="Extracted annotations")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("label", Text(_show(annotations.label)))
    table.add_row("judgment", Text(_show(annotations.judgment)))
    table.add_row("proper text", Text(_show(annotations.proper_text)))
    console.print(table)


@app.command()
def conventions() -> None:
    """List supported conventions and their commands."""
    table = Table(title="Conventions")
    table.add_column("Package", style="bold blue")
    table.add_column("Environments")
    table.add_column("Item commands")
    table.add_row(
        Convention.GB4E.value,
        f"{settings.gb4e_environment}, {settings.gb4e_sublist_environment}",
        f"{settings.gb4e_item_command}, {settings.gb4e_tagged_item_command}",
    )
    table.add_row(Convention.LINGUEX.value, "-", r"\ex., \a., \b., \z.")
    console.print(table)


def _show(value: Optional[str]) -> str:
    if value is None:
        return "(none)"
    return repr(value)


if __name__ == "__main__":
    app()
