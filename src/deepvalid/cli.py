"""CLI interface for deepvalid using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from deepvalid import __description__, __version__
from deepvalid.config import DeepValidConfig, OutputFormat, load_config
from deepvalid.errors import DeepValidError
from deepvalid.loader import load_registry
from deepvalid.registry import Registry
from deepvalid.rules import Predicate, Validation

app = typer.Typer(
    name="deepvalid",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"deepvalid version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """deepvalid - check nested data against declarative rules."""


def _load_settings(config: Path | None) -> DeepValidConfig:
    try:
        settings = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(EXIT_ERROR)

    logging.basicConfig(
        level=settings.logging.python_level,
        format="%(levelname)s %(name)s: %(message)s"
    )
    return settings


def _load_registry(schema: str | None, settings: DeepValidConfig) -> Registry:
    target = schema or settings.schema_.target
    if not target:
        console.print("[red]Error:[/red] No schema given. Use --schema or set schema.target in .deepvalid.json")
        raise typer.Exit(EXIT_ERROR)

    try:
        return load_registry(target, search_path=Path.cwd())
    except DeepValidError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(EXIT_ERROR)


def _read_data(data_file: str) -> Any:
    try:
        if data_file == "-":
            return jsonlib.load(typer.get_text_stream("stdin"))
        with open(data_file, encoding="utf-8") as f:
            return jsonlib.load(f)
    except FileNotFoundError:
        console.print(f"[red]Error:[/red] Data file not found: {data_file}")
        raise typer.Exit(EXIT_ERROR)
    except jsonlib.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] Invalid JSON in {data_file}: {e}")
        raise typer.Exit(EXIT_ERROR)


def _describe(validation: Validation) -> str:
    rule = validation.rule
    if isinstance(rule, Predicate) and rule.label:
        return rule.label
    return rule.kind


@app.command()
def check(
    rule: Annotated[
        str,
        typer.Argument(help="Name of the rule to check against")
    ],
    data_file: Annotated[
        str,
        typer.Argument(help="JSON file to check, or '-' for stdin")
    ],
    schema: Annotated[
        Optional[str],
        typer.Option("--schema", "-s", help="Schema target 'package.module:attribute' (default: from config)")
    ] = None,
    format: Annotated[
        Optional[OutputFormat],
        typer.Option("--format", "-f", help="Output format: text, json (default: from config)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .deepvalid.json)")
    ] = None,
) -> None:
    """Check a JSON document against a named rule."""
    settings = _load_settings(config)
    registry = _load_registry(schema, settings)
    data = _read_data(data_file)

    try:
        is_valid = registry.valid(rule, data)
    except DeepValidError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(EXIT_ERROR)

    output_format = format or settings.output.format
    if output_format == OutputFormat.JSON:
        typer.echo(jsonlib.dumps({"rule": rule, "file": data_file, "valid": is_valid}))
    elif is_valid:
        console.print(f"[green]VALID[/green] {data_file} matches rule '{rule}'")
    else:
        console.print(f"[red]INVALID[/red] {data_file} does not match rule '{rule}'")

    raise typer.Exit(EXIT_VALID if is_valid else EXIT_INVALID)


@app.command()
def rules(
    schema: Annotated[
        Optional[str],
        typer.Option("--schema", "-s", help="Schema target 'package.module:attribute' (default: from config)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .deepvalid.json)")
    ] = None,
) -> None:
    """List the rules a schema defines."""
    settings = _load_settings(config)
    registry = _load_registry(schema, settings)

    if not len(registry):
        console.print("[yellow]No rules defined[/yellow]")
        return

    table = Table(title=registry.name)
    table.add_column("Name", style="cyan")
    table.add_column("Kind", style="white")
    table.add_column("Optional", style="dim")

    for name in registry:
        validation = registry[name]
        table.add_row(name, _describe(validation), "yes" if validation.optional else "no")

    console.print(table)
