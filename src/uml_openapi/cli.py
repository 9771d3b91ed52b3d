"""Command-line interface for the UML to OpenAPI transformer.

Commands:
    transform  PlantUML file -> OpenAPI document (JSON or YAML)
    parse      PlantUML file -> intermediate entity graph (JSON)
    fixtures   list the bundled sample diagrams
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from src.shared.config import TransformerConfig
from src.shared.constants import SUPPORTED_OUTPUT_FORMATS, TRANSFORMER_SERVICE_NAME
from src.shared.errors import AppError, ParsingError
from src.shared.logging import setup_logging
from src.uml_openapi.services.fixture_provider import FixtureProvider
from src.uml_openapi.services.plantuml_parser import parse_plantuml
from src.uml_openapi.services.transform_runner import check_size, run_transform

app = typer.Typer(
    name="uml-openapi",
    help="Turn PlantUML class diagrams into OpenAPI 3.1 scaffolds.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _read_input(source: str) -> str:
    """Read diagram text from a file or stdin.

    Raises:
        ParsingError: If the file is not UTF-8 text.
    """
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        err_console.print(f"[red]Error:[/red] file not found: {source}")
        raise typer.Exit(code=1)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParsingError(f"Diagram file is not valid UTF-8 text: {source}") from exc


def _load_diagram(source: str, config: TransformerConfig) -> str:
    """Read *source* and enforce the size limit, exiting with code 1 on failure."""
    try:
        text = _read_input(source)
        check_size(text, config)
    except AppError as exc:
        err_console.print(f"[red]Error:[/red] {exc.detail}")
        raise typer.Exit(code=1) from exc
    return text


@app.command()
def transform(
    source: str = typer.Argument(..., help="PlantUML file, or '-' for stdin."),
    fmt: str = typer.Option("json", "--format", "-f", help="Output format: json or yaml."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to this file."),
    validate: bool = typer.Option(False, "--validate", help="Validate the generated document."),
) -> None:
    """Transform a PlantUML class diagram into an OpenAPI document."""
    config = TransformerConfig()
    setup_logging(TRANSFORMER_SERVICE_NAME, config.log_level)

    if fmt.lower() not in SUPPORTED_OUTPUT_FORMATS:
        err_console.print(
            f"[red]Error:[/red] unsupported format {fmt!r}; "
            f"use one of {', '.join(SUPPORTED_OUTPUT_FORMATS)}"
        )
        raise typer.Exit(code=2)

    text = _load_diagram(source, config)
    try:
        result = run_transform(text, config, fmt.lower(), validate)
    except AppError as exc:
        err_console.print(f"[red]Error:[/red] {exc.detail}")
        raise typer.Exit(code=1) from exc

    if output is not None:
        output.write_text(result.rendered or "", encoding="utf-8")
        console.print(f"Wrote {output}")
    else:
        typer.echo(result.rendered)

    if result.validation is not None:
        for warning in result.validation.warnings:
            err_console.print(f"[yellow]warning:[/yellow] {warning}")
        for error in result.validation.errors:
            err_console.print(f"[red]invalid:[/red] {error}")
        if not result.validation.valid:
            raise typer.Exit(code=1)


@app.command()
def parse(
    source: str = typer.Argument(..., help="PlantUML file, or '-' for stdin."),
) -> None:
    """Print the intermediate entity graph parsed from a PlantUML file."""
    config = TransformerConfig()
    setup_logging(TRANSFORMER_SERVICE_NAME, config.log_level)

    diagram = parse_plantuml(_load_diagram(source, config))
    typer.echo(diagram.model_dump_json(indent=2))


@app.command()
def fixtures(
    directory: Optional[Path] = typer.Option(None, "--dir", "-d", help="Fixture directory."),
) -> None:
    """List the sample PlantUML diagrams."""
    provider = FixtureProvider(directory or TransformerConfig().fixtures_dir)
    try:
        items = provider.list_fixtures()
    except AppError as exc:
        err_console.print(f"[red]Error:[/red] {exc.detail}")
        raise typer.Exit(code=1) from exc

    table = Table(title="PlantUML fixtures")
    table.add_column("ID", style="cyan")
    table.add_column("Label")
    table.add_column("File")
    table.add_column("Lines", justify="right")
    for item in items:
        table.add_row(item.id, item.label, item.file_name, str(len(item.content.splitlines())))
    console.print(table)


if __name__ == "__main__":
    app()
