"""``tsungforge render``: print or save the XML for a scenario file."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from tsungforge._internal.errors import TsungForgeError
from tsungforge._internal.logging import setup_logging
from tsungforge.dsl.loader import load_document
from tsungforge.engine.writer import write_document_to

console = Console(stderr=True)


def render_cmd(
    scenario_file: Path = typer.Argument(
        ...,
        help="Path to the scenario .py file.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the XML to this file instead of stdout.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging.",
    ),
) -> None:
    """Render a scenario file to Tsung XML."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        document = load_document(scenario_file)
        xml = document.serialize()
        if output is None:
            typer.echo(xml)
            return
        path = write_document_to(xml, output)
    except TsungForgeError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(f"[green]Wrote[/green] {path}")
