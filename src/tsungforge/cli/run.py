"""``tsungforge run``: write a scenario's XML and start Tsung with it."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tsungforge._internal.config import load_config
from tsungforge._internal.errors import TsungForgeError
from tsungforge._internal.logging import setup_logging
from tsungforge.dsl.loader import load_document
from tsungforge.engine.runner import TsungRunner

if TYPE_CHECKING:
    from tsungforge.model.document import ScenarioDocument

console = Console(stderr=True)


def _summary_table(document: ScenarioDocument) -> Table:
    """Tabulate what the scenario declares."""
    table = Table(show_header=True, header_style="bold cyan", expand=True)
    table.add_column("Section", style="bold")
    table.add_column("Entries")

    table.add_row("Clients", ", ".join(c.host for c in document.clients) or "-")
    table.add_row(
        "Servers",
        ", ".join(f"{s.host}:{s.port}" for s in document.servers) or "-",
    )
    table.add_row(
        "Phases",
        "; ".join(
            f"#{p.ordinal} {p.duration} {p.unit} @ {p.arrival_rate}/{p.arrival_unit}"
            for p in document.phases
        )
        or "-",
    )
    table.add_row(
        "Sessions",
        ", ".join(f"{s.name} ({s.probability}%)" for s in document.sessions) or "-",
    )
    return table


def run_cmd(
    scenario_file: Path = typer.Argument(
        ...,
        help="Path to the scenario .py file.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    tsung_bin: str | None = typer.Option(
        None,
        "--tsung-bin",
        help="Tsung executable (default: $TSUNGFORGE_TSUNG_BIN or 'tsung').",
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        help="Give up if Tsung runs longer than this many seconds.",
        min=1.0,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging.",
    ),
) -> None:
    """Write the scenario's XML to a temporary file and run Tsung on it."""
    setup_logging(logging.DEBUG if verbose else logging.INFO)

    try:
        config = load_config()
        document = load_document(scenario_file)
    except TsungForgeError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(
        Panel(
            _summary_table(document),
            title=f"tsungforge: {scenario_file.name}",
            border_style="cyan",
        )
    )

    runner = TsungRunner(tsung_bin or config.tsung_binary, timeout=timeout)
    try:
        result = document.execute(runner)
    except TsungForgeError as exc:
        console.print(f"[red]Tsung run failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(f"[bold]Config:[/bold] {result.config_path}")
    if result.stdout:
        typer.echo(result.stdout, nl=False)
    if result.stderr:
        console.print(result.stderr, markup=False, highlight=False)

    if not result.ok:
        console.print(f"[red]FAIL:[/red] tsung exited with status {result.returncode}")
        raise typer.Exit(code=result.returncode)

    console.print("[green]Tsung started successfully.[/green]")
