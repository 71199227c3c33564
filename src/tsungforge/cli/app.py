"""Main Typer application, the entry point for the ``tsungforge`` CLI."""

from __future__ import annotations

import typer

from tsungforge import __version__
from tsungforge.cli.init_cmd import init_cmd
from tsungforge.cli.render import render_cmd
from tsungforge.cli.run import run_cmd

app = typer.Typer(
    name="tsungforge",
    help="Describe Tsung load tests in Python and render their XML configuration.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("render", help="Render a scenario file to Tsung XML.")(render_cmd)
app.command("run", help="Write a scenario's XML and start Tsung with it.")(run_cmd)
app.command("init", help="Scaffold a new scenario file.")(init_cmd)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tsungforge {__version__}")
        raise typer.Exit


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """tsungforge: Tsung load tests as Python code."""
