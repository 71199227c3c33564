"""``tsungforge init``: scaffold a new scenario file from a template."""

from __future__ import annotations

from pathlib import Path
from string import Template

import typer
from rich.console import Console

console = Console(stderr=True)

_SCENARIO_TEMPLATE = Template('''\
"""Tsung scenario: $name.

Render with:
    tsungforge render $filename

Run with:
    tsungforge run $filename
"""

from __future__ import annotations

from tsungforge import ScenarioDocument, load_config

doc = ScenarioDocument(load_config().global_options())

# Drive traffic from this machine against a server on localhost:2001.
doc.add_client("localhost", True, 10000)
doc.add_server("localhost", 2001)

# Four 5-minute phases; arrivals per second double each phase.
for rate in (1, 2, 4, 8):
    doc.add_phase(5, "minute", rate, "second")

session = doc.add_session("$session")

login = session.add_transaction("login")
login.add_request(
    "POST",
    "/api/auth/login",
    {"username": "%%_users_username%%", "password": "%%_users_password%%"},
)

dashboard = session.add_transaction("dashboard")
me = dashboard.add_request("GET", "/api/me")
me.add_dynamic_variable("me_user_id", "json", "$$.id")

session.add_think_time(5)
''')


def init_cmd(
    name: str = typer.Argument(
        "my_scenario",
        help="Name for the scenario (used as filename and session name).",
    ),
) -> None:
    """Scaffold a new scenario file in the current directory."""
    safe_name = "".join(c if c.isalnum() or c == "_" else "_" for c in name).lower()
    if not safe_name or safe_name[0].isdigit():
        safe_name = "scenario_" + safe_name

    filename = f"{safe_name}.py"
    display_name = name.replace("_", " ").replace("-", " ").title()

    target = Path.cwd() / filename
    if target.exists():
        console.print(f"[red]File already exists:[/red] {filename}")
        raise typer.Exit(code=1)

    content = _SCENARIO_TEMPLATE.substitute(
        name=display_name,
        filename=filename,
        session=safe_name,
    )
    target.write_text(content)
    console.print(f"[green]Created scenario:[/green] {filename}")
