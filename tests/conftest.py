"""Shared test fixtures for the tsungforge test suite."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from tsungforge.model.document import GlobalOptions, ScenarioDocument

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


# =============================================================================
# Pytest configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-apply markers based on test directory structure."""
    for item in items:
        test_path = str(item.fspath)
        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/e2e/" in test_path:
            item.add_marker(pytest.mark.e2e)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers installed by setup_logging so streams never go stale."""
    yield
    logger = logging.getLogger("tsungforge")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


# =============================================================================
# Scenario fixtures
# =============================================================================


def build_reference_document() -> ScenarioDocument:
    """The login/dashboard ramp used across the suite."""
    doc = ScenarioDocument(GlobalOptions(loglevel="notice", version="1.0", dump_traffic=False))
    doc.add_client("localhost", True, 10000)
    doc.add_server("localhost", 2001)
    for rate in (1, 2, 4, 8):
        doc.add_phase(5, "minute", rate, "second")

    session = doc.add_session("my_profile")
    login = session.add_transaction("login")
    login.add_request(
        "POST",
        "/api/auth/login",
        {"username": "%%_users_username%%", "password": "%%_users_password%%"},
    )
    dashboard = session.add_transaction("dashboard")
    me = dashboard.add_request("GET", "/api/me")
    me.add_dynamic_variable("me_user_id", "json", "$.id")
    session.add_think_time(5)
    return doc


@pytest.fixture
def reference_document() -> ScenarioDocument:
    """A fresh copy of the reference scenario."""
    return build_reference_document()


SCENARIO_SOURCE = """\
from __future__ import annotations

from tsungforge import ScenarioDocument

doc = ScenarioDocument()
doc.add_client("localhost", True, 100)
doc.add_server("target.local", 8080)
doc.add_phase(1, "minute", 2, "second")
session = doc.add_session("smoke")
session.add_transaction("home").add_request("GET", "/")
"""


@pytest.fixture
def sample_scenario_path(tmp_path: Path) -> Path:
    """Write a minimal scenario file for the loader and CLI."""
    path = tmp_path / "smoke_scenario.py"
    path.write_text(SCENARIO_SOURCE)
    return path
