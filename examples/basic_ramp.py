"""Exponential ramp against a server on localhost:2001.

Render with:

    tsungforge render examples/basic_ramp.py
"""

from __future__ import annotations

from tsungforge import GlobalOptions, ScenarioDocument

doc = ScenarioDocument(GlobalOptions(loglevel="notice", version="1.0", dump_traffic=False))
doc.add_client("localhost", True, 10000)
doc.add_server("localhost", 2001)

# 4 phases of 5 minutes each; new users per second double every phase.
doc.add_phase(5, "minute", 1, "second")
doc.add_phase(5, "minute", 2, "second")
doc.add_phase(5, "minute", 4, "second")
doc.add_phase(5, "minute", 8, "second")

session = doc.add_session("my_profile")

# The user logs in and goes straight to the dashboard page.
login = session.add_transaction("login")
login.add_request(
    "POST",
    "/api/auth/login",
    {"username": "%%_users_username%%", "password": "%%_users_password%%"},
)
dashboard = session.add_transaction("dashboard")
me = dashboard.add_request("GET", "/api/me")
me.add_dynamic_variable("me_user_id", "json", "$.id")

# On the dashboard the user waits for a bit.
session.add_think_time(5)
