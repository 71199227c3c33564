"""The scenario object model.

A :class:`ScenarioDocument` owns clients, servers, arrival phases and
sessions; sessions own transactions and think-times; transactions own
requests; requests own dynamic variables. Each entity renders its own XML
fragment and the document stitches them together in insertion order.
"""

from __future__ import annotations

from tsungforge.model.document import GlobalOptions, ScenarioDocument
from tsungforge.model.dynvar import DynamicVariable, ExtractionKind
from tsungforge.model.hosts import Client, Server
from tsungforge.model.phase import Phase, TimeUnit
from tsungforge.model.request import Request
from tsungforge.model.session import Session
from tsungforge.model.thinktime import ThinkTime
from tsungforge.model.transaction import Transaction

__all__ = [
    "Client",
    "DynamicVariable",
    "ExtractionKind",
    "GlobalOptions",
    "Phase",
    "Request",
    "ScenarioDocument",
    "Server",
    "Session",
    "ThinkTime",
    "TimeUnit",
    "Transaction",
]
