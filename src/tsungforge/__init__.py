"""tsungforge: describe Tsung load tests in Python and render their XML."""

from __future__ import annotations

from tsungforge._internal.config import TsungForgeConfig, load_config
from tsungforge.model import (
    DynamicVariable,
    ExtractionKind,
    GlobalOptions,
    Request,
    ScenarioDocument,
    Session,
    ThinkTime,
    TimeUnit,
    Transaction,
)

__version__ = "0.1.0"

__all__ = [
    "DynamicVariable",
    "ExtractionKind",
    "GlobalOptions",
    "Request",
    "ScenarioDocument",
    "Session",
    "ThinkTime",
    "TimeUnit",
    "Transaction",
    "TsungForgeConfig",
    "load_config",
]
