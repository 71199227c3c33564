"""Custom exception hierarchy for tsungforge."""

from __future__ import annotations


class TsungForgeError(Exception):
    """Base exception for all tsungforge errors.

    The scenario model itself never raises these; they come from the
    surrounding layers (configuration, scenario loading, writing and
    running the generated document).
    """


class ScenarioError(TsungForgeError):
    """Raised when a scenario file cannot be loaded.

    Examples:
        - The file does not exist or is not a ``.py`` file.
        - Importing the file raises.
        - The module defines no ``ScenarioDocument``.
    """


class ConfigError(TsungForgeError):
    """Raised when configuration is invalid or missing.

    Examples:
        - ``TSUNGFORGE_LOGLEVEL`` is not a Tsung log level.
        - ``TSUNGFORGE_DUMP_TRAFFIC`` is not a boolean word.
    """


class EngineError(TsungForgeError):
    """Raised when the generated document cannot be written or executed.

    Examples:
        - A temporary file cannot be created or written.
        - The ``tsung`` binary is not on the PATH.
    """
