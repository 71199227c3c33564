"""Configuration loading for tsungforge."""

from __future__ import annotations

import os
from dataclasses import dataclass

from tsungforge._internal.errors import ConfigError
from tsungforge.model.document import GlobalOptions

# Log levels understood by the Tsung controller.
TSUNG_LOG_LEVELS = (
    "emergency",
    "critical",
    "error",
    "warning",
    "notice",
    "info",
    "debug",
)

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class TsungForgeConfig:
    """Global tsungforge configuration.

    Attributes:
        loglevel: Tsung controller log level written on the root element.
        version: Tsung configuration format version.
        dump_traffic: Whether Tsung should dump all traffic.
        tsung_binary: Executable used to run the generated document.
    """

    loglevel: str = "notice"
    version: str = "1.0"
    dump_traffic: bool = False
    tsung_binary: str = "tsung"

    def global_options(self) -> GlobalOptions:
        """Return the document-level options carried by this config."""
        return GlobalOptions(
            loglevel=self.loglevel,
            version=self.version,
            dump_traffic=self.dump_traffic,
        )


def _parse_bool(name: str, raw: str) -> bool:
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    msg = f"{name} must be a boolean (true/false, yes/no, 1/0), got: {raw!r}"
    raise ConfigError(msg)


def load_config() -> TsungForgeConfig:
    """Load configuration from environment variables with defaults.

    Environment variables:
        TSUNGFORGE_LOGLEVEL: Tsung log level (default: notice).
        TSUNGFORGE_VERSION: Configuration format version (default: 1.0).
        TSUNGFORGE_DUMP_TRAFFIC: Dump traffic flag (default: false).
        TSUNGFORGE_TSUNG_BIN: Tsung executable (default: tsung).

    Returns:
        Populated TsungForgeConfig instance.

    Raises:
        ConfigError: If an environment variable has an invalid value.
    """
    loglevel = os.environ.get("TSUNGFORGE_LOGLEVEL", "notice").strip().lower()
    if loglevel not in TSUNG_LOG_LEVELS:
        msg = (
            f"TSUNGFORGE_LOGLEVEL must be one of {', '.join(TSUNG_LOG_LEVELS)}, "
            f"got: {loglevel!r}"
        )
        raise ConfigError(msg)

    version = os.environ.get("TSUNGFORGE_VERSION", "1.0").strip()
    if not version:
        msg = "TSUNGFORGE_VERSION must not be empty"
        raise ConfigError(msg)

    dump_traffic = _parse_bool(
        "TSUNGFORGE_DUMP_TRAFFIC",
        os.environ.get("TSUNGFORGE_DUMP_TRAFFIC", "false"),
    )

    tsung_binary = os.environ.get("TSUNGFORGE_TSUNG_BIN", "tsung").strip()
    if not tsung_binary:
        msg = "TSUNGFORGE_TSUNG_BIN must not be empty"
        raise ConfigError(msg)

    return TsungForgeConfig(
        loglevel=loglevel,
        version=version,
        dump_traffic=dump_traffic,
        tsung_binary=tsung_binary,
    )
