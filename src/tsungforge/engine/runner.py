"""Running Tsung against a written configuration file."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from tsungforge._internal.errors import EngineError
from tsungforge._internal.logging import get_logger

logger = get_logger("engine.runner")


@dataclass(frozen=True)
class RunResult:
    """Outcome of one Tsung invocation.

    Attributes:
        config_path: The configuration file Tsung was started with.
        command: The full command line that was executed.
        returncode: Process exit status.
        stdout: Captured standard output.
        stderr: Captured standard error.
    """

    config_path: Path
    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class TsungRunner:
    """Start ``tsung -f <config> start`` and capture its output.

    A non-zero exit status is reported through :class:`RunResult`; only a
    failure to launch the process raises.

    Args:
        binary: Tsung executable name or path.
        timeout: Seconds to wait for the process, or ``None`` for no limit.
    """

    def __init__(self, binary: str = "tsung", *, timeout: float | None = None) -> None:
        self.binary = binary
        self.timeout = timeout

    def command(self, config_path: str | Path) -> tuple[str, ...]:
        """Return the command line used for *config_path*."""
        return (self.binary, "-f", str(config_path), "start")

    def run(self, config_path: str | Path) -> RunResult:
        """Execute Tsung for *config_path* and wait for it to exit.

        Raises:
            EngineError: If the configuration file is missing, Tsung cannot
                be started, or the timeout expires.
        """
        path = Path(config_path)
        if not path.exists():
            msg = f"Tsung configuration not found: {path}"
            raise EngineError(msg)

        command = self.command(path)
        logger.info("Starting test: %s", " ".join(command))
        try:
            completed = subprocess.run(  # noqa: S603
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            msg = f"Tsung executable not found: {self.binary!r}"
            raise EngineError(msg) from exc
        except subprocess.TimeoutExpired as exc:
            msg = f"Tsung did not finish within {self.timeout}s"
            raise EngineError(msg) from exc
        except OSError as exc:
            msg = f"Could not start Tsung: {exc}"
            raise EngineError(msg) from exc

        if completed.returncode != 0:
            logger.warning("Tsung exited with status %d", completed.returncode)
        else:
            logger.info("Tsung finished")

        return RunResult(
            config_path=path,
            command=command,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
