"""The scenario document: root of the object graph and its serializer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tsungforge._internal.logging import get_logger
from tsungforge.model.formatting import escape_attr, format_bool
from tsungforge.model.hosts import DEFAULT_PORT, Client, Server
from tsungforge.model.options import options_xml
from tsungforge.model.phase import Phase
from tsungforge.model.session import Session

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from tsungforge._internal.types import Number
    from tsungforge.engine.runner import RunResult, TsungRunner
    from tsungforge.model.phase import TimeUnit

logger = get_logger("model.document")

XML_HEADER = '<?xml version="1.0"?>'
DTD_PATH = "/opt/local/share/tsung/tsung-1.0.dtd"
DOCTYPE = f'<!DOCTYPE tsung SYSTEM "{DTD_PATH}" []>'


@dataclass(frozen=True)
class GlobalOptions:
    """Attributes of the root ``<tsung>`` element.

    Attributes:
        loglevel: Controller log level (``notice``, ``debug``, ...).
        version: Configuration format version.
        dump_traffic: Whether Tsung dumps all exchanged traffic.
    """

    loglevel: str = "notice"
    version: str = "1.0"
    dump_traffic: bool = False


class ScenarioDocument:
    """A complete Tsung load test description.

    Build the graph with the ``add_*`` methods, then call :meth:`serialize`
    to obtain the XML configuration. Every level renders in insertion
    order; nothing is sorted, deduplicated or validated.

    Example::

        doc = ScenarioDocument()
        doc.add_client("localhost", True, 10000)
        doc.add_server("localhost", 2001)
        doc.add_phase(5, "minute", 1, "second")
        session = doc.add_session("browse")
        session.add_transaction("home").add_request("GET", "/")
        print(doc.serialize())

    Args:
        options: Root element attributes. Defaults to :class:`GlobalOptions`.
    """

    def __init__(self, options: GlobalOptions | None = None) -> None:
        self._options = options or GlobalOptions()
        self._clients: list[Client] = []
        self._servers: list[Server] = []
        self._phases: list[Phase] = []
        self._sessions: list[Session] = []

    @property
    def options(self) -> GlobalOptions:
        return self._options

    @property
    def clients(self) -> tuple[Client, ...]:
        return tuple(self._clients)

    @property
    def servers(self) -> tuple[Server, ...]:
        return tuple(self._servers)

    @property
    def phases(self) -> tuple[Phase, ...]:
        return tuple(self._phases)

    @property
    def sessions(self) -> tuple[Session, ...]:
        return tuple(self._sessions)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_client(self, host: str, use_controller_vm: bool, max_users: int) -> None:
        """Add a host that drives traffic.

        Args:
            host: Hostname of the load generator.
            use_controller_vm: Whether to reuse the controller's Erlang VM.
            max_users: Maximum number of users this client creates.
        """
        self._clients.append(Client(host, use_controller_vm, max_users))
        logger.debug("Added client %s (max_users=%s)", host, max_users)

    def add_server(self, host: str, port: int | str | None = None) -> None:
        """Add a server under test. *port* defaults to 80 when ``None``."""
        self._servers.append(Server(host, DEFAULT_PORT if port is None else port))
        logger.debug("Added server %s:%s", host, self._servers[-1].port)

    def add_phase(
        self,
        duration: Number,
        unit: TimeUnit | str,
        arrival_rate: Number,
        arrival_unit: TimeUnit | str,
    ) -> None:
        """Append an arrival phase.

        The phase is numbered by its position: the first phase added is
        phase 1, the next phase 2, and so on.

        Args:
            duration: How long the phase lasts, in *unit*.
            unit: ``hour``, ``minute`` or ``second``.
            arrival_rate: New users started per *arrival_unit*.
            arrival_unit: ``hour``, ``minute`` or ``second``.
        """
        phase = Phase(
            ordinal=len(self._phases) + 1,
            duration=duration,
            unit=unit,
            arrival_rate=arrival_rate,
            arrival_unit=arrival_unit,
        )
        self._phases.append(phase)
        logger.debug("Added phase %d", phase.ordinal)

    def add_session(self, name: str, probability: int | None = None) -> Session:
        """Create a session and return it for further building.

        Args:
            name: Session name.
            probability: Chance (percent) that a new user runs this
                session. ``None`` means 100.

        Returns:
            The new Session.
        """
        session = Session(name, probability)
        self._sessions.append(session)
        logger.debug("Added session %s (probability=%s)", name, session.probability)
        return session

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def serialize(self) -> str:
        """Render the whole document as Tsung XML.

        Pure: the graph is not modified, and an unchanged graph always
        yields the same text.
        """
        opts = self._options
        parts = [
            XML_HEADER,
            DOCTYPE,
            f'<tsung loglevel="{escape_attr(opts.loglevel)}" '
            f'version="{escape_attr(opts.version)}" '
            f'dumptraffic="{format_bool(opts.dump_traffic)}">',
            "<clients>",
            *(client.to_xml() for client in self._clients),
            "</clients>",
            "<servers>",
            *(server.to_xml() for server in self._servers),
            "</servers>",
            "<load>",
            *(phase.to_xml() for phase in self._phases),
            "</load>",
            options_xml(),
            "<sessions>",
            *(session.to_xml() for session in self._sessions),
            "</sessions>",
            "</tsung>",
        ]
        return "".join(parts)

    def persist(self, writer: Callable[[str], Path] | None = None) -> Path:
        """Write :meth:`serialize`'s output verbatim and return where it went.

        Args:
            writer: Callable taking the XML text and returning the written
                path. Defaults to a new temporary ``tsung_*.xml`` file.

        Raises:
            EngineError: If the default writer cannot write the file.
        """
        if writer is None:
            from tsungforge.engine.writer import write_document

            writer = write_document
        return writer(self.serialize())

    def execute(
        self,
        runner: TsungRunner | None = None,
        *,
        writer: Callable[[str], Path] | None = None,
    ) -> RunResult:
        """Persist the document and run Tsung against it.

        Args:
            runner: Runner used to invoke Tsung. Defaults to ``tsung`` on
                the PATH.
            writer: Passed to :meth:`persist`.

        Returns:
            The captured result of the Tsung process.

        Raises:
            EngineError: If writing the file or starting Tsung fails.
        """
        if runner is None:
            from tsungforge.engine.runner import TsungRunner

            runner = TsungRunner()
        path = self.persist(writer)
        return runner.run(path)

    def __repr__(self) -> str:
        return (
            f"ScenarioDocument(clients={len(self._clients)}, servers={len(self._servers)}, "
            f"phases={len(self._phases)}, sessions={len(self._sessions)})"
        )
