"""Load-generating clients and target servers."""

from __future__ import annotations

from dataclasses import dataclass

from tsungforge.model.formatting import escape_attr, format_bool, format_number

DEFAULT_PORT = 80


@dataclass(frozen=True)
class Client:
    """A host that generates load.

    Attributes:
        host: Hostname of the load generator.
        use_controller_vm: Run users inside the controller's Erlang VM
            instead of starting a remote one.
        max_users: Upper bound on users this client creates.
    """

    host: str
    use_controller_vm: bool
    max_users: int

    def to_xml(self) -> str:
        return (
            f'<client host="{escape_attr(self.host)}" '
            f'use_controller_vm="{format_bool(self.use_controller_vm)}" '
            f'maxusers="{format_number(self.max_users)}" />'
        )


@dataclass(frozen=True)
class Server:
    """A server under test, reached over TCP."""

    host: str
    port: int | str = DEFAULT_PORT

    def to_xml(self) -> str:
        return (
            f'<server host="{escape_attr(self.host)}" '
            f'port="{escape_attr(format_number(self.port))}" type="tcp" />'
        )
