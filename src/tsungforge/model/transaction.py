"""Named groups of requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tsungforge.model.formatting import escape_attr
from tsungforge.model.request import Request

if TYPE_CHECKING:
    from collections.abc import Mapping

# Tsung reports transactions whose name starts with this prefix.
TRANSACTION_PREFIX = "tx_"


class Transaction:
    """An ordered sequence of requests reported under one name."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._requests: list[Request] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def requests(self) -> tuple[Request, ...]:
        return tuple(self._requests)

    def add_request(
        self,
        method: str,
        url: str,
        form_data: Mapping[str, str] | None = None,
    ) -> Request:
        """Append a request to this transaction.

        Args:
            method: HTTP method.
            url: Absolute path to fire the request to.
            form_data: Optional fields for a ``POST`` body.

        Returns:
            The new Request, for attaching dynamic variables.
        """
        request = Request(method, url, form_data)
        self._requests.append(request)
        return request

    def to_xml(self) -> str:
        body = "".join(request.to_xml() for request in self._requests)
        return (
            f'<transaction name="{TRANSACTION_PREFIX}{escape_attr(self._name)}">'
            f"{body}</transaction>"
        )

    def __repr__(self) -> str:
        return f"Transaction({self._name!r}, requests={len(self._requests)})"
