"""HTTP requests and the response captures attached to them."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tsungforge.model.dynvar import DynamicVariable
from tsungforge.model.formatting import encode_form, escape_attr, format_bool

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tsungforge._internal.types import FormData
    from tsungforge.model.dynvar import ExtractionKind

HTTP_VERSION = "1.1"


class Request:
    """One HTTP call, optionally capturing response data into variables.

    Args:
        method: HTTP method. Stored upper-cased.
        url: Absolute path (or full URL) to request.
        form_data: Fields sent as a form-url-encoded body. Only rendered
            for ``POST``.
    """

    def __init__(
        self,
        method: str,
        url: str,
        form_data: Mapping[str, str] | None = None,
    ) -> None:
        self._method = method.upper()
        self._url = url
        self._form_data: FormData = dict(form_data or {})
        self._variables: list[DynamicVariable] = []

    @property
    def method(self) -> str:
        return self._method

    @property
    def url(self) -> str:
        return self._url

    @property
    def form_data(self) -> FormData:
        """A copy of the POST fields."""
        return dict(self._form_data)

    @property
    def variables(self) -> tuple[DynamicVariable, ...]:
        """Captured variables in insertion order."""
        return tuple(self._variables)

    @property
    def substitution(self) -> bool:
        """True iff at least one dynamic variable is captured."""
        return len(self._variables) > 0

    def add_dynamic_variable(
        self,
        name: str,
        kind: ExtractionKind | str,
        expression: str,
    ) -> DynamicVariable:
        """Capture part of the response into the variable *name*.

        Args:
            name: Variable name.
            kind: One of ``json``, ``xpath``, ``regexp``, ``re``, ``psql``.
            expression: Expression selecting the value to capture.

        Returns:
            The appended DynamicVariable.
        """
        variable = DynamicVariable(name=name, kind=kind, expression=expression)
        self._variables.append(variable)
        return variable

    def to_xml(self) -> str:
        parts = [f'<request subst="{format_bool(self.substitution)}">']
        parts.extend(variable.to_xml() for variable in self._variables)

        attrs = (
            f'url="{escape_attr(self._url)}" method="{escape_attr(self._method)}" '
            f'version="{HTTP_VERSION}"'
        )
        if self._method == "POST":
            attrs += f' contents="{encode_form(self._form_data)}"'
        parts.append(f"<http {attrs} />")
        parts.append("</request>")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Request({self._method!r}, {self._url!r}, variables={len(self._variables)})"
