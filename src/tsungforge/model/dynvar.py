"""Dynamic variables: named captures of response data."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tsungforge._internal.logging import get_logger
from tsungforge.model.formatting import escape_attr

logger = get_logger("model.dynvar")


class ExtractionKind(StrEnum):
    """How Tsung extracts the captured value from a response."""

    JSON = "json"
    XPATH = "xpath"
    REGEXP = "regexp"
    RE = "re"
    PSQL = "psql"


# Extraction kind -> ``dyn_variable`` attribute carrying the expression.
EXTRACTION_ATTRIBUTES: dict[str, str] = {
    ExtractionKind.JSON: "jsonpath",
    ExtractionKind.XPATH: "xpath",
    ExtractionKind.REGEXP: "regexp",
    ExtractionKind.RE: "re",
    ExtractionKind.PSQL: "pgsql_expr",
}


@dataclass(frozen=True)
class DynamicVariable:
    """A capture of response data into the scenario variable *name*.

    Attributes:
        name: Variable name, referenced later as ``%%_name%%``.
        kind: Extraction mechanism, one of :class:`ExtractionKind`.
        expression: JSONPath / XPath / regular expression / SQL expression.
    """

    name: str
    kind: ExtractionKind | str
    expression: str

    @property
    def attribute(self) -> str:
        """Attribute name for :attr:`kind`, or ``""`` when the kind is unknown."""
        return EXTRACTION_ATTRIBUTES.get(self.kind, "")

    def to_xml(self) -> str:
        """Render a ``dyn_variable`` element.

        An unknown kind does not raise: the element is emitted with an empty
        attribute name and a warning is logged.
        """
        attribute = self.attribute
        if not attribute:
            logger.warning(
                "Unknown extraction kind %r for dynamic variable %r; "
                "rendering an empty attribute name",
                str(self.kind),
                self.name,
            )
        return (
            f'<dyn_variable name="{escape_attr(self.name)}" '
            f'{attribute}="{escape_attr(self.expression)}"/>'
        )
