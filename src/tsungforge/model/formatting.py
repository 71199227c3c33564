"""Scalar formatting helpers shared by every renderable entity.

Tsung reads booleans as the lowercase words ``true``/``false`` and numbers
as plain decimal literals. Attribute values are XML-escaped; POST bodies are
form-url-encoded with ``&amp;`` between pairs so they can sit inside an
attribute unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote
from xml.sax.saxutils import escape

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tsungforge._internal.types import Number

# Characters left alone by a ``querystring``-style encoder on top of
# ``quote``'s unreserved set.
_FORM_SAFE = "!*'()"

# Separator between encoded pairs, already escaped for attribute context.
FORM_PAIR_SEPARATOR = "&amp;"

_ATTR_ENTITIES = {'"': "&quot;"}


def format_bool(value: object) -> str:
    """Render a truth value as ``true`` or ``false``."""
    return "true" if value else "false"


def format_number(value: Number | str) -> str:
    """Render a number without a trailing ``.0`` for integral values.

    Strings pass through unchanged so callers may hand over values such as
    a port read from a config file.

    Examples::

        format_number(5)     # "5"
        format_number(5.0)   # "5"
        format_number(0.5)   # "0.5"
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def escape_attr(value: object) -> str:
    """Escape ``&``, ``<``, ``>`` and ``"`` for use inside a quoted attribute."""
    return escape(str(value), _ATTR_ENTITIES)


def encode_form(data: Mapping[str, object]) -> str:
    """Form-url-encode *data*, joining pairs with ``&amp;``.

    Keys and values are percent-encoded individually (spaces become
    ``%20``), so the result contains no bare ``&`` and can be embedded as an
    attribute value without further escaping. Pair order follows the
    mapping's iteration order.
    """
    return FORM_PAIR_SEPARATOR.join(
        f"{quote(str(key), safe=_FORM_SAFE)}={quote(str(value), safe=_FORM_SAFE)}"
        for key, value in data.items()
    )
