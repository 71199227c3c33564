"""Think-time pauses between session actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tsungforge.model.formatting import format_bool, format_number

if TYPE_CHECKING:
    from tsungforge._internal.types import Number


@dataclass(frozen=True)
class ThinkTime:
    """Pause for *seconds* before the next action.

    When *randomize* is set, Tsung draws the pause from a distribution whose
    mean is *seconds*.
    """

    seconds: Number
    randomize: bool = True

    def to_xml(self) -> str:
        return (
            f'<thinktime value="{format_number(self.seconds)}" '
            f'random="{format_bool(self.randomize)}"/>'
        )
