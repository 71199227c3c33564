"""Arrival phases: the steps of the user-arrival ramp."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from tsungforge.model.formatting import escape_attr, format_number

if TYPE_CHECKING:
    from tsungforge._internal.types import Number


class TimeUnit(StrEnum):
    """Units accepted for phase durations and arrival rates."""

    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


@dataclass(frozen=True)
class Phase:
    """One step of the arrival schedule.

    During *duration* (in *unit*), Tsung starts *arrival_rate* new users
    per *arrival_unit*.

    Attributes:
        ordinal: 1-based position among the document's phases. Assigned by
            :meth:`ScenarioDocument.add_phase`.
        duration: Length of the phase.
        unit: Unit of *duration*.
        arrival_rate: Users started per *arrival_unit*.
        arrival_unit: Unit of *arrival_rate*.
    """

    ordinal: int
    duration: Number
    unit: TimeUnit | str
    arrival_rate: Number
    arrival_unit: TimeUnit | str

    def to_xml(self) -> str:
        return (
            f'<arrivalphase phase="{self.ordinal}" '
            f'duration="{format_number(self.duration)}" unit="{escape_attr(self.unit)}">'
            f'<users arrivalrate="{format_number(self.arrival_rate)}" '
            f'unit="{escape_attr(self.arrival_unit)}" />'
            "</arrivalphase>"
        )
