"""Weighted user sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tsungforge.model.formatting import escape_attr, format_number
from tsungforge.model.thinktime import ThinkTime
from tsungforge.model.transaction import Transaction

if TYPE_CHECKING:
    from tsungforge._internal.types import Number

# A session action renders itself; transactions and think-times interleave.
Action = Transaction | ThinkTime

DEFAULT_PROBABILITY = 100


class Session:
    """A named, weighted sequence of transactions and think-times.

    Each new virtual user picks one session, weighted by *probability*.
    Keeping the probabilities of a document summing to 100 is up to the
    caller.

    Args:
        name: Session name.
        probability: Selection weight in percent. ``None`` means 100;
            an explicit ``0`` is kept.
    """

    def __init__(self, name: str, probability: int | None = None) -> None:
        self._name = name
        self._probability = DEFAULT_PROBABILITY if probability is None else probability
        self._actions: list[Action] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def probability(self) -> int:
        return self._probability

    @property
    def actions(self) -> tuple[Action, ...]:
        """Transactions and think-times in insertion order."""
        return tuple(self._actions)

    def add_transaction(self, name: str) -> Transaction:
        """Append and return a new transaction."""
        transaction = Transaction(name)
        self._actions.append(transaction)
        return transaction

    def add_think_time(self, seconds: Number, randomize: bool = True) -> ThinkTime:
        """Append a pause of *seconds* before the next action.

        Args:
            seconds: Pause length (the mean, when randomized).
            randomize: Whether Tsung should randomize the pause.

        Returns:
            The appended ThinkTime.
        """
        think_time = ThinkTime(seconds=seconds, randomize=randomize)
        self._actions.append(think_time)
        return think_time

    def to_xml(self) -> str:
        body = "".join(action.to_xml() for action in self._actions)
        return (
            f'<session name="{escape_attr(self._name)}" '
            f'probability="{format_number(self._probability)}" type="ts_http">'
            f"{body}</session>"
        )

    def __repr__(self) -> str:
        return (
            f"Session({self._name!r}, probability={self._probability}, "
            f"actions={len(self._actions)})"
        )
