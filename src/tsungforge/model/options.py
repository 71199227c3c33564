"""The fixed ``<options>`` block written into every document."""

from __future__ import annotations

from dataclasses import dataclass

from tsungforge.model.formatting import escape_attr


@dataclass(frozen=True)
class UserAgent:
    """A ``User-Agent`` header value and the share of users sending it."""

    probability: int
    value: str


USER_AGENTS: tuple[UserAgent, ...] = (
    UserAgent(
        80,
        "Mozilla/5.0 (X11; U; Linux i686; en-US; rv:1.7.8) Gecko/20050513 Galeon/1.3.21",
    ),
    UserAgent(
        20,
        "Mozilla/5.0 (Windows; U; Windows NT 5.2; fr-FR; rv:1.7.8) Gecko/20050511 Firefox/1.0.4",
    ),
)


def options_xml() -> str:
    """Render the static options block (``ts_http`` user agent distribution)."""
    agents = "".join(
        f'<user_agent probability="{agent.probability}">{escape_attr(agent.value)}</user_agent>'
        for agent in USER_AGENTS
    )
    return f'<options><option type="ts_http" name="user_agent">{agents}</option></options>'
