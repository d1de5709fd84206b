from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_jira_tickets.servers.dispatcher import ToolDispatcher


@dataclass(frozen=True)
class AppContext:
    """Lifespan context holding the tool dispatcher."""

    dispatcher: ToolDispatcher
