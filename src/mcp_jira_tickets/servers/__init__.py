"""Tool catalog, handlers and dispatcher for the MCP Jira tickets server."""

from .catalog import TOOLS, ToolDescriptor, ToolParameter, get_descriptor
from .context import AppContext
from .dispatcher import ToolDispatcher, ToolResult
from .handlers import TOOL_HANDLERS

__all__ = [
    "TOOLS",
    "TOOL_HANDLERS",
    "AppContext",
    "ToolDescriptor",
    "ToolDispatcher",
    "ToolParameter",
    "ToolResult",
    "get_descriptor",
]
