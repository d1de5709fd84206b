"""Dispatch tool calls by name and flatten every outcome into a result."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from mcp.types import CallToolResult, TextContent

from ..jira import JiraFetcher
from ..logging_config import get_logger, log_operation
from .catalog import TOOLS, ToolDescriptor
from .handlers import TOOL_HANDLERS, ToolHandler

logger = get_logger("mcp-jira-tickets.dispatcher")


@dataclass(frozen=True)
class ToolResult:
    """Outcome of one tool call: a single text block and an error flag."""

    text: str
    is_error: bool = False

    @property
    def content(self) -> list[TextContent]:
        return [TextContent(type="text", text=self.text)]

    def to_call_tool_result(self) -> CallToolResult:
        return CallToolResult(content=self.content, isError=self.is_error)


class ToolDispatcher:
    """
    Route tool calls to their handlers.

    This is the only place where failures become results: unknown names,
    argument errors, Jira errors and unexpected exceptions all come back as
    an error-flagged ToolResult, never as a raised exception.
    """

    def __init__(
        self,
        jira: JiraFetcher,
        tools: tuple[ToolDescriptor, ...] = TOOLS,
        handlers: Mapping[str, ToolHandler] = TOOL_HANDLERS,
        read_only: bool = False,
    ) -> None:
        missing = [tool.name for tool in tools if tool.name not in handlers]
        if missing:
            raise ValueError(f"No handler registered for tool(s): {', '.join(missing)}")
        self.jira = jira
        self.tools = {tool.name: tool for tool in tools}
        self.handlers = dict(handlers)
        self.read_only = read_only

    def list_tools(self) -> list[ToolDescriptor]:
        """Descriptors callable in the current mode, in catalog order."""
        return [
            tool
            for tool in self.tools.values()
            if tool.read_only or not self.read_only
        ]

    def dispatch(self, name: str, arguments: dict[str, Any] | None) -> ToolResult:
        """
        Execute one tool call.

        Args:
            name: Tool name
            arguments: Raw argument object

        Returns:
            ToolResult with the handler text, or an error-flagged result
        """
        with log_operation(logger, f"tool:{name}"):
            try:
                descriptor = self.tools.get(name)
                if descriptor is None:
                    raise ValueError(f"Unknown tool: {name}")
                if self.read_only and not descriptor.read_only:
                    raise ValueError(
                        f"Operation '{name}' is not available in read-only mode."
                    )
                kwargs = descriptor.resolve_arguments(arguments)
                text = self.handlers[name](self.jira, **kwargs)
            except Exception as e:
                logger.error(f"Tool execution error in {name}: {e}")
                return ToolResult(text=f"Error executing {name}: {e}", is_error=True)

        return ToolResult(text=text)
