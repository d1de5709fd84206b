"""Static catalog of the Jira ticket tools and their parameter schemas."""

import re
from dataclasses import dataclass, field
from typing import Any

from mcp.types import Tool

# JSON Schema type names accepted in descriptors
STRING = "string"
INTEGER = "integer"
BOOLEAN = "boolean"

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")
_INTEGER_STRING = re.compile(r"^[+-]?\d+$")


def to_snake_case(name: str) -> str:
    """Convert a camelCase parameter name to its snake_case keyword."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@dataclass(frozen=True)
class ToolParameter:
    """One declared tool parameter."""

    name: str
    type: str
    description: str
    required: bool = False
    default: Any = None

    @property
    def keyword(self) -> str:
        """The handler keyword argument this parameter is passed as."""
        return to_snake_case(self.name)

    def to_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.default is not None:
            schema["default"] = self.default
        return schema

    def coerce(self, value: Any) -> Any:
        """Check ``value`` against the declared type.

        Raises:
            ValueError: If the value does not fit the type
        """
        if self.type == STRING:
            if isinstance(value, str):
                return value
        elif self.type == BOOLEAN:
            if isinstance(value, bool):
                return value
            if isinstance(value, str) and value.lower() in ("true", "false"):
                return value.lower() == "true"
        elif self.type == INTEGER:
            if isinstance(value, int) and not isinstance(value, bool):
                return value
            if isinstance(value, float) and value.is_integer():
                return int(value)
            if isinstance(value, str) and _INTEGER_STRING.match(value.strip()):
                return int(value)
        raise ValueError(
            f"Parameter '{self.name}' must be of type {self.type}, got {value!r}"
        )


@dataclass(frozen=True)
class ToolDescriptor:
    """Name, description and parameter schema of one tool."""

    name: str
    description: str
    parameters: tuple[ToolParameter, ...] = field(default_factory=tuple)
    read_only: bool = True

    def __post_init__(self) -> None:
        names = [param.name for param in self.parameters]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate parameter names in tool '{self.name}'")
        for param in self.parameters:
            if param.required and param.default is not None:
                raise ValueError(
                    f"Required parameter '{param.name}' of tool '{self.name}' "
                    "cannot have a default"
                )

    @property
    def required(self) -> list[str]:
        return [param.name for param in self.parameters if param.required]

    @property
    def input_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {param.name: param.to_schema() for param in self.parameters},
            "additionalProperties": False,
        }
        if self.required:
            schema["required"] = self.required
        return schema

    def to_tool(self) -> Tool:
        """Render the descriptor as an MCP tool definition."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )

    def resolve_arguments(self, arguments: dict[str, Any] | None) -> dict[str, Any]:
        """
        Validate call arguments and map them to handler keyword arguments.

        Undeclared names are rejected, required names must be present,
        defaults fill omitted optional parameters, and a JSON null counts as
        omitted.

        Args:
            arguments: The raw argument object of the call

        Returns:
            Keyword arguments for the handler, keyed by snake_case name

        Raises:
            ValueError: On any schema violation
        """
        arguments = arguments or {}
        if not isinstance(arguments, dict):
            raise ValueError("Tool arguments must be an object")

        declared = {param.name for param in self.parameters}
        unexpected = sorted(set(arguments) - declared)
        if unexpected:
            raise ValueError(f"Unexpected parameter(s): {', '.join(unexpected)}")

        resolved: dict[str, Any] = {}
        missing = []
        for param in self.parameters:
            value = arguments.get(param.name)
            if value is None:
                if param.required:
                    missing.append(param.name)
                    continue
                resolved[param.keyword] = param.default
                continue
            resolved[param.keyword] = param.coerce(value)

        if missing:
            raise ValueError(f"Missing required parameter(s): {', '.join(missing)}")
        return resolved


TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name="create_ticket",
        description="Create a new Jira ticket",
        read_only=False,
        parameters=(
            ToolParameter("summary", STRING, "Ticket title/summary", required=True),
            ToolParameter("description", STRING, "Ticket description", required=True),
            ToolParameter(
                "issueType",
                STRING,
                "Issue type (Task, Bug, Story, Epic)",
                default="Task",
            ),
            ToolParameter(
                "projectKey",
                STRING,
                "Jira project key; defaults to the configured project",
            ),
            ToolParameter(
                "priority",
                STRING,
                "Priority (Highest, High, Medium, Low, Lowest)",
                default="Medium",
            ),
        ),
    ),
    ToolDescriptor(
        name="search_tickets",
        description=(
            "Search Jira tickets with a raw JQL query or with simple filters. "
            "A JQL query overrides the filters; with neither, the search is "
            "scoped to the default project."
        ),
        parameters=(
            ToolParameter(
                "jql",
                STRING,
                "JQL (Jira Query Language) string for advanced search",
            ),
            ToolParameter("assignee", STRING, "Filter by assignee username or email"),
            ToolParameter(
                "status", STRING, "Filter by status (To Do, In Progress, Done, etc.)"
            ),
            ToolParameter("projectKey", STRING, "Filter by project key"),
            ToolParameter(
                "maxResults",
                INTEGER,
                "Maximum number of results to return",
                default=20,
            ),
        ),
    ),
    ToolDescriptor(
        name="get_ticket_details",
        description="Get detailed information about a specific Jira ticket",
        parameters=(
            ToolParameter(
                "ticketKey", STRING, "Jira ticket key (e.g., PROJ-123)", required=True
            ),
            ToolParameter(
                "includeComments",
                BOOLEAN,
                "Include the three most recent comments",
                default=True,
            ),
            ToolParameter(
                "includeHistory",
                BOOLEAN,
                "Include recent change history",
                default=False,
            ),
        ),
    ),
    ToolDescriptor(
        name="update_ticket",
        description=(
            "Update a Jira ticket (summary, description, priority, assignee, "
            "status). Reports each change; an unknown assignee or unreachable "
            "status is reported as a warning."
        ),
        read_only=False,
        parameters=(
            ToolParameter(
                "ticketKey", STRING, "Jira ticket key to update", required=True
            ),
            ToolParameter("summary", STRING, "Update ticket summary"),
            ToolParameter("description", STRING, "Update ticket description"),
            ToolParameter("assignee", STRING, "Assign to user (email or username)"),
            ToolParameter("status", STRING, "Transition to new status"),
            ToolParameter("priority", STRING, "Update priority"),
        ),
    ),
    ToolDescriptor(
        name="add_comment",
        description="Add a comment to a Jira ticket",
        read_only=False,
        parameters=(
            ToolParameter("ticketKey", STRING, "Jira ticket key", required=True),
            ToolParameter("comment", STRING, "Comment text to add", required=True),
            ToolParameter(
                "visibility",
                STRING,
                "Comment visibility (public, internal). Accepted but not yet "
                "applied: comments are always posted with default visibility.",
                default="public",
            ),
        ),
    ),
    ToolDescriptor(
        name="list_projects",
        description="List available Jira projects",
        parameters=(
            ToolParameter(
                "expand",
                STRING,
                "Additional project details to include",
                default="description,lead",
            ),
        ),
    ),
)


def get_descriptor(name: str) -> ToolDescriptor | None:
    """Look up a descriptor by tool name."""
    for descriptor in TOOLS:
        if descriptor.name == name:
            return descriptor
    return None
