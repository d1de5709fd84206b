class MCPJiraError(Exception):
    """Base exception for MCP Jira ticket tool errors."""

    pass


class MCPJiraConfigError(MCPJiraError, ValueError):
    """Raised when required configuration is missing or invalid."""

    pass


class MCPJiraAuthenticationError(MCPJiraError):
    """Raised when Jira API authentication fails (401/403)."""

    pass


class MCPJiraApiError(MCPJiraError):
    """Raised when a Jira API call fails for any other reason.

    The message carries the remote error text, and ``status_code`` the HTTP
    status when a response was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
