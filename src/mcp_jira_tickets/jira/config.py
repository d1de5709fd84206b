"""Configuration module for Jira API interactions."""

import os
from dataclasses import dataclass

from ..exceptions import MCPJiraConfigError
from ..utils import getenv_first, is_atlassian_cloud_url, is_env_ssl_verify
from ..utils.urls import normalize_base_url

DEFAULT_TIMEOUT = 30.0

# (setting, environment variables checked in order)
REQUIRED_SETTINGS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("url", ("JIRA_URL", "JIRA_BASE_URL")),
    ("username", ("JIRA_USERNAME", "JIRA_EMAIL")),
    ("api_token", ("JIRA_API_TOKEN",)),
    ("default_project_key", ("JIRA_PROJECT_KEY",)),
)


@dataclass(frozen=True)
class JiraConfig:
    """Jira API configuration.

    Loaded once at startup and shared read-only by every tool call. Jira
    Cloud is addressed with basic authentication (account email plus API
    token).
    """

    url: str  # Base URL for Jira
    username: str  # Account email
    api_token: str  # API token
    default_project_key: str  # Project used when a call names none
    ssl_verify: bool = True  # Whether to verify SSL certificates
    timeout: float = DEFAULT_TIMEOUT  # Seconds per HTTP request

    def __post_init__(self) -> None:
        missing = [
            name
            for name, _ in REQUIRED_SETTINGS
            if not (getattr(self, name) or "").strip()
        ]
        if missing:
            raise MCPJiraConfigError(
                f"Missing required Jira configuration: {', '.join(missing)}"
            )
        if self.timeout <= 0:
            raise MCPJiraConfigError(
                f"Jira timeout must be a positive number of seconds, got {self.timeout}"
            )
        object.__setattr__(self, "url", normalize_base_url(self.url))

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance (atlassian.net and friends)."""
        return is_atlassian_cloud_url(self.url)

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            MCPJiraConfigError: If required environment variables are missing
                or a value is invalid. Every missing variable is named.
        """
        values: dict[str, str] = {}
        missing: list[str] = []
        for name, env_names in REQUIRED_SETTINGS:
            value = getenv_first(*env_names)
            if value and value.strip():
                values[name] = value.strip()
            else:
                missing.append(" or ".join(env_names))

        if missing:
            msg = f"Missing required environment variables: {', '.join(missing)}"
            raise MCPJiraConfigError(msg)

        return cls(
            url=values["url"],
            username=values["username"],
            api_token=values["api_token"],
            default_project_key=values["default_project_key"],
            ssl_verify=is_env_ssl_verify("JIRA_SSL_VERIFY"),
            timeout=cls.get_timeout(),
        )

    @staticmethod
    def get_timeout() -> float:
        """Get the HTTP timeout from JIRA_TIMEOUT, defaulting to 30 seconds."""
        raw = os.getenv("JIRA_TIMEOUT")
        if not raw:
            return DEFAULT_TIMEOUT
        try:
            return float(raw)
        except ValueError as e:
            raise MCPJiraConfigError(
                f"JIRA_TIMEOUT must be a number of seconds, got '{raw}'"
            ) from e
