"""Base client module for Jira API interactions."""

from typing import Any

from atlassian import Jira
from requests.exceptions import HTTPError, RequestException

from ..exceptions import MCPJiraApiError, MCPJiraAuthenticationError
from ..logging_config import get_logger
from .config import JiraConfig

logger = get_logger("mcp-jira-tickets.jira")

API_PREFIX = "rest/api/3"


class JiraClient:
    """Base client for Jira API interactions."""

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from
                environment variables.

        Raises:
            MCPJiraConfigError: If configuration is missing or invalid.
        """
        self.config = config if config is not None else JiraConfig.from_env()

        self.jira = Jira(
            url=self.config.url,
            username=self.config.username,
            password=self.config.api_token,
            cloud=self.config.is_cloud,
            verify_ssl=self.config.ssl_verify,
            timeout=self.config.timeout,
            api_version="3",
        )

    def _api_path(self, resource: str) -> str:
        return f"{API_PREFIX}/{resource.lstrip('/')}"

    def _get(self, resource: str, params: dict[str, Any] | None = None) -> Any:
        """GET a v3 resource and return the decoded JSON body."""
        return self._call("GET", resource, params=params)

    def _post(self, resource: str, data: dict[str, Any]) -> Any:
        """POST a JSON body to a v3 resource."""
        return self._call("POST", resource, data=data)

    def _put(self, resource: str, data: dict[str, Any]) -> Any:
        """PUT a JSON body to a v3 resource."""
        return self._call("PUT", resource, data=data)

    def _call(
        self,
        method: str,
        resource: str,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> Any:
        """Issue one request and translate transport failures.

        Raises:
            MCPJiraAuthenticationError: If Jira answers 401 or 403
            MCPJiraApiError: For any other HTTP or network failure; the
                message is the one Jira returned
        """
        path = self._api_path(resource)
        logger.debug(f"Jira {method} {path} params={params}")
        try:
            if method == "GET":
                return self.jira.get(path, params=params)
            if method == "POST":
                return self.jira.post(path, data=data, params=params)
            if method == "PUT":
                return self.jira.put(path, data=data, params=params)
            raise ValueError(f"Unsupported HTTP method: {method}")
        except HTTPError as http_err:
            status_code = (
                http_err.response.status_code
                if http_err.response is not None
                else None
            )
            if status_code in (401, 403):
                error_msg = (
                    f"Authentication failed for Jira API ({status_code}). "
                    "Token may be expired or invalid. Please verify credentials. "
                    f"Jira said: {http_err}"
                )
                logger.error(error_msg)
                raise MCPJiraAuthenticationError(error_msg) from http_err
            logger.error(f"HTTP error during Jira {method} {path}: {http_err}")
            raise MCPJiraApiError(str(http_err), status_code=status_code) from http_err
        except RequestException as req_err:
            logger.error(f"Network error during Jira {method} {path}: {req_err}")
            raise MCPJiraApiError(f"Network error: {req_err}") from req_err
