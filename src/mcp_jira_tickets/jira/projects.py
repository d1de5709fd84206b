"""Module for Jira project operations."""

from ..exceptions import MCPJiraApiError
from ..logging_config import get_logger
from ..models.jira import JiraProject
from .client import JiraClient

logger = get_logger("mcp-jira-tickets.jira")


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    def get_all_projects(
        self, expand: str | None = "description,lead"
    ) -> list[JiraProject]:
        """
        Get every project visible to the configured user.

        Args:
            expand: Comma-separated expand directive (e.g. 'description,lead')

        Returns:
            List of JiraProject models

        Raises:
            MCPJiraApiError: If the project list cannot be fetched
        """
        params = {"expand": expand} if expand else None
        data = self._get("project", params=params)

        # Plain list, or a paginated page with "values"
        if isinstance(data, dict):
            data = data.get("values", [])
        if not isinstance(data, list):
            msg = f"Unexpected return value type from project API: {type(data)}"
            logger.error(msg)
            raise MCPJiraApiError(msg)

        return [JiraProject.from_api_response(project) for project in data]
