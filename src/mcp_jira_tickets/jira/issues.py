"""Module for Jira issue operations."""

from typing import Any

from ..exceptions import MCPJiraApiError
from ..logging_config import get_logger
from ..models.jira import JiraTicket, text_to_adf
from .client import JiraClient

logger = get_logger("mcp-jira-tickets.jira")

# Fields always requested for the ticket details view
DETAIL_FIELDS = (
    "key",
    "summary",
    "description",
    "status",
    "assignee",
    "creator",
    "created",
    "updated",
    "priority",
    "issuetype",
    "project",
)


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def create_issue(
        self,
        summary: str,
        description: str,
        issue_type: str = "Task",
        project_key: str | None = None,
        priority: str = "Medium",
    ) -> dict[str, str]:
        """
        Create a new issue.

        The project is not validated locally: when neither ``project_key``
        nor the configured default is usable, Jira's own error surfaces.

        Args:
            summary: Issue summary
            description: Plain text description, sent as ADF
            issue_type: Issue type name (e.g. 'Task', 'Bug')
            project_key: Project key; defaults to the configured project
            priority: Priority name (e.g. 'Medium')

        Returns:
            Dict with the new issue's ``id`` and ``key``

        Raises:
            MCPJiraApiError: If Jira rejects the issue
        """
        payload = {
            "fields": {
                "project": {"key": project_key or self.config.default_project_key},
                "summary": summary,
                "description": text_to_adf(description),
                "issuetype": {"name": issue_type},
                "priority": {"name": priority},
            }
        }
        result = self._post("issue", payload)
        if not isinstance(result, dict) or "key" not in result:
            msg = f"Unexpected response when creating issue: {result!r}"
            logger.error(msg)
            raise MCPJiraApiError(msg)

        logger.info(f"Created issue {result['key']}")
        return {"id": str(result.get("id", "")), "key": str(result["key"])}

    def get_issue(
        self,
        issue_key: str,
        include_comments: bool = True,
        include_history: bool = False,
    ) -> JiraTicket:
        """
        Get a single issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            include_comments: Also request the comment field
            include_history: Also expand the change history

        Returns:
            JiraTicket model

        Raises:
            MCPJiraApiError: If the issue cannot be fetched
        """
        fields = list(DETAIL_FIELDS)
        if include_comments:
            fields.append("comment")
        params: dict[str, Any] = {"fields": ",".join(fields)}
        if include_history:
            params["expand"] = "changelog"

        data = self._get(f"issue/{issue_key}", params=params)
        if not isinstance(data, dict):
            msg = f"Unexpected response when fetching issue {issue_key}: {type(data)}"
            logger.error(msg)
            raise MCPJiraApiError(msg)
        return JiraTicket.from_api_response(data)

    def update_issue_fields(self, issue_key: str, fields: dict[str, Any]) -> None:
        """
        Set fields on an issue in a single update call.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            fields: Field payload, already in API shape

        Raises:
            MCPJiraApiError: If Jira rejects the update
        """
        self._put(f"issue/{issue_key}", {"fields": fields})
        logger.info(f"Updated fields {sorted(fields)} on {issue_key}")
