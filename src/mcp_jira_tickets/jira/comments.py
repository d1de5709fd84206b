"""Module for Jira comment operations."""

from typing import Any

from ..logging_config import get_logger
from ..models.jira import text_to_adf
from .client import JiraClient

logger = get_logger("mcp-jira-tickets.jira")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def add_comment(self, issue_key: str, comment: str) -> dict[str, Any]:
        """Add a plain text comment to an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment: Comment text, sent as a single ADF paragraph

        Returns:
            The created comment as returned by Jira (empty if none)

        Raises:
            MCPJiraApiError: If the comment is rejected
        """
        result = self._post(
            f"issue/{issue_key}/comment", {"body": text_to_adf(comment)}
        )
        logger.info(f"Added comment to {issue_key}")
        return result if isinstance(result, dict) else {}
