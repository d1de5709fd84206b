"""Module for Jira transition operations."""

from ..logging_config import get_logger
from ..models.jira import JiraTransition
from .client import JiraClient

logger = get_logger("mcp-jira-tickets.jira")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    def get_transitions(self, issue_key: str) -> list[JiraTransition]:
        """
        Get the status transitions currently available on an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of JiraTransition models

        Raises:
            MCPJiraApiError: If the transitions cannot be fetched
        """
        data = self._get(f"issue/{issue_key}/transitions")
        transitions = data.get("transitions", []) if isinstance(data, dict) else []
        return [
            JiraTransition.from_api_response(transition)
            for transition in transitions
            if isinstance(transition, dict)
        ]

    def transition_issue(self, issue_key: str, transition_id: str) -> None:
        """
        Execute a transition on an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            transition_id: ID from get_transitions

        Raises:
            MCPJiraApiError: If the transition is rejected
        """
        self._post(
            f"issue/{issue_key}/transitions", {"transition": {"id": transition_id}}
        )
        logger.info(f"Executed transition {transition_id} on {issue_key}")
