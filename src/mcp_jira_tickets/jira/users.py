"""Module for Jira user operations."""

from ..logging_config import get_logger
from ..models.jira import JiraUser
from .client import JiraClient

logger = get_logger("mcp-jira-tickets.jira")


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def find_user(self, query: str) -> JiraUser | None:
        """
        Find a user by email address, name or display name.

        Args:
            query: Search string passed to the user directory

        Returns:
            The first matching user with an account ID, or None

        Raises:
            MCPJiraApiError: If the directory lookup fails
        """
        users = self._get("user/search", params={"query": query})
        if not isinstance(users, list):
            logger.warning(f"User search for '{query}' returned {type(users)}")
            return None

        for data in users:
            user = JiraUser.from_api_response(data)
            if user.account_id:
                logger.debug(f"Resolved '{query}' to account {user.account_id}")
                return user

        logger.info(f"No user found for '{query}'")
        return None
