"""
Common Jira entity models.

This module provides Pydantic models for users and workflow transitions.
"""

from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, UNKNOWN


class JiraUser(ApiModel):
    """
    Model representing a Jira user.
    """

    account_id: str | None = None
    display_name: str = UNKNOWN
    email: str | None = None
    active: bool = True

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraUser":
        """
        Create a JiraUser from a Jira API response.

        Args:
            data: The user data from the Jira API

        Returns:
            A JiraUser instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            account_id=data.get("accountId"),
            display_name=str(data.get("displayName") or UNKNOWN),
            email=data.get("emailAddress"),
            active=bool(data.get("active", True)),
        )


class JiraTransition(ApiModel):
    """
    Model representing a workflow transition available on an issue.
    """

    id: str = EMPTY_STRING
    name: str = EMPTY_STRING
    to_status: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraTransition":
        """
        Create a JiraTransition from a Jira API response.

        Args:
            data: One entry of the ``transitions`` list

        Returns:
            A JiraTransition instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        to_status = EMPTY_STRING
        target = data.get("to")
        if isinstance(target, dict):
            to_status = str(target.get("name") or EMPTY_STRING)

        return cls(
            id=str(data.get("id", EMPTY_STRING)),
            name=str(data.get("name") or EMPTY_STRING),
            to_status=to_status,
        )

    def leads_to(self, status: str) -> bool:
        """Whether this transition ends in ``status`` (case-insensitive)."""
        return bool(self.to_status) and self.to_status.lower() == status.strip().lower()
