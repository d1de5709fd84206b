"""
Jira comment models.

This module provides Pydantic models for Jira comments.
"""

from typing import Any

from ...logging_config import get_logger
from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, NO_TEXT_CONTENT
from .adf import adf_first_text
from .common import JiraUser

logger = get_logger("mcp-jira-tickets.models")


class JiraComment(ApiModel):
    """
    Model representing a Jira issue comment.
    """

    id: str = JIRA_DEFAULT_ID
    body: str = NO_TEXT_CONTENT
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    author: JiraUser = JiraUser()

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraComment":
        """
        Create a JiraComment from a Jira API response.

        Only the first text run of the ADF body is kept.

        Args:
            data: The comment data from the Jira API

        Returns:
            A JiraComment instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary comment data")
            return cls()

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            body=adf_first_text(data.get("body")) or NO_TEXT_CONTENT,
            created=str(data.get("created") or EMPTY_STRING),
            updated=str(data.get("updated") or EMPTY_STRING),
            author=JiraUser.from_api_response(data.get("author") or {}),
        )
