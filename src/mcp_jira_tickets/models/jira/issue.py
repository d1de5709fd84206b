"""
Jira issue models.

This module provides the ticket view rebuilt from ``GET /issue/{key}`` and
``GET /search/jql`` payloads.
"""

from datetime import datetime, timezone
from typing import Any

import dateutil.parser
from pydantic import Field

from ...logging_config import get_logger
from ..base import ApiModel
from ..constants import (
    EMPTY_STRING,
    JIRA_DEFAULT_ID,
    JIRA_DEFAULT_KEY,
    NO_PRIORITY,
    UNASSIGNED,
    UNKNOWN,
)
from .adf import adf_first_text
from .comment import JiraComment

logger = get_logger("mcp-jira-tickets.models")


def _name_of(value: Any, key: str = "name") -> str | None:
    if isinstance(value, dict):
        name = value.get(key)
        return str(name) if name else None
    return None


# Unparseable timestamps sort as the oldest
_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _timestamp(value: str) -> datetime:
    try:
        parsed = dateutil.parser.parse(value)
    except (ValueError, OverflowError):
        return _OLDEST
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


class JiraChangelogEntry(ApiModel):
    """
    One field change from an issue's change history.
    """

    author: str = UNKNOWN
    created: str = EMPTY_STRING
    field: str = EMPTY_STRING
    from_value: str | None = None
    to_value: str | None = None

    @classmethod
    def from_history(cls, history: dict[str, Any]) -> list["JiraChangelogEntry"]:
        """Flatten one changelog history record into per-field entries."""
        if not isinstance(history, dict):
            return []
        author = _name_of(history.get("author"), "displayName") or UNKNOWN
        created = str(history.get("created") or EMPTY_STRING)
        entries = []
        for item in history.get("items") or []:
            if not isinstance(item, dict):
                continue
            entries.append(
                cls(
                    author=author,
                    created=created,
                    field=str(item.get("field") or EMPTY_STRING),
                    from_value=item.get("fromString"),
                    to_value=item.get("toString"),
                )
            )
        return entries


class JiraTicket(ApiModel):
    """
    Model representing a Jira issue as shown by the ticket tools.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    description: str | None = None
    status: str = UNKNOWN
    assignee: str = UNASSIGNED
    creator: str = UNKNOWN
    priority: str = NO_PRIORITY
    issue_type: str = UNKNOWN
    project_key: str | None = None
    project_name: str | None = None
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    comments: list[JiraComment] = Field(default_factory=list)
    changelog: list[JiraChangelogEntry] = Field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraTicket":
        """
        Create a JiraTicket from a Jira API response.

        Args:
            data: The issue data from the Jira API

        Returns:
            A JiraTicket instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary issue data")
            return cls()

        fields = data.get("fields") or {}
        if not isinstance(fields, dict):
            fields = {}

        comments: list[JiraComment] = []
        comment_field = fields.get("comment")
        if isinstance(comment_field, dict):
            comments = [
                JiraComment.from_api_response(comment)
                for comment in comment_field.get("comments") or []
            ]

        changelog: list[JiraChangelogEntry] = []
        changelog_data = data.get("changelog")
        if isinstance(changelog_data, dict):
            for history in changelog_data.get("histories") or []:
                changelog.extend(JiraChangelogEntry.from_history(history))

        project = fields.get("project")

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            key=str(data.get("key") or JIRA_DEFAULT_KEY),
            summary=str(fields.get("summary") or EMPTY_STRING),
            description=adf_first_text(fields.get("description")),
            status=_name_of(fields.get("status")) or UNKNOWN,
            assignee=_name_of(fields.get("assignee"), "displayName") or UNASSIGNED,
            creator=_name_of(fields.get("creator"), "displayName") or UNKNOWN,
            priority=_name_of(fields.get("priority")) or NO_PRIORITY,
            issue_type=_name_of(fields.get("issuetype")) or UNKNOWN,
            project_key=_name_of(project, "key"),
            project_name=_name_of(project),
            created=str(fields.get("created") or EMPTY_STRING),
            updated=str(fields.get("updated") or EMPTY_STRING),
            comments=comments,
            changelog=changelog,
        )

    def recent_comments(self, limit: int = 3) -> list[JiraComment]:
        """Return the last ``limit`` comments, oldest first."""
        return self.comments[-limit:] if limit > 0 else []

    def recent_changes(self, limit: int = 5) -> list[JiraChangelogEntry]:
        """Return the ``limit`` most recent change entries, newest first."""
        ordered = sorted(
            self.changelog, key=lambda entry: _timestamp(entry.created), reverse=True
        )
        return ordered[:limit] if limit > 0 else []
