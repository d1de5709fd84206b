"""
Pydantic models for the MCP Jira tickets integration.
"""

from .base import ApiModel
from .jira import (
    JiraChangelogEntry,
    JiraComment,
    JiraProject,
    JiraSearchResult,
    JiraTicket,
    JiraTransition,
    JiraUser,
)

__all__ = [
    "ApiModel",
    "JiraChangelogEntry",
    "JiraComment",
    "JiraProject",
    "JiraSearchResult",
    "JiraTicket",
    "JiraTransition",
    "JiraUser",
]
