"""
Jira data models for the MCP Jira tickets integration.

This package provides Pydantic models for Jira API data structures,
organized by entity type.
"""

from .adf import adf_first_text, text_to_adf
from .comment import JiraComment
from .common import JiraTransition, JiraUser
from .issue import JiraChangelogEntry, JiraTicket
from .project import JiraProject
from .search import JiraSearchResult

__all__ = [
    "JiraChangelogEntry",
    "JiraComment",
    "JiraProject",
    "JiraSearchResult",
    "JiraTicket",
    "JiraTransition",
    "JiraUser",
    "adf_first_text",
    "text_to_adf",
]
