"""Jira API module for MCP Jira tickets."""

from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .issues import IssuesMixin
from .projects import ProjectsMixin
from .search import SearchMixin, build_jql
from .transitions import TransitionsMixin
from .users import UsersMixin


class JiraFetcher(
    IssuesMixin,
    SearchMixin,
    UsersMixin,
    TransitionsMixin,
    CommentsMixin,
    ProjectsMixin,
):
    """
    The main Jira client class providing access to all Jira operations
    used by the ticket tools.
    """

    pass


__all__ = ["JiraClient", "JiraConfig", "JiraFetcher", "build_jql"]
