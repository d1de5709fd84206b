"""
Jira search result models.
"""

from typing import Any

from pydantic import Field

from ...logging_config import get_logger
from ..base import ApiModel
from .issue import JiraTicket

logger = get_logger("mcp-jira-tickets.models")


class JiraSearchResult(ApiModel):
    """
    Model representing one page of a JQL search.

    ``total`` is the remote match count when Jira reports one, otherwise
    None; ``has_more`` tells whether Jira holds further pages.
    """

    jql: str = ""
    issues: list[JiraTicket] = Field(default_factory=list)
    total: int | None = None
    max_results: int = 0
    has_more: bool = False

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a Jira API response.

        Args:
            data: The search response from the Jira API
            **kwargs: ``jql`` and ``max_results`` of the request

        Returns:
            A JiraSearchResult instance
        """
        jql = str(kwargs.get("jql", ""))
        max_results = int(kwargs.get("max_results", 0))
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary search data")
            return cls(jql=jql, max_results=max_results)

        issues = [
            JiraTicket.from_api_response(issue)
            for issue in data.get("issues") or []
            if isinstance(issue, dict)
        ]

        total = data.get("total")
        if not isinstance(total, int) or total < 0:
            total = None

        if "isLast" in data:
            has_more = not data.get("isLast")
        else:
            has_more = bool(data.get("nextPageToken"))
        if total is not None:
            has_more = total > len(issues)

        return cls(
            jql=jql,
            issues=issues,
            total=total,
            max_results=max_results,
            has_more=has_more,
        )

    @property
    def count_label(self) -> str:
        """Match count for display: the remote total, or the page size with
        a ``+`` when more pages exist."""
        if self.total is not None:
            return str(self.total)
        suffix = "+" if self.has_more else ""
        return f"{len(self.issues)}{suffix}"
