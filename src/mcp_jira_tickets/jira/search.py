"""Module for Jira search operations."""

from ..exceptions import MCPJiraApiError
from ..logging_config import get_logger
from ..models.jira import JiraSearchResult
from .client import JiraClient

logger = get_logger("mcp-jira-tickets.jira")

SEARCH_FIELDS = (
    "key",
    "summary",
    "status",
    "assignee",
    "created",
    "updated",
    "priority",
    "issuetype",
)


def quote_jql_value(value: str) -> str:
    """Render a value as a double-quoted JQL string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_jql(
    default_project_key: str,
    jql: str | None = None,
    assignee: str | None = None,
    status: str | None = None,
    project_key: str | None = None,
) -> str:
    """
    Work out the effective JQL for a ticket search.

    A raw ``jql`` wins and every filter is ignored. Otherwise the filters
    that are present are AND-ed together; with none present the search is
    scoped to the default project, never left unscoped.

    Args:
        default_project_key: Configured default project
        jql: Raw JQL query
        assignee: Assignee filter
        status: Status filter
        project_key: Project filter

    Returns:
        The JQL string to send
    """
    if jql and jql.strip():
        return jql

    conditions = []
    if project_key:
        conditions.append(f"project = {quote_jql_value(project_key)}")
    if assignee:
        conditions.append(f"assignee = {quote_jql_value(assignee)}")
    if status:
        conditions.append(f"status = {quote_jql_value(status)}")

    if not conditions:
        return f"project = {quote_jql_value(default_project_key)}"
    return " AND ".join(conditions)


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(self, jql: str, max_results: int = 20) -> JiraSearchResult:
        """
        Run one JQL search and return the first page.

        Args:
            jql: JQL query string
            max_results: Page size

        Returns:
            JiraSearchResult holding the page and the remote match count

        Raises:
            MCPJiraApiError: If the search fails
        """
        params = {
            "jql": jql,
            "maxResults": max_results,
            "fields": ",".join(SEARCH_FIELDS),
        }
        response = self._get("search/jql", params=params)
        if not isinstance(response, dict):
            msg = f"Unexpected return value type from search API: {type(response)}"
            logger.error(msg)
            raise MCPJiraApiError(msg)

        result = JiraSearchResult.from_api_response(
            response, jql=jql, max_results=max_results
        )
        logger.info(f"Search '{jql}' returned {len(result.issues)} issues")
        return result
