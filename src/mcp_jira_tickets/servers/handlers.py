"""Tool handlers: translate validated tool arguments into Jira calls.

Each handler receives the fetcher plus keyword-only arguments named after
its catalog parameters (snake_case) and returns the response text. Errors
propagate to the dispatcher; only update_ticket downgrades sub-step
failures to warnings.
"""

from collections.abc import Callable
from typing import Any

from ..exceptions import MCPJiraError
from ..jira import JiraFetcher, build_jql
from ..logging_config import get_logger
from ..models.jira import text_to_adf
from .formatting import (
    format_comment_added,
    format_created_ticket,
    format_project_list,
    format_search_result,
    format_ticket_details,
    format_update_report,
)

logger = get_logger("mcp-jira-tickets.handlers")

ToolHandler = Callable[..., str]


def create_ticket(
    jira: JiraFetcher,
    *,
    summary: str,
    description: str,
    issue_type: str = "Task",
    project_key: str | None = None,
    priority: str = "Medium",
) -> str:
    created = jira.create_issue(
        summary=summary,
        description=description,
        issue_type=issue_type,
        project_key=project_key,
        priority=priority,
    )
    return format_created_ticket(
        jira.config.url, created, summary, issue_type, priority
    )


def search_tickets(
    jira: JiraFetcher,
    *,
    jql: str | None = None,
    assignee: str | None = None,
    status: str | None = None,
    project_key: str | None = None,
    max_results: int = 20,
) -> str:
    effective_jql = build_jql(
        jira.config.default_project_key,
        jql=jql,
        assignee=assignee,
        status=status,
        project_key=project_key,
    )
    if jql and (assignee or status or project_key):
        logger.info("Raw JQL supplied; ignoring assignee/status/project filters")
    result = jira.search_issues(effective_jql, max_results=max_results)
    return format_search_result(jira.config.url, result)


def get_ticket_details(
    jira: JiraFetcher,
    *,
    ticket_key: str,
    include_comments: bool = True,
    include_history: bool = False,
) -> str:
    ticket = jira.get_issue(
        ticket_key,
        include_comments=include_comments,
        include_history=include_history,
    )
    return format_ticket_details(
        jira.config.url, ticket, include_comments, include_history
    )


def update_ticket(
    jira: JiraFetcher,
    *,
    ticket_key: str,
    summary: str | None = None,
    description: str | None = None,
    assignee: str | None = None,
    status: str | None = None,
    priority: str | None = None,
) -> str:
    """Best-effort multi-field update.

    Field changes go out in one update call whose failure is fatal. The
    assignee lookup and the status transition never fail the call: their
    problems become warning notes in the report.
    """
    notes: list[str] = []
    fields: dict[str, Any] = {}

    if summary:
        fields["summary"] = summary
        notes.append(f'Summary updated to: "{summary}"')
    if description:
        fields["description"] = text_to_adf(description)
        notes.append("Description updated")
    if priority:
        fields["priority"] = {"name": priority}
        notes.append(f"Priority set to: {priority}")

    if assignee:
        try:
            user = jira.find_user(assignee)
        except MCPJiraError as e:
            logger.warning(f"User lookup for '{assignee}' failed: {e}")
            notes.append(f"⚠️ Could not find user: {assignee} ({e})")
        else:
            if user is None:
                notes.append(f"⚠️ Could not find user: {assignee}")
            else:
                fields["assignee"] = {"accountId": user.account_id}
                notes.append(f"Assigned to: {user.display_name}")

    if fields:
        jira.update_issue_fields(ticket_key, fields)

    if status:
        try:
            transitions = jira.get_transitions(ticket_key)
            transition = next((t for t in transitions if t.leads_to(status)), None)
            if transition is None:
                available = sorted({t.to_status for t in transitions if t.to_status})
                note = f"⚠️ Could not transition to status: {status}"
                if available:
                    note += f" (available: {', '.join(available)})"
                notes.append(note)
            else:
                jira.transition_issue(ticket_key, transition.id)
                notes.append(f"Status changed to: {transition.to_status}")
        except MCPJiraError as e:
            logger.warning(f"Status update of {ticket_key} failed: {e}")
            notes.append(f"⚠️ Status update failed: {e}")

    if not notes:
        notes.append("No changes requested")

    return format_update_report(jira.config.url, ticket_key, notes)


def add_comment(
    jira: JiraFetcher,
    *,
    ticket_key: str,
    comment: str,
    visibility: str = "public",
) -> str:
    # visibility is part of the tool contract but not sent to Jira yet
    if visibility != "public":
        logger.info(
            f"Comment visibility '{visibility}' requested for {ticket_key}; "
            "posting with default visibility"
        )
    jira.add_comment(ticket_key, comment)
    return format_comment_added(jira.config.url, ticket_key, comment)


def list_projects(jira: JiraFetcher, *, expand: str = "description,lead") -> str:
    projects = jira.get_all_projects(expand=expand)
    return format_project_list(jira.config.url, projects)


TOOL_HANDLERS: dict[str, ToolHandler] = {
    "create_ticket": create_ticket,
    "search_tickets": search_tickets,
    "get_ticket_details": get_ticket_details,
    "update_ticket": update_ticket,
    "add_comment": add_comment,
    "list_projects": list_projects,
}
