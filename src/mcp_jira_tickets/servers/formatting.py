"""Text renderers for the Jira ticket tool responses."""

from ..models.constants import NO_DESCRIPTION
from ..models.jira import JiraProject, JiraSearchResult, JiraTicket
from ..utils import (
    browse_url,
    format_locale_date,
    format_locale_datetime,
    project_url,
)


def format_created_ticket(
    base_url: str,
    created: dict[str, str],
    summary: str,
    issue_type: str,
    priority: str,
) -> str:
    key = created["key"]
    return (
        "✅ Successfully created Jira ticket!\n"
        "\n"
        "🎫 **Ticket Details:**\n"
        f"- **Key:** {key}\n"
        f"- **ID:** {created['id']}\n"
        f"- **URL:** {browse_url(base_url, key)}\n"
        f"- **Summary:** {summary}\n"
        f"- **Type:** {issue_type}\n"
        f"- **Priority:** {priority}\n"
        "\n"
        "The ticket has been created and is ready for work. "
        "You can access it directly using the URL above."
    )


def format_ticket_line(base_url: str, ticket: JiraTicket) -> str:
    return (
        f"🎫 **{ticket.key}** - {ticket.summary}\n"
        f"   📊 Status: {ticket.status} | 👤 Assignee: {ticket.assignee}"
        f" | ⚡ Priority: {ticket.priority} | 🏷️ Type: {ticket.issue_type}\n"
        f"   📅 Created: {format_locale_date(ticket.created)}"
        f" | 🔄 Updated: {format_locale_date(ticket.updated)}\n"
        f"   🔗 {browse_url(base_url, ticket.key)}"
    )


def format_search_result(base_url: str, result: JiraSearchResult) -> str:
    header = (
        f"📋 **Found {result.count_label} Jira tickets** "
        f"(showing {len(result.issues)}):"
    )
    if result.issues:
        listing = "\n\n".join(
            format_ticket_line(base_url, ticket) for ticket in result.issues
        )
    else:
        listing = "No tickets matched the search."
    return f"{header}\n\n{listing}\n\n**Search Query:** {result.jql}"


def format_ticket_details(
    base_url: str,
    ticket: JiraTicket,
    include_comments: bool,
    include_history: bool,
) -> str:
    """Render the details view of one ticket.

    Comments and history sections only appear when requested and present.
    """
    project = ticket.project_key or "Unknown"
    if ticket.project_name:
        project = f"{project} ({ticket.project_name})"

    text = (
        f"🎫 **{ticket.key}**: {ticket.summary}\n"
        "\n"
        f"📝 **Description:** {ticket.description or NO_DESCRIPTION}\n"
        "\n"
        f"📊 **Status:** {ticket.status}\n"
        f"👤 **Assignee:** {ticket.assignee}\n"
        f"👨‍💻 **Creator:** {ticket.creator}\n"
        f"⚡ **Priority:** {ticket.priority}\n"
        f"🏷️ **Type:** {ticket.issue_type}\n"
        f"📁 **Project:** {project}\n"
        f"📅 **Created:** {format_locale_datetime(ticket.created)}\n"
        f"🔄 **Updated:** {format_locale_datetime(ticket.updated)}\n"
        f"🔗 **URL:** {browse_url(base_url, ticket.key)}"
    )

    comments = ticket.recent_comments() if include_comments else []
    if comments:
        text += "\n\n💬 **Recent Comments:**\n"
        for comment in comments:
            text += (
                f"\n👤 **{comment.author.display_name}** "
                f"({format_locale_date(comment.created)}):\n"
                f"{comment.body}\n"
            )

    changes = ticket.recent_changes() if include_history else []
    if changes:
        text += "\n\n🕘 **Recent History:**\n"
        for change in changes:
            text += (
                f"\n• {format_locale_datetime(change.created)} "
                f"{change.author} changed **{change.field}**: "
                f"{change.from_value or '(empty)'} → {change.to_value or '(empty)'}"
            )

    return text


def format_update_report(base_url: str, ticket_key: str, notes: list[str]) -> str:
    changes = "\n".join(f"• {note}" for note in notes)
    return (
        f"✅ **Updated ticket {ticket_key}**\n"
        "\n"
        "🔄 **Changes made:**\n"
        f"{changes}\n"
        "\n"
        f"🔗 **View ticket:** {browse_url(base_url, ticket_key)}"
    )


def format_comment_added(base_url: str, ticket_key: str, comment: str) -> str:
    return (
        f"✅ **Comment added to {ticket_key}**\n"
        "\n"
        f"💬 **Comment:** {comment}\n"
        "\n"
        f"🔗 **View ticket:** {browse_url(base_url, ticket_key)}"
    )


def format_project_list(base_url: str, projects: list[JiraProject]) -> str:
    header = f"📂 **Available Jira Projects** ({len(projects)} total):"
    if not projects:
        return f"{header}\n\nNo projects available."
    listing = "\n\n".join(
        f"📁 **{project.key}** - {project.name}\n"
        f"   📝 {project.description}\n"
        f"   👤 Lead: {project.lead}\n"
        f"   🔗 {project_url(base_url, project.key)}"
        for project in projects
    )
    return f"{header}\n\n{listing}"
