"""Tests for the Jira issue operations."""

import pytest

from mcp_jira_tickets.exceptions import MCPJiraApiError
from mcp_jira_tickets.jira.issues import DETAIL_FIELDS
from mcp_jira_tickets.models.jira import JiraTicket, text_to_adf
from tests.utils.factories import JiraCommentFactory, JiraIssueFactory


class TestCreateIssue:
    def test_create_issue_sends_adf_payload(self, jira_fetcher):
        jira_fetcher.jira.post.return_value = {
            "id": "10042",
            "key": "DEV-123",
            "self": "https://test.atlassian.net/rest/api/3/issue/10042",
        }

        result = jira_fetcher.create_issue(
            summary="Fix login bug", description="Users cannot log in"
        )

        assert result == {"id": "10042", "key": "DEV-123"}
        jira_fetcher.jira.post.assert_called_once_with(
            "rest/api/3/issue",
            data={
                "fields": {
                    "project": {"key": "DEV"},
                    "summary": "Fix login bug",
                    "description": text_to_adf("Users cannot log in"),
                    "issuetype": {"name": "Task"},
                    "priority": {"name": "Medium"},
                }
            },
            params=None,
        )

    def test_explicit_project_type_and_priority(self, jira_fetcher):
        jira_fetcher.jira.post.return_value = {"id": "1", "key": "OPS-1"}

        jira_fetcher.create_issue(
            summary="s",
            description="d",
            issue_type="Bug",
            project_key="OPS",
            priority="High",
        )

        fields = jira_fetcher.jira.post.call_args.kwargs["data"]["fields"]
        assert fields["project"] == {"key": "OPS"}
        assert fields["issuetype"] == {"name": "Bug"}
        assert fields["priority"] == {"name": "High"}

    def test_response_without_key(self, jira_fetcher):
        jira_fetcher.jira.post.return_value = {"errors": {}}

        with pytest.raises(MCPJiraApiError, match="Unexpected response"):
            jira_fetcher.create_issue(summary="s", description="d")


class TestGetIssue:
    def test_default_requests_comments_without_changelog(self, jira_fetcher):
        jira_fetcher.jira.get.return_value = JiraIssueFactory.create("DEV-5")

        ticket = jira_fetcher.get_issue("DEV-5")

        assert isinstance(ticket, JiraTicket)
        assert ticket.key == "DEV-5"
        jira_fetcher.jira.get.assert_called_once_with(
            "rest/api/3/issue/DEV-5",
            params={"fields": ",".join([*DETAIL_FIELDS, "comment"])},
        )

    def test_without_comments_with_history(self, jira_fetcher):
        jira_fetcher.jira.get.return_value = JiraIssueFactory.create("DEV-5")

        jira_fetcher.get_issue("DEV-5", include_comments=False, include_history=True)

        params = jira_fetcher.jira.get.call_args.kwargs["params"]
        assert "comment" not in params["fields"].split(",")
        assert params["expand"] == "changelog"

    def test_comments_are_parsed(self, jira_fetcher):
        jira_fetcher.jira.get.return_value = JiraIssueFactory.create(
            fields={"comment": {"comments": [JiraCommentFactory.create("Hi")]}}
        )

        ticket = jira_fetcher.get_issue("DEV-1")
        assert [c.body for c in ticket.comments] == ["Hi"]

    def test_unexpected_response_type(self, jira_fetcher):
        jira_fetcher.jira.get.return_value = "not json"

        with pytest.raises(MCPJiraApiError, match="DEV-1"):
            jira_fetcher.get_issue("DEV-1")


def test_update_issue_fields(jira_fetcher):
    jira_fetcher.update_issue_fields("DEV-1", {"summary": "New"})

    jira_fetcher.jira.put.assert_called_once_with(
        "rest/api/3/issue/DEV-1", data={"fields": {"summary": "New"}}, params=None
    )
