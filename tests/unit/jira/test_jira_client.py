"""Tests for the JiraClient transport wrapper."""

from unittest.mock import MagicMock, patch

import pytest
from requests.exceptions import ConnectionError, HTTPError

from mcp_jira_tickets.exceptions import (
    MCPJiraApiError,
    MCPJiraAuthenticationError,
    MCPJiraError,
)
from mcp_jira_tickets.jira.client import JiraClient


def _http_error(status_code: int, message: str = "boom") -> HTTPError:
    response = MagicMock()
    response.status_code = status_code
    return HTTPError(message, response=response)


def test_init_builds_v3_cloud_client(jira_config):
    with patch("mcp_jira_tickets.jira.client.Jira") as mock_jira:
        client = JiraClient(config=jira_config)

    mock_jira.assert_called_once_with(
        url="https://test.atlassian.net",
        username="test@example.com",
        password="test-api-token",
        cloud=True,
        verify_ssl=True,
        timeout=30.0,
        api_version="3",
    )
    assert client.config is jira_config


def test_init_loads_config_from_env(jira_environment):
    with patch("mcp_jira_tickets.jira.client.Jira"):
        client = JiraClient()
    assert client.config.default_project_key == "DEV"


@pytest.fixture
def client(jira_config):
    with patch("mcp_jira_tickets.jira.client.Jira"):
        client = JiraClient(config=jira_config)
    client.jira = MagicMock()
    return client


def test_get_prefixes_v3_path(client):
    client.jira.get.return_value = {"ok": True}

    assert client._get("issue/DEV-1", params={"fields": "summary"}) == {"ok": True}
    client.jira.get.assert_called_once_with(
        "rest/api/3/issue/DEV-1", params={"fields": "summary"}
    )


def test_post_and_put_send_json_body(client):
    client._post("/issue", {"fields": {}})
    client.jira.post.assert_called_once_with(
        "rest/api/3/issue", data={"fields": {}}, params=None
    )

    client._put("issue/DEV-1", {"fields": {"summary": "x"}})
    client.jira.put.assert_called_once_with(
        "rest/api/3/issue/DEV-1", data={"fields": {"summary": "x"}}, params=None
    )


@pytest.mark.parametrize("status_code", [401, 403])
def test_auth_failures_keep_jira_message(client, status_code):
    client.jira.get.side_effect = _http_error(
        status_code, "Client must be authenticated to access this resource."
    )

    with pytest.raises(MCPJiraAuthenticationError) as exc_info:
        client._get("myself")

    message = str(exc_info.value)
    assert f"({status_code})" in message
    assert "Client must be authenticated to access this resource." in message


def test_other_http_errors_keep_jira_message(client):
    client.jira.post.side_effect = _http_error(
        400, "Field 'priority' cannot be set"
    )

    with pytest.raises(MCPJiraApiError) as exc_info:
        client._post("issue", {})

    assert exc_info.value.status_code == 400
    assert "Field 'priority' cannot be set" in str(exc_info.value)
    assert isinstance(exc_info.value, MCPJiraError)


def test_network_errors_are_mapped(client):
    client.jira.get.side_effect = ConnectionError("connection refused")

    with pytest.raises(MCPJiraApiError, match="Network error: connection refused"):
        client._get("project")


def test_unsupported_method(client):
    with pytest.raises(ValueError, match="Unsupported HTTP method"):
        client._call("DELETE", "issue/DEV-1")
