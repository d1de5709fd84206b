"""Unit tests for the JiraConfig class."""

import dataclasses

import pytest

from mcp_jira_tickets.exceptions import MCPJiraConfigError
from mcp_jira_tickets.jira.config import JiraConfig


def test_from_env_success(jira_environment):
    """Test that from_env successfully creates a config from environment variables."""
    config = JiraConfig.from_env()
    assert config.url == "https://test.atlassian.net"
    assert config.username == "test@example.com"
    assert config.api_token == "test-api-token"
    assert config.default_project_key == "DEV"
    assert config.ssl_verify is True
    assert config.timeout == 30.0
    assert config.is_cloud is True


def test_from_env_names_every_missing_variable(monkeypatch):
    """Test that from_env reports all missing variables at once."""
    monkeypatch.setenv("JIRA_URL", "https://test.atlassian.net")
    with pytest.raises(MCPJiraConfigError) as exc_info:
        JiraConfig.from_env()

    message = str(exc_info.value)
    assert "JIRA_USERNAME or JIRA_EMAIL" in message
    assert "JIRA_API_TOKEN" in message
    assert "JIRA_PROJECT_KEY" in message
    assert "JIRA_BASE_URL" not in message


def test_from_env_missing_everything():
    with pytest.raises(MCPJiraConfigError, match="JIRA_URL or JIRA_BASE_URL"):
        JiraConfig.from_env()


def test_from_env_accepts_aliases(monkeypatch):
    monkeypatch.setenv("JIRA_BASE_URL", "https://alias.atlassian.net/")
    monkeypatch.setenv("JIRA_EMAIL", "alias@example.com")
    monkeypatch.setenv("JIRA_API_TOKEN", "token")
    monkeypatch.setenv("JIRA_PROJECT_KEY", "OPS")

    config = JiraConfig.from_env()
    assert config.url == "https://alias.atlassian.net"
    assert config.username == "alias@example.com"


def test_primary_name_wins_over_alias(jira_environment, monkeypatch):
    monkeypatch.setenv("JIRA_BASE_URL", "https://other.atlassian.net")
    assert JiraConfig.from_env().url == "https://test.atlassian.net"


def test_blank_value_counts_as_missing(jira_environment, monkeypatch):
    monkeypatch.setenv("JIRA_API_TOKEN", "   ")
    with pytest.raises(MCPJiraConfigError, match="JIRA_API_TOKEN"):
        JiraConfig.from_env()


def test_from_env_timeout_and_ssl(jira_environment, monkeypatch):
    monkeypatch.setenv("JIRA_TIMEOUT", "12.5")
    monkeypatch.setenv("JIRA_SSL_VERIFY", "false")
    config = JiraConfig.from_env()
    assert config.timeout == 12.5
    assert config.ssl_verify is False


def test_from_env_invalid_timeout(jira_environment, monkeypatch):
    monkeypatch.setenv("JIRA_TIMEOUT", "soon")
    with pytest.raises(MCPJiraConfigError, match="JIRA_TIMEOUT"):
        JiraConfig.from_env()


def test_non_positive_timeout_rejected(jira_config_factory):
    with pytest.raises(MCPJiraConfigError, match="positive"):
        jira_config_factory(timeout=0)


def test_direct_construction_validates(jira_config_factory):
    with pytest.raises(MCPJiraConfigError, match="default_project_key"):
        jira_config_factory(default_project_key="")


def test_url_is_normalized(jira_config_factory):
    config = jira_config_factory(url="https://test.atlassian.net/")
    assert config.url == "https://test.atlassian.net"


def test_config_is_immutable(jira_config):
    with pytest.raises(dataclasses.FrozenInstanceError):
        jira_config.url = "https://elsewhere.atlassian.net"
