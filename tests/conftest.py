"""
Root pytest configuration.

Keeps the developer's real Jira environment out of the tests and pins the
anyio backend used by async tests.
"""

from unittest.mock import MagicMock

import pytest

from mcp_jira_tickets.jira import JiraFetcher
from mcp_jira_tickets.jira.config import JiraConfig

JIRA_ENV_VARS = (
    "JIRA_URL",
    "JIRA_BASE_URL",
    "JIRA_USERNAME",
    "JIRA_EMAIL",
    "JIRA_API_TOKEN",
    "JIRA_PROJECT_KEY",
    "JIRA_SSL_VERIFY",
    "JIRA_TIMEOUT",
    "READ_ONLY_MODE",
    "MCP_TRANSPORT",
    "MCP_PORT",
)


@pytest.fixture(autouse=True)
def clean_jira_environment(monkeypatch):
    """Remove Jira settings inherited from the shell for every test."""
    for name in JIRA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def jira_environment(monkeypatch):
    """A complete, valid Jira environment."""
    env = {
        "JIRA_URL": "https://test.atlassian.net",
        "JIRA_USERNAME": "test@example.com",
        "JIRA_API_TOKEN": "test-api-token",
        "JIRA_PROJECT_KEY": "DEV",
    }
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return env


@pytest.fixture
def jira_config_factory():
    """
    Factory for creating JiraConfig instances with customizable options.

    Example:
        def test_config(jira_config_factory):
            config = jira_config_factory(timeout=5)
            assert config.timeout == 5
    """

    def _create_config(**overrides):
        defaults = {
            "url": "https://test.atlassian.net",
            "username": "test@example.com",
            "api_token": "test-api-token",
            "default_project_key": "DEV",
        }
        return JiraConfig(**{**defaults, **overrides})

    return _create_config


@pytest.fixture
def jira_config(jira_config_factory):
    return jira_config_factory()


@pytest.fixture
def jira_fetcher(jira_config):
    """A real JiraFetcher whose underlying atlassian client is a MagicMock."""
    fetcher = JiraFetcher(config=jira_config)
    fetcher.jira = MagicMock()
    return fetcher
