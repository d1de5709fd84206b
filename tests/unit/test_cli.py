"""Tests for the command line entry point."""

import os
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from mcp_jira_tickets import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cli():
    """Keep the CLI from touching real .env files, log handlers or os.environ."""
    with (
        patch.dict(os.environ, {}),
        patch("mcp_jira_tickets.load_dotenv") as mock_load_dotenv,
        patch("mcp_jira_tickets.setup_logger") as mock_setup_logger,
        patch(
            "mcp_jira_tickets.server.run_server", new_callable=AsyncMock
        ) as mock_run_server,
    ):
        yield {
            "load_dotenv": mock_load_dotenv,
            "setup_logger": mock_setup_logger,
            "run_server": mock_run_server,
        }


def test_missing_configuration_exits(runner, isolated_cli):
    result = runner.invoke(main, [])

    assert result.exit_code == 1
    isolated_cli["run_server"].assert_not_called()


def test_flags_override_environment(runner, isolated_cli):
    result = runner.invoke(
        main,
        [
            "--jira-url",
            "https://flags.atlassian.net",
            "--jira-username",
            "cli@example.com",
            "--jira-token",
            "cli-token",
            "--jira-project-key",
            "CLI",
            "--jira-timeout",
            "5",
            "--no-jira-ssl-verify",
            "--read-only",
        ],
    )

    assert result.exit_code == 0, result.output
    assert os.environ["JIRA_URL"] == "https://flags.atlassian.net"
    assert os.environ["JIRA_PROJECT_KEY"] == "CLI"
    assert os.environ["JIRA_TIMEOUT"] == "5.0"
    assert os.environ["JIRA_SSL_VERIFY"] == "false"
    assert os.environ["READ_ONLY_MODE"] == "true"
    isolated_cli["run_server"].assert_awaited_once_with(transport="stdio", port=8000)


def test_transport_and_port_from_environment(runner, isolated_cli, jira_environment):
    with patch.dict(os.environ, {"MCP_TRANSPORT": "SSE", "MCP_PORT": "9001"}):
        result = runner.invoke(main, [])

    assert result.exit_code == 0, result.output
    isolated_cli["run_server"].assert_awaited_once_with(transport="sse", port=9001)


def test_transport_flag_wins(runner, isolated_cli, jira_environment):
    with patch.dict(os.environ, {"MCP_TRANSPORT": "sse"}):
        result = runner.invoke(main, ["--transport", "stdio", "--port", "8123"])

    assert result.exit_code == 0, result.output
    isolated_cli["run_server"].assert_awaited_once_with(transport="stdio", port=8123)


def test_unsupported_transport_from_environment(runner, isolated_cli, jira_environment):
    with patch.dict(os.environ, {"MCP_TRANSPORT": "websocket"}):
        result = runner.invoke(main, [])

    assert result.exit_code == 1
    isolated_cli["run_server"].assert_not_called()


@pytest.mark.parametrize("flags, level", [([], None), (["-v"], "INFO"), (["-vv"], "DEBUG")])
def test_verbosity(runner, isolated_cli, jira_environment, flags, level):
    result = runner.invoke(main, flags)

    assert result.exit_code == 0, result.output
    assert isolated_cli["setup_logger"].call_args.kwargs["level"] == level


def test_env_file_is_loaded(runner, isolated_cli, jira_environment, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("JIRA_PROJECT_KEY=ENV\n")

    result = runner.invoke(main, ["--env-file", str(env_file)])

    assert result.exit_code == 0, result.output
    isolated_cli["load_dotenv"].assert_called_once_with(str(env_file))
