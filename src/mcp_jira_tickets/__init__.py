import asyncio
import os
import sys

import click
from dotenv import load_dotenv

from .exceptions import MCPJiraConfigError
from .logging_config import log_operation, setup_logger

__version__ = "0.1.0"

logger = setup_logger()


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse"]),
    default=None,
    help="Transport type (stdio or sse); defaults to MCP_TRANSPORT or stdio",
)
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to listen on for SSE transport; defaults to MCP_PORT or 8000",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--jira-username", help="Jira account email")
@click.option("--jira-token", help="Jira API token")
@click.option("--jira-project-key", help="Default Jira project key")
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=None,
    help="Verify SSL certificates (default: verify)",
)
@click.option(
    "--jira-timeout",
    type=float,
    help="HTTP timeout in seconds for Jira requests (default: 30)",
)
@click.option(
    "--read-only",
    is_flag=True,
    default=False,
    help="Disable tools that create or modify tickets",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str | None,
    port: int | None,
    log_dir: str | None,
    log_to_file: bool,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
    jira_project_key: str | None,
    jira_ssl_verify: bool | None,
    jira_timeout: float | None,
    read_only: bool,
) -> None:
    """MCP Jira Tickets Server - Jira ticket tools for MCP.

    Exposes tools to create, search, inspect, update and comment on Jira
    Cloud tickets and to list projects.
    """
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    setup_logger(
        name="mcp-jira-tickets",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    with log_operation(logger, "application_startup", app_version=__version__):
        if env_file:
            logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        # Command line arguments override the environment
        if jira_url:
            os.environ["JIRA_URL"] = jira_url
        if jira_username:
            os.environ["JIRA_USERNAME"] = jira_username
        if jira_token:
            os.environ["JIRA_API_TOKEN"] = jira_token
        if jira_project_key:
            os.environ["JIRA_PROJECT_KEY"] = jira_project_key
        if jira_ssl_verify is not None:
            os.environ["JIRA_SSL_VERIFY"] = str(jira_ssl_verify).lower()
        if jira_timeout is not None:
            os.environ["JIRA_TIMEOUT"] = str(jira_timeout)
        if read_only:
            os.environ["READ_ONLY_MODE"] = "true"

        final_transport = transport or os.getenv("MCP_TRANSPORT", "stdio").lower()
        if final_transport not in ("stdio", "sse"):
            logger.error(f"Unsupported transport: {final_transport}")
            sys.exit(1)
        final_port = port if port is not None else int(os.getenv("MCP_PORT", "8000"))

        # Fail before serving rather than on the first tool call
        from .jira.config import JiraConfig

        try:
            JiraConfig.from_env()
        except MCPJiraConfigError as e:
            logger.error(f"Invalid configuration: {e}")
            sys.exit(1)

    from . import server

    asyncio.run(server.run_server(transport=final_transport, port=final_port))


__all__ = ["__version__", "main"]

if __name__ == "__main__":
    main()
