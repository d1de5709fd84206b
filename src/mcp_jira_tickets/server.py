from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import anyio
from mcp.server import Server
from mcp.types import CallToolResult, Tool

from .jira import JiraFetcher
from .jira.config import JiraConfig
from .logging_config import get_logger
from .servers.context import AppContext
from .servers.dispatcher import ToolDispatcher
from .utils.io import is_read_only_mode
from .utils.logging import log_config_param

logger = get_logger("mcp-jira-tickets")


def log_jira_config(config: JiraConfig) -> None:
    """Log the effective Jira configuration with the token masked."""
    log_config_param(logger, "Jira", "URL", config.url)
    log_config_param(logger, "Jira", "Username", config.username)
    log_config_param(logger, "Jira", "API Token", config.api_token, sensitive=True)
    log_config_param(logger, "Jira", "Default Project", config.default_project_key)
    log_config_param(logger, "Jira", "SSL Verify", str(config.ssl_verify))
    log_config_param(logger, "Jira", "Timeout", f"{config.timeout:g}s")


@asynccontextmanager
async def server_lifespan(server: Server) -> AsyncIterator[AppContext]:
    """Build the Jira client and dispatcher for the lifetime of the server."""
    logger.info("Starting MCP Jira tickets server")

    read_only = is_read_only_mode()
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")

    config = JiraConfig.from_env()
    log_jira_config(config)
    jira = JiraFetcher(config=config)
    logger.info("Jira client initialized successfully.")

    try:
        yield AppContext(dispatcher=ToolDispatcher(jira, read_only=read_only))
    finally:
        logger.info("MCP Jira tickets server stopped")


app = Server("mcp-jira-tickets", lifespan=server_lifespan)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List the Jira ticket tools available in the current mode."""
    ctx = app.request_context.lifespan_context
    return [descriptor.to_tool() for descriptor in ctx.dispatcher.list_tools()]


@app.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
    """Run one Jira ticket tool; failures come back as error results."""
    ctx = app.request_context.lifespan_context
    result = await anyio.to_thread.run_sync(ctx.dispatcher.dispatch, name, arguments)
    return result.to_call_tool_result()


async def run_server(transport: str = "stdio", port: int = 8000) -> None:
    """Run the MCP Jira tickets server with the specified transport."""
    if transport == "sse":
        import uvicorn
        from mcp.server.sse import SseServerTransport
        from starlette.applications import Starlette
        from starlette.requests import Request
        from starlette.responses import Response
        from starlette.routing import Mount, Route

        sse = SseServerTransport("/messages/")

        async def handle_sse(request: Request) -> Response:
            async with sse.connect_sse(
                request.scope, request.receive, request._send
            ) as streams:
                await app.run(
                    streams[0], streams[1], app.create_initialization_options()
                )
            return Response()

        starlette_app = Starlette(
            routes=[
                Route("/sse", endpoint=handle_sse),
                Mount("/messages/", app=sse.handle_post_message),
            ],
        )

        config = uvicorn.Config(starlette_app, host="0.0.0.0", port=port)  # noqa: S104
        server = uvicorn.Server(config)
        # serve() keeps us on the current event loop
        await server.serve()
    else:
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream, write_stream, app.create_initialization_options()
            )
