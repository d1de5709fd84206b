"""Entry point for running the MCP Jira tickets server."""

from mcp_jira_tickets import main

if __name__ == "__main__":
    main()
