"""URL-related utility functions for MCP Jira tickets."""

import re
from urllib.parse import urlparse


def is_atlassian_cloud_url(url: str | None) -> bool:
    """Determine if a URL belongs to Atlassian Cloud or Server/Data Center.

    Args:
        url: The URL to check

    Returns:
        True if the URL is for an Atlassian Cloud instance, False otherwise
    """
    if not url:
        return False

    hostname = urlparse(url).hostname or ""

    # Localhost and private network hosts are always Server/Data Center
    if (
        hostname == "localhost"
        or re.match(r"^127\.", hostname)
        or re.match(r"^192\.168\.", hostname)
        or re.match(r"^10\.", hostname)
        or re.match(r"^172\.(1[6-9]|2[0-9]|3[0-1])\.", hostname)
    ):
        return False

    return (
        ".atlassian.net" in hostname
        or ".jira.com" in hostname
        or ".jira-dev.com" in hostname
        or "api.atlassian.com" in hostname
    )


def normalize_base_url(url: str) -> str:
    """Strip surrounding whitespace and trailing slashes from a base URL."""
    return url.strip().rstrip("/")


def browse_url(base_url: str, ticket_key: str) -> str:
    """Return the web URL of a ticket."""
    return f"{normalize_base_url(base_url)}/browse/{ticket_key}"


def project_url(base_url: str, project_key: str) -> str:
    """Return the web URL of a project."""
    return f"{normalize_base_url(base_url)}/projects/{project_key}"
