"""
Utility functions for the MCP Jira tickets integration.
This package provides various utility functions used throughout the codebase.
"""

from .date import format_locale_date, format_locale_datetime, parse_date
from .env import getenv_first, is_env_ssl_verify
from .io import is_read_only_mode
from .logging import log_config_param, mask_sensitive
from .urls import browse_url, is_atlassian_cloud_url, normalize_base_url, project_url

__all__ = [
    "browse_url",
    "format_locale_date",
    "format_locale_datetime",
    "getenv_first",
    "is_atlassian_cloud_url",
    "is_env_ssl_verify",
    "is_read_only_mode",
    "log_config_param",
    "mask_sensitive",
    "normalize_base_url",
    "parse_date",
    "project_url",
]
