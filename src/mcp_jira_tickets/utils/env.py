"""Environment variable utility functions for MCP Jira tickets."""

import os


def is_env_extended_truthy(env_var_name: str, default: str = "") -> bool:
    """Check if environment variable is set to an extended truthy value.

    Considers 'true', '1', 'yes', 'y', 'on' as truthy values (case-insensitive).
    Used for READ_ONLY_MODE and similar flags.
    """
    return os.getenv(env_var_name, default).lower() in ("true", "1", "yes", "y", "on")


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to false values.
    """
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no")


def getenv_first(*env_var_names: str) -> str | None:
    """Return the first non-empty value among the given environment variables.

    Lets a setting have a primary name and legacy aliases, checked in order.
    """
    for name in env_var_names:
        value = os.getenv(name)
        if value:
            return value
    return None
