"""Utility functions for date operations."""

from datetime import datetime, timezone

import dateutil.parser

from ..logging_config import get_logger

logger = get_logger("mcp-jira-tickets")

# Locale-dependent calendar date and date-time renderings
LOCALE_DATE_FORMAT = "%x"
LOCALE_DATETIME_FORMAT = "%x %X"


def parse_date(date_str: str | None, format_string: str = "%Y-%m-%d") -> str:
    """
    Parse a date string from ISO format to a specified format.

    The input string `date_str` accepts:
    - None
    - Epoch timestamp (only contains digits and is in milliseconds)
    - Other formats supported by `dateutil.parser` (ISO 8601, RFC 3339, etc.)

    Args:
        date_str: Date string
        format_string: The output format (default: "%Y-%m-%d")

    Returns:
        Formatted date string, empty string if date_str is empty, or the
        original string if it cannot be parsed
    """
    if not date_str:
        return ""

    try:
        if date_str.isdigit():
            date = datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
        else:
            date = dateutil.parser.parse(date_str)
        return date.strftime(format_string)

    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(f"utils.parse_date - error parsing date '{date_str}': {str(e)}")

    return date_str


def format_locale_date(date_str: str | None) -> str:
    """Render a Jira timestamp as a locale calendar date."""
    return parse_date(date_str, LOCALE_DATE_FORMAT)


def format_locale_datetime(date_str: str | None) -> str:
    """Render a Jira timestamp as a locale date and time."""
    return parse_date(date_str, LOCALE_DATETIME_FORMAT)
