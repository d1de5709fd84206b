"""Tests for the date utility functions."""

from datetime import datetime

from mcp_jira_tickets.utils import format_locale_date, format_locale_datetime, parse_date


def test_parse_date_empty_input():
    """Test that parse_date returns an empty string for empty input."""
    assert parse_date(None) == ""
    assert parse_date("") == ""


def test_parse_date_invalid_input():
    """Test that parse_date returns the input unchanged when it cannot parse it."""
    assert parse_date("invalid") == "invalid"


def test_parse_date_iso8601():
    assert parse_date("2021-01-01T00:00:00Z") == "2021-01-01"


def test_parse_date_jira_timestamp():
    """Test the timestamp shape Jira returns (offset without colon)."""
    assert parse_date("2024-01-15T10:30:00.000+0000") == "2024-01-15"


def test_parse_date_epoch_milliseconds():
    assert parse_date("1612156800000") == "2021-02-01"


def test_parse_date_custom_format():
    assert parse_date("2021-07-01", "%B %d, %Y") == "July 01, 2021"


def test_format_locale_date():
    assert format_locale_date("2021-07-01T08:00:00.000+0000") == datetime(
        2021, 7, 1
    ).strftime("%x")


def test_format_locale_datetime():
    expected = datetime(2021, 7, 1, 8, 5, 9).strftime("%x %X")
    assert format_locale_datetime("2021-07-01T08:05:09.000+0000") == expected


def test_format_locale_date_missing():
    assert format_locale_date(None) == ""
