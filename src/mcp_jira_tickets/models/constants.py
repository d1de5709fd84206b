"""Default values shared by the Jira models."""

EMPTY_STRING = ""
JIRA_DEFAULT_ID = "0"
JIRA_DEFAULT_KEY = "UNKNOWN-0"
UNKNOWN = "Unknown"
UNASSIGNED = "Unassigned"
NO_PRIORITY = "None"
NO_DESCRIPTION = "No description"
NO_TEXT_CONTENT = "No text content"
NO_LEAD = "No lead assigned"
