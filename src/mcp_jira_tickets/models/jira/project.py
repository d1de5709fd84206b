"""
Jira project models.
"""

from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, NO_DESCRIPTION, NO_LEAD, UNKNOWN


class JiraProject(ApiModel):
    """
    Model representing a Jira project.
    """

    id: str = EMPTY_STRING
    key: str = EMPTY_STRING
    name: str = UNKNOWN
    description: str = NO_DESCRIPTION
    lead: str = NO_LEAD
    project_type: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraProject":
        """
        Create a JiraProject from a Jira API response.

        Args:
            data: One project from ``GET /project``

        Returns:
            A JiraProject instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        lead = data.get("lead")
        lead_name = lead.get("displayName") if isinstance(lead, dict) else None

        return cls(
            id=str(data.get("id", EMPTY_STRING)),
            key=str(data.get("key") or EMPTY_STRING),
            name=str(data.get("name") or UNKNOWN),
            description=str(data.get("description") or NO_DESCRIPTION),
            lead=str(lead_name or NO_LEAD),
            project_type=str(data.get("projectTypeKey") or EMPTY_STRING),
        )
