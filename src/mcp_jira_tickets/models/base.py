"""
Base model for Jira API data.

Every model is rebuilt from a raw API payload on each call and never
mutated afterwards.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """Base class for models built from Jira API responses."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "ApiModel":
        """Create a model instance from an API response payload."""
        raise NotImplementedError
