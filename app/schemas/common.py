"""
Shared/common Pydantic schemas used across multiple endpoints
"""

from pydantic import BaseModel


class UserSummary(BaseModel):
    """
    Minimal user information for embedding in responses.

    Used by comment, report and suggestion listings so clients get a display
    name without fetching the full user profile.
    """

    id: str
    username: str

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str
