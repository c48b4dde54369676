"""
Pydantic schemas for Comment endpoints
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from app.models.comment import CommentBase
from app.schemas.base import UTCDatetime
from app.schemas.common import UserSummary

CommentStatusValue = Literal["active", "hidden", "flagged"]


class CommentCreate(BaseModel):
    """Schema for creating a new comment"""

    word_id: str = Field(description="ID of the word being commented on")
    text: str = Field(min_length=1, max_length=2000)

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class CommentUpdate(BaseModel):
    text: str = Field(min_length=1, max_length=2000)


class CommentStatusUpdate(BaseModel):
    status: CommentStatusValue


class CommentResponse(CommentBase):
    """
    Schema for comment response - what API returns.

    The author is embedded as a UserSummary; comments by deleted users show
    "Unknown user".
    """

    id: str
    user_id: str
    status: str
    created_at: UTCDatetime
    updated_at: UTCDatetime
    user: UserSummary | None = None


class CommentListResponse(BaseModel):
    total: int
    comments: list[CommentResponse]
