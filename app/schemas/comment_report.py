"""
Pydantic schemas for comment reports.
"""

from pydantic import BaseModel, Field

from app.schemas.base import UTCDatetime, UTCDatetimeOptional
from app.schemas.common import UserSummary


class CommentReportCreate(BaseModel):
    """Request schema for reporting a comment."""

    reason: str | None = Field(default=None, max_length=1000)


class CommentReportResponse(BaseModel):
    """
    Response schema for a comment report.

    The reported comment's text and both users' names are joined in for the
    moderation queue.
    """

    id: str
    comment_id: str
    reporter_id: str
    user_id: str
    reason: str | None = None
    status: str
    created_at: UTCDatetime
    reviewed_by: str | None = None
    reviewed_at: UTCDatetimeOptional = None

    comment_text: str | None = None
    reporter: UserSummary | None = None
    reported_user: UserSummary | None = None

    model_config = {"from_attributes": True}


class CommentReportListResponse(BaseModel):
    total: int
    items: list[CommentReportResponse]
