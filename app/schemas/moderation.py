"""
Schemas for moderation actions on comment reports.
"""

from pydantic import BaseModel, Field


class WarnRequest(BaseModel):
    """Request schema for block-and-warn."""

    reason: str | None = Field(
        default=None,
        max_length=500,
        description="Warning reason; also used as the ban reason if the user gets banned",
    )


class ModerationResult(BaseModel):
    """
    Outcome of a moderation action.

    warnings is only set by block-and-warn. banned is True when the author is
    banned after the action.
    """

    report_id: str
    report_status: str
    comment_id: str
    user_id: str
    warnings: int | None = None
    banned: bool = False
