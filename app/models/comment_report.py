"""
SQLModel-based CommentReport models

This module defines the comment report table using SQLModel.
"""

from datetime import datetime

from sqlalchemy import Index
from sqlmodel import Field, SQLModel

from app.config import ReportStatus
from app.core.database import generate_id, utc_now


class CommentReportBase(SQLModel):
    """
    Base model with shared public fields for CommentReports.

    These fields are safe to expose via the API.
    """

    comment_id: str = Field(max_length=64)

    # User who filed the report
    reporter_id: str = Field(max_length=64)

    # Author of the reported comment (the user a warning would go to)
    user_id: str = Field(max_length=64)

    reason: str | None = Field(default=None, max_length=1000)

    status: str = Field(default=ReportStatus.PENDING, max_length=10)


class CommentReports(CommentReportBase, table=True):
    """
    Database table for comment reports.

    Extends CommentReportBase with:
    - Primary key
    - Timestamps
    - Review tracking fields
    """

    __tablename__ = "comment-reports"

    __table_args__ = (
        Index("idx_comment_reports_comment_id", "comment_id"),
        Index("idx_comment_reports_user_id", "user_id"),
        Index("idx_comment_reports_status_created_at", "status", "created_at"),
    )

    id: str = Field(default_factory=generate_id, primary_key=True, max_length=64)

    created_at: datetime = Field(default_factory=utc_now)

    reviewed_by: str | None = Field(default=None, max_length=64)
    reviewed_at: datetime | None = Field(default=None)
