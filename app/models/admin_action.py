"""
SQLModel-based AdminAction model for audit logging

This module defines the AdminActions database model for tracking all admin
moderation actions. This provides an audit trail for:
- Comment report triage (dismiss, block, block and warn)
- Suggestion review (approve, reject)
- User moderation (ban, unban, warnings reset, status change)
- Word of the day curation
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Column, Index
from sqlmodel import Field, SQLModel

from app.core.database import utc_now


class AdminActions(SQLModel, table=True):
    """
    Audit log for admin moderation actions.

    It stores:
    - Who performed the action
    - What type of action (AdminActionType constants)
    - References to related entities (report, suggestion, user, comment, word)
    - JSON details with context (warning count, ban reason, note, etc.)

    References are plain strings: the audit row must survive deletion of
    the entities it mentions.
    """

    __tablename__ = "admin-actions"

    __table_args__ = (
        Index("idx_admin_actions_admin_id", "admin_id"),
        Index("idx_admin_actions_target_user_id", "target_user_id"),
        Index("idx_admin_actions_created_at", "created_at"),
        Index("idx_admin_actions_action_type", "action_type"),
    )

    # Primary key
    action_id: int | None = Field(default=None, primary_key=True)

    # Admin who performed the action
    admin_id: str | None = Field(default=None, max_length=64)

    action_type: int = Field(default=0)

    # Related entities (nullable - not all actions have all references)
    report_id: str | None = Field(default=None, max_length=64)
    suggestion_id: str | None = Field(default=None, max_length=64)
    target_user_id: str | None = Field(default=None, max_length=64)
    comment_id: str | None = Field(default=None, max_length=64)
    word_id: str | None = Field(default=None, max_length=64)

    # Examples:
    # - report_dismiss: {}
    # - report_block_warn: {"reason": "spam", "warnings": 2, "banned": true}
    # - suggestion_approve: {"note": "", "created_word_id": "..."}
    details: dict[str, Any] | None = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utc_now)
