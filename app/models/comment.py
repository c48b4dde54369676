"""
SQLModel-based Comment models with inheritance for security

CommentBase (shared public fields)
    ├─> Comments (database table, adds status and bookkeeping)
    └─> CommentCreate/CommentUpdate/CommentResponse (API schemas, defined in app/schemas)

Note: word_id is deliberately not a foreign key. Comments may outlive (or
predate) the word they refer to, and the listing endpoints cope with that.
"""

from datetime import datetime

from sqlalchemy import Index
from sqlmodel import Field, SQLModel

from app.config import CommentStatus
from app.core.database import generate_id, utc_now


class CommentBase(SQLModel):
    """
    Base model with shared public fields for Comments.
    """

    word_id: str = Field(max_length=64)
    text: str = Field(default="")


class Comments(CommentBase, table=True):
    """
    Database table for comments on dictionary words.

    Status lifecycle:
    - active: visible
    - flagged: reported by a user, awaiting moderation
    - hidden: blocked by an admin, text replaced with a placeholder
    """

    __tablename__ = "comments"

    __table_args__ = (
        Index("idx_comments_word_id_created_at", "word_id", "created_at"),
        Index("idx_comments_user_id_created_at", "user_id", "created_at"),
        Index("idx_comments_status", "status"),
    )

    id: str = Field(default_factory=generate_id, primary_key=True, max_length=64)

    user_id: str = Field(max_length=64)

    status: str = Field(default=CommentStatus.ACTIVE, max_length=10)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
