"""
SQLModel-based Suggestion models

A suggestion is a user-submitted candidate dictionary word awaiting review.
When word_id is set, the suggestion proposes a change to an existing word.
"""

from datetime import datetime

from sqlalchemy import Index
from sqlmodel import Field, SQLModel

from app.config import SuggestionStatus
from app.core.database import generate_id, utc_now


class SuggestionBase(SQLModel):
    """
    Base model with shared public fields for Suggestions.
    """

    word_id: str | None = Field(default=None, max_length=64)
    text: str = Field(max_length=100)
    definition: str = Field(default="")
    example: str | None = Field(default=None)
    origin: str | None = Field(default=None)


class Suggestions(SuggestionBase, table=True):
    """
    Database table for word suggestions.

    Review tracking:
    - reviewed_by: admin who approved or rejected the suggestion
    - review_note: free-text note from the admin ("" when none was given)
    """

    __tablename__ = "suggestions"

    __table_args__ = (
        Index("idx_suggestions_status_created_at", "status", "created_at"),
        Index("idx_suggestions_user_id_created_at", "user_id", "created_at"),
    )

    id: str = Field(default_factory=generate_id, primary_key=True, max_length=64)

    user_id: str = Field(max_length=64)

    status: str = Field(default=SuggestionStatus.PENDING, max_length=10)

    reviewed_by: str | None = Field(default=None, max_length=64)
    review_note: str | None = Field(default=None, max_length=2000)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
