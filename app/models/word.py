"""
SQLModel-based Word models

WordBase (shared public fields)
    ├─> Words (database table, adds counters and bookkeeping)
    └─> WordCreate/WordUpdate/WordResponse (API schemas, defined in app/schemas)
"""

from datetime import datetime

from sqlalchemy import JSON, Column, Index
from sqlmodel import Field, SQLModel

from app.config import WordStatus
from app.core.database import generate_id, utc_now


class WordBase(SQLModel):
    """
    Base model with shared public fields for dictionary words.
    """

    text: str = Field(max_length=100)
    definition: str = Field(default="")
    example: str | None = Field(default=None)
    origin: str | None = Field(default=None)

    status: str = Field(default=WordStatus.PENDING, max_length=10)


class Words(WordBase, table=True):
    """
    Database table for dictionary words.

    likes_count and views_count are denormalized counters. They are only ever
    changed with ``col = col + n`` updates, never read-modify-write.
    """

    __tablename__ = "words"

    __table_args__ = (
        Index("idx_words_text", "text"),
        Index("idx_words_status_created_at", "status", "created_at"),
        Index("idx_words_status_likes", "status", "likes_count"),
    )

    id: str = Field(default_factory=generate_id, primary_key=True, max_length=64)

    # User id of the author, or "admin" for words entered from the back-office
    created_by: str | None = Field(default=None, max_length=64)

    likes_count: int = Field(default=0)
    views_count: int = Field(default=0)

    tags: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
