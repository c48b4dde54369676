"""
SQLModel-based Vote model

One row per (user, word): value is 1 for a like and -1 for a dislike.
"""

from datetime import datetime

from sqlalchemy import ForeignKeyConstraint, Index, UniqueConstraint
from sqlmodel import Field, SQLModel

from app.core.database import generate_id, utc_now


class Votes(SQLModel, table=True):
    """
    Database table for votes on dictionary words.
    """

    __tablename__ = "votes"

    __table_args__ = (
        ForeignKeyConstraint(
            ["word_id"],
            ["words.id"],
            ondelete="CASCADE",
            onupdate="CASCADE",
            name="fk_votes_word_id",
        ),
        ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            ondelete="CASCADE",
            onupdate="CASCADE",
            name="fk_votes_user_id",
        ),
        UniqueConstraint("user_id", "word_id", name="uq_votes_user_word"),
        Index("idx_votes_word_id", "word_id"),
        Index("idx_votes_created_at", "created_at"),
    )

    id: str = Field(default_factory=generate_id, primary_key=True, max_length=64)

    user_id: str = Field(max_length=64)
    word_id: str = Field(max_length=64)

    value: int = Field(default=1)

    created_at: datetime = Field(default_factory=utc_now)
