"""
SQLModel-based Favorite model

Junction table between users and the words they marked as favourite.
"""

from datetime import datetime

from sqlalchemy import ForeignKeyConstraint, Index
from sqlmodel import Field, SQLModel

from app.core.database import utc_now


class Favorites(SQLModel, table=True):
    """
    Database table for favourite words.

    The composite primary key makes adding a favourite twice a no-op at the
    database level.
    """

    __tablename__ = "favorites"

    __table_args__ = (
        ForeignKeyConstraint(
            ["word_id"],
            ["words.id"],
            ondelete="CASCADE",
            onupdate="CASCADE",
            name="fk_favorites_word_id",
        ),
        ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            ondelete="CASCADE",
            onupdate="CASCADE",
            name="fk_favorites_user_id",
        ),
        Index("fk_favorites_word_id", "word_id"),
    )

    # Composite primary key
    user_id: str = Field(primary_key=True, max_length=64)
    word_id: str = Field(primary_key=True, max_length=64)

    created_at: datetime = Field(default_factory=utc_now)
