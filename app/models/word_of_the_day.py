"""
SQLModel-based WordOfTheDay model

One row per calendar day. The pick for a day can be replaced (refresh or pin)
and unpublished (status inactive); past rows are kept as history.
"""

from datetime import date, datetime

from sqlalchemy import ForeignKeyConstraint, Index
from sqlmodel import Field, SQLModel

from app.config import WordOfTheDayStatus
from app.core.database import generate_id, utc_now


class WordsOfTheDay(SQLModel, table=True):
    """
    Database table for the daily featured word.
    """

    __tablename__ = "words-of-the-day"

    __table_args__ = (
        ForeignKeyConstraint(
            ["word_id"],
            ["words.id"],
            ondelete="CASCADE",
            onupdate="CASCADE",
            name="fk_words_of_the_day_word_id",
        ),
        Index("idx_words_of_the_day_day", "day", unique=True),
        Index("idx_words_of_the_day_word_id", "word_id"),
    )

    id: str = Field(default_factory=generate_id, primary_key=True, max_length=64)

    word_id: str = Field(max_length=64)
    day: date

    status: str = Field(default=WordOfTheDayStatus.ACTIVE, max_length=10)

    # Admin who pinned the word, None when picked at random
    selected_by: str | None = Field(default=None, max_length=64)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
