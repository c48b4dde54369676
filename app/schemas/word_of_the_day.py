"""
Pydantic schemas for the word of the day.
"""

from datetime import date
from typing import Literal

from pydantic import BaseModel

from app.schemas.word import WordResponse


class WordOfTheDayResponse(BaseModel):
    day: date
    status: str
    selected_by: str | None = None
    word: WordResponse


class WordOfTheDayHistoryItem(BaseModel):
    day: date
    word_id: str
    status: str
    selected_by: str | None = None

    model_config = {"from_attributes": True}


class WordOfTheDaySet(BaseModel):
    """Pin a word for a day (today when day is omitted)."""

    word_id: str
    day: date | None = None


class WordOfTheDayVote(BaseModel):
    kind: Literal["like", "dislike"]
