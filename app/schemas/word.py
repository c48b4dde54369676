"""
Pydantic schemas for Word endpoints
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from app.models.word import WordBase
from app.schemas.base import UTCDatetime

WordStatusValue = Literal["active", "pending", "rejected"]


class WordCreate(BaseModel):
    """Schema for creating a dictionary word"""

    text: str = Field(min_length=1, max_length=100)
    definition: str = Field(min_length=1)
    example: str | None = None
    origin: str | None = None
    status: WordStatusValue = "pending"
    tags: list[str] = Field(default_factory=list)

    @field_validator("text", "definition")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class WordUpdate(BaseModel):
    """Schema for updating a word - all fields optional"""

    text: str | None = Field(default=None, min_length=1, max_length=100)
    definition: str | None = Field(default=None, min_length=1)
    example: str | None = None
    origin: str | None = None
    status: WordStatusValue | None = None
    tags: list[str] | None = None


class WordStatusUpdate(BaseModel):
    status: WordStatusValue


class WordResponse(WordBase):
    """Schema for word response - what API returns"""

    id: str
    created_by: str | None = None
    likes_count: int
    views_count: int
    tags: list[str] = []
    created_at: UTCDatetime
    updated_at: UTCDatetime


class WordListResponse(BaseModel):
    total: int
    words: list[WordResponse]
