"""
Pydantic schemas for Suggestion endpoints
"""

from pydantic import BaseModel, Field, field_validator

from app.models.suggestion import SuggestionBase
from app.schemas.base import UTCDatetime
from app.schemas.common import UserSummary
from app.schemas.word import WordResponse


class SuggestionCreate(BaseModel):
    """Schema for submitting a word suggestion"""

    text: str = Field(min_length=1, max_length=100)
    definition: str = Field(min_length=1)
    example: str | None = None
    origin: str | None = None
    word_id: str | None = Field(default=None, description="Existing word this suggestion edits")

    @field_validator("text", "definition")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class ReviewRequest(BaseModel):
    """Admin note attached to an approval or rejection."""

    note: str | None = Field(default=None, max_length=2000)


class SuggestionResponse(SuggestionBase):
    id: str
    user_id: str
    status: str
    reviewed_by: str | None = None
    review_note: str | None = None
    created_at: UTCDatetime
    updated_at: UTCDatetime
    user: UserSummary | None = None


class SuggestionListResponse(BaseModel):
    total: int
    suggestions: list[SuggestionResponse]


class SuggestionApproveResponse(BaseModel):
    suggestion: SuggestionResponse
    word: WordResponse


class SuggestionStatsResponse(BaseModel):
    total: int
    pending: int
    approved: int
    rejected: int
    approval_rate: float = Field(description="Approved suggestions as a percentage of all")
