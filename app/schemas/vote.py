"""
Pydantic schemas for Vote endpoints
"""

from typing import Literal

from pydantic import BaseModel

from app.schemas.base import UTCDatetime


class VoteCreate(BaseModel):
    word_id: str
    value: Literal[1, -1]


class VoteResponse(BaseModel):
    id: str
    user_id: str
    word_id: str
    value: int
    created_at: UTCDatetime

    model_config = {"from_attributes": True}


class VoteListResponse(BaseModel):
    total: int
    votes: list[VoteResponse]


class VotesByDate(BaseModel):
    date: str
    count: int
