"""
Pydantic schemas for dashboard statistics.
"""

from pydantic import BaseModel

from app.schemas.vote import VotesByDate
from app.schemas.word import WordResponse


class DashboardStatsResponse(BaseModel):
    total_users: int
    active_users: int
    total_words: int
    active_words: int
    total_votes: int
    pending_suggestions: int
    votes_by_date: list[VotesByDate]
    top_words: list[WordResponse]
