"""
Dashboard statistics API endpoints
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import AdminUser
from app.core.database import get_db
from app.schemas.stats import DashboardStatsResponse
from app.schemas.vote import VotesByDate
from app.schemas.word import WordResponse
from app.services import stats as stats_service

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/", response_model=DashboardStatsResponse)
async def dashboard_stats(
    _: AdminUser,
    days: Annotated[int, Query(ge=1, le=365, description="Votes chart window")] = 30,
    db: AsyncSession = Depends(get_db),
) -> DashboardStatsResponse:
    """
    Headline numbers for the admin dashboard.

    Includes user, word and vote totals, the pending suggestion count, votes
    per day over the last `days` days and the five most liked words.
    """
    stats = await stats_service.get_dashboard_stats(db, days)
    return DashboardStatsResponse(
        total_users=stats["total_users"],
        active_users=stats["active_users"],
        total_words=stats["total_words"],
        active_words=stats["active_words"],
        total_votes=stats["total_votes"],
        pending_suggestions=stats["pending_suggestions"],
        votes_by_date=[VotesByDate.model_validate(item) for item in stats["votes_by_date"]],
        top_words=[WordResponse.model_validate(word) for word in stats["top_words"]],
    )
