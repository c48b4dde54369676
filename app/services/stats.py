"""
Dashboard statistics.
"""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import SuggestionStatus, UserStatus, WordStatus, settings
from app.models.suggestion import Suggestions
from app.models.user import Users
from app.models.word import Words
from app.services import votes as votes_service


async def _count(db: AsyncSession, model: Any, *conditions: Any) -> int:
    query = select(func.count()).select_from(model)
    if conditions:
        query = query.where(*conditions)
    result = await db.execute(query)
    return result.scalar_one()


async def get_top_words(db: AsyncSession, limit: int | None = None) -> list[Words]:
    """Most liked words regardless of status."""
    result = await db.execute(
        select(Words)
        .order_by(Words.likes_count.desc(), Words.created_at.desc())  # type: ignore[attr-defined]
        .limit(limit or settings.TOP_WORDS_LIMIT)
    )
    return list(result.scalars().all())


async def get_dashboard_stats(db: AsyncSession, days: int | None = None) -> dict[str, Any]:
    """
    Collect the headline numbers shown on the admin dashboard.

    Returns:
        Dict with total_users, active_users, total_words, active_words,
        total_votes, pending_suggestions, votes_by_date and top_words
    """
    return {
        "total_users": await _count(db, Users),
        "active_users": await _count(db, Users, Users.status == UserStatus.ACTIVE),
        "total_words": await _count(db, Words),
        "active_words": await _count(db, Words, Words.status == WordStatus.ACTIVE),
        "total_votes": await votes_service.count_votes(db),
        "pending_suggestions": await _count(
            db, Suggestions, Suggestions.status == SuggestionStatus.PENDING
        ),
        "votes_by_date": await votes_service.get_votes_stats_by_date(db, days),
        "top_words": await get_top_words(db),
    }
