"""
Suggestion accessors.

Approval that also creates the dictionary word lives in
app.services.suggestion_review; the functions here only touch the
suggestions table.
"""

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import SuggestionStatus
from app.core.database import utc_now
from app.core.errors import SuggestionAlreadyReviewedError, SuggestionNotFoundError
from app.core.logging import get_logger
from app.models.suggestion import Suggestions

logger = get_logger(__name__)


async def _require_suggestion(db: AsyncSession, suggestion_id: str) -> Suggestions:
    suggestion = await db.get(Suggestions, suggestion_id)
    if suggestion is None:
        raise SuggestionNotFoundError()
    return suggestion


async def create_suggestion(
    db: AsyncSession,
    user_id: str,
    text: str,
    definition: str,
    example: str | None = None,
    origin: str | None = None,
    word_id: str | None = None,
) -> Suggestions:
    """Submit a new suggestion. It always starts out pending."""
    suggestion = Suggestions(
        user_id=user_id,
        word_id=word_id,
        text=text,
        definition=definition,
        example=example,
        origin=origin,
        status=SuggestionStatus.PENDING,
    )
    db.add(suggestion)
    await db.flush()

    logger.info("suggestion_created", suggestion_id=suggestion.id, author_id=user_id)
    return suggestion


async def get_all_suggestions(db: AsyncSession) -> list[Suggestions]:
    result = await db.execute(select(Suggestions).order_by(Suggestions.created_at.desc()))  # type: ignore[attr-defined]
    return list(result.scalars().all())


async def get_pending_suggestions(db: AsyncSession) -> list[Suggestions]:
    result = await db.execute(
        select(Suggestions)
        .where(Suggestions.status == SuggestionStatus.PENDING)  # type: ignore[arg-type]
        .order_by(Suggestions.created_at.desc())  # type: ignore[attr-defined]
    )
    return list(result.scalars().all())


async def get_suggestion_by_id(db: AsyncSession, suggestion_id: str) -> Suggestions | None:
    return await db.get(Suggestions, suggestion_id)


async def get_user_suggestions(db: AsyncSession, user_id: str) -> list[Suggestions]:
    result = await db.execute(
        select(Suggestions)
        .where(Suggestions.user_id == user_id)  # type: ignore[arg-type]
        .order_by(Suggestions.created_at.desc())  # type: ignore[attr-defined]
    )
    return list(result.scalars().all())


async def claim_pending_suggestion(
    db: AsyncSession, suggestion_id: str, status: str, admin_id: str, note: str | None = None
) -> bool:
    """
    Record a review decision, only if the suggestion is still pending.

    A single conditional UPDATE, so when two admins review the same suggestion
    at once exactly one of them gets True.

    Returns:
        True if this call reviewed the suggestion, False if it was no longer pending
    """
    result = await db.execute(
        update(Suggestions)
        .where(
            Suggestions.id == suggestion_id,  # type: ignore[arg-type]
            Suggestions.status == SuggestionStatus.PENDING,  # type: ignore[arg-type]
        )
        .values(status=status, reviewed_by=admin_id, review_note=note or "", updated_at=utc_now())
        .execution_options(synchronize_session=False)
    )
    claimed: bool = result.rowcount == 1  # type: ignore[attr-defined]

    cached = await db.get(Suggestions, suggestion_id)
    if cached is not None:
        await db.refresh(cached)

    if claimed:
        logger.info("suggestion_reviewed", suggestion_id=suggestion_id, status=status)
    return claimed


async def _set_review(
    db: AsyncSession, suggestion_id: str, status: str, admin_id: str, note: str | None
) -> Suggestions:
    if not await claim_pending_suggestion(db, suggestion_id, status, admin_id, note):
        await _require_suggestion(db, suggestion_id)
        raise SuggestionAlreadyReviewedError()
    return await _require_suggestion(db, suggestion_id)


async def approve_suggestion(
    db: AsyncSession, suggestion_id: str, admin_id: str, note: str | None = None
) -> Suggestions:
    return await _set_review(db, suggestion_id, SuggestionStatus.APPROVED, admin_id, note)


async def reject_suggestion(
    db: AsyncSession, suggestion_id: str, admin_id: str, note: str | None = None
) -> Suggestions:
    return await _set_review(db, suggestion_id, SuggestionStatus.REJECTED, admin_id, note)


async def delete_suggestion(db: AsyncSession, suggestion_id: str) -> None:
    suggestion = await _require_suggestion(db, suggestion_id)
    await db.delete(suggestion)
    await db.flush()
    logger.info("suggestion_deleted", suggestion_id=suggestion_id)


async def get_suggestions_stats(db: AsyncSession) -> dict[str, float | int]:
    """
    Count suggestions by status.

    Returns:
        {"total", "pending", "approved", "rejected", "approval_rate"} where
        approval_rate is a percentage of all suggestions (0 when there are none)
    """
    result = await db.execute(
        select(Suggestions.status, func.count())  # type: ignore[call-overload]
        .group_by(Suggestions.status)
    )
    counts = {
        SuggestionStatus.PENDING: 0,
        SuggestionStatus.APPROVED: 0,
        SuggestionStatus.REJECTED: 0,
    }
    total = 0
    for status_value, count in result.all():
        total += count
        if status_value in counts:
            counts[status_value] = count

    approved = counts[SuggestionStatus.APPROVED]
    return {
        "total": total,
        "pending": counts[SuggestionStatus.PENDING],
        "approved": approved,
        "rejected": counts[SuggestionStatus.REJECTED],
        "approval_rate": (approved / total) * 100 if total > 0 else 0.0,
    }
