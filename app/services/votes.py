"""
Vote accessors.

A user holds at most one vote per word. Only likes are reflected in the
word's likes_count; dislikes are stored but never touch the counter.
"""

from datetime import timedelta

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import VoteValue, settings
from app.core.database import utc_now
from app.core.errors import VoteNotFoundError
from app.core.logging import get_logger
from app.models.vote import Votes
from app.services import words as words_service

logger = get_logger(__name__)


async def get_user_vote_for_word(db: AsyncSession, user_id: str, word_id: str) -> Votes | None:
    result = await db.execute(
        select(Votes).where(
            Votes.user_id == user_id,  # type: ignore[arg-type]
            Votes.word_id == word_id,  # type: ignore[arg-type]
        )
    )
    return result.scalars().first()


async def add_vote(db: AsyncSession, user_id: str, word_id: str, value: int) -> str:
    """
    Record a user's vote on a word.

    - Same value already recorded: nothing changes.
    - Different value recorded: the vote is replaced in place (same id). If the
      old vote was a like, the word loses one like.
    - A new like adds one like to the word.

    Returns:
        The vote id
    """
    existing = await get_user_vote_for_word(db, user_id, word_id)

    if existing is not None and existing.value == value:
        return existing.id

    if existing is not None:
        if existing.value == VoteValue.LIKE:
            await words_service.decrement_like_count(db, word_id)
        existing.value = value
        existing.created_at = utc_now()
        vote = existing
    else:
        vote = Votes(user_id=user_id, word_id=word_id, value=value)
        db.add(vote)

    await db.flush()

    if value == VoteValue.LIKE:
        await words_service.increment_like_count(db, word_id)

    logger.info(
        "vote_recorded",
        vote_id=vote.id,
        word_id=word_id,
        value=value,
        replaced=existing is not None,
    )
    return vote.id


async def delete_vote(db: AsyncSession, vote_id: str) -> None:
    """
    Remove a vote. Removing a like takes one like off the word.

    Raises:
        VoteNotFoundError: If the vote does not exist
    """
    vote = await db.get(Votes, vote_id)
    if vote is None:
        raise VoteNotFoundError()

    word_id = vote.word_id
    was_like = vote.value == VoteValue.LIKE

    await db.delete(vote)
    await db.flush()

    if was_like:
        await words_service.decrement_like_count(db, word_id)

    logger.info("vote_deleted", vote_id=vote_id, word_id=word_id)


async def get_user_votes(db: AsyncSession, user_id: str) -> list[Votes]:
    result = await db.execute(
        select(Votes)
        .where(Votes.user_id == user_id)  # type: ignore[arg-type]
        .order_by(Votes.created_at.desc())  # type: ignore[attr-defined]
    )
    return list(result.scalars().all())


async def get_word_votes(db: AsyncSession, word_id: str) -> list[Votes]:
    result = await db.execute(
        select(Votes)
        .where(Votes.word_id == word_id)  # type: ignore[arg-type]
        .order_by(Votes.created_at.desc())  # type: ignore[attr-defined]
    )
    return list(result.scalars().all())


async def count_votes(db: AsyncSession) -> int:
    result = await db.execute(select(func.count()).select_from(Votes))
    return result.scalar_one()


async def get_votes_stats_by_date(
    db: AsyncSession, days: int | None = None
) -> list[dict[str, str | int]]:
    """
    Count votes per calendar day over the last ``days`` days.

    Days without votes are omitted. Grouping happens in Python so the query
    stays portable between MariaDB and SQLite.

    Returns:
        [{"date": "YYYY-MM-DD", "count": n}, ...] in ascending date order
    """
    if days is None:
        days = settings.STATS_DAYS
    since = utc_now() - timedelta(days=days)
    result = await db.execute(
        select(Votes.created_at)  # type: ignore[call-overload]
        .where(Votes.created_at >= since)
        .order_by(Votes.created_at)
    )

    counts: dict[str, int] = {}
    for created_at in result.scalars().all():
        day = created_at.date().isoformat()
        counts[day] = counts.get(day, 0) + 1

    return [{"date": day, "count": count} for day, count in counts.items()]
