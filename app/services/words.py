"""
Word accessors.

Counter columns (likes_count, views_count) are only changed through
``col = col + n`` statements so concurrent votes and views never overwrite
each other.
"""

from typing import Any

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import WordStatus, settings
from app.core.database import utc_now
from app.core.errors import WordNotFoundError
from app.core.logging import get_logger
from app.models.word import Words

logger = get_logger(__name__)


async def _require_word(db: AsyncSession, word_id: str) -> Words:
    word = await db.get(Words, word_id)
    if word is None:
        raise WordNotFoundError()
    return word


async def create_or_update_word(
    db: AsyncSession, data: dict[str, Any], word_id: str | None = None
) -> Words:
    """
    Create a word, or update the existing one when word_id matches a record.

    Counters and created_at are preserved on update; tags default to an
    empty list.
    """
    values = dict(data)
    if values.get("tags") is None:
        values.pop("tags", None)

    word = await db.get(Words, word_id) if word_id else None
    if word is None:
        if word_id:
            values["id"] = word_id
        word = Words(**values)
        db.add(word)
        created = True
    else:
        for field, value in values.items():
            setattr(word, field, value)
        word.updated_at = utc_now()
        created = False

    await db.flush()
    logger.info("word_saved", word_id=word.id, created=created, status=word.status)
    return word


async def get_all_words(db: AsyncSession) -> list[Words]:
    result = await db.execute(select(Words).order_by(Words.created_at.desc()))  # type: ignore[attr-defined]
    return list(result.scalars().all())


async def get_active_words(db: AsyncSession) -> list[Words]:
    """Return published words, newest first."""
    result = await db.execute(
        select(Words)
        .where(Words.status == WordStatus.ACTIVE)  # type: ignore[arg-type]
        .order_by(Words.created_at.desc())  # type: ignore[attr-defined]
    )
    return list(result.scalars().all())


async def get_word_by_id(db: AsyncSession, word_id: str) -> Words | None:
    return await db.get(Words, word_id)


async def delete_word(db: AsyncSession, word_id: str) -> None:
    word = await _require_word(db, word_id)
    await db.delete(word)
    await db.flush()
    logger.info("word_deleted", word_id=word_id)


async def update_word_status(db: AsyncSession, word_id: str, status: str) -> Words:
    """
    Change a word's status, leaving every other field untouched.

    Raises:
        WordNotFoundError: If the word does not exist
    """
    word = await _require_word(db, word_id)
    previous_status = word.status

    word.status = status
    if word.tags is None:
        word.tags = []
    word.updated_at = utc_now()
    await db.flush()

    logger.info(
        "word_status_changed",
        word_id=word_id,
        previous_status=previous_status,
        new_status=status,
    )
    return word


async def _increment(db: AsyncSession, word_id: str, column: str, amount: int) -> None:
    counter = getattr(Words, column)
    result = await db.execute(
        update(Words)
        .where(Words.id == word_id)  # type: ignore[arg-type]
        .values({column: counter + amount, "updated_at": utc_now()})
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:  # type: ignore[attr-defined]
        raise WordNotFoundError()

    # Keep an already-loaded instance in sync with the row
    cached = await db.get(Words, word_id)
    if cached is not None:
        await db.refresh(cached)


async def increment_view_count(db: AsyncSession, word_id: str) -> None:
    await _increment(db, word_id, "views_count", 1)


async def increment_like_count(db: AsyncSession, word_id: str) -> None:
    await _increment(db, word_id, "likes_count", 1)


async def decrement_like_count(db: AsyncSession, word_id: str) -> None:
    await _increment(db, word_id, "likes_count", -1)


async def search_words(db: AsyncSession, term: str, limit: int | None = None) -> list[Words]:
    """
    Prefix search over active words.

    Matches words whose text starts with ``term`` (case as stored), capped at
    SEARCH_RESULTS_LIMIT results.
    """
    result = await db.execute(
        select(Words)
        .where(
            Words.text.startswith(term, autoescape=True),  # type: ignore[attr-defined]
            Words.status == WordStatus.ACTIVE,  # type: ignore[arg-type]
        )
        .order_by(Words.text)
        .limit(limit or settings.SEARCH_RESULTS_LIMIT)
    )
    return list(result.scalars().all())


async def get_trending_words(db: AsyncSession, limit: int | None = None) -> list[Words]:
    """Return the most liked active words."""
    result = await db.execute(
        select(Words)
        .where(Words.status == WordStatus.ACTIVE)  # type: ignore[arg-type]
        .order_by(Words.likes_count.desc(), Words.created_at.desc())  # type: ignore[attr-defined]
        .limit(limit or settings.TRENDING_WORDS_LIMIT)
    )
    return list(result.scalars().all())
