"""
Word of the day.

There is one row per calendar day in words-of-the-day. The first request of
a day picks a random active word and stores it, so every later request that
day sees the same word. Admins can replace the pick (refresh), pin a chosen
word, or unpublish the day's pick.
"""

import random
from datetime import date

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import AdminActionType, VoteValue, WordOfTheDayStatus, WordStatus
from app.core.database import utc_now
from app.core.errors import NoActiveWordsError, WordNotFoundError
from app.core.logging import get_logger
from app.models.word import Words
from app.models.word_of_the_day import WordsOfTheDay
from app.services import words as words_service
from app.services.admin_actions import log_admin_action

logger = get_logger(__name__)


def _today() -> date:
    return utc_now().date()


async def _get_entry(
    db: AsyncSession, day: date, for_update: bool = False
) -> WordsOfTheDay | None:
    query = select(WordsOfTheDay).where(WordsOfTheDay.day == day)  # type: ignore[arg-type]
    if for_update:
        # Locking read, so a row committed by another transaction is seen
        query = query.with_for_update()
    result = await db.execute(query)
    return result.scalars().first()


async def _pick_random_word_id(db: AsyncSession, exclude: str | None = None) -> str:
    result = await db.execute(
        select(Words.id).where(Words.status == WordStatus.ACTIVE)  # type: ignore[call-overload,arg-type]
    )
    word_ids = list(result.scalars().all())
    if not word_ids:
        raise NoActiveWordsError()

    # Only avoid repeating the current pick when there is something else to show
    candidates = [word_id for word_id in word_ids if word_id != exclude] or word_ids
    return random.choice(candidates)


async def _insert_entry(
    db: AsyncSession, day: date, word_id: str, selected_by: str | None = None
) -> WordsOfTheDay | None:
    """
    Create the row for a day that has none.

    Returns None when a concurrent request created the day's row first.
    """
    entry = WordsOfTheDay(word_id=word_id, day=day, selected_by=selected_by)
    try:
        async with db.begin_nested():
            db.add(entry)
    except IntegrityError:
        logger.info("word_of_the_day_already_created", day=day.isoformat())
        return None
    return entry


async def _record_selection(
    db: AsyncSession, day: date, word_id: str, selected_by: str | None = None
) -> None:
    await words_service.increment_view_count(db, word_id)
    logger.info(
        "word_of_the_day_selected",
        day=day.isoformat(),
        word_id=word_id,
        selected_by=selected_by,
    )


async def _select(
    db: AsyncSession,
    day: date,
    word_id: str,
    entry: WordsOfTheDay | None,
    selected_by: str | None = None,
) -> WordsOfTheDay:
    """Make word_id the day's active pick, creating the day's row if needed."""
    if entry is None:
        entry = await _insert_entry(db, day, word_id, selected_by) or await _get_entry(
            db, day, for_update=True
        )
    assert entry is not None

    entry.word_id = word_id
    entry.status = WordOfTheDayStatus.ACTIVE
    entry.selected_by = selected_by
    entry.updated_at = utc_now()
    await db.flush()

    await _record_selection(db, day, word_id, selected_by)
    return entry


async def get_word_of_the_day(
    db: AsyncSession, day: date | None = None
) -> tuple[WordsOfTheDay, Words]:
    """
    Return the day's word, picking one at random if the day has none yet.

    A new pick counts as one view of the word.

    Raises:
        NoActiveWordsError: If a pick is needed and no word is active
    """
    day = day or _today()
    entry = await _get_entry(db, day)

    if entry is not None and entry.status == WordOfTheDayStatus.ACTIVE:
        word = await words_service.get_word_by_id(db, entry.word_id)
        if word is not None:
            return entry, word

    word_id = await _pick_random_word_id(db)
    if entry is None:
        entry = await _insert_entry(db, day, word_id)
        if entry is None:
            # Another request picked the day's word first
            entry = await _get_entry(db, day, for_update=True)
            assert entry is not None
            word = await words_service.get_word_by_id(db, entry.word_id)
            assert word is not None
            return entry, word
        await _record_selection(db, day, word_id)
    else:
        entry = await _select(db, day, word_id, entry)
    word = await words_service.get_word_by_id(db, word_id)
    assert word is not None
    return entry, word


async def refresh_word_of_the_day(
    db: AsyncSession, day: date | None = None
) -> tuple[WordsOfTheDay, Words]:
    """Replace the day's pick with another random active word."""
    day = day or _today()
    entry = await _get_entry(db, day)

    word_id = await _pick_random_word_id(db, exclude=entry.word_id if entry else None)
    entry = await _select(db, day, word_id, entry)
    word = await words_service.get_word_by_id(db, word_id)
    assert word is not None
    return entry, word


async def set_word_of_the_day(
    db: AsyncSession, word_id: str, admin_id: str, day: date | None = None
) -> tuple[WordsOfTheDay, Words]:
    """
    Pin a specific word for a day (today by default).

    Raises:
        WordNotFoundError: If the word does not exist
    """
    day = day or _today()
    word = await words_service.get_word_by_id(db, word_id)
    if word is None:
        raise WordNotFoundError()

    entry = await _get_entry(db, day)
    entry = await _select(db, day, word_id, entry, selected_by=admin_id)

    log_admin_action(
        db,
        admin_id,
        AdminActionType.WORD_OF_THE_DAY_SET,
        word_id=word_id,
        details={"day": day.isoformat()},
    )
    return entry, word


async def clear_word_of_the_day(db: AsyncSession, day: date | None = None) -> None:
    """Unpublish the day's pick. The next read picks a new word."""
    day = day or _today()
    entry = await _get_entry(db, day)
    if entry is None:
        return

    entry.status = WordOfTheDayStatus.INACTIVE
    entry.updated_at = utc_now()
    await db.flush()
    logger.info("word_of_the_day_cleared", day=day.isoformat(), word_id=entry.word_id)


async def vote_word_of_the_day(
    db: AsyncSession, value: int, day: date | None = None
) -> Words:
    """
    Apply a like (+1) or dislike (-1) to the day's word.

    Unlike per-user votes, a dislike here takes one like off the counter.
    """
    _, word = await get_word_of_the_day(db, day)

    if value == VoteValue.LIKE:
        await words_service.increment_like_count(db, word.id)
    else:
        await words_service.decrement_like_count(db, word.id)

    logger.info("word_of_the_day_voted", word_id=word.id, value=value)
    return word


async def get_word_of_the_day_history(db: AsyncSession, limit: int = 30) -> list[WordsOfTheDay]:
    """Return past and present picks, most recent day first."""
    result = await db.execute(
        select(WordsOfTheDay).order_by(WordsOfTheDay.day.desc()).limit(limit)  # type: ignore[attr-defined]
    )
    return list(result.scalars().all())
