"""
Word of the day API endpoints
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import VoteValue
from app.core.auth import AdminUser, CurrentUser
from app.core.database import get_db
from app.models.word import Words
from app.models.word_of_the_day import WordsOfTheDay
from app.schemas.common import MessageResponse
from app.schemas.word import WordResponse
from app.schemas.word_of_the_day import (
    WordOfTheDayHistoryItem,
    WordOfTheDayResponse,
    WordOfTheDaySet,
    WordOfTheDayVote,
)
from app.services import word_of_the_day as wotd_service

router = APIRouter(prefix="/word-of-the-day", tags=["word of the day"])


def _response(entry: WordsOfTheDay, word: Words) -> WordOfTheDayResponse:
    return WordOfTheDayResponse(
        day=entry.day,
        status=entry.status,
        selected_by=entry.selected_by,
        word=WordResponse.model_validate(word),
    )


@router.get("/", response_model=WordOfTheDayResponse)
async def get_word_of_the_day(
    _: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> WordOfTheDayResponse:
    """Today's word. The first request of the day picks one at random."""
    entry, word = await wotd_service.get_word_of_the_day(db)
    await db.commit()
    return _response(entry, word)


@router.post("/refresh", response_model=WordOfTheDayResponse)
async def refresh_word_of_the_day(
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> WordOfTheDayResponse:
    """Replace today's word with another random active word."""
    entry, word = await wotd_service.refresh_word_of_the_day(db)
    await db.commit()
    return _response(entry, word)


@router.put("/", response_model=WordOfTheDayResponse)
async def set_word_of_the_day(
    selection: WordOfTheDaySet,
    admin: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> WordOfTheDayResponse:
    """Pin a specific word for a day."""
    entry, word = await wotd_service.set_word_of_the_day(
        db, selection.word_id, admin.id, selection.day
    )
    await db.commit()
    return _response(entry, word)


@router.delete("/", response_model=MessageResponse)
async def clear_word_of_the_day(
    _: AdminUser,
    day: Annotated[date | None, Query(description="Day to clear (defaults to today)")] = None,
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    await wotd_service.clear_word_of_the_day(db, day)
    await db.commit()
    return MessageResponse(message="Word of the day cleared")


@router.post("/vote", response_model=WordResponse)
async def vote_word_of_the_day(
    vote: WordOfTheDayVote,
    _: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> WordResponse:
    """Like (+1) or dislike (-1) today's word."""
    value = VoteValue.LIKE if vote.kind == "like" else VoteValue.DISLIKE
    word = await wotd_service.vote_word_of_the_day(db, value)
    await db.commit()
    return WordResponse.model_validate(word)


@router.get("/history", response_model=list[WordOfTheDayHistoryItem])
async def word_of_the_day_history(
    _: AdminUser,
    limit: Annotated[int, Query(ge=1, le=365)] = 30,
    db: AsyncSession = Depends(get_db),
) -> list[WordOfTheDayHistoryItem]:
    entries = await wotd_service.get_word_of_the_day_history(db, limit)
    return [WordOfTheDayHistoryItem.model_validate(entry) for entry in entries]
