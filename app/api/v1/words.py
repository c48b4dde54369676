"""
Words API endpoints
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import AdminUser, CurrentUser
from app.core.database import get_db
from app.core.errors import WordNotFoundError
from app.schemas.word import (
    WordCreate,
    WordListResponse,
    WordResponse,
    WordStatusUpdate,
    WordUpdate,
)
from app.services import words as words_service

router = APIRouter(prefix="/words", tags=["words"])

# created_by value for words entered from the back-office
BACK_OFFICE_AUTHOR = "admin"


def _word_list(words: list) -> WordListResponse:
    return WordListResponse(
        total=len(words),
        words=[WordResponse.model_validate(word) for word in words],
    )


@router.get("/", response_model=WordListResponse)
async def list_words(
    _: AdminUser,
    status_filter: Annotated[
        str | None,
        Query(alias="status", pattern="^(active|pending|rejected)$", description="Filter by status"),
    ] = None,
    db: AsyncSession = Depends(get_db),
) -> WordListResponse:
    """List every word, newest first, optionally filtered by status."""
    words = await words_service.get_all_words(db)
    if status_filter is not None:
        words = [word for word in words if word.status == status_filter]
    return _word_list(words)


@router.get("/active", response_model=WordListResponse)
async def list_active_words(
    _: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> WordListResponse:
    return _word_list(await words_service.get_active_words(db))


@router.get("/search", response_model=WordListResponse)
async def search_words(
    _: CurrentUser,
    q: Annotated[str, Query(min_length=1, max_length=100, description="Prefix to match")],
    db: AsyncSession = Depends(get_db),
) -> WordListResponse:
    """
    Prefix search over active words.

    **Examples:**
    - `/words/search?q=ch` - active words starting with "ch"
    """
    return _word_list(await words_service.search_words(db, q))


@router.get("/trending", response_model=WordListResponse)
async def trending_words(
    _: CurrentUser,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    db: AsyncSession = Depends(get_db),
) -> WordListResponse:
    """Most liked active words."""
    return _word_list(await words_service.get_trending_words(db, limit))


@router.post("/", response_model=WordResponse, status_code=status.HTTP_201_CREATED)
async def create_word(
    word_data: WordCreate,
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> WordResponse:
    word = await words_service.create_or_update_word(
        db, {**word_data.model_dump(), "created_by": BACK_OFFICE_AUTHOR}
    )
    await db.commit()
    return WordResponse.model_validate(word)


@router.get("/{word_id}", response_model=WordResponse)
async def get_word(
    word_id: Annotated[str, Path(description="Word ID")],
    _: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> WordResponse:
    word = await words_service.get_word_by_id(db, word_id)
    if word is None:
        raise WordNotFoundError()
    return WordResponse.model_validate(word)


@router.post("/{word_id}/view", response_model=WordResponse)
async def record_view(
    word_id: Annotated[str, Path(description="Word ID")],
    _: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> WordResponse:
    """Count one view of the word."""
    await words_service.increment_view_count(db, word_id)
    await db.commit()

    word = await words_service.get_word_by_id(db, word_id)
    return WordResponse.model_validate(word)


@router.patch("/{word_id}", response_model=WordResponse)
async def update_word(
    word_id: Annotated[str, Path(description="Word ID")],
    word_data: WordUpdate,
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> WordResponse:
    """
    Update a word.

    All fields are optional. Only provided fields will be updated; counters
    cannot be changed here.
    """
    if await words_service.get_word_by_id(db, word_id) is None:
        raise WordNotFoundError()

    word = await words_service.create_or_update_word(
        db, word_data.model_dump(exclude_unset=True), word_id=word_id
    )
    await db.commit()
    return WordResponse.model_validate(word)


@router.patch("/{word_id}/status", response_model=WordResponse)
async def update_word_status(
    word_id: Annotated[str, Path(description="Word ID")],
    status_data: WordStatusUpdate,
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> WordResponse:
    """Publish (active), hold (pending) or reject a word."""
    word = await words_service.update_word_status(db, word_id, status_data.status)
    await db.commit()
    return WordResponse.model_validate(word)


@router.delete("/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_word(
    word_id: Annotated[str, Path(description="Word ID")],
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> None:
    await words_service.delete_word(db, word_id)
    await db.commit()
