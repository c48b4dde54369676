"""
Votes API endpoints
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import UserRole
from app.core.auth import AdminUser, CurrentUser
from app.core.database import get_db
from app.core.errors import VoteNotFoundError, WordNotFoundError
from app.models.vote import Votes
from app.schemas.vote import VoteCreate, VoteListResponse, VoteResponse, VotesByDate
from app.services import votes as votes_service
from app.services import words as words_service

router = APIRouter(prefix="/votes", tags=["votes"])


@router.post("/", response_model=VoteResponse)
async def cast_vote(
    vote_data: VoteCreate,
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> VoteResponse:
    """
    Like (1) or dislike (-1) a word.

    Voting the same way twice changes nothing; voting the other way replaces
    the previous vote.
    """
    if await words_service.get_word_by_id(db, vote_data.word_id) is None:
        raise WordNotFoundError()

    vote_id = await votes_service.add_vote(db, current_user.id, vote_data.word_id, vote_data.value)
    await db.commit()

    vote = await db.get(Votes, vote_id)
    return VoteResponse.model_validate(vote)


@router.get("/mine", response_model=VoteListResponse)
async def my_votes(
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> VoteListResponse:
    votes = await votes_service.get_user_votes(db, current_user.id)
    return VoteListResponse(
        total=len(votes), votes=[VoteResponse.model_validate(v) for v in votes]
    )


@router.get("/mine/{word_id}", response_model=VoteResponse)
async def my_vote_for_word(
    word_id: Annotated[str, Path(description="Word ID")],
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> VoteResponse:
    vote = await votes_service.get_user_vote_for_word(db, current_user.id, word_id)
    if vote is None:
        raise VoteNotFoundError()
    return VoteResponse.model_validate(vote)


@router.get("/word/{word_id}", response_model=VoteListResponse)
async def word_votes(
    word_id: Annotated[str, Path(description="Word ID")],
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> VoteListResponse:
    votes = await votes_service.get_word_votes(db, word_id)
    return VoteListResponse(
        total=len(votes), votes=[VoteResponse.model_validate(v) for v in votes]
    )


@router.get("/user/{user_id}", response_model=VoteListResponse)
async def user_votes(
    user_id: Annotated[str, Path(description="User ID")],
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> VoteListResponse:
    votes = await votes_service.get_user_votes(db, user_id)
    return VoteListResponse(
        total=len(votes), votes=[VoteResponse.model_validate(v) for v in votes]
    )


@router.get("/stats/by-date", response_model=list[VotesByDate])
async def votes_by_date(
    _: AdminUser,
    days: Annotated[int, Query(ge=1, le=365)] = 30,
    db: AsyncSession = Depends(get_db),
) -> list[VotesByDate]:
    stats = await votes_service.get_votes_stats_by_date(db, days)
    return [VotesByDate.model_validate(item) for item in stats]


@router.delete("/{vote_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vote(
    vote_id: Annotated[str, Path(description="Vote ID")],
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> None:
    """Withdraw a vote. Only the voter or an admin may delete it."""
    vote = await db.get(Votes, vote_id)
    if vote is None:
        raise VoteNotFoundError()
    if vote.user_id != current_user.id and current_user.role != UserRole.ADMIN:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized")

    await votes_service.delete_vote(db, vote_id)
    await db.commit()
