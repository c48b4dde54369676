"""
Suggestions API endpoints

Users submit word suggestions; admins review them. Approving a suggestion
creates a pending word that still has to be published from the words
endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import UserRole
from app.core.auth import AdminUser, CurrentUser
from app.core.database import get_db
from app.core.errors import SuggestionNotFoundError
from app.models.suggestion import Suggestions
from app.schemas.common import UserSummary
from app.schemas.suggestion import (
    ReviewRequest,
    SuggestionApproveResponse,
    SuggestionCreate,
    SuggestionListResponse,
    SuggestionResponse,
    SuggestionStatsResponse,
)
from app.schemas.word import WordResponse
from app.services import suggestion_review
from app.services import suggestions as suggestions_service
from app.services import users as users_service

router = APIRouter(prefix="/suggestions", tags=["suggestions"])

UNKNOWN_USER = "Unknown user"


async def _with_authors(
    db: AsyncSession, suggestions: list[Suggestions]
) -> list[SuggestionResponse]:
    names = await users_service.get_usernames(db, [s.user_id for s in suggestions])
    responses = []
    for suggestion in suggestions:
        response = SuggestionResponse.model_validate(suggestion)
        response.user = UserSummary(
            id=suggestion.user_id, username=names.get(suggestion.user_id, UNKNOWN_USER)
        )
        responses.append(response)
    return responses


@router.get("/", response_model=SuggestionListResponse)
async def list_suggestions(
    _: AdminUser,
    pending_only: Annotated[bool, Query(description="Only pending suggestions")] = False,
    db: AsyncSession = Depends(get_db),
) -> SuggestionListResponse:
    """List suggestions with their author's name, newest first."""
    if pending_only:
        suggestions = await suggestions_service.get_pending_suggestions(db)
    else:
        suggestions = await suggestions_service.get_all_suggestions(db)

    return SuggestionListResponse(
        total=len(suggestions), suggestions=await _with_authors(db, suggestions)
    )


@router.get("/stats", response_model=SuggestionStatsResponse)
async def suggestion_stats(
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> SuggestionStatsResponse:
    return SuggestionStatsResponse(**await suggestions_service.get_suggestions_stats(db))


@router.get("/mine", response_model=SuggestionListResponse)
async def my_suggestions(
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> SuggestionListResponse:
    suggestions = await suggestions_service.get_user_suggestions(db, current_user.id)
    return SuggestionListResponse(
        total=len(suggestions), suggestions=await _with_authors(db, suggestions)
    )


@router.post("/", response_model=SuggestionResponse, status_code=status.HTTP_201_CREATED)
async def create_suggestion(
    suggestion_data: SuggestionCreate,
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> SuggestionResponse:
    """Submit a word suggestion for review."""
    suggestion = await suggestions_service.create_suggestion(
        db,
        current_user.id,
        suggestion_data.text,
        suggestion_data.definition,
        example=suggestion_data.example,
        origin=suggestion_data.origin,
        word_id=suggestion_data.word_id,
    )
    await db.commit()
    return (await _with_authors(db, [suggestion]))[0]


@router.get("/{suggestion_id}", response_model=SuggestionResponse)
async def get_suggestion(
    suggestion_id: Annotated[str, Path(description="Suggestion ID")],
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> SuggestionResponse:
    suggestion = await suggestions_service.get_suggestion_by_id(db, suggestion_id)
    if suggestion is None:
        raise SuggestionNotFoundError()
    if suggestion.user_id != current_user.id and current_user.role != UserRole.ADMIN:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized")
    return (await _with_authors(db, [suggestion]))[0]


@router.post("/{suggestion_id}/approve", response_model=SuggestionApproveResponse)
async def approve_suggestion(
    suggestion_id: Annotated[str, Path(description="Suggestion ID")],
    review: ReviewRequest,
    admin: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> SuggestionApproveResponse:
    """
    Approve a pending suggestion.

    Creates exactly one word (status pending, authored by the suggester) and
    marks the suggestion approved, in one transaction.
    """
    suggestion, word = await suggestion_review.approve(db, suggestion_id, admin.id, review.note)
    await db.commit()
    return SuggestionApproveResponse(
        suggestion=(await _with_authors(db, [suggestion]))[0],
        word=WordResponse.model_validate(word),
    )


@router.post("/{suggestion_id}/reject", response_model=SuggestionResponse)
async def reject_suggestion(
    suggestion_id: Annotated[str, Path(description="Suggestion ID")],
    review: ReviewRequest,
    admin: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> SuggestionResponse:
    """Reject a pending suggestion. No word is created."""
    suggestion = await suggestion_review.reject(db, suggestion_id, admin.id, review.note)
    await db.commit()
    return (await _with_authors(db, [suggestion]))[0]


@router.delete("/{suggestion_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_suggestion(
    suggestion_id: Annotated[str, Path(description="Suggestion ID")],
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> None:
    await suggestions_service.delete_suggestion(db, suggestion_id)
    await db.commit()
