"""
Comments API endpoints
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import CommentStatus, UserRole
from app.core.auth import AdminUser, CurrentUser
from app.core.database import get_db
from app.core.errors import CommentBlockedError, CommentNotFoundError
from app.models.comment import Comments
from app.models.user import Users
from app.schemas.comment import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    CommentStatusUpdate,
    CommentUpdate,
)
from app.schemas.comment_report import CommentReportCreate, CommentReportResponse
from app.schemas.common import UserSummary
from app.services import comments as comments_service
from app.services import users as users_service

router = APIRouter(prefix="/comments", tags=["comments"])

UNKNOWN_USER = "Unknown user"


async def _with_authors(db: AsyncSession, comments: list[Comments]) -> list[CommentResponse]:
    """Attach author names with a single lookup for the whole page."""
    names = await users_service.get_usernames(db, [comment.user_id for comment in comments])
    responses = []
    for comment in comments:
        response = CommentResponse.model_validate(comment)
        response.user = UserSummary(
            id=comment.user_id, username=names.get(comment.user_id, UNKNOWN_USER)
        )
        responses.append(response)
    return responses


async def _get_own_comment(db: AsyncSession, comment_id: str, user: Users) -> Comments:
    comment = await comments_service.get_comment_by_id(db, comment_id)
    if comment is None:
        raise CommentNotFoundError()
    if comment.user_id != user.id and user.role != UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to modify this comment",
        )
    return comment


@router.get("/", response_model=CommentListResponse)
async def list_comments(
    _: AdminUser,
    word_id: Annotated[str | None, Query(description="Filter by word ID")] = None,
    user_id: Annotated[str | None, Query(description="Filter by user ID")] = None,
    db: AsyncSession = Depends(get_db),
) -> CommentListResponse:
    """
    List comments, newest first.

    **Examples:**
    - `/comments?word_id=abc` - All comments on word abc
    - `/comments?user_id=xyz` - All comments by user xyz
    """
    if word_id is not None:
        comments = await comments_service.get_word_comments(db, word_id)
        if user_id is not None:
            comments = [comment for comment in comments if comment.user_id == user_id]
    elif user_id is not None:
        comments = await comments_service.get_user_comments(db, user_id)
    else:
        comments = await comments_service.get_all_comments(db)

    return CommentListResponse(total=len(comments), comments=await _with_authors(db, comments))


@router.post("/", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(
    comment_data: CommentCreate,
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> CommentResponse:
    comment = await comments_service.create_comment(
        db, current_user.id, comment_data.word_id, comment_data.text
    )
    await db.commit()
    return (await _with_authors(db, [comment]))[0]


@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(
    comment_id: Annotated[str, Path(description="Comment ID")],
    _: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> CommentResponse:
    comment = await comments_service.get_comment_by_id(db, comment_id)
    if comment is None:
        raise CommentNotFoundError()
    return (await _with_authors(db, [comment]))[0]


@router.patch("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: Annotated[str, Path(description="Comment ID")],
    comment_data: CommentUpdate,
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> CommentResponse:
    """
    Edit a comment's text. Only the author or an admin may edit.

    Once a moderator has blocked a comment, only an admin can change it.
    """
    comment = await _get_own_comment(db, comment_id, current_user)
    if comment.status == CommentStatus.HIDDEN and current_user.role != UserRole.ADMIN:
        raise CommentBlockedError()
    comment = await comments_service.update_comment(db, comment_id, {"text": comment_data.text})
    await db.commit()
    return (await _with_authors(db, [comment]))[0]


@router.patch("/{comment_id}/status", response_model=CommentResponse)
async def update_comment_status(
    comment_id: Annotated[str, Path(description="Comment ID")],
    status_data: CommentStatusUpdate,
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> CommentResponse:
    comment = await comments_service.update_comment_status(db, comment_id, status_data.status)
    await db.commit()
    return (await _with_authors(db, [comment]))[0]


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: Annotated[str, Path(description="Comment ID")],
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> None:
    await _get_own_comment(db, comment_id, current_user)
    await comments_service.delete_comment(db, comment_id)
    await db.commit()


@router.post(
    "/{comment_id}/report",
    response_model=CommentReportResponse,
    status_code=status.HTTP_201_CREATED,
)
async def report_comment(
    comment_id: Annotated[str, Path(description="Comment ID")],
    report_data: CommentReportCreate,
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> CommentReportResponse:
    """
    Report a comment to the moderators.

    The comment is flagged until an admin acts on the report.
    """
    report = await comments_service.report_comment(
        db, comment_id, current_user.id, report_data.reason
    )
    await db.commit()
    return CommentReportResponse.model_validate(report)
