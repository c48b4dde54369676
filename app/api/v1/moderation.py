"""
Moderation API endpoints.

Admin-only. Provides:
- The comment report queue
- Block / block-and-warn / dismiss actions on a pending report
- The admin action audit log
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import AdminUser
from app.core.database import get_db
from app.core.errors import ReportNotFoundError
from app.core.logging import bind_context
from app.models.comment_report import CommentReports
from app.schemas.admin_action import AdminActionResponse
from app.schemas.comment_report import CommentReportListResponse, CommentReportResponse
from app.schemas.common import UserSummary
from app.schemas.moderation import ModerationResult, WarnRequest
from app.services import comments as comments_service
from app.services import moderation as moderation_service
from app.services import users as users_service
from app.services.admin_actions import get_admin_actions

router = APIRouter(prefix="/moderation", tags=["moderation"])

UNKNOWN_USER = "Unknown user"


async def _enrich_reports(
    db: AsyncSession, reports: list[CommentReports]
) -> list[CommentReportResponse]:
    """Join in the comment text and both user names."""
    user_ids = [report.reporter_id for report in reports] + [report.user_id for report in reports]
    names = await users_service.get_usernames(db, user_ids)

    responses = []
    for report in reports:
        comment = await comments_service.get_comment_by_id(db, report.comment_id)
        response = CommentReportResponse.model_validate(report)
        response.comment_text = comment.text if comment else None
        response.reporter = UserSummary(
            id=report.reporter_id, username=names.get(report.reporter_id, UNKNOWN_USER)
        )
        response.reported_user = UserSummary(
            id=report.user_id, username=names.get(report.user_id, UNKNOWN_USER)
        )
        responses.append(response)
    return responses


@router.get("/reports", response_model=CommentReportListResponse)
async def list_reports(
    _: AdminUser,
    status_filter: Annotated[
        str | None,
        Query(
            alias="status",
            pattern="^(pending|reviewed|dismissed)$",
            description="Filter by status (defaults to pending)",
        ),
    ] = "pending",
    db: AsyncSession = Depends(get_db),
) -> CommentReportListResponse:
    """List comment reports, newest first. Only pending reports unless a status is given."""
    if status_filter == "pending":
        reports = await comments_service.get_pending_comment_reports(db)
    else:
        reports = await comments_service.get_comment_reports(db, status_filter)

    return CommentReportListResponse(total=len(reports), items=await _enrich_reports(db, reports))


@router.get("/reports/{report_id}", response_model=CommentReportResponse)
async def get_report(
    report_id: Annotated[str, Path(description="Report ID")],
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> CommentReportResponse:
    report = await comments_service.get_comment_report_by_id(db, report_id)
    if report is None:
        raise ReportNotFoundError()
    return (await _enrich_reports(db, [report]))[0]


@router.post("/reports/{report_id}/block", response_model=ModerationResult)
async def block_comment(
    report_id: Annotated[str, Path(description="Report ID")],
    admin: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> ModerationResult:
    """Hide the reported comment. The author is not warned."""
    bind_context(report_id=report_id)
    result = await moderation_service.block_comment_for_report(db, report_id, admin.id)
    await db.commit()
    return result


@router.post("/reports/{report_id}/block-and-warn", response_model=ModerationResult)
async def block_and_warn(
    report_id: Annotated[str, Path(description="Report ID")],
    warn_data: WarnRequest,
    admin: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> ModerationResult:
    """
    Hide the reported comment and warn its author.

    The author is banned on their second warning, with the given reason as
    ban reason. The response carries the new warning count and whether the
    author is now banned.
    """
    bind_context(report_id=report_id)
    result = await moderation_service.block_and_warn(db, report_id, admin.id, warn_data.reason)
    await db.commit()
    return result


@router.post("/reports/{report_id}/dismiss", response_model=ModerationResult)
async def dismiss_report(
    report_id: Annotated[str, Path(description="Report ID")],
    admin: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> ModerationResult:
    """Dismiss a report without touching the comment or its author."""
    bind_context(report_id=report_id)
    result = await moderation_service.dismiss_report(db, report_id, admin.id)
    await db.commit()
    return result


@router.get("/actions", response_model=list[AdminActionResponse])
async def list_admin_actions(
    _: AdminUser,
    admin_id: Annotated[str | None, Query(description="Filter by acting admin")] = None,
    target_user_id: Annotated[str | None, Query(description="Filter by target user")] = None,
    limit: Annotated[int, Query(ge=1, le=500)] = 100,
    db: AsyncSession = Depends(get_db),
) -> list[AdminActionResponse]:
    """Audit log of admin actions, most recent first."""
    actions = await get_admin_actions(db, admin_id, target_user_id, limit)
    return [AdminActionResponse.model_validate(action) for action in actions]
