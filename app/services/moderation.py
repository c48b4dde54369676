"""
Comment report moderation.

An admin acts on a pending report in one of three ways:

- block: the comment text is replaced with the moderation placeholder and
  the comment is hidden; the report becomes reviewed
- block and warn: block, then add one warning to the comment's author.
  Reaching two warnings bans the author (see users.add_warning_to_user)
- dismiss: the report becomes dismissed; comment and author are untouched

Each function only flushes. The caller commits once, so every step of an
action lands together or not at all. The report is claimed first with a
conditional update: when two admins act on the same report, the second one
gets ReportAlreadyProcessedError before anything else is changed.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import AdminActionType, Moderation, ReportStatus, UserStatus
from app.core.errors import ReportAlreadyProcessedError, ReportNotFoundError
from app.core.logging import get_logger
from app.models.comment_report import CommentReports
from app.schemas.moderation import ModerationResult
from app.services import comments as comments_service
from app.services import users as users_service
from app.services.admin_actions import log_admin_action

logger = get_logger(__name__)


async def _claim(
    db: AsyncSession, report_id: str, status: str, admin_id: str
) -> CommentReports:
    report = await comments_service.get_comment_report_by_id(db, report_id)
    if report is None:
        raise ReportNotFoundError()

    claimed = await comments_service.claim_pending_report(db, report_id, status, admin_id)
    if not claimed:
        raise ReportAlreadyProcessedError()

    return report


async def block_comment_for_report(
    db: AsyncSession, report_id: str, admin_id: str
) -> ModerationResult:
    """Hide the reported comment without warning its author."""
    report = await _claim(db, report_id, ReportStatus.REVIEWED, admin_id)
    await comments_service.block_comment(db, report.comment_id)

    log_admin_action(
        db,
        admin_id,
        AdminActionType.REPORT_BLOCK,
        report_id=report_id,
        comment_id=report.comment_id,
        target_user_id=report.user_id,
    )

    logger.info(
        "report_comment_blocked",
        report_id=report_id,
        comment_id=report.comment_id,
    )
    return ModerationResult(
        report_id=report_id,
        report_status=ReportStatus.REVIEWED,
        comment_id=report.comment_id,
        user_id=report.user_id,
    )


async def block_and_warn(
    db: AsyncSession, report_id: str, admin_id: str, reason: str | None = None
) -> ModerationResult:
    """
    Hide the reported comment and warn its author.

    The reason is recorded in the audit log and becomes the author's ban
    reason if this warning bans them.

    Raises:
        ReportNotFoundError: If the report does not exist
        ReportAlreadyProcessedError: If the report is no longer pending
        CommentNotFoundError: If the reported comment was deleted
        UserNotFoundError: If the author was deleted
    """
    reason = reason or Moderation.DEFAULT_WARNING_REASON

    report = await _claim(db, report_id, ReportStatus.REVIEWED, admin_id)
    await comments_service.block_comment(db, report.comment_id)
    warnings = await users_service.add_warning_to_user(db, report.user_id, reason)

    author = await users_service.get_user_by_id(db, report.user_id)
    banned = author is not None and author.status == UserStatus.BANNED

    log_admin_action(
        db,
        admin_id,
        AdminActionType.REPORT_BLOCK_WARN,
        report_id=report_id,
        comment_id=report.comment_id,
        target_user_id=report.user_id,
        details={"reason": reason, "warnings": warnings, "banned": banned},
    )

    logger.info(
        "report_comment_blocked_and_warned",
        report_id=report_id,
        comment_id=report.comment_id,
        target_user_id=report.user_id,
        warnings=warnings,
        banned=banned,
    )
    return ModerationResult(
        report_id=report_id,
        report_status=ReportStatus.REVIEWED,
        comment_id=report.comment_id,
        user_id=report.user_id,
        warnings=warnings,
        banned=banned,
    )


async def dismiss_report(db: AsyncSession, report_id: str, admin_id: str) -> ModerationResult:
    """Close a report without touching the comment or its author."""
    report = await _claim(db, report_id, ReportStatus.DISMISSED, admin_id)

    log_admin_action(
        db,
        admin_id,
        AdminActionType.REPORT_DISMISS,
        report_id=report_id,
        comment_id=report.comment_id,
    )

    logger.info("report_dismissed", report_id=report_id)
    return ModerationResult(
        report_id=report_id,
        report_status=ReportStatus.DISMISSED,
        comment_id=report.comment_id,
        user_id=report.user_id,
    )
