"""
Comment and comment report accessors.

Comments belong to a user and a word; reports are filed by one user against
another user's comment and stay pending until an admin acts on them (see
app.services.moderation).
"""

from typing import Any

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import CommentStatus, Moderation, ReportStatus
from app.core.database import utc_now
from app.core.errors import CommentNotFoundError, ReportNotFoundError
from app.core.logging import get_logger
from app.models.comment import Comments
from app.models.comment_report import CommentReports

logger = get_logger(__name__)


async def _require_comment(db: AsyncSession, comment_id: str) -> Comments:
    comment = await db.get(Comments, comment_id)
    if comment is None:
        raise CommentNotFoundError()
    return comment


# ===== Comments =====


async def create_comment(
    db: AsyncSession, user_id: str, word_id: str, text: str, status: str | None = None
) -> Comments:
    comment = Comments(
        user_id=user_id,
        word_id=word_id,
        text=text,
        status=status or CommentStatus.ACTIVE,
    )
    db.add(comment)
    await db.flush()

    logger.info("comment_created", comment_id=comment.id, word_id=word_id)
    return comment


async def get_all_comments(db: AsyncSession) -> list[Comments]:
    result = await db.execute(select(Comments).order_by(Comments.created_at.desc()))  # type: ignore[attr-defined]
    return list(result.scalars().all())


async def get_word_comments(db: AsyncSession, word_id: str) -> list[Comments]:
    result = await db.execute(
        select(Comments)
        .where(Comments.word_id == word_id)  # type: ignore[arg-type]
        .order_by(Comments.created_at.desc())  # type: ignore[attr-defined]
    )
    return list(result.scalars().all())


async def get_user_comments(db: AsyncSession, user_id: str) -> list[Comments]:
    result = await db.execute(
        select(Comments)
        .where(Comments.user_id == user_id)  # type: ignore[arg-type]
        .order_by(Comments.created_at.desc())  # type: ignore[attr-defined]
    )
    return list(result.scalars().all())


async def get_comment_by_id(db: AsyncSession, comment_id: str) -> Comments | None:
    return await db.get(Comments, comment_id)


async def update_comment(db: AsyncSession, comment_id: str, data: dict[str, Any]) -> Comments:
    comment = await _require_comment(db, comment_id)
    for field, value in data.items():
        setattr(comment, field, value)
    comment.updated_at = utc_now()
    await db.flush()
    return comment


async def update_comment_status(db: AsyncSession, comment_id: str, status: str) -> Comments:
    comment = await _require_comment(db, comment_id)
    previous_status = comment.status

    comment.status = status
    comment.updated_at = utc_now()
    await db.flush()

    logger.info(
        "comment_status_changed",
        comment_id=comment_id,
        previous_status=previous_status,
        new_status=status,
    )
    return comment


async def delete_comment(db: AsyncSession, comment_id: str) -> None:
    comment = await _require_comment(db, comment_id)
    await db.delete(comment)
    await db.flush()
    logger.info("comment_deleted", comment_id=comment_id)


async def count_user_comments(db: AsyncSession, user_id: str) -> int:
    result = await db.execute(
        select(func.count()).select_from(Comments).where(Comments.user_id == user_id)  # type: ignore[arg-type]
    )
    return result.scalar_one()


async def block_comment(db: AsyncSession, comment_id: str) -> Comments:
    """
    Hide a comment and replace its text with the moderation placeholder.

    The original text is not kept.

    Raises:
        CommentNotFoundError: If the comment does not exist
    """
    comment = await _require_comment(db, comment_id)
    comment.text = Moderation.BLOCKED_COMMENT_TEXT
    comment.status = CommentStatus.HIDDEN
    comment.updated_at = utc_now()
    await db.flush()

    logger.info("comment_blocked", comment_id=comment_id, author_id=comment.user_id)
    return comment


# ===== Comment reports =====


async def report_comment(
    db: AsyncSession, comment_id: str, reporter_id: str, reason: str | None = None
) -> CommentReports:
    """
    File a report against a comment and flag it for moderation.

    The reported user is the comment's author. A hidden comment keeps its
    status; anything else becomes flagged.
    """
    comment = await _require_comment(db, comment_id)

    report = CommentReports(
        comment_id=comment_id,
        reporter_id=reporter_id,
        user_id=comment.user_id,
        reason=reason,
    )
    db.add(report)

    if comment.status != CommentStatus.HIDDEN:
        comment.status = CommentStatus.FLAGGED
        comment.updated_at = utc_now()

    await db.flush()

    logger.info(
        "comment_reported",
        report_id=report.id,
        comment_id=comment_id,
        reporter_id=reporter_id,
        reported_user_id=comment.user_id,
    )
    return report


async def get_pending_comment_reports(db: AsyncSession) -> list[CommentReports]:
    """Return pending reports, newest first."""
    result = await db.execute(
        select(CommentReports)
        .where(CommentReports.status == ReportStatus.PENDING)  # type: ignore[arg-type]
        .order_by(CommentReports.created_at.desc())  # type: ignore[attr-defined]
    )
    return list(result.scalars().all())


async def get_comment_reports(db: AsyncSession, status: str | None = None) -> list[CommentReports]:
    query = select(CommentReports)
    if status is not None:
        query = query.where(CommentReports.status == status)  # type: ignore[arg-type]
    result = await db.execute(query.order_by(CommentReports.created_at.desc()))  # type: ignore[attr-defined]
    return list(result.scalars().all())


async def get_comment_report_by_id(db: AsyncSession, report_id: str) -> CommentReports | None:
    return await db.get(CommentReports, report_id)


async def update_comment_report_status(
    db: AsyncSession, report_id: str, status: str, reviewed_by: str | None = None
) -> CommentReports:
    """Set a report's status unconditionally."""
    report = await db.get(CommentReports, report_id)
    if report is None:
        raise ReportNotFoundError()

    report.status = status
    report.reviewed_by = reviewed_by
    report.reviewed_at = utc_now()
    await db.flush()
    return report


async def claim_pending_report(
    db: AsyncSession, report_id: str, status: str, reviewed_by: str
) -> bool:
    """
    Move a report out of pending, only if it is still pending.

    This is a single conditional UPDATE, so when two admins act on the same
    report at once exactly one of them gets True.

    Returns:
        True if this call changed the report, False if it was no longer pending
    """
    result = await db.execute(
        update(CommentReports)
        .where(
            CommentReports.id == report_id,  # type: ignore[arg-type]
            CommentReports.status == ReportStatus.PENDING,  # type: ignore[arg-type]
        )
        .values(status=status, reviewed_by=reviewed_by, reviewed_at=utc_now())
        .execution_options(synchronize_session=False)
    )
    claimed: bool = result.rowcount == 1  # type: ignore[attr-defined]

    cached = await db.get(CommentReports, report_id)
    if cached is not None:
        await db.refresh(cached)

    return claimed
