"""
Audit log for admin actions.
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.admin_action import AdminActions


def log_admin_action(
    db: AsyncSession,
    admin_id: str | None,
    action_type: int,
    *,
    report_id: str | None = None,
    suggestion_id: str | None = None,
    target_user_id: str | None = None,
    comment_id: str | None = None,
    word_id: str | None = None,
    details: dict[str, Any] | None = None,
) -> AdminActions:
    """
    Add an audit row to the session.

    The row is written with the rest of the caller's transaction, so an
    action that rolls back leaves no audit entry behind.
    """
    action = AdminActions(
        admin_id=admin_id,
        action_type=action_type,
        report_id=report_id,
        suggestion_id=suggestion_id,
        target_user_id=target_user_id,
        comment_id=comment_id,
        word_id=word_id,
        details=details or {},
    )
    db.add(action)
    return action


async def get_admin_actions(
    db: AsyncSession,
    admin_id: str | None = None,
    target_user_id: str | None = None,
    limit: int = 100,
) -> list[AdminActions]:
    query = select(AdminActions)
    if admin_id is not None:
        query = query.where(AdminActions.admin_id == admin_id)  # type: ignore[arg-type]
    if target_user_id is not None:
        query = query.where(AdminActions.target_user_id == target_user_id)  # type: ignore[arg-type]

    result = await db.execute(
        query.order_by(AdminActions.created_at.desc(), AdminActions.action_id.desc()).limit(limit)  # type: ignore[attr-defined,union-attr]
    )
    return list(result.scalars().all())
