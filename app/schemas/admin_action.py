"""
Pydantic schemas for the admin action audit log.
"""

from typing import Any

from pydantic import BaseModel

from app.schemas.base import UTCDatetime


class AdminActionResponse(BaseModel):
    action_id: int
    admin_id: str | None = None
    action_type: int
    report_id: str | None = None
    suggestion_id: str | None = None
    target_user_id: str | None = None
    comment_id: str | None = None
    word_id: str | None = None
    details: dict[str, Any] | None = None
    created_at: UTCDatetime

    model_config = {"from_attributes": True}
