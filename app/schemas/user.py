"""
Pydantic schemas for User endpoints
"""

from typing import Literal

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.user import UserBase
from app.schemas.base import UTCDatetime, UTCDatetimeOptional

UserStatusValue = Literal["active", "inactive", "banned", "visitor"]
UserRoleValue = Literal["admin", "editor", "user"]


class UserCreate(BaseModel):
    """Schema for creating a user from the back-office"""

    username: str = Field(min_length=1, max_length=50)
    email: EmailStr
    password: str | None = Field(default=None, min_length=6, max_length=255)
    first_name: str = Field(default="", max_length=50)
    birth_year: int | None = Field(default=None, ge=1900, le=2100)
    city: str = Field(default="", max_length=100)
    role: UserRoleValue = "user"
    status: UserStatusValue = "active"

    @field_validator("username", "first_name", "city")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class UserUpdate(BaseModel):
    """Schema for updating a user - all fields optional"""

    username: str | None = Field(default=None, min_length=1, max_length=50)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=6, max_length=255)
    first_name: str | None = Field(default=None, max_length=50)
    birth_year: int | None = Field(default=None, ge=1900, le=2100)
    city: str | None = Field(default=None, max_length=100)
    role: UserRoleValue | None = None
    status: UserStatusValue | None = None


class UserStatusUpdate(BaseModel):
    status: UserStatusValue


class BanRequest(BaseModel):
    reason: str | None = Field(default=None, max_length=500)


class UserResponse(UserBase):
    """Schema for user response - what API returns. Never includes the password hash."""

    id: str
    warnings: int
    ban_reason: str
    created_at: UTCDatetime
    updated_at: UTCDatetime
    last_login: UTCDatetimeOptional = None


class UserWithActivity(UserResponse):
    """User row on the admin users page, with activity counts"""

    comments_count: int = 0
    suggestions_count: int = 0
    likes_count: int = 0


class UserListResponse(BaseModel):
    total: int
    users: list[UserWithActivity]


class FavoritesResponse(BaseModel):
    user_id: str
    word_ids: list[str]
