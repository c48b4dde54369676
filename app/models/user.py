"""
SQLModel-based User models with inheritance for security

This module defines the Users database model using SQLModel, which combines
SQLAlchemy and Pydantic functionality. The inheritance structure is:

UserBase (shared public fields)
    ├─> Users (database table, adds internal/sensitive fields)
    └─> UserCreate/UserUpdate/UserResponse (API schemas, defined in app/schemas)

This approach eliminates field duplication while maintaining security boundaries.
"""

from datetime import datetime

from sqlalchemy import Index
from sqlmodel import Field, SQLModel

from app.config import UserRole, UserStatus
from app.core.database import generate_id, utc_now


class UserBase(SQLModel):
    """
    Base model with shared public fields for Users.

    These fields are safe to expose via the API and are shared between:
    - The database table (Users)
    - API response schemas (UserResponse)
    """

    # Public profile ("pseudo" in the mobile app)
    username: str = Field(max_length=50)
    first_name: str = Field(default="", max_length=50)
    birth_year: int | None = Field(default=None)
    city: str = Field(default="", max_length=100)

    email: str = Field(max_length=120)

    role: str = Field(default=UserRole.USER, max_length=10)
    status: str = Field(default=UserStatus.ACTIVE, max_length=10)


class Users(UserBase, table=True):
    """
    Database table for users with internal and sensitive fields.

    Extends UserBase with:
    - String primary key (generated, or supplied by the identity provider)
    - Password hash (never exposed)
    - Moderation fields: warnings, ban_reason
    - Timestamps
    """

    __tablename__ = "users"

    __table_args__ = (
        Index("idx_users_email", "email", unique=True),
        Index("idx_users_username", "username"),
        Index("idx_users_status", "status"),
    )

    # Primary key
    id: str = Field(default_factory=generate_id, primary_key=True, max_length=64)

    # Authentication (highly sensitive - never expose)
    password: str = Field(default="", max_length=255)

    # Moderation
    warnings: int = Field(default=0)
    ban_reason: str = Field(default="", max_length=500)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    last_login: datetime | None = Field(default=None)

    # Note: Relationships are intentionally omitted.
    # Foreign keys are sufficient for queries, and omitting relationships avoids:
    # - Circular import issues
    # - Accidental eager loading
    # - Unwanted auto-serialization in API responses
