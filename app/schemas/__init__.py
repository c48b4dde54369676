"""
Pydantic schemas for API responses and requests
"""

from app.models.comment import CommentBase  # Re-export from models
from app.models.user import UserBase  # Re-export from models
from app.models.word import WordBase  # Re-export from models
from app.schemas.comment import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    CommentUpdate,
)
from app.schemas.suggestion import (
    SuggestionCreate,
    SuggestionListResponse,
    SuggestionResponse,
)
from app.schemas.user import (
    UserCreate,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from app.schemas.word import (
    WordCreate,
    WordListResponse,
    WordResponse,
    WordUpdate,
)

__all__ = [
    # Base models
    "UserBase",
    "WordBase",
    "CommentBase",
    # User schemas
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserListResponse",
    # Word schemas
    "WordCreate",
    "WordUpdate",
    "WordResponse",
    "WordListResponse",
    # Comment schemas
    "CommentCreate",
    "CommentUpdate",
    "CommentResponse",
    "CommentListResponse",
    # Suggestion schemas
    "SuggestionCreate",
    "SuggestionResponse",
    "SuggestionListResponse",
]
