"""
Users API endpoints

Account management is admin-only. Favourites are managed by each user for
themselves under /users/me/favorites.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import AdminActionType
from app.core.auth import AdminUser, CurrentUser
from app.core.database import get_db
from app.core.errors import UserNotFoundError, WordNotFoundError
from app.schemas.user import (
    BanRequest,
    FavoritesResponse,
    UserCreate,
    UserListResponse,
    UserResponse,
    UserStatusUpdate,
    UserUpdate,
    UserWithActivity,
)
from app.services import users as users_service
from app.services import words as words_service
from app.services.admin_actions import log_admin_action

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/", response_model=UserListResponse)
async def list_users(
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> UserListResponse:
    """
    List all users, newest first, with their comment, suggestion and like counts.

    Counts are fetched with one grouped query per activity type.
    """
    users = await users_service.get_all_users(db)
    counts = await users_service.get_user_activity_counts(db, [user.id for user in users])

    return UserListResponse(
        total=len(users),
        users=[
            UserWithActivity.model_validate(
                {**user.model_dump(exclude={"password"}), **counts[user.id]}
            )
            for user in users
        ],
    )


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    """Create a user account from the back-office."""
    user = await users_service.create_or_update_user(db, user_data.model_dump())
    await db.commit()
    return UserResponse.model_validate(user)


# ===== Own favourites (any authenticated user) =====


@router.get("/me/favorites", response_model=FavoritesResponse)
async def get_my_favorites(
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> FavoritesResponse:
    word_ids = await users_service.get_user_favorites(db, current_user.id)
    return FavoritesResponse(user_id=current_user.id, word_ids=word_ids)


@router.post("/me/favorites/{word_id}", response_model=FavoritesResponse)
async def add_favorite(
    word_id: Annotated[str, Path(description="Word ID")],
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> FavoritesResponse:
    """Add a word to the current user's favourites. Adding twice is a no-op."""
    if await words_service.get_word_by_id(db, word_id) is None:
        raise WordNotFoundError()

    await users_service.add_to_favorites(db, current_user.id, word_id)
    await db.commit()

    word_ids = await users_service.get_user_favorites(db, current_user.id)
    return FavoritesResponse(user_id=current_user.id, word_ids=word_ids)


@router.delete("/me/favorites/{word_id}", response_model=FavoritesResponse)
async def remove_favorite(
    word_id: Annotated[str, Path(description="Word ID")],
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> FavoritesResponse:
    await users_service.remove_from_favorites(db, current_user.id, word_id)
    await db.commit()

    word_ids = await users_service.get_user_favorites(db, current_user.id)
    return FavoritesResponse(user_id=current_user.id, word_ids=word_ids)


# ===== Admin account management =====


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: Annotated[str, Path(description="User ID")],
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    user = await users_service.get_user_by_id(db, user_id)
    if user is None:
        raise UserNotFoundError()
    return UserResponse.model_validate(user)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: Annotated[str, Path(description="User ID")],
    user_data: UserUpdate,
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    """
    Update a user's profile.

    All fields are optional. Only provided fields will be updated.
    """
    if await users_service.get_user_by_id(db, user_id) is None:
        raise UserNotFoundError()

    user = await users_service.create_or_update_user(
        db, user_data.model_dump(exclude_unset=True), user_id=user_id
    )
    await db.commit()
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: Annotated[str, Path(description="User ID")],
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> None:
    await users_service.delete_user(db, user_id)
    await db.commit()


@router.patch("/{user_id}/status", response_model=UserResponse)
async def update_user_status(
    user_id: Annotated[str, Path(description="User ID")],
    status_data: UserStatusUpdate,
    admin: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    """Change a user's status. Any status other than banned clears the ban reason."""
    user = await users_service.update_user_status(db, user_id, status_data.status)
    log_admin_action(
        db,
        admin.id,
        AdminActionType.USER_STATUS_CHANGE,
        target_user_id=user_id,
        details={"status": status_data.status},
    )
    await db.commit()
    return UserResponse.model_validate(user)


@router.post("/{user_id}/ban", response_model=UserResponse)
async def ban_user(
    user_id: Annotated[str, Path(description="User ID")],
    ban_data: BanRequest,
    admin: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    user = await users_service.ban_user(db, user_id, ban_data.reason)
    log_admin_action(
        db,
        admin.id,
        AdminActionType.USER_BAN,
        target_user_id=user_id,
        details={"reason": user.ban_reason},
    )
    await db.commit()
    return UserResponse.model_validate(user)


@router.post("/{user_id}/unban", response_model=UserResponse)
async def unban_user(
    user_id: Annotated[str, Path(description="User ID")],
    admin: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    """Lift a ban. The warning count is kept."""
    user = await users_service.unban_user(db, user_id)
    log_admin_action(db, admin.id, AdminActionType.USER_UNBAN, target_user_id=user_id)
    await db.commit()
    return UserResponse.model_validate(user)


@router.post("/{user_id}/reset-warnings", response_model=UserResponse)
async def reset_warnings(
    user_id: Annotated[str, Path(description="User ID")],
    admin: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    user = await users_service.reset_user_warnings(db, user_id)
    log_admin_action(db, admin.id, AdminActionType.USER_WARNINGS_RESET, target_user_id=user_id)
    await db.commit()
    return UserResponse.model_validate(user)


@router.get("/{user_id}/favorites", response_model=FavoritesResponse)
async def get_user_favorites(
    user_id: Annotated[str, Path(description="User ID")],
    _: AdminUser,
    db: AsyncSession = Depends(get_db),
) -> FavoritesResponse:
    if await users_service.get_user_by_id(db, user_id) is None:
        raise UserNotFoundError()

    word_ids = await users_service.get_user_favorites(db, user_id)
    return FavoritesResponse(user_id=user_id, word_ids=word_ids)
