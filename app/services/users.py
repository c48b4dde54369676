"""
User accessors.

Thin functions over the users and favorites tables. None of them commit:
the caller (request handler or script) owns the transaction.
"""

from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Moderation, UserStatus, VoteValue
from app.core.database import utc_now
from app.core.errors import DuplicateUserError, UserNotFoundError
from app.core.logging import get_logger
from app.core.security import get_password_hash
from app.models.comment import Comments
from app.models.favorite import Favorites
from app.models.suggestion import Suggestions
from app.models.user import Users
from app.models.vote import Votes

logger = get_logger(__name__)


async def _require_user(db: AsyncSession, user_id: str) -> Users:
    user = await db.get(Users, user_id)
    if user is None:
        raise UserNotFoundError()
    return user


async def _ensure_unique(db: AsyncSession, user: Users) -> None:
    """Reject an email or username already used by another account."""
    result = await db.execute(
        select(Users.id).where(
            (Users.email == user.email) | (Users.username == user.username),  # type: ignore[arg-type]
            Users.id != user.id,  # type: ignore[arg-type]
        )
    )
    if result.first() is not None:
        raise DuplicateUserError()


async def create_or_update_user(
    db: AsyncSession, data: dict[str, Any], user_id: str | None = None
) -> Users:
    """
    Create a user, or update the existing one when user_id matches a record.

    A supplied user_id that does not exist yet creates the user under that id
    (accounts provisioned by an external identity provider keep their id).
    created_at is never overwritten. A plain-text "password" key is hashed.

    Args:
        db: Database session
        data: Field values (only the keys present are written on update)
        user_id: Optional identifier to create or update

    Returns:
        The created or updated user
    """
    values = dict(data)
    password = values.pop("password", None)

    user = await db.get(Users, user_id) if user_id else None
    if user is None:
        if user_id:
            values["id"] = user_id
        user = Users(**values)
        created = True
    else:
        for field, value in values.items():
            setattr(user, field, value)
        user.updated_at = utc_now()
        created = False

    if password:
        user.password = get_password_hash(password)

    if user.status != UserStatus.BANNED:
        user.ban_reason = ""

    await _ensure_unique(db, user)
    db.add(user)
    await db.flush()

    logger.info("user_saved", target_user_id=user.id, created=created)
    return user


async def get_all_users(db: AsyncSession) -> list[Users]:
    """Return every user, newest first."""
    result = await db.execute(select(Users).order_by(Users.created_at.desc()))  # type: ignore[attr-defined]
    return list(result.scalars().all())


async def get_user_by_id(db: AsyncSession, user_id: str) -> Users | None:
    return await db.get(Users, user_id)


async def get_user_by_email(db: AsyncSession, email: str) -> Users | None:
    result = await db.execute(select(Users).where(Users.email == email))  # type: ignore[arg-type]
    return result.scalars().first()


async def delete_user(db: AsyncSession, user_id: str) -> None:
    user = await _require_user(db, user_id)
    await db.delete(user)
    await db.flush()
    logger.info("user_deleted", target_user_id=user_id)


async def update_user_status(db: AsyncSession, user_id: str, status: str) -> Users:
    """
    Change a user's status.

    Any status other than banned clears the ban reason, so un-banning through
    a status change leaves no stale reason behind.
    """
    user = await _require_user(db, user_id)
    previous_status = user.status

    user.status = status
    if status != UserStatus.BANNED:
        user.ban_reason = ""
    user.updated_at = utc_now()
    await db.flush()

    logger.info(
        "user_status_changed",
        target_user_id=user_id,
        previous_status=previous_status,
        new_status=status,
    )
    return user


async def get_user_favorites(db: AsyncSession, user_id: str) -> list[str]:
    """Return the ids of the user's favourite words, oldest first."""
    result = await db.execute(
        select(Favorites.word_id)  # type: ignore[call-overload]
        .where(Favorites.user_id == user_id)
        .order_by(Favorites.created_at)
    )
    return list(result.scalars().all())


async def add_to_favorites(db: AsyncSession, user_id: str, word_id: str) -> None:
    """Add a word to the user's favourites. Adding it twice is a no-op."""
    await _require_user(db, user_id)

    existing = await db.get(Favorites, (user_id, word_id))
    if existing is not None:
        return

    db.add(Favorites(user_id=user_id, word_id=word_id))
    await db.flush()


async def remove_from_favorites(db: AsyncSession, user_id: str, word_id: str) -> None:
    await db.execute(
        delete(Favorites).where(
            Favorites.user_id == user_id,  # type: ignore[arg-type]
            Favorites.word_id == word_id,  # type: ignore[arg-type]
        )
    )


async def update_last_login(db: AsyncSession, user_id: str) -> None:
    now = utc_now()
    await db.execute(
        update(Users)
        .where(Users.id == user_id)  # type: ignore[arg-type]
        .values(last_login=now, updated_at=now)
        .execution_options(synchronize_session=False)
    )


async def add_warning_to_user(db: AsyncSession, user_id: str, reason: str | None = None) -> int:
    """
    Record one warning against a user, banning them at the threshold.

    The counter is incremented in the database (``warnings = warnings + 1``),
    which also locks the row until the transaction ends. The ban is a second
    conditional update on the same locked row, so concurrent admins can
    neither lose an increment nor skip the ban.

    Args:
        db: Database session
        user_id: User receiving the warning
        reason: Ban reason used if this warning triggers the ban

    Returns:
        The user's warning count after the increment

    Raises:
        UserNotFoundError: If the user does not exist
    """
    now = utc_now()
    result = await db.execute(
        update(Users)
        .where(Users.id == user_id)  # type: ignore[arg-type]
        .values(warnings=Users.warnings + 1, updated_at=now)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:  # type: ignore[attr-defined]
        raise UserNotFoundError()

    await db.execute(
        update(Users)
        .where(
            Users.id == user_id,  # type: ignore[arg-type]
            Users.warnings >= Moderation.WARNING_BAN_THRESHOLD,  # type: ignore[operator]
        )
        .values(
            status=UserStatus.BANNED,
            ban_reason=reason or Moderation.DEFAULT_WARNING_BAN_REASON,
        )
        .execution_options(synchronize_session=False)
    )

    warnings_result = await db.execute(
        select(Users.warnings).where(Users.id == user_id)  # type: ignore[call-overload]
    )
    warnings: int = warnings_result.scalar_one()

    # Objects already loaded in this session still hold the old values
    cached = await db.get(Users, user_id)
    if cached is not None:
        await db.refresh(cached)

    logger.info("user_warned", target_user_id=user_id, warnings=warnings)
    if warnings >= Moderation.WARNING_BAN_THRESHOLD:
        logger.info("user_auto_banned", target_user_id=user_id, warnings=warnings)

    return warnings


async def ban_user(db: AsyncSession, user_id: str, reason: str | None = None) -> Users:
    user = await _require_user(db, user_id)
    user.status = UserStatus.BANNED
    user.ban_reason = reason or Moderation.DEFAULT_BAN_REASON
    user.updated_at = utc_now()
    await db.flush()

    logger.info("user_banned", target_user_id=user_id, reason=user.ban_reason)
    return user


async def unban_user(db: AsyncSession, user_id: str) -> Users:
    """Lift a ban. Warnings are kept; use reset_user_warnings to clear them."""
    user = await _require_user(db, user_id)
    user.status = UserStatus.ACTIVE
    user.ban_reason = ""
    user.updated_at = utc_now()
    await db.flush()

    logger.info("user_unbanned", target_user_id=user_id)
    return user


async def reset_user_warnings(db: AsyncSession, user_id: str) -> Users:
    user = await _require_user(db, user_id)
    user.warnings = 0
    user.updated_at = utc_now()
    await db.flush()

    logger.info("user_warnings_reset", target_user_id=user_id)
    return user


async def check_user_banned(db: AsyncSession, email: str, username: str) -> tuple[bool, str | None]:
    """
    Check whether a banned account exists for this email or username.

    Email is checked first, then username.

    Returns:
        Tuple of (banned, reason)
    """
    for column, value in ((Users.email, email), (Users.username, username)):
        result = await db.execute(
            select(Users).where(
                column == value,  # type: ignore[arg-type]
                Users.status == UserStatus.BANNED,  # type: ignore[arg-type]
            )
        )
        banned = result.scalars().first()
        if banned is not None:
            return True, banned.ban_reason or Moderation.DEFAULT_BANNED_ACCOUNT_REASON

    return False, None


async def get_usernames(db: AsyncSession, user_ids: list[str]) -> dict[str, str]:
    """
    Fetch display names for several users in a single query.

    Falls back to the email address when a user has no username. Unknown ids
    are absent from the result; callers use .get(user_id, default).
    """
    if not user_ids:
        return {}

    result = await db.execute(
        select(Users.id, Users.username, Users.email).where(  # type: ignore[call-overload]
            Users.id.in_(set(user_ids))  # type: ignore[attr-defined]
        )
    )
    return {user_id: username or email for user_id, username, email in result.all()}


async def get_user_activity_counts(
    db: AsyncSession, user_ids: list[str]
) -> dict[str, dict[str, int]]:
    """
    Count comments, suggestions and likes given for several users.

    Returns:
        Dict mapping user_id to {"comments_count", "suggestions_count", "likes_count"}.
        Every requested id is present, with zeros when the user has no activity.
    """
    counts: dict[str, dict[str, int]] = {
        user_id: {"comments_count": 0, "suggestions_count": 0, "likes_count": 0}
        for user_id in user_ids
    }
    if not user_ids:
        return counts

    queries = (
        (
            "comments_count",
            select(Comments.user_id, func.count())  # type: ignore[call-overload]
            .where(Comments.user_id.in_(user_ids))  # type: ignore[attr-defined]
            .group_by(Comments.user_id),
        ),
        (
            "suggestions_count",
            select(Suggestions.user_id, func.count())  # type: ignore[call-overload]
            .where(Suggestions.user_id.in_(user_ids))  # type: ignore[attr-defined]
            .group_by(Suggestions.user_id),
        ),
        (
            "likes_count",
            select(Votes.user_id, func.count())  # type: ignore[call-overload]
            .where(Votes.user_id.in_(user_ids), Votes.value == VoteValue.LIKE)  # type: ignore[attr-defined]
            .group_by(Votes.user_id),
        ),
    )
    for key, query in queries:
        result = await db.execute(query)
        for user_id, count in result.all():
            counts[user_id][key] = count

    return counts
