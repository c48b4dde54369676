"""
Authentication API endpoints.

This module provides endpoints for:
- Login with email and password (JWT access token, also set as a cookie)
- Logout (clears the cookie)
- Current user information
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import UserStatus, settings
from app.core.auth import CurrentUser
from app.core.database import get_db
from app.core.logging import get_logger
from app.core.security import create_access_token, verify_password
from app.schemas.auth import LoginRequest, TokenResponse
from app.schemas.common import MessageResponse
from app.schemas.user import UserResponse
from app.services import users as users_service

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _set_auth_cookie(response: Response, access_token: str) -> None:
    """Set the access token as an HTTPOnly cookie."""
    response.set_cookie(
        key="access_token",
        value=access_token,
        httponly=True,  # Prevent JavaScript access (XSS protection)
        secure=settings.ENVIRONMENT == "production",  # HTTPS only in production
        samesite="strict",  # CSRF protection
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,  # Match JWT expiration
    )


def _clear_auth_cookie(response: Response) -> None:
    # Match set_cookie params
    response.delete_cookie(
        key="access_token",
        path="/",
        httponly=True,
        secure=settings.ENVIRONMENT == "production",
        samesite="strict",
    )


@router.post("/login", response_model=TokenResponse)
async def login(
    credentials: LoginRequest,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate a user and return a JWT access token.

    The token is returned in the body and also set as an HTTPOnly cookie.

    Flow:
    1. Refuse banned accounts (by email, then username) with their ban reason
    2. Verify email/password
    3. Refuse inactive accounts
    4. Record last_login and issue the token
    """
    user = await users_service.get_user_by_email(db, credentials.email)

    banned, reason = await users_service.check_user_banned(
        db, credentials.email, user.username if user else ""
    )
    if banned:
        logger.info("login_refused_banned", email=credentials.email)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=reason)

    if user is None or not verify_password(credentials.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
        )

    if user.status == UserStatus.INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User account is inactive",
        )

    access_token = create_access_token(user.id)
    _set_auth_cookie(response, access_token)

    await users_service.update_last_login(db, user.id)
    await db.commit()

    logger.info("user_logged_in", target_user_id=user.id, role=user.role)
    return TokenResponse(
        access_token=access_token,
        token_type="bearer",
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response) -> MessageResponse:
    """
    Logout by clearing the access token cookie.

    Bearer tokens held by the client stay valid until they expire.
    """
    _clear_auth_cookie(response)
    return MessageResponse(message="Successfully logged out")


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: CurrentUser) -> UserResponse:
    """Get current authenticated user information."""
    return UserResponse.model_validate(current_user)
