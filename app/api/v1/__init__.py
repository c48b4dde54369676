"""
API v1 Router
"""

from fastapi import APIRouter

from app.api.v1 import (
    auth,
    comments,
    moderation,
    stats,
    suggestions,
    users,
    votes,
    word_of_the_day,
    words,
)

router = APIRouter()

# Include all endpoint routers
router.include_router(auth.router)
router.include_router(users.router)
router.include_router(words.router)
router.include_router(comments.router)
router.include_router(moderation.router)
router.include_router(suggestions.router)
router.include_router(votes.router)
router.include_router(word_of_the_day.router)
router.include_router(stats.router)

__all__ = ["router"]
