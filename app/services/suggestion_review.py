"""
Suggestion review.

Approving a suggestion copies it into a new dictionary word that waits in
pending status for a separate publish step; rejecting only records the
decision. The suggestion is claimed out of pending before the word is
created, so a suggestion reviewed twice at once yields one word. Both steps
of an approval are flushed in the caller's transaction.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import AdminActionType, WordStatus
from app.core.logging import get_logger
from app.models.suggestion import Suggestions
from app.models.word import Words
from app.services import suggestions as suggestions_service
from app.services import words as words_service
from app.services.admin_actions import log_admin_action

logger = get_logger(__name__)


async def approve(
    db: AsyncSession, suggestion_id: str, admin_id: str, note: str | None = None
) -> tuple[Suggestions, Words]:
    """
    Approve a pending suggestion and create its word.

    The word is created with status pending and created_by set to the
    suggestion's author; it is never published here.

    Returns:
        Tuple of (updated suggestion, created word)

    Raises:
        SuggestionNotFoundError: If the suggestion does not exist
        SuggestionAlreadyReviewedError: If it was already approved or rejected
    """
    suggestion = await suggestions_service.approve_suggestion(db, suggestion_id, admin_id, note)

    word = await words_service.create_or_update_word(
        db,
        {
            "text": suggestion.text,
            "definition": suggestion.definition,
            "example": suggestion.example,
            "origin": suggestion.origin,
            "status": WordStatus.PENDING,
            "created_by": suggestion.user_id,
        },
    )

    log_admin_action(
        db,
        admin_id,
        AdminActionType.SUGGESTION_APPROVE,
        suggestion_id=suggestion_id,
        target_user_id=suggestion.user_id,
        word_id=word.id,
        details={"note": suggestion.review_note, "created_word_id": word.id},
    )

    logger.info("suggestion_approved", suggestion_id=suggestion_id, word_id=word.id)
    return suggestion, word


async def reject(
    db: AsyncSession, suggestion_id: str, admin_id: str, note: str | None = None
) -> Suggestions:
    """Reject a pending suggestion. No word is created."""
    suggestion = await suggestions_service.reject_suggestion(db, suggestion_id, admin_id, note)

    log_admin_action(
        db,
        admin_id,
        AdminActionType.SUGGESTION_REJECT,
        suggestion_id=suggestion_id,
        target_user_id=suggestion.user_id,
        details={"note": suggestion.review_note},
    )

    logger.info("suggestion_rejected", suggestion_id=suggestion_id)
    return suggestion
