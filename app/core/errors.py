"""
Domain errors raised by the data accessors and workflows.

Services raise these instead of HTTPException so they can be used from
scripts as well as request handlers. The handlers registered in app.main
turn them into ``{"detail": ...}`` JSON responses with the status code
carried by the exception class.
"""


class AdminAPIError(Exception):
    """Base class for all domain errors."""

    status_code = 500
    detail = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class NotFoundError(AdminAPIError):
    status_code = 404
    detail = "Resource not found"


class UserNotFoundError(NotFoundError):
    detail = "User not found"


class WordNotFoundError(NotFoundError):
    detail = "Word not found"


class CommentNotFoundError(NotFoundError):
    detail = "Comment not found"


class ReportNotFoundError(NotFoundError):
    detail = "Report not found"


class SuggestionNotFoundError(NotFoundError):
    detail = "Suggestion not found"


class VoteNotFoundError(NotFoundError):
    detail = "Vote not found"


class NoActiveWordsError(NotFoundError):
    detail = "No active words available"


class ReportAlreadyProcessedError(AdminAPIError):
    status_code = 400
    detail = "Report has already been processed"


class SuggestionAlreadyReviewedError(AdminAPIError):
    status_code = 400
    detail = "Suggestion has already been reviewed"


class DuplicateUserError(AdminAPIError):
    status_code = 409
    detail = "A user with this email or username already exists"


class CommentBlockedError(AdminAPIError):
    status_code = 403
    detail = "This comment was blocked by a moderator and can no longer be edited"
