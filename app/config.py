"""
Application Configuration
Uses Pydantic Settings for environment-based configuration
"""

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra env vars like MARIADB_* used by docker-compose
    )

    # Application
    PROJECT_NAME: str = "Slang Dictionary Admin API"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = Field(default="development", pattern="^(development|staging|production)$")
    DEBUG: bool = Field(default=False)
    API_V1_STR: str = "/api/v1"

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # CORS
    # Allow str because it can be a comma-separated string in .env
    CORS_ORIGINS: str | list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"]
    )

    # Database
    DATABASE_URL: str
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 10
    DB_ECHO: bool = False

    # Statistics
    STATS_DAYS: int = 30  # Window for the votes-by-date chart
    TOP_WORDS_LIMIT: int = 5
    TRENDING_WORDS_LIMIT: int = 10
    SEARCH_RESULTS_LIMIT: int = 20

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        """Parse CORS origins from comma-separated string"""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v


# Create global settings instance

load_dotenv()
settings = Settings()  # type: ignore[call-arg]


class UserStatus:
    """User account status constants"""

    ACTIVE = "active"
    INACTIVE = "inactive"
    BANNED = "banned"
    VISITOR = "visitor"


class UserRole:
    """User role constants"""

    ADMIN = "admin"
    EDITOR = "editor"
    USER = "user"


class WordStatus:
    """Dictionary word status constants"""

    ACTIVE = "active"
    PENDING = "pending"
    REJECTED = "rejected"


class CommentStatus:
    """Comment status constants"""

    ACTIVE = "active"
    HIDDEN = "hidden"
    FLAGGED = "flagged"


class ReportStatus:
    """Comment report status constants"""

    PENDING = "pending"
    REVIEWED = "reviewed"
    DISMISSED = "dismissed"


class SuggestionStatus:
    """Word suggestion status constants"""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class WordOfTheDayStatus:
    """Word of the day status constants"""

    ACTIVE = "active"
    INACTIVE = "inactive"


class VoteValue:
    """Vote value constants"""

    LIKE = 1
    DISLIKE = -1


class Moderation:
    """Moderation constants"""

    # Number of warnings that triggers an automatic ban
    WARNING_BAN_THRESHOLD = 2

    BLOCKED_COMMENT_TEXT = "This comment has been blocked by moderation."

    DEFAULT_WARNING_REASON = "Inappropriate content"
    DEFAULT_WARNING_BAN_REASON = "Multiple warnings"
    DEFAULT_BAN_REASON = "Community rules violation"
    DEFAULT_BANNED_ACCOUNT_REASON = "Account banned"


class AdminActionType:
    """Admin action type constants for audit logging"""

    REPORT_DISMISS = 1
    REPORT_BLOCK = 2
    REPORT_BLOCK_WARN = 3
    SUGGESTION_APPROVE = 4
    SUGGESTION_REJECT = 5
    USER_BAN = 6
    USER_UNBAN = 7
    USER_WARNINGS_RESET = 8
    USER_STATUS_CHANGE = 9
    WORD_OF_THE_DAY_SET = 10
