"""
SQLModel table models.

Each module defines one collection of the dictionary datastore. Importing
this package registers every table with SQLModel.metadata, which is what
scripts/init_db.py and the test suite use to create the schema.
"""

from app.models.admin_action import AdminActions
from app.models.comment import Comments
from app.models.comment_report import CommentReports
from app.models.favorite import Favorites
from app.models.suggestion import Suggestions
from app.models.user import Users
from app.models.vote import Votes
from app.models.word import Words
from app.models.word_of_the_day import WordsOfTheDay

__all__ = [
    # Core entity models
    "Users",
    "Words",
    "Comments",
    "Suggestions",
    # Moderation
    "CommentReports",
    "AdminActions",
    # Junction/relationship tables
    "Votes",
    "Favorites",
    "WordsOfTheDay",
]
