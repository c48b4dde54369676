"""
Tests for words and votes services.

Votes are checked through their effect on the word's likes_count: only
likes move the counter, and changing or withdrawing a like gives it back.
"""

from datetime import timedelta

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import VoteValue, WordStatus
from app.core.database import utc_now
from app.core.errors import VoteNotFoundError, WordNotFoundError
from app.models.vote import Votes
from app.services import votes as votes_service
from app.services import words as words_service


@pytest.mark.unit
class TestWords:
    async def test_create_defaults(self, db_session: AsyncSession):
        word = await words_service.create_or_update_word(
            db_session, {"text": "Wesh", "definition": "Greeting"}
        )

        assert word.status == WordStatus.PENDING
        assert word.tags == []
        assert word.likes_count == 0
        assert word.views_count == 0

    async def test_update_keeps_counters(self, db_session: AsyncSession, make_word):
        word = await make_word(likes_count=4, views_count=9)

        updated = await words_service.create_or_update_word(
            db_session, {"definition": "New definition"}, word_id=word.id
        )

        assert updated.definition == "New definition"
        assert updated.likes_count == 4
        assert updated.views_count == 9

    async def test_update_status_leaves_other_fields(self, db_session: AsyncSession, make_word):
        word = await make_word(status=WordStatus.PENDING, text="Chelou", tags=["verlan"])

        await words_service.update_word_status(db_session, word.id, WordStatus.ACTIVE)

        assert word.status == WordStatus.ACTIVE
        assert word.text == "Chelou"
        assert word.tags == ["verlan"]

    async def test_update_status_unknown_word(self, db_session: AsyncSession):
        with pytest.raises(WordNotFoundError):
            await words_service.update_word_status(db_session, "missing", WordStatus.ACTIVE)

    async def test_active_words_only(self, db_session: AsyncSession, make_word):
        active = await make_word(status=WordStatus.ACTIVE)
        await make_word(status=WordStatus.PENDING)
        await make_word(status=WordStatus.REJECTED)

        words = await words_service.get_active_words(db_session)

        assert [w.id for w in words] == [active.id]

    async def test_view_count(self, db_session: AsyncSession, make_word):
        word = await make_word()

        await words_service.increment_view_count(db_session, word.id)
        await words_service.increment_view_count(db_session, word.id)

        assert word.views_count == 2

    async def test_increment_unknown_word(self, db_session: AsyncSession):
        with pytest.raises(WordNotFoundError):
            await words_service.increment_like_count(db_session, "missing")

    async def test_search_is_prefix_on_active_words(self, db_session: AsyncSession, make_word):
        await make_word(text="chelou")
        await make_word(text="chiller")
        await make_word(text="kiffer")
        await make_word(text="chaud", status=WordStatus.PENDING)

        words = await words_service.search_words(db_session, "ch")

        assert [w.text for w in words] == ["chelou", "chiller"]

    async def test_search_escapes_wildcards(self, db_session: AsyncSession, make_word):
        await make_word(text="chelou")

        assert await words_service.search_words(db_session, "%") == []

    async def test_trending_orders_by_likes(self, db_session: AsyncSession, make_word):
        low = await make_word(likes_count=1)
        high = await make_word(likes_count=10)
        await make_word(likes_count=50, status=WordStatus.PENDING)

        words = await words_service.get_trending_words(db_session, limit=5)

        assert [w.id for w in words] == [high.id, low.id]

    async def test_delete(self, db_session: AsyncSession, make_word):
        word = await make_word()

        await words_service.delete_word(db_session, word.id)

        assert await words_service.get_word_by_id(db_session, word.id) is None


@pytest.mark.unit
class TestVotes:
    async def test_like_increments(self, db_session: AsyncSession, make_user, make_word):
        user = await make_user()
        word = await make_word()

        vote_id = await votes_service.add_vote(db_session, user.id, word.id, VoteValue.LIKE)

        assert vote_id
        assert word.likes_count == 1

    async def test_same_vote_twice_is_noop(self, db_session: AsyncSession, make_user, make_word):
        user = await make_user()
        word = await make_word()

        first = await votes_service.add_vote(db_session, user.id, word.id, VoteValue.LIKE)
        second = await votes_service.add_vote(db_session, user.id, word.id, VoteValue.LIKE)

        assert first == second
        assert word.likes_count == 1
        assert len(await votes_service.get_word_votes(db_session, word.id)) == 1

    async def test_dislike_leaves_counter(self, db_session: AsyncSession, make_user, make_word):
        user = await make_user()
        word = await make_word(likes_count=3)

        await votes_service.add_vote(db_session, user.id, word.id, VoteValue.DISLIKE)

        assert word.likes_count == 3

    async def test_switch_like_to_dislike(self, db_session: AsyncSession, make_user, make_word):
        user = await make_user()
        word = await make_word()

        first = await votes_service.add_vote(db_session, user.id, word.id, VoteValue.LIKE)
        second = await votes_service.add_vote(db_session, user.id, word.id, VoteValue.DISLIKE)

        assert first == second
        assert word.likes_count == 0
        vote = await votes_service.get_user_vote_for_word(db_session, user.id, word.id)
        assert vote is not None
        assert vote.value == VoteValue.DISLIKE

    async def test_switch_dislike_to_like(self, db_session: AsyncSession, make_user, make_word):
        user = await make_user()
        word = await make_word()

        await votes_service.add_vote(db_session, user.id, word.id, VoteValue.DISLIKE)
        await votes_service.add_vote(db_session, user.id, word.id, VoteValue.LIKE)

        assert word.likes_count == 1

    async def test_delete_like_decrements(self, db_session: AsyncSession, make_user, make_word):
        user = await make_user()
        word = await make_word()
        vote_id = await votes_service.add_vote(db_session, user.id, word.id, VoteValue.LIKE)

        await votes_service.delete_vote(db_session, vote_id)

        assert word.likes_count == 0
        assert await votes_service.count_votes(db_session) == 0

    async def test_delete_unknown_vote(self, db_session: AsyncSession):
        with pytest.raises(VoteNotFoundError):
            await votes_service.delete_vote(db_session, "missing")

    async def test_stats_by_date(self, db_session: AsyncSession, make_user):
        user = await make_user()
        now = utc_now()
        db_session.add_all(
            [
                Votes(user_id=user.id, word_id="a", created_at=now),
                Votes(user_id=user.id, word_id="b", created_at=now),
                Votes(user_id=user.id, word_id="c", created_at=now - timedelta(days=2)),
                Votes(user_id=user.id, word_id="d", created_at=now - timedelta(days=60)),
            ]
        )
        await db_session.commit()

        stats = await votes_service.get_votes_stats_by_date(db_session, days=30)

        assert stats == [
            {"date": (now - timedelta(days=2)).date().isoformat(), "count": 1},
            {"date": now.date().isoformat(), "count": 2},
        ]

    async def test_stats_window_of_zero_days(self, db_session: AsyncSession, make_user):
        user = await make_user()
        now = utc_now()
        db_session.add_all(
            [
                Votes(user_id=user.id, word_id="a", created_at=now - timedelta(hours=1)),
                Votes(user_id=user.id, word_id="b", created_at=now - timedelta(days=2)),
                Votes(user_id=user.id, word_id="c", created_at=now - timedelta(days=60)),
            ]
        )
        await db_session.commit()

        assert await votes_service.get_votes_stats_by_date(db_session, days=0) == []

        default_window = await votes_service.get_votes_stats_by_date(db_session)
        assert sum(item["count"] for item in default_window) == 2
