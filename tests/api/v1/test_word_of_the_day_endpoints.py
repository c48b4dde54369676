"""
Tests for word of the day API endpoints.
"""

import pytest
from httpx import AsyncClient

from app.config import WordStatus


@pytest.mark.api
class TestReadWordOfTheDay:
    async def test_no_active_words(self, client: AsyncClient, user_headers):
        response = await client.get("/api/v1/word-of-the-day/", headers=user_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "No active words available"

    async def test_same_word_all_day(self, client: AsyncClient, user_headers, make_word):
        for _ in range(3):
            await make_word()

        first = await client.get("/api/v1/word-of-the-day/", headers=user_headers)
        second = await client.get("/api/v1/word-of-the-day/", headers=user_headers)

        assert first.status_code == 200
        assert first.json()["word"]["id"] == second.json()["word"]["id"]
        assert first.json()["status"] == "active"
        assert second.json()["word"]["views_count"] == 1

    async def test_requires_auth(self, client: AsyncClient):
        response = await client.get("/api/v1/word-of-the-day/")

        assert response.status_code == 401

    async def test_vote(self, client: AsyncClient, user_headers, make_word):
        await make_word(likes_count=2)

        response = await client.post(
            "/api/v1/word-of-the-day/vote", headers=user_headers, json={"kind": "like"}
        )
        assert response.status_code == 200
        assert response.json()["likes_count"] == 3

        response = await client.post(
            "/api/v1/word-of-the-day/vote", headers=user_headers, json={"kind": "dislike"}
        )
        assert response.json()["likes_count"] == 2

    async def test_vote_invalid_kind(self, client: AsyncClient, user_headers):
        response = await client.post(
            "/api/v1/word-of-the-day/vote", headers=user_headers, json={"kind": "love"}
        )

        assert response.status_code == 422


@pytest.mark.api
class TestManageWordOfTheDay:
    async def test_pin_word(self, client: AsyncClient, admin_user, admin_headers, user_headers, make_word):
        await make_word()
        chosen = await make_word(text="Wesh")

        response = await client.put(
            "/api/v1/word-of-the-day/", headers=admin_headers, json={"word_id": chosen.id}
        )

        assert response.status_code == 200
        assert response.json()["selected_by"] == admin_user.id

        response = await client.get("/api/v1/word-of-the-day/", headers=user_headers)
        assert response.json()["word"]["text"] == "Wesh"

    async def test_pin_unknown_word(self, client: AsyncClient, admin_headers):
        response = await client.put(
            "/api/v1/word-of-the-day/", headers=admin_headers, json={"word_id": "missing"}
        )

        assert response.status_code == 404

    async def test_pin_other_day(self, client: AsyncClient, admin_headers, make_word):
        word = await make_word()

        response = await client.put(
            "/api/v1/word-of-the-day/",
            headers=admin_headers,
            json={"word_id": word.id, "day": "2030-01-01"},
        )

        assert response.status_code == 200
        assert response.json()["day"] == "2030-01-01"

    async def test_refresh(self, client: AsyncClient, admin_headers, user_headers, make_word):
        await make_word()
        await make_word()

        first = await client.get("/api/v1/word-of-the-day/", headers=user_headers)
        refreshed = await client.post("/api/v1/word-of-the-day/refresh", headers=admin_headers)

        assert refreshed.status_code == 200
        assert refreshed.json()["word"]["id"] != first.json()["word"]["id"]

    async def test_refresh_requires_admin(self, client: AsyncClient, user_headers, make_word):
        await make_word()

        response = await client.post("/api/v1/word-of-the-day/refresh", headers=user_headers)

        assert response.status_code == 403

    async def test_clear_and_history(self, client: AsyncClient, admin_headers, make_word):
        await make_word()
        await client.post("/api/v1/word-of-the-day/refresh", headers=admin_headers)

        response = await client.delete("/api/v1/word-of-the-day/", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Word of the day cleared"

        response = await client.get("/api/v1/word-of-the-day/history", headers=admin_headers)
        [entry] = response.json()
        assert entry["status"] == "inactive"

    async def test_pending_word_is_never_picked(
        self, client: AsyncClient, user_headers, make_word
    ):
        active = await make_word()
        await make_word(status=WordStatus.PENDING)

        response = await client.get("/api/v1/word-of-the-day/", headers=user_headers)

        assert response.json()["word"]["id"] == active.id
