"""
Tests for users API endpoints.

These tests cover the /api/v1/users endpoints including:
- Admin-only account management (list, create, update, delete)
- Status changes, ban, unban and warning reset with audit rows
- Favourites of the current user
"""

import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import AdminActionType, UserStatus
from app.models.admin_action import AdminActions
from app.models.comment import Comments
from app.models.vote import Votes


@pytest.mark.api
class TestUserAccess:
    async def test_requires_auth(self, client: AsyncClient):
        response = await client.get("/api/v1/users/")

        assert response.status_code == 401

    async def test_requires_admin(self, client: AsyncClient, user_headers):
        response = await client.get("/api/v1/users/", headers=user_headers)

        assert response.status_code == 403
        assert response.json()["detail"] == "Admin privileges required"


@pytest.mark.api
class TestListUsers:
    async def test_list_with_activity_counts(
        self, client: AsyncClient, db_session: AsyncSession, admin_headers, regular_user
    ):
        db_session.add_all(
            [
                Comments(user_id=regular_user.id, word_id="w1", text="hello"),
                Votes(user_id=regular_user.id, word_id="w1", value=1),
            ]
        )
        await db_session.commit()

        response = await client.get("/api/v1/users/", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        jean = next(u for u in data["users"] if u["id"] == regular_user.id)
        assert jean["comments_count"] == 1
        assert jean["likes_count"] == 1
        assert jean["suggestions_count"] == 0
        assert "password" not in jean


@pytest.mark.api
class TestManageUsers:
    async def test_create_user(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/users/",
            headers=admin_headers,
            json={"username": "newbie", "email": "newbie@example.com", "password": "secret123"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "newbie"
        assert data["status"] == "active"
        assert data["warnings"] == 0
        assert "password" not in data

    async def test_create_duplicate_email(self, client: AsyncClient, admin_headers, regular_user):
        response = await client.post(
            "/api/v1/users/",
            headers=admin_headers,
            json={"username": "other", "email": "jean@example.com"},
        )

        assert response.status_code == 409

    async def test_get_user(self, client: AsyncClient, admin_headers, regular_user):
        response = await client.get(f"/api/v1/users/{regular_user.id}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["email"] == "jean@example.com"

    async def test_get_unknown_user(self, client: AsyncClient, admin_headers):
        response = await client.get("/api/v1/users/missing", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    async def test_update_user(self, client: AsyncClient, admin_headers, regular_user):
        response = await client.patch(
            f"/api/v1/users/{regular_user.id}",
            headers=admin_headers,
            json={"city": "Marseille"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["city"] == "Marseille"
        assert data["username"] == "jean"

    async def test_delete_user(self, client: AsyncClient, admin_headers, regular_user):
        user_id = regular_user.id

        response = await client.delete(f"/api/v1/users/{user_id}", headers=admin_headers)
        assert response.status_code == 204

        response = await client.get(f"/api/v1/users/{user_id}", headers=admin_headers)
        assert response.status_code == 404


@pytest.mark.api
class TestModerateUsers:
    async def test_status_change_clears_ban_reason(
        self, client: AsyncClient, db_session: AsyncSession, admin_user, admin_headers, make_user
    ):
        user = await make_user(status=UserStatus.BANNED, ban_reason="spam")

        response = await client.patch(
            f"/api/v1/users/{user.id}/status",
            headers=admin_headers,
            json={"status": "active"},
        )

        assert response.status_code == 200
        assert response.json()["status"] == "active"
        assert response.json()["ban_reason"] == ""

        result = await db_session.execute(select(AdminActions))
        [action] = result.scalars().all()
        assert action.action_type == AdminActionType.USER_STATUS_CHANGE
        assert action.admin_id == admin_user.id
        assert action.target_user_id == user.id

    async def test_invalid_status(self, client: AsyncClient, admin_headers, regular_user):
        response = await client.patch(
            f"/api/v1/users/{regular_user.id}/status",
            headers=admin_headers,
            json={"status": "deleted"},
        )

        assert response.status_code == 422

    async def test_ban_and_unban(self, client: AsyncClient, admin_headers, make_user):
        user = await make_user(warnings=1)
        user_id = user.id

        response = await client.post(
            f"/api/v1/users/{user_id}/ban", headers=admin_headers, json={"reason": "rude"}
        )
        assert response.status_code == 200
        assert response.json()["status"] == "banned"
        assert response.json()["ban_reason"] == "rude"

        response = await client.post(f"/api/v1/users/{user_id}/unban", headers=admin_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "active"
        assert data["ban_reason"] == ""
        assert data["warnings"] == 1

    async def test_ban_default_reason(self, client: AsyncClient, admin_headers, regular_user):
        response = await client.post(
            f"/api/v1/users/{regular_user.id}/ban", headers=admin_headers, json={}
        )

        assert response.status_code == 200
        assert response.json()["ban_reason"] == "Community rules violation"

    async def test_reset_warnings(self, client: AsyncClient, admin_headers, make_user):
        user = await make_user(warnings=1)

        response = await client.post(
            f"/api/v1/users/{user.id}/reset-warnings", headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["warnings"] == 0

    async def test_banned_user_token_is_refused(
        self, client: AsyncClient, admin_headers, regular_user, user_headers
    ):
        await client.post(
            f"/api/v1/users/{regular_user.id}/ban", headers=admin_headers, json={"reason": "spam"}
        )

        response = await client.get("/api/v1/users/me/favorites", headers=user_headers)

        assert response.status_code == 403
        assert response.json()["detail"] == "spam"


@pytest.mark.api
class TestFavorites:
    async def test_add_and_list(self, client: AsyncClient, user_headers, make_word):
        word = await make_word()

        response = await client.post(
            f"/api/v1/users/me/favorites/{word.id}", headers=user_headers
        )
        assert response.status_code == 200
        assert response.json()["word_ids"] == [word.id]

        response = await client.get("/api/v1/users/me/favorites", headers=user_headers)
        assert response.json()["word_ids"] == [word.id]

    async def test_add_twice_is_noop(self, client: AsyncClient, user_headers, make_word):
        word = await make_word()
        url = f"/api/v1/users/me/favorites/{word.id}"

        await client.post(url, headers=user_headers)
        response = await client.post(url, headers=user_headers)

        assert response.json()["word_ids"] == [word.id]

    async def test_add_unknown_word(self, client: AsyncClient, user_headers):
        response = await client.post("/api/v1/users/me/favorites/missing", headers=user_headers)

        assert response.status_code == 404

    async def test_remove(self, client: AsyncClient, user_headers, make_word):
        word = await make_word()
        url = f"/api/v1/users/me/favorites/{word.id}"
        await client.post(url, headers=user_headers)

        response = await client.delete(url, headers=user_headers)

        assert response.status_code == 200
        assert response.json()["word_ids"] == []

    async def test_admin_sees_user_favorites(
        self, client: AsyncClient, admin_headers, regular_user, user_headers, make_word
    ):
        word = await make_word()
        await client.post(f"/api/v1/users/me/favorites/{word.id}", headers=user_headers)

        response = await client.get(
            f"/api/v1/users/{regular_user.id}/favorites", headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json() == {"user_id": regular_user.id, "word_ids": [word.id]}
