"""
Tests for comments API endpoints.

These tests cover the /api/v1/comments endpoints including:
- Posting, reading, editing and deleting comments
- Author/admin permission checks
- Reporting a comment
- Admin listing and status changes
"""

import pytest
from httpx import AsyncClient

from app.config import CommentStatus, Moderation


@pytest.mark.api
class TestCreateComment:
    async def test_create(self, client: AsyncClient, regular_user, user_headers):
        response = await client.post(
            "/api/v1/comments/",
            headers=user_headers,
            json={"word_id": "w1", "text": "Great definition"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["text"] == "Great definition"
        assert data["status"] == "active"
        assert data["user"] == {"id": regular_user.id, "username": "jean"}

    async def test_create_requires_text(self, client: AsyncClient, user_headers):
        response = await client.post(
            "/api/v1/comments/", headers=user_headers, json={"word_id": "w1", "text": ""}
        )

        assert response.status_code == 422


@pytest.mark.api
class TestEditComment:
    async def test_author_can_edit(
        self, client: AsyncClient, regular_user, user_headers, make_comment
    ):
        comment = await make_comment(regular_user.id)

        response = await client.patch(
            f"/api/v1/comments/{comment.id}", headers=user_headers, json={"text": "Edited"}
        )

        assert response.status_code == 200
        assert response.json()["text"] == "Edited"

    async def test_other_user_cannot_edit(
        self, client: AsyncClient, make_user, user_headers, make_comment
    ):
        author = await make_user()
        comment = await make_comment(author.id)

        response = await client.patch(
            f"/api/v1/comments/{comment.id}", headers=user_headers, json={"text": "Hijack"}
        )

        assert response.status_code == 403

    async def test_author_cannot_edit_blocked_comment(
        self,
        client: AsyncClient,
        regular_user,
        admin_user,
        user_headers,
        admin_headers,
        make_comment,
        make_report,
    ):
        comment = await make_comment(regular_user.id, text="bad text")
        report = await make_report(comment, admin_user.id)
        comment_id = comment.id

        response = await client.post(
            f"/api/v1/moderation/reports/{report.id}/block", headers=admin_headers
        )
        assert response.status_code == 200

        response = await client.patch(
            f"/api/v1/comments/{comment_id}",
            headers=user_headers,
            json={"text": "bad text again"},
        )

        assert response.status_code == 403
        assert response.json()["detail"] == (
            "This comment was blocked by a moderator and can no longer be edited"
        )

        response = await client.get(f"/api/v1/comments/{comment_id}", headers=user_headers)
        assert response.json()["text"] == Moderation.BLOCKED_COMMENT_TEXT
        assert response.json()["status"] == CommentStatus.HIDDEN

    async def test_admin_can_edit_blocked_comment(
        self, client: AsyncClient, regular_user, admin_headers, make_comment
    ):
        comment = await make_comment(regular_user.id, status=CommentStatus.HIDDEN)

        response = await client.patch(
            f"/api/v1/comments/{comment.id}", headers=admin_headers, json={"text": "Reworded"}
        )

        assert response.status_code == 200
        assert response.json()["text"] == "Reworded"
        assert response.json()["status"] == CommentStatus.HIDDEN

    async def test_admin_can_delete(
        self, client: AsyncClient, regular_user, admin_headers, make_comment
    ):
        comment = await make_comment(regular_user.id)
        comment_id = comment.id

        response = await client.delete(f"/api/v1/comments/{comment_id}", headers=admin_headers)
        assert response.status_code == 204

        response = await client.get(f"/api/v1/comments/{comment_id}", headers=admin_headers)
        assert response.status_code == 404

    async def test_delete_unknown(self, client: AsyncClient, user_headers):
        response = await client.delete("/api/v1/comments/missing", headers=user_headers)

        assert response.status_code == 404


@pytest.mark.api
class TestReportComment:
    async def test_report_flags_comment(
        self, client: AsyncClient, make_user, regular_user, user_headers, admin_headers, make_comment
    ):
        author = await make_user(username="author")
        comment = await make_comment(author.id)

        response = await client.post(
            f"/api/v1/comments/{comment.id}/report",
            headers=user_headers,
            json={"reason": "offensive"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["reporter_id"] == regular_user.id
        assert data["user_id"] == author.id
        assert data["reason"] == "offensive"

        response = await client.get(f"/api/v1/comments/{comment.id}", headers=admin_headers)
        assert response.json()["status"] == "flagged"

    async def test_report_unknown_comment(self, client: AsyncClient, user_headers):
        response = await client.post(
            "/api/v1/comments/missing/report", headers=user_headers, json={}
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Comment not found"


@pytest.mark.api
class TestAdminComments:
    async def test_list_filters(
        self, client: AsyncClient, admin_headers, make_user, make_comment
    ):
        alice = await make_user(username="alice")
        bob = await make_user(username="bob")
        await make_comment(alice.id, word_id="w1")
        await make_comment(bob.id, word_id="w1")
        await make_comment(alice.id, word_id="w2")

        response = await client.get("/api/v1/comments/", headers=admin_headers)
        assert response.json()["total"] == 3

        response = await client.get(
            "/api/v1/comments/", headers=admin_headers, params={"word_id": "w1"}
        )
        assert response.json()["total"] == 2

        response = await client.get(
            "/api/v1/comments/", headers=admin_headers, params={"user_id": alice.id}
        )
        data = response.json()
        assert data["total"] == 2
        assert {c["user"]["username"] for c in data["comments"]} == {"alice"}

    async def test_unknown_author(self, client: AsyncClient, admin_headers, make_comment):
        await make_comment("deleted-user")

        response = await client.get("/api/v1/comments/", headers=admin_headers)

        assert response.json()["comments"][0]["user"]["username"] == "Unknown user"

    async def test_list_requires_admin(self, client: AsyncClient, user_headers):
        response = await client.get("/api/v1/comments/", headers=user_headers)

        assert response.status_code == 403

    async def test_hide_comment(
        self, client: AsyncClient, admin_headers, regular_user, make_comment
    ):
        comment = await make_comment(regular_user.id)

        response = await client.patch(
            f"/api/v1/comments/{comment.id}/status",
            headers=admin_headers,
            json={"status": CommentStatus.HIDDEN},
        )

        assert response.status_code == 200
        assert response.json()["status"] == "hidden"
