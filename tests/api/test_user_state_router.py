"""
Tests for favorites and comment endpoints.

Services are replaced through dependency_overrides; tokens are real.

System role: Verification of authenticated user state HTTP contract
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from mangaverse.api.deps import get_comment_service, get_favorites_service
from mangaverse.api.routers.comments import router as comments_router
from mangaverse.api.routers.favorites import router as favorites_router
from mangaverse.core.exceptions import ConflictError, NotFoundError, PermissionDeniedError
from mangaverse.models.user_state import CommentResponse, FavoriteResponse


@pytest.fixture
def mock_favorites_service():
    return AsyncMock()


@pytest.fixture
def mock_comment_service():
    return AsyncMock()


@pytest.fixture
def client(mock_favorites_service, mock_comment_service):
    app = FastAPI()
    app.include_router(favorites_router)
    app.include_router(comments_router)
    app.dependency_overrides[get_favorites_service] = lambda: mock_favorites_service
    app.dependency_overrides[get_comment_service] = lambda: mock_comment_service
    return TestClient(app)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class TestAuthGuard:
    def test_missing_token_is_401(self, client):
        response = client.get("/favorites")

        assert response.status_code == 401
        assert response.json()["detail"] == "Access token required"

    def test_invalid_token_is_403(self, client):
        response = client.get("/favorites", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 403
        assert response.json()["detail"] == "Invalid or expired token"


class TestFavoritesRouter:
    def test_add_favorite(self, client, mock_favorites_service, user_headers, user_id):
        # Arrange
        mock_favorites_service.add_favorite.return_value = FavoriteResponse(
            id=uuid.uuid4(),
            manga_id="m1",
            manga_title="Alpha",
            manga_cover=None,
            created_at=_now(),
        )

        # Act
        response = client.post(
            "/favorites",
            json={"manga_id": "m1", "manga_title": "Alpha"},
            headers=user_headers,
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["manga_id"] == "m1"
        mock_favorites_service.add_favorite.assert_awaited_once_with(
            user_id, "m1", manga_title="Alpha", manga_cover=None
        )

    def test_duplicate_favorite_is_409(self, client, mock_favorites_service, user_headers):
        mock_favorites_service.add_favorite.side_effect = ConflictError("Manga already in favorites")

        response = client.post("/favorites", json={"manga_id": "m1"}, headers=user_headers)

        assert response.status_code == 409

    def test_remove_favorite(self, client, mock_favorites_service, user_headers, user_id):
        response = client.delete("/favorites/m1", headers=user_headers)

        assert response.status_code == 204
        mock_favorites_service.remove_favorite.assert_awaited_once_with(user_id, "m1")

    def test_missing_manga_id_is_422(self, client, user_headers):
        response = client.post("/favorites", json={}, headers=user_headers)
        assert response.status_code == 422


class TestCommentsRouter:
    def test_list_is_public(self, client, mock_comment_service):
        mock_comment_service.list_comments.return_value = []

        response = client.get("/manga/m1/comments")

        assert response.status_code == 200
        assert response.json() == []
        mock_comment_service.list_comments.assert_awaited_once_with("m1", limit=50, offset=0)

    def test_create_uses_token_identity(self, client, mock_comment_service, user_headers, user_id):
        # Arrange
        mock_comment_service.create_comment.return_value = CommentResponse(
            id=uuid.uuid4(),
            manga_id="m1",
            user_id=user_id,
            username="reader",
            content="great",
            created_at=_now(),
        )

        # Act
        response = client.post(
            "/manga/m1/comments", json={"content": "  great  "}, headers=user_headers
        )

        # Assert
        assert response.status_code == 201
        mock_comment_service.create_comment.assert_awaited_once_with(
            user_id=user_id, username="reader", manga_id="m1", content="great"
        )

    def test_blank_comment_rejected(self, client, user_headers):
        response = client.post("/manga/m1/comments", json={"content": "   "}, headers=user_headers)
        assert response.status_code == 422

    def test_delete_foreign_comment_is_403(self, client, mock_comment_service, user_headers):
        mock_comment_service.delete_comment.side_effect = PermissionDeniedError(
            "Not allowed to delete this comment"
        )

        response = client.delete(f"/manga/m1/comments/{uuid.uuid4()}", headers=user_headers)

        assert response.status_code == 403
        assert mock_comment_service.delete_comment.call_args.kwargs["is_admin"] is False

    def test_admin_delete_passes_flag(self, client, mock_comment_service, admin_headers):
        response = client.delete(f"/manga/m1/comments/{uuid.uuid4()}", headers=admin_headers)

        assert response.status_code == 204
        assert mock_comment_service.delete_comment.call_args.kwargs["is_admin"] is True

    def test_unknown_comment_is_404(self, client, mock_comment_service, user_headers):
        mock_comment_service.delete_comment.side_effect = NotFoundError("Comment not found")

        response = client.delete(f"/manga/m1/comments/{uuid.uuid4()}", headers=user_headers)

        assert response.status_code == 404
