"""
Integration tests for AuthService against an in-memory database.

System role: Verification of registration, login and profile lookups
"""

import uuid

import pytest

from mangaverse.application.services.auth_service import AuthService
from mangaverse.core.exceptions import AuthenticationError, ConflictError, NotFoundError
from mangaverse.core.security import decode_access_token


@pytest.fixture
def auth_service(test_async_db) -> AuthService:
    return AuthService(db=test_async_db)


class TestRegister:
    async def test_register_creates_user_role_and_token(self, auth_service) -> None:
        # Act
        result = await auth_service.register("newbie", "newbie@example.com", "secret123")

        # Assert
        assert result.user.username == "newbie"
        assert result.user.role == "user"
        assert "password_hash" not in result.user.model_dump()
        claims = decode_access_token(result.token)
        assert claims["userId"] == str(result.user.id)
        assert claims["role"] == "user"

    async def test_duplicate_username_conflicts(self, auth_service, reader) -> None:
        with pytest.raises(ConflictError, match="User already exists"):
            await auth_service.register("reader", "other@example.com", "secret123")

    async def test_duplicate_email_conflicts(self, auth_service, reader) -> None:
        with pytest.raises(ConflictError) as exc_info:
            await auth_service.register("someone", "reader@example.com", "secret123")
        assert exc_info.value.details["field"] == "email"


class TestLogin:
    async def test_login_with_valid_credentials(self, auth_service, reader) -> None:
        result = await auth_service.login("reader", "secret123")

        assert result.user.id == reader.id
        assert decode_access_token(result.token)["username"] == "reader"

    async def test_wrong_password_rejected(self, auth_service, reader) -> None:
        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await auth_service.login("reader", "wrong-password")

    async def test_unknown_user_rejected(self, auth_service) -> None:
        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await auth_service.login("ghost", "secret123")


class TestMe:
    async def test_me_returns_profile(self, auth_service, reader) -> None:
        profile = await auth_service.me(reader.id)
        assert profile.email == "reader@example.com"

    async def test_me_for_deleted_user(self, auth_service) -> None:
        with pytest.raises(NotFoundError):
            await auth_service.me(uuid.uuid4())
