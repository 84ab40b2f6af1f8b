"""
Authentication service.

Registration, login and profile lookup. Passwords are bcrypt-hashed and
sessions are stateless HS256 JWTs.

Dependencies: mangaverse.boundary.db.CRUD, mangaverse.core.security
System role: Account use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.CRUD.user_crud import user_crud
from mangaverse.boundary.db.models.user_model import UserModel
from mangaverse.core.exceptions import AuthenticationError, ConflictError, NotFoundError
from mangaverse.core.security import create_access_token, hash_password, verify_password
from mangaverse.models.auth import AuthResponse, UserResponse

logger = logging.getLogger(__name__)


def token_claims(user: UserModel) -> dict:
    return {
        "userId": str(user.id),
        "username": user.username,
        "email": user.email,
        "role": user.role,
    }


class AuthService:
    """Account registration, login and profile service."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize auth service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    def _issue(self, user: UserModel) -> AuthResponse:
        return AuthResponse(
            user=UserResponse.model_validate(user),
            token=create_access_token(token_claims(user)),
        )

    async def register(self, username: str, email: str, password: str) -> AuthResponse:
        """
        Create a reader account and sign it in.

        Public registration always creates role "user"; admins are promoted
        from the admin console or seeded.

        Args:
            username: Unique login name
            email: Unique email address
            password: Plaintext password

        Returns:
            AuthResponse: Profile and access token

        Raises:
            ConflictError: Username or email already registered
        """
        existing = await user_crud.find_conflicting(self.db, username, email)
        if existing is not None:
            field = "username" if existing.username == username else "email"
            raise ConflictError("User already exists", {"field": field})

        user = await user_crud.create(
            self.db,
            username=username,
            email=email,
            password_hash=hash_password(password),
            role="user",
        )
        logger.info("User registered", extra={"user_id": str(user.id), "username": username})
        return self._issue(user)

    async def login(self, username: str, password: str) -> AuthResponse:
        """
        Verify credentials and issue a token.

        Raises:
            AuthenticationError: Unknown user or wrong password
        """
        user = await user_crud.get_by_username(self.db, username)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login", extra={"username": username})
            raise AuthenticationError("Invalid credentials")
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return self._issue(user)

    async def me(self, user_id: UUID) -> UserResponse:
        """
        Current user's profile.

        Raises:
            NotFoundError: Account was deleted after the token was issued
        """
        user = await user_crud.get_by_id(self.db, user_id)
        if user is None:
            raise NotFoundError("User not found", resource="user")
        return UserResponse.model_validate(user)
