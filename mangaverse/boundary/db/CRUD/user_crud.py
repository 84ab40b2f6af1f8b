"""
User CRUD operations.

Dependencies: sqlalchemy, mangaverse.boundary.db.models
System role: Account persistence operations
"""

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.models.user_model import UserModel
from mangaverse.boundary.db.CRUD.base_crud import BaseCRUD


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for UserModel with login lookups."""

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def get_by_username(self, session: AsyncSession, username: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.username == username)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_conflicting(
        self,
        session: AsyncSession,
        username: str,
        email: str,
    ) -> UserModel | None:
        """
        Find an account that already uses the username or the email.

        Args:
            session: Async database session
            username: Requested username
            email: Requested email

        Returns:
            First conflicting user, None when both are free
        """
        stmt = (
            select(UserModel)
            .where(or_(UserModel.username == username, UserModel.email == email))
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


user_crud = UserCRUD()
