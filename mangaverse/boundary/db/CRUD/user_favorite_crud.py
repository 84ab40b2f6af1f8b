"""
User favorite CRUD operations.

Dependencies: sqlalchemy, mangaverse.boundary.db.models
System role: Bookmark persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.models.user_favorite_model import UserFavoriteModel
from mangaverse.boundary.db.CRUD.base_crud import BaseCRUD


class UserFavoriteCRUD(BaseCRUD[UserFavoriteModel]):
    """CRUD operations for UserFavoriteModel scoped to a user."""

    def __init__(self) -> None:
        """Initialize UserFavoriteCRUD with UserFavoriteModel."""
        super().__init__(UserFavoriteModel)

    async def list_for_user(self, session: AsyncSession, user_id: UUID) -> Sequence[UserFavoriteModel]:
        """List a user's favorites, newest first."""
        stmt = (
            select(UserFavoriteModel)
            .where(UserFavoriteModel.user_id == user_id)
            .order_by(UserFavoriteModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_for_user(
        self,
        session: AsyncSession,
        user_id: UUID,
        manga_id: str,
    ) -> UserFavoriteModel | None:
        stmt = select(UserFavoriteModel).where(
            UserFavoriteModel.user_id == user_id,
            UserFavoriteModel.manga_id == manga_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_for_user(self, session: AsyncSession, user_id: UUID, manga_id: str) -> bool:
        stmt = delete(UserFavoriteModel).where(
            UserFavoriteModel.user_id == user_id,
            UserFavoriteModel.manga_id == manga_id,
        )
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def delete_all_for_user(self, session: AsyncSession, user_id: UUID) -> int:
        stmt = delete(UserFavoriteModel).where(UserFavoriteModel.user_id == user_id)
        result = await session.execute(stmt)
        return result.rowcount


user_favorite_crud = UserFavoriteCRUD()
