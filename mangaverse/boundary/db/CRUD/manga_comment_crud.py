"""
Manga comment CRUD operations.

Dependencies: sqlalchemy, mangaverse.boundary.db.models
System role: Reader discussion persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Row, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.models.manga_comment_model import MangaCommentModel
from mangaverse.boundary.db.models.user_model import UserModel
from mangaverse.boundary.db.CRUD.base_crud import BaseCRUD


class MangaCommentCRUD(BaseCRUD[MangaCommentModel]):
    """CRUD operations for MangaCommentModel."""

    def __init__(self) -> None:
        """Initialize MangaCommentCRUD with MangaCommentModel."""
        super().__init__(MangaCommentModel)

    async def list_with_authors(
        self,
        session: AsyncSession,
        manga_id: str,
        limit: int = 50,
        offset: int = 0,
    ) -> Sequence[Row[tuple[MangaCommentModel, str]]]:
        """
        List comments on a manga with their author's username, newest first.

        Args:
            session: Async database session
            manga_id: Catalog manga ID
            limit: Page size
            offset: Rows to skip

        Returns:
            Rows of (MangaCommentModel, username)
        """
        stmt = (
            select(MangaCommentModel, UserModel.username)
            .join(UserModel, UserModel.id == MangaCommentModel.user_id)
            .where(MangaCommentModel.manga_id == manga_id)
            .order_by(MangaCommentModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.all()

    async def delete_all_for_user(self, session: AsyncSession, user_id: UUID) -> int:
        stmt = delete(MangaCommentModel).where(MangaCommentModel.user_id == user_id)
        result = await session.execute(stmt)
        return result.rowcount


manga_comment_crud = MangaCommentCRUD()
