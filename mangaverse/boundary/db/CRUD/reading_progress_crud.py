"""
Reading progress CRUD operations.

Dependencies: sqlalchemy, mangaverse.boundary.db.models
System role: Reading position persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.models.reading_progress_model import ReadingProgressModel
from mangaverse.boundary.db.CRUD.base_crud import BaseCRUD


class ReadingProgressCRUD(BaseCRUD[ReadingProgressModel]):
    """CRUD operations for ReadingProgressModel keyed by (user, manga)."""

    def __init__(self) -> None:
        """Initialize ReadingProgressCRUD with ReadingProgressModel."""
        super().__init__(ReadingProgressModel)

    async def list_for_user(self, session: AsyncSession, user_id: UUID) -> Sequence[ReadingProgressModel]:
        """List a user's progress rows, most recently updated first."""
        stmt = (
            select(ReadingProgressModel)
            .where(ReadingProgressModel.user_id == user_id)
            .order_by(ReadingProgressModel.updated_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_for_user(
        self,
        session: AsyncSession,
        user_id: UUID,
        manga_id: str,
    ) -> ReadingProgressModel | None:
        stmt = select(ReadingProgressModel).where(
            ReadingProgressModel.user_id == user_id,
            ReadingProgressModel.manga_id == manga_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(
        self,
        session: AsyncSession,
        user_id: UUID,
        manga_id: str,
        **fields,
    ) -> ReadingProgressModel:
        """
        Create or update the progress row for (user, manga).

        Args:
            session: Async database session
            user_id: Owning user
            manga_id: Catalog manga ID
            **fields: chapter_id, page_number, total_pages, completed

        Returns:
            The stored ReadingProgressModel
        """
        existing = await self.get_for_user(session, user_id, manga_id)
        if existing is None:
            return await self.create(session, user_id=user_id, manga_id=manga_id, **fields)
        for field, value in fields.items():
            setattr(existing, field, value)
        await session.flush()
        await session.refresh(existing)
        return existing

    async def delete_for_user(self, session: AsyncSession, user_id: UUID, manga_id: str) -> bool:
        stmt = delete(ReadingProgressModel).where(
            ReadingProgressModel.user_id == user_id,
            ReadingProgressModel.manga_id == manga_id,
        )
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def delete_all_for_user(self, session: AsyncSession, user_id: UUID) -> int:
        stmt = delete(ReadingProgressModel).where(ReadingProgressModel.user_id == user_id)
        result = await session.execute(stmt)
        return result.rowcount


reading_progress_crud = ReadingProgressCRUD()
