"""
Reading progress service.

Dependencies: mangaverse.boundary.db.CRUD
System role: Reading position use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.CRUD.reading_progress_crud import reading_progress_crud
from mangaverse.core.exceptions import NotFoundError
from mangaverse.models.user_state import ReadingProgressResponse

logger = logging.getLogger(__name__)


class ReadingProgressService:
    """Per-user reading position, one row per manga."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_progress(self, user_id: UUID) -> list[ReadingProgressResponse]:
        rows = await reading_progress_crud.list_for_user(self.db, user_id)
        return [ReadingProgressResponse.model_validate(row) for row in rows]

    async def get_progress(self, user_id: UUID, manga_id: str) -> ReadingProgressResponse:
        row = await reading_progress_crud.get_for_user(self.db, user_id, manga_id)
        if row is None:
            raise NotFoundError("No reading progress for this manga", resource="reading_progress")
        return ReadingProgressResponse.model_validate(row)

    async def save_progress(
        self,
        user_id: UUID,
        manga_id: str,
        chapter_id: str,
        page_number: int = 1,
        total_pages: int | None = None,
        completed: bool = False,
    ) -> ReadingProgressResponse:
        """
        Upsert the reading position for (user, manga).

        Args:
            user_id: Reader
            manga_id: Catalog manga ID
            chapter_id: Chapter being read
            page_number: 1-based page
            total_pages: Chapter page count, when known
            completed: Manga finished flag

        Returns:
            ReadingProgressResponse: Stored position
        """
        row = await reading_progress_crud.upsert(
            self.db,
            user_id,
            manga_id,
            chapter_id=chapter_id,
            page_number=page_number,
            total_pages=total_pages,
            completed=completed,
        )
        logger.debug(
            "Reading progress saved",
            extra={"user_id": str(user_id), "manga_id": manga_id, "chapter_id": chapter_id},
        )
        return ReadingProgressResponse.model_validate(row)

    async def delete_progress(self, user_id: UUID, manga_id: str) -> None:
        await reading_progress_crud.delete_for_user(self.db, user_id, manga_id)
