"""
Favorites service.

Dependencies: mangaverse.boundary.db.CRUD
System role: Bookmark use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.CRUD.user_favorite_crud import user_favorite_crud
from mangaverse.core.exceptions import ConflictError
from mangaverse.models.user_state import FavoriteResponse, FavoriteStatusResponse

logger = logging.getLogger(__name__)


class FavoritesService:
    """Per-user manga bookmarks."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_favorites(self, user_id: UUID) -> list[FavoriteResponse]:
        rows = await user_favorite_crud.list_for_user(self.db, user_id)
        return [FavoriteResponse.model_validate(row) for row in rows]

    async def add_favorite(
        self,
        user_id: UUID,
        manga_id: str,
        manga_title: str | None = None,
        manga_cover: str | None = None,
    ) -> FavoriteResponse:
        """
        Bookmark a manga.

        Raises:
            ConflictError: Already in favorites
        """
        if await user_favorite_crud.get_for_user(self.db, user_id, manga_id) is not None:
            raise ConflictError("Manga already in favorites", {"manga_id": manga_id})
        try:
            row = await user_favorite_crud.create(
                self.db,
                user_id=user_id,
                manga_id=manga_id,
                manga_title=manga_title,
                manga_cover=manga_cover,
            )
        except IntegrityError as e:
            # Concurrent add won the unique (user_id, manga_id) constraint
            await self.db.rollback()
            raise ConflictError("Manga already in favorites", {"manga_id": manga_id}) from e
        logger.info("Favorite added", extra={"user_id": str(user_id), "manga_id": manga_id})
        return FavoriteResponse.model_validate(row)

    async def is_favorite(self, user_id: UUID, manga_id: str) -> FavoriteStatusResponse:
        row = await user_favorite_crud.get_for_user(self.db, user_id, manga_id)
        return FavoriteStatusResponse(manga_id=manga_id, is_favorite=row is not None)

    async def remove_favorite(self, user_id: UUID, manga_id: str) -> None:
        """Remove a bookmark; removing a missing bookmark is a no-op."""
        removed = await user_favorite_crud.delete_for_user(self.db, user_id, manga_id)
        logger.info(
            "Favorite removed",
            extra={"user_id": str(user_id), "manga_id": manga_id, "existed": removed},
        )
