"""
Manga comment service.

Dependencies: mangaverse.boundary.db.CRUD
System role: Reader discussion use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.CRUD.manga_comment_crud import manga_comment_crud
from mangaverse.core.exceptions import NotFoundError, PermissionDeniedError
from mangaverse.models.user_state import CommentResponse

logger = logging.getLogger(__name__)


class CommentService:
    """Comments on manga detail pages."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_comments(
        self,
        manga_id: str,
        limit: int = 50,
        offset: int = 0,
    ) -> list[CommentResponse]:
        """Comments on a manga, newest first, with author usernames."""
        rows = await manga_comment_crud.list_with_authors(self.db, manga_id, limit, offset)
        return [
            CommentResponse(
                id=comment.id,
                manga_id=comment.manga_id,
                user_id=comment.user_id,
                username=username,
                content=comment.content,
                created_at=comment.created_at,
            )
            for comment, username in rows
        ]

    async def create_comment(
        self,
        user_id: UUID,
        username: str,
        manga_id: str,
        content: str,
    ) -> CommentResponse:
        comment = await manga_comment_crud.create(
            self.db,
            user_id=user_id,
            manga_id=manga_id,
            content=content,
        )
        logger.info(
            "Comment created",
            extra={"comment_id": str(comment.id), "manga_id": manga_id, "user_id": str(user_id)},
        )
        return CommentResponse(
            id=comment.id,
            manga_id=comment.manga_id,
            user_id=comment.user_id,
            username=username,
            content=comment.content,
            created_at=comment.created_at,
        )

    async def delete_comment(
        self,
        manga_id: str,
        comment_id: UUID,
        user_id: UUID,
        is_admin: bool = False,
    ) -> None:
        """
        Delete a comment.

        Raises:
            NotFoundError: Comment missing or attached to another manga
            PermissionDeniedError: Caller is neither the author nor an admin
        """
        comment = await manga_comment_crud.get_by_id(self.db, comment_id)
        if comment is None or comment.manga_id != manga_id:
            raise NotFoundError("Comment not found", resource="comment")
        if comment.user_id != user_id and not is_admin:
            raise PermissionDeniedError("You can only delete your own comments")
        await manga_comment_crud.delete_by_id(self.db, comment_id)
        logger.info(
            "Comment deleted",
            extra={"comment_id": str(comment_id), "by_admin": is_admin and comment.user_id != user_id},
        )
