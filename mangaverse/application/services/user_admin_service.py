"""
User administration service.

Dependencies: mangaverse.boundary.db.CRUD
System role: Admin account management orchestration
"""

import logging
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.CRUD.manga_comment_crud import manga_comment_crud
from mangaverse.boundary.db.CRUD.reading_progress_crud import reading_progress_crud
from mangaverse.boundary.db.CRUD.user_crud import user_crud
from mangaverse.boundary.db.CRUD.user_favorite_crud import user_favorite_crud
from mangaverse.boundary.db.models.blog_post_model import BlogPostModel
from mangaverse.core.exceptions import NotFoundError, ValidationError
from mangaverse.models.auth import UserResponse
from mangaverse.models.common import PageResponse

logger = logging.getLogger(__name__)


class UserAdminService:
    """Listing, role changes and removal of accounts."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_users(self, limit: int = 50, offset: int = 0) -> PageResponse[UserResponse]:
        users = await user_crud.list_newest(self.db, limit, offset)
        total = await user_crud.count(self.db)
        return PageResponse[UserResponse](
            data=[UserResponse.model_validate(u) for u in users],
            total=total,
            limit=limit,
            offset=offset,
        )

    async def update_role(self, user_id: UUID, role: str) -> UserResponse:
        user = await user_crud.update_by_id(self.db, user_id, role=role)
        if user is None:
            raise NotFoundError("User not found", resource="user")
        logger.info("User role changed", extra={"user_id": str(user_id), "role": role})
        return UserResponse.model_validate(user)

    async def delete_user(self, user_id: UUID, acting_user_id: UUID) -> None:
        """
        Delete an account and its reader state.

        Blog posts the user wrote are kept with no author.

        Raises:
            ValidationError: Admin tried to delete their own account
            NotFoundError: Unknown user
        """
        if user_id == acting_user_id:
            raise ValidationError("You cannot delete your own account", field="user_id")
        if not await user_crud.exists(self.db, user_id):
            raise NotFoundError("User not found", resource="user")

        await user_favorite_crud.delete_all_for_user(self.db, user_id)
        await reading_progress_crud.delete_all_for_user(self.db, user_id)
        await manga_comment_crud.delete_all_for_user(self.db, user_id)
        await self.db.execute(
            update(BlogPostModel).where(BlogPostModel.author_id == user_id).values(author_id=None)
        )
        await user_crud.delete_by_id(self.db, user_id)
        logger.info(
            "User deleted",
            extra={"user_id": str(user_id), "deleted_by": str(acting_user_id)},
        )
