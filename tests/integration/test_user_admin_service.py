"""
Integration tests for UserAdminService.

System role: Verification of account administration rules
"""

import uuid

import pytest

from mangaverse.application.services.blog_service import BlogService
from mangaverse.application.services.comment_service import CommentService
from mangaverse.application.services.favorites_service import FavoritesService
from mangaverse.application.services.user_admin_service import UserAdminService
from mangaverse.boundary.db.CRUD.blog_post_crud import blog_post_crud
from mangaverse.boundary.db.CRUD.user_crud import user_crud
from mangaverse.core.exceptions import NotFoundError, ValidationError


@pytest.fixture
def user_service(test_async_db) -> UserAdminService:
    return UserAdminService(db=test_async_db)


class TestUserAdminService:
    async def test_list_users_paginates(self, user_service, reader, admin_user) -> None:
        page = await user_service.list_users(limit=1, offset=0)

        assert page.total == 2
        assert len(page.data) == 1

    async def test_update_role(self, user_service, reader) -> None:
        updated = await user_service.update_role(reader.id, "admin")
        assert updated.role == "admin"

    async def test_update_role_unknown_user(self, user_service) -> None:
        with pytest.raises(NotFoundError):
            await user_service.update_role(uuid.uuid4(), "admin")

    async def test_admin_cannot_delete_self(self, user_service, admin_user) -> None:
        with pytest.raises(ValidationError):
            await user_service.delete_user(admin_user.id, acting_user_id=admin_user.id)

    async def test_delete_removes_reader_state_keeps_posts(
        self, test_async_db, user_service, reader, admin_user
    ) -> None:
        # Arrange
        await FavoritesService(db=test_async_db).add_favorite(reader.id, "m1")
        await CommentService(db=test_async_db).create_comment(reader.id, "reader", "m1", "hi")
        post = await BlogService(db=test_async_db).create_post(
            reader.id, title="T", slug="t", content="c", tags=[], published=True
        )

        # Act
        await user_service.delete_user(reader.id, acting_user_id=admin_user.id)

        # Assert
        assert await user_crud.get_by_id(test_async_db, reader.id) is None
        assert await FavoritesService(db=test_async_db).list_favorites(reader.id) == []
        assert await CommentService(db=test_async_db).list_comments("m1") == []
        kept = await blog_post_crud.get_by_slug(test_async_db, "t")
        await test_async_db.refresh(kept)
        assert kept.id == post.id
        assert kept.author_id is None

    async def test_delete_unknown_user(self, user_service, admin_user) -> None:
        with pytest.raises(NotFoundError):
            await user_service.delete_user(uuid.uuid4(), acting_user_id=admin_user.id)
